# neuranet

A small, fully connected neural network in plain Python. It needs nothing
outside the standard library.

## What it provides

- `neuranet.matrix.Matrix(num_rows, num_cols, randomize=False)` is a dense
  matrix of floats. You index it as `m[row, col]`. Out-of-range indices raise
  `IndexError`.
  - A new matrix holds zeros. With `randomize=True` it holds random values
    between -0.0001 and 0.0001.
  - `transpose()` and `copy()` return new matrices.
  - `str(m)` lists every value, row by row, each followed by two tabs.
- `neuranet.matrix.multiply(a, b)` returns the product `a @ b` as a new
  `Matrix`. It raises `ValueError` when the shapes do not fit.
- `neuranet.neuron.Activation` is an enum with the members `TANH` (1), `RELU` (2)
  and `SIGMOID` (3).
- `neuranet.neuron.Neuron(value=0.0, activation=Activation.SIGMOID)` is a single
  neuron. When you set `value`, the neuron recomputes `activated_value` and
  `derived_value`, the derivative of its activation.
- `neuranet.layer.Layer(size, activation=Activation.SIGMOID)` is a list of
  neurons (`layer.neurons`). Its methods are:
  - `set_value(index, value)`
  - `activated_values()`
  - `values_matrix()`, `activated_matrix()` and `derived_matrix()`, which return
    the raw, activated and derived values as 1×N matrices.
- `neuranet.network.NeuralNetwork` is the network itself, and
  `neuranet.network.CostFunction` selects its cost function.
  `CostFunction.MSE` (1) is the only member.

## The network

```python
from neuranet.network import NeuralNetwork, CostFunction
from neuranet.neuron import Activation

net = NeuralNetwork(
    [3, 4, 3],
    hidden_activation=Activation.RELU,
    output_activation=Activation.SIGMOID,
    cost_function=CostFunction.MSE,
    bias=1.0,
    learning_rate=0.05,
    momentum=1.0,
)

for _ in range(100):
    error = net.train([0.2, 0.5, 0.1], [0.2, 0.5, 0.1])
    print(error)
```

The layers take their activations from their position in the network:

- The input layer uses sigmoid.
- The hidden layers use `hidden_activation`.
- The last layer uses `output_activation`.

The weight matrices (`net.weights`) start with small random values.

`train(inputs, target, bias=None, learning_rate=None, momentum=None)` runs one
training step on a single sample and returns the total error, which is also
kept in `net.error`. Any of `bias`, `learning_rate` and `momentum` that you pass
replaces the network's current setting before the step.

You can also call the steps one at a time:

```python
net.set_input([0.2, 0.5, 0.1])
net.target = [0.2, 0.5, 0.1]
net.feed_forward()
net.set_errors()
net.back_propagation()
```

- `feed_forward()` multiplies each layer's values by the next weight matrix and
  adds `bias`. It uses raw values for the input layer and activated values for
  the later layers.
- `set_errors()` fills these attributes:
  - `net.errors`, with `0.5 * (target - output) ** 2` for each output;
  - `net.derived_errors`, with `output - target` for each output;
  - `net.error`, with their sum.
- `back_propagation()` replaces every weight matrix with
  `momentum * old - learning_rate * delta`.

## Command line

```
neuranet
```

This builds a 650-213-650 network and trains it 1000 times on the sample
`0.2,0.5,0.1` with the same values as target. After each step it prints
`Error: <value>`.

Options:

| Option | Default |
| --- | --- |
| `--topology` (comma-separated layer sizes, at least two, all positive) | `650,213,650` |
| `--input` (comma-separated values) | `0.2,0.5,0.1` |
| `--target` (comma-separated values) | `0.2,0.5,0.1` |
| `--iterations` | 1000 |
| `--learning-rate` | 0.05 |
| `--momentum` | 1.0 |
| `--bias` | 1.0 |
| `--hidden-activation` (1 tanh, 2 ReLU, 3 sigmoid) | 2 |
| `--output-activation` (1 tanh, 2 ReLU, 3 sigmoid) | 3 |
| `--cost-function` (mean squared error is the only cost used) | 1 |

## What it does not do

- Training works on one sample at a time. There are no batches, datasets or
  shuffling.
- Networks cannot be saved or loaded.
- It has no prediction helper apart from `set_input` followed by
  `feed_forward` and reading `net.layers[-1].activated_values()`.

## Running the tests

```
pip install .[test]
pytest
```