"""Fully connected feed-forward neural network trained by back-propagation."""

from __future__ import annotations

from enum import IntEnum
from itertools import product
from typing import Sequence

from .layer import Layer
from .matrix import Matrix, multiply
from .neuron import Activation


class CostFunction(IntEnum):
    """Cost functions used to measure the output error."""

    MSE = 1


class NeuralNetwork:
    """A network of layers joined by weight matrices.

    The input layer uses the default (sigmoid) activation, the hidden layers
    ``hidden_activation`` and the last layer ``output_activation``.
    """

    def __init__(
        self,
        topology: Sequence[int],
        hidden_activation: Activation | int = Activation.RELU,
        output_activation: Activation | int = Activation.SIGMOID,
        cost_function: CostFunction | int = CostFunction.MSE,
        bias: float = 1.0,
        learning_rate: float = 0.05,
        momentum: float = 1.0,
    ) -> None:
        if not topology:
            raise ValueError("topology must name at least one layer")
        self.topology = list(topology)
        self.hidden_activation = Activation(hidden_activation)
        self.output_activation = Activation(output_activation)
        self.cost_function = cost_function
        self.bias = bias
        self.learning_rate = learning_rate
        self.momentum = momentum

        last = len(self.topology) - 1
        self.layers: list[Layer] = []
        for index, size in enumerate(self.topology):
            if 0 < index < last:
                self.layers.append(Layer(size, self.hidden_activation))
            elif index == last:
                self.layers.append(Layer(size, self.output_activation))
            else:
                self.layers.append(Layer(size))

        self.weights: list[Matrix] = [
            Matrix(rows, cols, randomize=True)
            for rows, cols in zip(self.topology, self.topology[1:])
        ]

        self.inputs: list[float] = []
        self.target: list[float] = []
        self.errors: list[float] = [0.0] * self.topology[-1]
        self.derived_errors: list[float] = [0.0] * self.topology[-1]
        self.error = 0.0

    def set_input(self, values: Sequence[float]) -> None:
        """Load ``values`` into the raw values of the input layer."""
        self.inputs = list(values)
        for index, value in enumerate(self.inputs):
            self.layers[0].set_value(index, value)

    def feed_forward(self) -> None:
        """Propagate the input layer's values through to the output layer."""
        for index, weights in enumerate(self.weights):
            layer = self.layers[index]
            left = layer.values_matrix() if index == 0 else layer.activated_matrix()
            result = multiply(left, weights)
            following = self.layers[index + 1]
            for col in range(result.num_cols):
                following.set_value(col, result[0, col] + self.bias)

    def set_errors(self) -> None:
        """Compute the per-output errors and the total error."""
        handlers = {CostFunction.MSE: self._set_errors_mse}
        handlers.get(self.cost_function, self._set_errors_mse)()

    def _set_errors_mse(self) -> None:
        outputs = self.layers[-1].neurons
        self.error = 0.0
        for index, expected in enumerate(self.target):
            actual = outputs[index].activated_value
            self.errors[index] = 0.5 * abs(expected - actual) ** 2
            self.derived_errors[index] = actual - expected
            self.error += self.errors[index]

    def back_propagation(self) -> None:
        """Replace every weight matrix with its updated value."""
        if len(self.topology) < 2:
            raise ValueError("back-propagation needs at least two layers")
        out = len(self.topology) - 1

        derived = self.layers[out].derived_matrix()
        gradients = Matrix(1, self.topology[out])
        for col, derived_error in enumerate(self.derived_errors):
            gradients[0, col] = derived_error * derived[0, col]

        delta = multiply(gradients.transpose(), self.layers[out - 1].activated_matrix())
        old = self.weights[out - 1]
        updated = Matrix(self.topology[out - 1], self.topology[out])
        for row, col in product(range(updated.num_rows), range(updated.num_cols)):
            updated[row, col] = (
                self.momentum * old[row, col] - self.learning_rate * delta[col, row]
            )
        new_weights = [updated]

        for index in range(out - 1, 0, -1):
            gradients = multiply(gradients, self.weights[index].transpose())
            hidden_derived = self.layers[index].derived_matrix()
            for col in range(hidden_derived.num_rows):
                gradients[0, col] = gradients[0, col] * hidden_derived[0, col]

            first = self.layers[0]
            previous = first.values_matrix() if index == 1 else first.activated_matrix()
            delta = multiply(previous.transpose(), gradients)

            old = self.weights[index - 1]
            updated = Matrix(old.num_rows, old.num_cols)
            for row, col in product(range(updated.num_rows), range(updated.num_cols)):
                updated[row, col] = (
                    self.momentum * old[row, col] - self.learning_rate * delta[row, col]
                )
            new_weights.append(updated)

        new_weights.reverse()
        self.weights = new_weights

    def train(
        self,
        inputs: Sequence[float],
        target: Sequence[float],
        bias: float | None = None,
        learning_rate: float | None = None,
        momentum: float | None = None,
    ) -> float:
        """Run one training step on a single sample and return the error."""
        if learning_rate is not None:
            self.learning_rate = learning_rate
        if momentum is not None:
            self.momentum = momentum
        if bias is not None:
            self.bias = bias

        self.set_input(inputs)
        self.target = list(target)
        self.feed_forward()
        self.set_errors()
        self.back_propagation()
        return self.error