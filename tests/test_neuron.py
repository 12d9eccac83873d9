import math

import pytest

from neuranet.neuron import Activation, Neuron


def test_activation_codes():
    assert Activation(1) is Activation.TANH
    assert Activation(2) is Activation.RELU
    assert Activation(3) is Activation.SIGMOID


def test_default_is_sigmoid():
    n = Neuron(0.0)
    assert n.activation is Activation.SIGMOID
    assert n.activated_value == 0.5


def test_int_activation_accepted():
    assert Neuron(0.0, 1).activation is Activation.TANH


def test_unknown_activation_rejected():
    with pytest.raises(ValueError):
        Neuron(0.0, 7)


@pytest.mark.parametrize("x", [-3.0, -0.4, 0.0, 0.7, 2.5])
def test_sigmoid_derivative_relation(x):
    n = Neuron(x, Activation.SIGMOID)
    a = n.activated_value
    assert 0.0 < a < 1.0
    assert n.derived_value == pytest.approx(a * (1 - a))


def test_sigmoid_is_symmetric():
    assert Neuron(1.3).activated_value + Neuron(-1.3).activated_value == pytest.approx(1.0)


def test_sigmoid_extreme_values_do_not_overflow():
    low = Neuron(-1000.0)
    high = Neuron(1000.0)
    assert 0.0 <= low.activated_value < 1e-100
    assert high.activated_value == pytest.approx(1.0)


@pytest.mark.parametrize("x", [-2.0, 0.0, 0.3, 1.5])
def test_tanh(x):
    n = Neuron(x, Activation.TANH)
    assert n.activated_value == pytest.approx(math.tanh(x))
    assert n.derived_value == pytest.approx(1 - math.tanh(x) ** 2)


def test_relu_positive():
    n = Neuron(2.75, Activation.RELU)
    assert n.activated_value == 2.75
    assert n.derived_value == 1.0


@pytest.mark.parametrize("x", [-4.0, 0.0])
def test_relu_non_positive(x):
    n = Neuron(x, Activation.RELU)
    assert n.activated_value == 0.0
    assert n.derived_value == 0.0


def test_setting_value_recomputes():
    n = Neuron(-1.0, Activation.RELU)
    n.value = 3.0
    assert n.value == 3.0
    assert n.activated_value == 3.0
    assert n.derived_value == 1.0