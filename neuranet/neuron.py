"""Single neurons with an activation function and its derivative."""

from __future__ import annotations

import math
from enum import IntEnum


class Activation(IntEnum):
    """Activation functions a neuron can apply."""

    TANH = 1
    RELU = 2
    SIGMOID = 3


def _sigmoid(x: float) -> float:
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    e = math.exp(x)
    return e / (1.0 + e)


class Neuron:
    """A neuron holding its raw, activated and derived values."""

    def __init__(
        self, value: float = 0.0, activation: Activation | int = Activation.SIGMOID
    ) -> None:
        self.activation = Activation(activation)
        self.value = value

    @property
    def value(self) -> float:
        return self._value

    @value.setter
    def value(self, value: float) -> None:
        self._value = float(value)
        self._activated = self._activate(self._value)
        self._derived = self._derive(self._value, self._activated)

    @property
    def activated_value(self) -> float:
        return self._activated

    @property
    def derived_value(self) -> float:
        return self._derived

    def _activate(self, x: float) -> float:
        if self.activation is Activation.TANH:
            return math.tanh(x)
        if self.activation is Activation.RELU:
            return x if x > 0 else 0.0
        return _sigmoid(x)

    def _derive(self, x: float, activated: float) -> float:
        if self.activation is Activation.TANH:
            return 1.0 - activated * activated
        if self.activation is Activation.RELU:
            return 1.0 if x > 0 else 0.0
        return activated * (1.0 - activated)

    def __repr__(self) -> str:
        return f"Neuron(value={self._value!r}, activation={self.activation.name})"