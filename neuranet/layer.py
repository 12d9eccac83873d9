"""Layers of neurons sharing one activation function."""

from __future__ import annotations

from .matrix import Matrix
from .neuron import Activation, Neuron


class Layer:
    """An ordered collection of neurons."""

    def __init__(
        self, size: int, activation: Activation | int = Activation.SIGMOID
    ) -> None:
        if size < 0:
            raise ValueError("layer size must not be negative")
        self.neurons = [Neuron(0.0, activation) for _ in range(size)]

    def __len__(self) -> int:
        return len(self.neurons)

    def set_value(self, index: int, value: float) -> None:
        """Set the raw value of the neuron at ``index``."""
        if not 0 <= index < len(self.neurons):
            raise IndexError(f"neuron index {index} out of range")
        self.neurons[index].value = value

    def activated_values(self) -> list[float]:
        """Return the activated value of every neuron."""
        return [neuron.activated_value for neuron in self.neurons]

    def _row(self, values: list[float]) -> Matrix:
        m = Matrix(1, len(values))
        for col, value in enumerate(values):
            m[0, col] = value
        return m

    def values_matrix(self) -> Matrix:
        """Return the raw values as a one-row matrix."""
        return self._row([neuron.value for neuron in self.neurons])

    def activated_matrix(self) -> Matrix:
        """Return the activated values as a one-row matrix."""
        return self._row(self.activated_values())

    def derived_matrix(self) -> Matrix:
        """Return the derived values as a one-row matrix."""
        return self._row([neuron.derived_value for neuron in self.neurons])