"""A small fully connected neural network: matrices, neurons, layers, back-propagation and a training command."""

__version__ = "0.1.0"
__all__ = ["matrix", "neuron", "layer", "network", "cli"]