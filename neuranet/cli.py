"""Command that trains a network on a single sample and reports the error."""

from __future__ import annotations

import argparse
from typing import Sequence

from .network import NeuralNetwork


def _float_list(text: str) -> list[float]:
    try:
        return [float(part) for part in text.split(",")]
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a list of numbers: {text!r}") from None


def _int_list(text: str) -> list[int]:
    try:
        values = [int(part) for part in text.split(",")]
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a list of integers: {text!r}") from None
    if any(value <= 0 for value in values):
        raise argparse.ArgumentTypeError("layer sizes must be positive")
    if len(values) < 2:
        raise argparse.ArgumentTypeError("topology needs at least two layers")
    return values


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="neuranet",
        description="Train a neural network on one sample, printing the error.",
    )
    parser.add_argument("--topology", type=_int_list, default=[650, 213, 650])
    parser.add_argument("--input", type=_float_list, default=[0.2, 0.5, 0.1])
    parser.add_argument("--target", type=_float_list, default=[0.2, 0.5, 0.1])
    parser.add_argument("--iterations", type=int, default=1000)
    parser.add_argument("--learning-rate", type=float, default=0.05)
    parser.add_argument("--momentum", type=float, default=1.0)
    parser.add_argument("--bias", type=float, default=1.0)
    parser.add_argument("--hidden-activation", type=int, default=2, choices=(1, 2, 3))
    parser.add_argument("--output-activation", type=int, default=3, choices=(1, 2, 3))
    parser.add_argument("--cost-function", type=int, default=1)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Train the network and print the error after each iteration."""
    args = _parser().parse_args(argv)
    network = NeuralNetwork(
        args.topology,
        args.hidden_activation,
        args.output_activation,
        args.cost_function,
        args.bias,
        args.learning_rate,
        args.momentum,
    )
    for _ in range(args.iterations):
        error = network.train(
            args.input, args.target, args.bias, args.learning_rate, args.momentum
        )
        print(f"Error: {error:g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())