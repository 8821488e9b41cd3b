"""Train a network on the synthetic dataset and report its test accuracy."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Optional, Sequence, TextIO

from tinynet.dataset import NUM_INPUTS, generate_test_set, generate_training_set
from tinynet.net import Net

__all__ = [
    "EvaluationResult",
    "REPORT_INTERVAL",
    "has_overlap",
    "train",
    "evaluate",
    "main",
]

REPORT_INTERVAL = 1000
DEFAULT_TOPOLOGY = (10, 32, 8, 1)
DEFAULT_TRAIN_SIZE = 1000
DEFAULT_TEST_SIZE = 100
DEFAULT_EPOCHS = 12000


@dataclass(frozen=True)
class EvaluationResult:
    """Accuracy in percent and mean squared error over a test set."""

    accuracy: float
    average_loss: float
    correct: int
    total: int


def has_overlap(
    training_inputs: Sequence[Sequence[float]], test_inputs: Sequence[Sequence[float]]
) -> bool:
    """Tell whether any training input also appears among the test inputs."""
    test_samples = {tuple(sample) for sample in test_inputs}
    return any(tuple(sample) in test_samples for sample in training_inputs)


def _check_data(inputs: Sequence, targets: Sequence) -> None:
    if len(inputs) != len(targets):
        raise ValueError(
            f"{len(inputs)} inputs but {len(targets)} targets were given"
        )
    if not inputs:
        raise ValueError("the dataset is empty")


def train(
    net: Net,
    inputs: Sequence[Sequence[float]],
    targets: Sequence[Sequence[float]],
    epochs: int,
    out: Optional[TextIO] = None,
) -> list[float]:
    """Train for ``epochs`` passes and return the average loss of each pass.

    The average loss is written to ``out`` every thousand epochs.
    """
    _check_data(inputs, targets)
    if epochs < 0:
        raise ValueError("epochs must not be negative")
    if out is None:
        out = sys.stdout

    losses: list[float] = []
    for epoch in range(1, epochs + 1):
        total_loss = 0.0
        for input_vals, target_vals in zip(inputs, targets):
            net.feed_forward(input_vals)
            net.back_propagation(target_vals)
            total_loss += (net.results()[0] - target_vals[0]) ** 2
        average = total_loss / len(inputs)
        losses.append(average)
        if epoch % REPORT_INTERVAL == 0:
            print(f"Epoch {epoch}: Average Loss = {average:g}", file=out)
    return losses


def evaluate(
    net: Net,
    inputs: Sequence[Sequence[float]],
    targets: Sequence[Sequence[float]],
) -> EvaluationResult:
    """Run the network over a test set, thresholding the first output at 0.5."""
    _check_data(inputs, targets)
    correct = 0
    total_loss = 0.0
    for input_vals, target_vals in zip(inputs, targets):
        net.feed_forward(input_vals)
        output = net.results()[0]
        target = target_vals[0]
        if (output >= 0.5 and target == 1.0) or (output < 0.5 and target == 0.0):
            correct += 1
        total_loss += (output - target) ** 2
    total = len(inputs)
    return EvaluationResult(
        accuracy=correct / total * 100.0,
        average_loss=total_loss / total,
        correct=correct,
        total=total,
    )


def _topology(text: str) -> tuple[int, ...]:
    try:
        layers = tuple(int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid topology: {text!r}") from None
    if len(layers) < 2 or any(count <= 0 for count in layers):
        raise argparse.ArgumentTypeError(
            "topology needs at least two positive layer sizes"
        )
    return layers


def _non_negative(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError("value must not be negative")
    return value


def _positive(text: str) -> int:
    value = _non_negative(text)
    if value == 0:
        raise argparse.ArgumentTypeError("value must be positive")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tinynet",
        description="Train a small network on synthetic data and test it.",
    )
    parser.add_argument(
        "--topology",
        type=_topology,
        default=DEFAULT_TOPOLOGY,
        help="comma separated layer sizes (default: 10,32,8,1)",
    )
    parser.add_argument("--train-size", type=_positive, default=DEFAULT_TRAIN_SIZE)
    parser.add_argument("--test-size", type=_positive, default=DEFAULT_TEST_SIZE)
    parser.add_argument("--epochs", type=_non_negative, default=DEFAULT_EPOCHS)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Build, train and test a network; print progress and results."""
    parser = _parser()
    args = parser.parse_args(argv)
    if args.topology[0] != NUM_INPUTS:
        parser.error(f"the input layer must have {NUM_INPUTS} neurons")

    net = Net(args.topology)
    training_inputs, training_targets = generate_training_set(args.train_size)
    test_inputs, test_targets = generate_test_set(args.test_size)

    print("Starting Training Phase...")
    train(net, training_inputs, training_targets, args.epochs)

    print("\nStarting Testing Phase...")
    result = evaluate(net, test_inputs, test_targets)
    print("\nTesting Results:")
    print(f"Accuracy: {result.accuracy:g}%")
    print(f"Average Loss: {result.average_loss:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())