"""Synthetic data: ten uniform inputs labelled by whether their sum exceeds five."""

from __future__ import annotations

import random

__all__ = [
    "NUM_INPUTS",
    "THRESHOLD",
    "TRAINING_SEED",
    "TEST_SEED",
    "Sample",
    "generate_complex_sample",
    "generate_training_set",
    "generate_test_set",
]

NUM_INPUTS = 10
THRESHOLD = 5.0
TRAINING_SEED = 42
TEST_SEED = 84

Sample = tuple[list[float], list[float]]


def generate_complex_sample(rng: random.Random) -> Sample:
    """Draw ten inputs in [0, 1) and a single binary target.

    The target is 1.0 when the inputs sum to more than five, otherwise 0.0.
    """
    inputs = [rng.random() for _ in range(NUM_INPUTS)]
    target = 1.0 if sum(inputs) > THRESHOLD else 0.0
    return inputs, [target]


def _generate_set(size: int, seed: int) -> tuple[list[list[float]], list[list[float]]]:
    if size < 0:
        raise ValueError("size must not be negative")
    rng = random.Random(seed)
    samples = [generate_complex_sample(rng) for _ in range(size)]
    inputs = [sample_inputs for sample_inputs, _ in samples]
    targets = [sample_targets for _, sample_targets in samples]
    return inputs, targets


def generate_training_set(size: int) -> tuple[list[list[float]], list[list[float]]]:
    """Return ``size`` reproducible training samples as (inputs, targets)."""
    return _generate_set(size, TRAINING_SEED)


def generate_test_set(size: int) -> tuple[list[list[float]], list[list[float]]]:
    """Return ``size`` reproducible test samples, drawn from a different seed."""
    return _generate_set(size, TEST_SEED)