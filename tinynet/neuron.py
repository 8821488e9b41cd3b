"""Neurons and the weighted connections between them."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Sequence

__all__ = ["Connection", "Neuron", "activation", "activation_prime"]


def activation(x: float) -> float:
    """Squash ``x`` into the range (-1, 1) with the hyperbolic tangent."""
    return math.tanh(x)


def activation_prime(x: float) -> float:
    """Derivative of the hyperbolic tangent at ``x``."""
    t = math.tanh(x)
    return 1.0 - t * t


@dataclass
class Connection:
    """An outgoing weight and the most recent change applied to it."""

    weight: float = 0.0
    delta_weight: float = 0.0


class Neuron:
    """A single tanh unit holding the weights of its outgoing connections."""

    learning_rate: float = 0.01
    momentum: float = 0.05

    def __init__(self, num_outputs: int, index: int, rng: random.Random) -> None:
        if num_outputs < 0:
            raise ValueError("num_outputs must not be negative")
        self.index = index
        self.output_val = 0.0
        self.gradient = 0.0
        self.output_weights = [
            Connection(weight=self._random_weight(num_outputs, rng))
            for _ in range(num_outputs)
        ]

    def __repr__(self) -> str:
        return (
            f"Neuron(index={self.index}, output_val={self.output_val!r}, "
            f"outputs={len(self.output_weights)})"
        )

    @staticmethod
    def _random_weight(num_outputs: int, rng: random.Random) -> float:
        # Xavier-style scaling by the fan-out of the neuron.
        return rng.random() * math.sqrt(1.0 / num_outputs)

    def feed_forward(self, prev_layer: Sequence[Neuron]) -> None:
        """Set the output from the weighted sum of the previous layer, bias included."""
        total = sum(
            neuron.output_val * neuron.output_weights[self.index].weight
            for neuron in prev_layer
        )
        self.output_val = activation(total)

    def calc_output_gradients(self, target: float) -> None:
        """Compute the gradient of an output neuron against its target value."""
        delta = target - self.output_val
        self.gradient = delta * activation_prime(self.output_val)

    def calc_hidden_gradients(self, next_layer: Sequence[Neuron]) -> None:
        """Compute the gradient of a hidden neuron from the layer that follows it."""
        dow = self._sum_dow(next_layer)
        self.gradient = dow * activation_prime(self.output_val)

    def _sum_dow(self, next_layer: Sequence[Neuron]) -> float:
        # The bias neuron of the next layer takes no input, so it is skipped.
        return sum(
            connection.weight * neuron.gradient
            for connection, neuron in zip(self.output_weights, next_layer[:-1])
        )

    def update_input_weights(self, prev_layer: Sequence[Neuron]) -> None:
        """Adjust the weights that feed this neuron, stored in the previous layer."""
        for neuron in prev_layer:
            connection = neuron.output_weights[self.index]
            new_delta = (
                self.learning_rate * neuron.output_val * self.gradient
                + self.momentum * connection.delta_weight
            )
            connection.delta_weight = new_delta
            connection.weight += new_delta