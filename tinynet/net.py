"""A fully connected feed-forward network trained by backpropagation."""

from __future__ import annotations

import math
import random
from typing import Optional, Sequence

from tinynet.neuron import Neuron

__all__ = ["Net", "DEFAULT_SEED"]

DEFAULT_SEED = 42

Layer = list


class Net:
    """Layers of tanh neurons, each layer ending with a bias neuron fixed at 1.0."""

    recent_average_smoothing_factor: float = 100.0

    def __init__(
        self, topology: Sequence[int], rng: Optional[random.Random] = None
    ) -> None:
        if len(topology) < 2:
            raise ValueError("topology needs at least an input and an output layer")
        if any(count <= 0 for count in topology):
            raise ValueError("every layer needs at least one neuron")
        if rng is None:
            rng = random.Random(DEFAULT_SEED)

        self.error = 0.0
        self._recent_average_error = 0.0
        self.layers: list[list[Neuron]] = []
        fan_outs = [*topology[1:], 0]
        for count, num_outputs in zip(topology, fan_outs):
            # One extra neuron per layer serves as the bias.
            layer = [Neuron(num_outputs, index, rng) for index in range(count + 1)]
            layer[-1].output_val = 1.0
            self.layers.append(layer)

    @property
    def recent_average_error(self) -> float:
        """Smoothed running average of the RMS error over recent samples."""
        return self._recent_average_error

    def feed_forward(self, input_vals: Sequence[float]) -> None:
        """Load the inputs and propagate them through every layer."""
        input_layer = self.layers[0]
        if len(input_vals) != len(input_layer) - 1:
            raise ValueError(
                f"expected {len(input_layer) - 1} inputs, got {len(input_vals)}"
            )
        for neuron, value in zip(input_layer, input_vals):
            neuron.output_val = value

        for prev_layer, layer in zip(self.layers, self.layers[1:]):
            for neuron in layer[:-1]:
                neuron.feed_forward(prev_layer)

    def back_propagation(self, target_vals: Sequence[float]) -> None:
        """Compute gradients against the targets and update every weight."""
        outputs = self.layers[-1][:-1]
        if len(target_vals) != len(outputs):
            raise ValueError(
                f"expected {len(outputs)} targets, got {len(target_vals)}"
            )

        squared = sum(
            (target - neuron.output_val) ** 2
            for neuron, target in zip(outputs, target_vals)
        )
        self.error = math.sqrt(squared / len(outputs))

        factor = self.recent_average_smoothing_factor
        self._recent_average_error = (
            self._recent_average_error * factor + self.error
        ) / (factor + 1.0)

        for neuron, target in zip(outputs, target_vals):
            neuron.calc_output_gradients(target)

        for layer_num in range(len(self.layers) - 2, 0, -1):
            next_layer = self.layers[layer_num + 1]
            for neuron in self.layers[layer_num]:
                neuron.calc_hidden_gradients(next_layer)

        for layer_num in range(len(self.layers) - 1, 0, -1):
            prev_layer = self.layers[layer_num - 1]
            for neuron in self.layers[layer_num][:-1]:
                neuron.update_input_weights(prev_layer)

    def results(self) -> list[float]:
        """Return the output values of the last layer, bias excluded."""
        return [neuron.output_val for neuron in self.layers[-1][:-1]]