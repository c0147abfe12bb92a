# config.py
# Topology and hyper parameters of a Perceptron, plus the shape factories for its tensors

import json
import logging
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Configurator:
    """Immutable description of the network.

    layers holds the neuron count of every layer after the inputs, the last
    entry being the output layer. Every layer input vector carries one bias
    slot; its value is 1 when bias is enabled and 0 otherwise.
    """

    layers: tuple
    input_count: int
    bias: bool = True
    learning_factor: float = 0.5
    momentum: float = 0.1
    weight_range: tuple = (-0.5, 0.5)
    seed: Optional[int] = None
    _rng: np.random.Generator = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, 'layers', tuple(int(n) for n in self.layers))
        object.__setattr__(self, 'input_count', int(self.input_count))
        object.__setattr__(self, 'weight_range', tuple(float(w) for w in self.weight_range))

        if not self.layers:
            raise ValueError("at least one layer is required")
        if any(n <= 0 for n in self.layers):
            raise ValueError(f"layer sizes must be positive, got {self.layers}")
        if self.input_count <= 0:
            raise ValueError(f"input_count must be positive, got {self.input_count}")
        if self.learning_factor < 0:
            raise ValueError(f"learning_factor must not be negative, got {self.learning_factor}")
        if not 0 <= self.momentum < 1:
            raise ValueError(f"momentum must be in [0, 1), got {self.momentum}")
        if len(self.weight_range) != 2 or self.weight_range[0] > self.weight_range[1]:
            raise ValueError(f"weight_range must be (low, high), got {self.weight_range}")

        object.__setattr__(self, '_rng', np.random.default_rng(self.seed))

    # ---------- loading -----------
    @classmethod
    def from_dict(cls, values):
        values = dict(values)
        unknown = set(values) - {'layers', 'input_count', 'bias', 'learning_factor',
                                 'momentum', 'weight_range', 'seed'}
        if unknown:
            raise ValueError(f"unknown configuration keys: {sorted(unknown)}")
        return cls(**values)

    @classmethod
    def from_json(cls, path):
        with open(path, 'r') as file:
            values = json.load(file)
        logger.debug("Loaded configuration from %s", path)
        return cls.from_dict(values)

    # ---------- accessors -----------
    def get_layers(self):
        return self.layers

    def get_input_count(self):
        return self.input_count

    def is_bias(self):
        return self.bias

    def get_layers_count(self):
        return len(self.layers)

    def get_learning_factor(self):
        return self.learning_factor

    def get_momentum(self):
        return self.momentum

    def rand_weight(self):
        low, high = self.weight_range
        return float(self._rng.uniform(low, high))

    # ---------- tensor shapes -----------
    def get_weights_matrix(self, input_count):
        # one (neurons x (previous width + bias slot)) array per layer
        matrix = []
        previous = input_count
        for neurons in self.layers:
            matrix.append(np.zeros((neurons, previous + 1)))
            previous = neurons
        return matrix

    def get_outputs_matrix(self, input_count):
        # outputs[l] is the input vector of layer l, the last one holds the results
        outputs = [np.zeros(input_count + 1)]
        for neurons in self.layers[:-1]:
            outputs.append(np.zeros(neurons + 1))
        outputs.append(np.zeros(self.layers[-1]))
        return outputs
