# network.py
# Fully connected sigmoid network trained one sample at a time with momentum backpropagation

import logging
from enum import Enum

import numpy as np

from .activation import sigmoid, derivative

logger = logging.getLogger(__name__)


class Mode(Enum):
    LEARNING = 'learning'
    TESTING = 'testing'


# ------------- Neurone ------------
class Neurone:

    def __init__(self, index):
        self.index = index
        self.input = 0.0 # raw weighted sum from the last forward pass, needed for the derivative

    def result(self, total):
        self.input = total
        return sigmoid(total)


# ------------- Layer ------------
class Layer:

    def __init__(self, index, neurons):
        self.index = index
        self.neurons = neurons

    @property
    def neurons_count(self):
        return len(self.neurons)

    def neurone(self, index):
        return self.neurons[index]


# ------------- Network ------------
class Perceptron:
    """Multi-layer perceptron of sigmoid units.

    Every tensor is a list holding one numpy array per layer:

    - weights[l] has shape (neurons in l, width of outputs[l]); the last column
      is the weight of the bias slot.
    - outputs[l] is the input vector of layer l (the raw input for l = 0) with
      the bias slot appended; outputs[-1] holds the results and has no bias slot.
    - last_weights and last_b mirror the weights. last_weights keeps every weight
      as it was before the most recent correction, last_b[l][n][0] the error term
      of neuron n. last_delta is allocated with the same shape but not used.

    Call set_input (and set_expected for learning) before each epoch.
    """

    def __init__(self, cfg):
        self.cfg = cfg
        self.layers = []
        self.input = None
        self.expected = None
        self.initialize()

    def initialize(self):
        """(Re)build layers and tensors. Any previous training state is discarded."""
        cfg = self.cfg
        input_count = cfg.get_input_count()

        self.layers = [
            Layer(l, [Neurone(n) for n in range(neurons)])
            for l, neurons in enumerate(cfg.get_layers())
        ]

        # random weights
        self.weights = cfg.get_weights_matrix(input_count)
        for layer_weights in self.weights:
            for row in layer_weights:
                for w in range(len(row)):
                    row[w] = cfg.rand_weight()

        # momentum history
        self.last_delta = cfg.get_weights_matrix(input_count)
        self.last_weights = cfg.get_weights_matrix(input_count)
        self.last_b = cfg.get_weights_matrix(input_count)

        self.outputs = cfg.get_outputs_matrix(input_count)
        self.results = np.zeros(self.layers[-1].neurons_count)
        self._forwarded = False

        logger.debug("Initialized network: inputs=%d layers=%s bias=%s",
                     input_count, list(cfg.get_layers()), cfg.is_bias())

    @property
    def bias_value(self):
        return 1.0 if self.cfg.is_bias() else 0.0

    # ---------- data -----------
    def set_input(self, values):
        values = np.asarray(values, dtype=float)
        if values.shape != (self.cfg.get_input_count(),):
            raise ValueError(f"expected {self.cfg.get_input_count()} inputs, got shape {values.shape}")
        self.input = values

    def set_expected(self, values):
        values = np.asarray(values, dtype=float)
        if values.shape != (self.layers[-1].neurons_count,):
            raise ValueError(f"expected {self.layers[-1].neurons_count} target values, got shape {values.shape}")
        self.expected = values

    def set_weight(self, layer, neurone, weight, value):
        if not 0 <= layer < len(self.weights):
            raise IndexError(f"layer {layer} out of range for {len(self.weights)} layers")
        neurons, width = self.weights[layer].shape
        if not 0 <= neurone < neurons or not 0 <= weight < width:
            raise IndexError(f"weight ({neurone}, {weight}) out of range for layer {layer} of shape {(neurons, width)}")
        self.weights[layer][neurone][weight] = value

    def get_weights(self):
        return self.weights

    def set_weights(self, weights):
        expected = [w.shape for w in self.cfg.get_weights_matrix(self.cfg.get_input_count())]
        weights = [np.array(w, dtype=float) for w in weights]
        actual = [w.shape for w in weights]
        if actual != expected:
            raise ValueError(f"weight tensor shape {actual} does not match topology {expected}")
        self.weights = weights

    def get_outputs(self):
        return self.outputs

    def get_results(self):
        return self.results

    def get_cfg(self):
        return self.cfg

    # ---------- training -----------
    def epoch(self, mode=Mode.LEARNING):
        """One forward pass, followed by one backward pass in LEARNING mode."""
        if self.input is None:
            raise RuntimeError("set_input must be called before epoch")
        if mode == Mode.LEARNING and self.expected is None:
            raise RuntimeError("set_expected must be called before a learning epoch")

        self.forward()
        if mode == Mode.LEARNING:
            self.backpropagation()

    def forward(self):
        bias = self.bias_value
        outputs = self.outputs
        outputs[0] = np.append(self.input, bias)

        last = len(self.layers) - 1
        for layer in self.layers:
            l = layer.index
            for neurone in layer.neurons:
                total = np.dot(outputs[l], self.weights[l][neurone.index])
                outputs[l + 1][neurone.index] = neurone.result(total)
            if l < last:
                outputs[l + 1][layer.neurons_count] = bias

        self.results = outputs[-1]
        self._forwarded = True
        return self.results

    def backpropagation(self):
        # layers in reverse, so a hidden layer reads the already corrected weights of the next one
        last = len(self.layers) - 1
        for layer in reversed(self.layers):
            l = layer.index
            for neurone in layer.neurons:
                n = neurone.index
                if l == last:
                    b = (self.expected[n] - self.results[n]) * derivative(neurone.input)
                else:
                    b = np.dot(self.last_b[l + 1][:, 0], self.weights[l + 1][:, n]) * derivative(neurone.input)
                self.last_b[l][n][0] = b

                old = self.weights[l][n].copy()
                self.weights[l][n] = (old
                                      + self.cfg.get_momentum() * (old - self.last_weights[l][n])
                                      + self.cfg.get_learning_factor() * b * self.outputs[l])
                self.last_weights[l][n] = old

    # ---------- errors -----------
    def _check_expected(self):
        if self.expected is None:
            raise RuntimeError("set_expected must be called before querying errors")
        if not self._forwarded:
            raise RuntimeError("epoch must run before querying errors")

    def get_output_errors(self):
        self._check_expected()
        return np.abs(self.expected - self.results)

    def get_average_error(self):
        # derivative of the already activated result, reporting only
        self._check_expected()
        return float(np.mean(np.abs(self.expected - self.results) * derivative(self.results)))
