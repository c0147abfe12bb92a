import logging

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from perceptron.config import Configurator
from perceptron.network import Perceptron


@pytest.fixture(autouse=True)
def setup_logging():
    """Keep package logging quiet during tests."""
    logging.getLogger("perceptron").setLevel(logging.CRITICAL)
    yield
    logging.getLogger("perceptron").setLevel(logging.NOTSET)


@pytest.fixture
def xor_cfg():
    return Configurator(layers=(4, 1), input_count=2, learning_factor=0.5, momentum=0.1, seed=0)


@pytest.fixture
def scenario_network():
    """2 inputs, 2 hidden, 1 output, bias on, every weight 0.5."""
    cfg = Configurator(layers=(2, 1), input_count=2, bias=True, learning_factor=0.5, momentum=0.1)
    network = Perceptron(cfg)
    network.set_weights([np.full((2, 3), 0.5), np.full((1, 3), 0.5)])
    return network
