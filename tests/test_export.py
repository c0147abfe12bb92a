import numpy as np
import pytest
import torch

from perceptron.config import Configurator
from perceptron.export import to_torch
from perceptron.network import Perceptron, Mode


@pytest.mark.parametrize("bias", [True, False])
def test_torch_model_matches_forward_pass(bias):
    network = Perceptron(Configurator(layers=(4, 3, 2), input_count=3, bias=bias, seed=11))
    network.set_input([0.2, -0.7, 1.5])
    network.epoch(Mode.TESTING)

    model = to_torch(network)
    with torch.no_grad():
        out = model(torch.tensor([0.2, -0.7, 1.5], dtype=torch.float64))
    assert out.numpy() == pytest.approx(network.get_results())


def test_torch_model_layout():
    network = Perceptron(Configurator(layers=(4, 1), input_count=2, seed=0))
    model = to_torch(network)
    linears = [m for m in model if isinstance(m, torch.nn.Linear)]
    assert [(m.in_features, m.out_features) for m in linears] == [(2, 4), (4, 1)]
    assert np.array_equal(linears[1].bias.detach().numpy(), network.get_weights()[1][:, -1])
