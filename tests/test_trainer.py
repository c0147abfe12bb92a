import numpy as np
import pytest

from perceptron.config import Configurator
from perceptron.data import XOR
from perceptron.network import Perceptron
from perceptron.trainer import train, evaluate, mean_output_error, plot_history, main


def test_train_reduces_error_on_single_sample():
    network = Perceptron(Configurator(layers=(3, 1), input_count=2, seed=0))
    history = train(network, [(np.array([1.0, 0.0]), np.array([1.0]))], epochs=50, report_every=0)
    assert len(history) == 50
    assert history[-1] < history[0]


def test_train_presents_every_sample(xor_cfg):
    network = Perceptron(xor_cfg)
    history = train(network, XOR, epochs=2, report_every=1)
    assert len(history) == 2
    # the last presented sample stays loaded
    assert list(network.input) == [1.0, 1.0]
    assert list(network.expected) == [0.0]


def test_evaluate_returns_copies(xor_cfg):
    network = Perceptron(xor_cfg)
    before = [w.copy() for w in network.get_weights()]
    results = evaluate(network, XOR)
    assert len(results) == 4
    assert all(r.shape == (1,) for r in results)
    assert results[0] is not network.get_results()
    for old, new in zip(before, network.get_weights()):
        assert np.array_equal(old, new)


def test_mean_output_error(xor_cfg):
    network = Perceptron(xor_cfg)
    results = evaluate(network, XOR)
    expected = np.mean([abs(y[0] - r[0]) for (_, y), r in zip(XOR, results)])
    assert mean_output_error(network, XOR) == pytest.approx(expected)


def test_plot_history():
    fig = plot_history([0.3, 0.2, 0.1])
    lines = fig.axes[0].get_lines()
    assert len(lines) == 1
    assert list(lines[0].get_ydata()) == [0.3, 0.2, 0.1]


def test_main_trains_and_saves(tmp_path, capsys):
    out = tmp_path / "weights.npz"
    history = main(["--epochs", "3", "--report-every", "0", "--save", str(out)])
    assert len(history) == 3
    assert out.exists()
    assert "mean output error" in capsys.readouterr().out


def test_main_with_config_data_and_weights(tmp_path):
    config = tmp_path / "cfg.json"
    config.write_text('{"layers": [2, 1], "input_count": 1, "seed": 1}')
    data = tmp_path / "samples.csv"
    data.write_text("0.0,1.0\n1.0,0.0\n")
    weights = tmp_path / "w.npz"

    main(["--config", str(config), "--data", str(data), "--epochs", "2", "--save", str(weights)])
    history = main(["--config", str(config), "--data", str(data), "--epochs", "1",
                    "--weights", str(weights)])
    assert len(history) == 1
