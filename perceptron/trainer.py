# trainer.py
# Epoch loop around a Perceptron: every epoch presents each sample once

import argparse
import logging

import numpy as np
import matplotlib.pyplot as plt

from .config import Configurator
from .data import XOR, load_samples
from .network import Perceptron, Mode
from .persistence import save_weights, load_weights

logger = logging.getLogger(__name__)


def train(network, samples, epochs, report_every=1000):
    # returns the mean average error of every epoch
    history = []
    for epoch in range(epochs):
        errors = []
        for x, y in samples:
            network.set_input(x)
            network.set_expected(y)
            network.epoch(Mode.LEARNING)
            errors.append(network.get_average_error())
        history.append(float(np.mean(errors)))

        if report_every and epoch % report_every == 0:
            logger.info("Epoch %d, average error: %.6f", epoch, history[-1])
    return history


def evaluate(network, samples):
    results = []
    for x, _ in samples:
        network.set_input(x)
        network.epoch(Mode.TESTING)
        results.append(network.get_results().copy()) # results are overwritten by the next pass
    return results


def mean_output_error(network, samples):
    errors = []
    for x, y in samples:
        network.set_input(x)
        network.set_expected(y)
        network.epoch(Mode.TESTING)
        errors.append(network.get_output_errors())
    return float(np.mean(errors))


def plot_history(history):
    fig = plt.figure()
    plt.plot(range(1, len(history) + 1), history, label='Training Error')
    plt.xlabel('Epoch')
    plt.ylabel('Average Error')
    plt.title('Training Error')
    plt.legend()
    return fig


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Train a momentum backpropagation perceptron')
    parser.add_argument('--config', help='JSON configuration file, defaults to a 2-4-1 XOR network')
    parser.add_argument('--data', help='CSV samples, inputs first then expected outputs (defaults to XOR)')
    parser.add_argument('--epochs', type=int, default=5000)
    parser.add_argument('--report-every', type=int, default=1000)
    parser.add_argument('--weights', help='start from weights saved with --save')
    parser.add_argument('--save', help='write the trained weights to this .npz file')
    parser.add_argument('--plot', action='store_true', help='show the training error curve')
    parser.add_argument('--verbose', '-v', action='store_true')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.config:
        cfg = Configurator.from_json(args.config)
    else:
        cfg = Configurator(layers=(4, 1), input_count=2, learning_factor=0.5, momentum=0.1, seed=0)

    samples = load_samples(args.data, cfg.get_input_count()) if args.data else XOR

    network = Perceptron(cfg)
    if args.weights:
        network.set_weights(load_weights(args.weights))

    history = train(network, samples, args.epochs, report_every=args.report_every)

    for (x, y), result in zip(samples, evaluate(network, samples)):
        print(f"input {x} expected {y} -> {np.round(result, 4)}")
    print("mean output error =", mean_output_error(network, samples))

    if args.save:
        save_weights(args.save, network.get_weights())
    if args.plot:
        plot_history(history)
        plt.show()
    return history


if __name__ == '__main__':
    main()
