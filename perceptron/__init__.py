"""
perceptron - sigmoid feedforward network trained by momentum backpropagation

Modules:
- activation: sigmoid and its derivative
- config: Configurator, topology and hyper parameters
- network: Perceptron engine, Layer, Neurone, Mode
- data: XOR samples and CSV loading
- persistence: save/load of the weight tensor
- trainer: epoch loop, evaluation, plotting, command line
- export: copy into a torch model
"""

from .activation import sigmoid, derivative
from .config import Configurator
from .network import Perceptron, Layer, Neurone, Mode
from .data import XOR, load_samples
from .persistence import save_weights, load_weights
from .trainer import train, evaluate, mean_output_error

__all__ = [
    'sigmoid', 'derivative',
    'Configurator',
    'Perceptron', 'Layer', 'Neurone', 'Mode',
    'XOR', 'load_samples',
    'save_weights', 'load_weights',
    'train', 'evaluate', 'mean_output_error',
]
