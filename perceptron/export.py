# export.py
# Copy a trained Perceptron into an equivalent torch model for inference

import numpy as np
import torch
from torch import nn


def to_torch(network):
    bias = network.bias_value

    layers = []
    for layer_weights in network.get_weights():
        nout, width = layer_weights.shape
        linear = nn.Linear(width - 1, nout).double() # last column is the bias slot
        with torch.no_grad():
            linear.weight.copy_(torch.from_numpy(np.ascontiguousarray(layer_weights[:, :-1])))
            linear.bias.copy_(torch.from_numpy(layer_weights[:, -1] * bias))
        layers.append(linear)
        layers.append(nn.Sigmoid())

    model = nn.Sequential(*layers)
    model.eval()
    return model
