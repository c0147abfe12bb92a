# activation.py
# sigmoid unit used by every neuron in the network

import numpy as np


# -------- activation functions -------
def sigmoid(x):
    return 1.0 / (1.0 + np.exp(-x))

def derivative(x):
    # x is the raw (pre-activation) input of the unit
    s = sigmoid(x)
    return s * (1.0 - s)
# -------------------------------------
