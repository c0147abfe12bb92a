# data.py
# Samples are (input, expected) pairs of 1-D float arrays

import logging

import numpy as np

logger = logging.getLogger(__name__)


# the classic problem a single layer can't learn
XOR = [
    (np.array([0.0, 0.0]), np.array([0.0])),
    (np.array([0.0, 1.0]), np.array([1.0])),
    (np.array([1.0, 0.0]), np.array([1.0])),
    (np.array([1.0, 1.0]), np.array([0.0])),
]


def load_samples(path, input_count, delimiter=','):
    # one sample per row: input columns first, then the expected outputs
    data = np.loadtxt(path, delimiter=delimiter, ndmin=2)
    if data.shape[1] <= input_count:
        raise ValueError(f"{path} has {data.shape[1]} columns, need more than {input_count} inputs")

    samples = [(row[:input_count].copy(), row[input_count:].copy()) for row in data]
    logger.info("Loaded %d samples from %s", len(samples), path)
    return samples
