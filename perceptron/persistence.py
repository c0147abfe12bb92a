# persistence.py
# Save and load the weight tensor, one array per layer

import logging

import numpy as np

logger = logging.getLogger(__name__)


def _key(layer):
    return f"layer_{layer:03d}"


def save_weights(path, weights):
    np.savez(path, **{_key(l): np.asarray(w) for l, w in enumerate(weights)})
    logger.info("Saved %d weight layers to %s", len(weights), path)


def load_weights(path):
    with np.load(path) as archive:
        count = len(archive.files)
        missing = [_key(l) for l in range(count) if _key(l) not in archive.files]
        if missing:
            raise ValueError(f"{path} is not a weight archive, missing {missing}")
        weights = [archive[_key(l)].copy() for l in range(count)]
    logger.info("Loaded %d weight layers from %s", len(weights), path)
    return weights
