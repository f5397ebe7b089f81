# rng.py
# the randomness source threaded through Network.random -> Layer.random -> Neuron.random

from typing import Protocol

import numpy as np

from .config import DTYPE


class RandomSource(Protocol):
    """Anything with ``uniform(low, high)``; numpy's Generator already fits."""

    def uniform(self, low: float, high: float) -> float: ...


def seeded(seed):
    # same seed -> same draws -> same network
    return np.random.default_rng(seed)


def draw(rng: RandomSource, low, high):
    # one call per value, the order of calls is what makes a build reproducible
    value = DTYPE(rng.uniform(low, high))
    high = DTYPE(high)
    if value >= high:
        # float64 samples just under high can round up when narrowed to float32
        value = np.nextafter(high, DTYPE(low))
    return value
