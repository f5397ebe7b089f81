# neuron.py

import numpy as np

from .config import DTYPE, WEIGHT_HIGH, WEIGHT_LOW
from .errors import DimensionMismatchError, TopologyError
from .rng import draw


# -------- activation function -------
def relu(z):
    return np.maximum(DTYPE(0), z)
# ------------------------------------


def as_vector(values):
    # private float32 copy, read only so nothing can change a built network
    vector = np.array(values, dtype=DTYPE)
    if vector.ndim != 1:
        raise TopologyError(f"expected a 1-D vector, got shape {vector.shape}")
    vector.flags.writeable = False
    return vector


class Neuron:
    """A single fully-connected unit: ``relu(inputs . weights + bias)``.

    The number of weights is fixed when the neuron is built and is the only
    input size ``propagate`` accepts.
    """

    def __init__(self, weights, bias):
        self.weights = as_vector(weights)
        self.bias = DTYPE(bias)

    @classmethod
    def random(cls, rng, input_size):
        # all the weights first (index order), then the bias
        weights = [draw(rng, WEIGHT_LOW, WEIGHT_HIGH) for _ in range(input_size)]
        bias = draw(rng, WEIGHT_LOW, WEIGHT_HIGH)
        return cls(weights, bias)

    @property
    def input_size(self):
        return len(self.weights)

    def propagate(self, inputs):
        inputs = np.asarray(inputs, dtype=DTYPE)
        if inputs.ndim != 1:
            raise DimensionMismatchError(self.input_size, inputs.shape)
        if len(inputs) != self.input_size:
            raise DimensionMismatchError(self.input_size, len(inputs))

        z = np.dot(inputs, self.weights) + self.bias
        return DTYPE(relu(z))

    def __repr__(self):
        return f"Neuron(weights={self.weights.tolist()}, bias={float(self.bias)})"
