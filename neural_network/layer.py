# layer.py

import numpy as np

from .config import DTYPE
from .errors import DimensionMismatchError, TopologyError
from .neuron import Neuron


class Layer:

    def __init__(self, neurons):
        neurons = tuple(neurons)
        if not neurons:
            raise TopologyError("a layer needs at least one neuron")

        # every neuron reads the same input vector
        input_size = neurons[0].input_size
        for neuron in neurons[1:]:
            if neuron.input_size != input_size:
                raise DimensionMismatchError(input_size, neuron.input_size, what="weights")

        self.neurons = neurons

    @classmethod
    def random(cls, rng, input_size, output_size):
        # neuron 0 finishes all of its draws before neuron 1 starts
        return cls(Neuron.random(rng, input_size) for _ in range(output_size))

    @property
    def input_size(self):
        return self.neurons[0].input_size

    @property
    def output_size(self):
        return len(self.neurons)

    def propagate(self, inputs):
        inputs = np.asarray(inputs, dtype=DTYPE)
        return np.array([neuron.propagate(inputs) for neuron in self.neurons], dtype=DTYPE)

    def __repr__(self):
        return f"Layer(input_size={self.input_size}, output_size={self.output_size})"
