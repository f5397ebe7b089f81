# network.py

import logging
from dataclasses import dataclass

import numpy as np

from .config import DTYPE
from .errors import DimensionMismatchError, TopologyError
from .layer import Layer
from .neuron import Neuron

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayerTopology:
    """Sizes of one entry in a network description.

    Between entries ``i`` and ``i + 1`` a layer is built with
    ``topology[i].output_neurons`` inputs and ``topology[i + 1].input_neurons``
    outputs; the other two fields at that boundary are not read.
    """

    input_neurons: int
    output_neurons: int

    def __post_init__(self):
        if self.input_neurons < 0 or self.output_neurons < 0:
            raise TopologyError(f"negative layer size in {self}")


def boundaries(topology):
    # (input size, output size) of every layer a topology describes
    topology = list(topology)
    shapes = []
    for i, (left, right) in enumerate(zip(topology, topology[1:])):
        if right.input_neurons == 0:
            raise TopologyError(f"topology entry {i + 1} has input_neurons=0, a layer needs at least one neuron")
        shapes.append((left.output_neurons, right.input_neurons))
    return shapes


class Network:

    def __init__(self, layers):
        # no checks here, callers building layers by hand keep them consistent
        self.layers = tuple(layers)

    @classmethod
    def random(cls, rng, topology):
        # fewer than two entries -> no boundaries -> empty (identity) network
        layers = [Layer.random(rng, nin, nout) for nin, nout in boundaries(topology)]
        logger.debug("built random network with layer shapes %s", [(layer.input_size, layer.output_size) for layer in layers])
        return cls(layers)

    @classmethod
    def from_weights(cls, topology, weights):
        """Rebuild a network from the flat sequence ``weights()`` produces.

        ``topology`` gives the same shapes ``random`` would build; values are
        consumed per neuron as bias first, then weights.
        """
        values = np.asarray(list(weights), dtype=DTYPE)
        shapes = boundaries(topology)
        expected = sum(nout * (nin + 1) for nin, nout in shapes)
        if len(values) != expected:
            raise DimensionMismatchError(expected, len(values), what="weights")

        layers = []
        pos = 0
        for nin, nout in shapes:
            neurons = []
            for _ in range(nout):
                neurons.append(Neuron(values[pos + 1:pos + 1 + nin], values[pos]))
                pos += nin + 1
            layers.append(Layer(neurons))

        return cls(layers)

    def weights(self):
        for layer in self.layers:
            for neuron in layer.neurons:
                yield neuron.bias
                yield from neuron.weights

    def propagate(self, inputs):
        # fresh copy, so an empty network never hands back the caller's array
        # (with no layers any shape passes through unchecked)
        x = np.array(inputs, dtype=DTYPE)
        for layer in self.layers:
            x = layer.propagate(x)
        return x

    def __repr__(self):
        return f"Network(layers={list(self.layers)!r})"
