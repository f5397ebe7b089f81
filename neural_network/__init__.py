"""Fully-connected feedforward networks with ReLU activations.

Build one from explicit layers or from a topology and a seeded randomness
source, then call ``propagate`` on an input vector::

    rng = seeded(42)
    net = Network.random(rng, [LayerTopology(0, 4), LayerTopology(4, 3)])
    net.propagate([0.1, 0.2, 0.3, 0.4])
"""

from .errors import DimensionMismatchError, NeuralNetworkError, TopologyError
from .layer import Layer
from .network import LayerTopology, Network
from .neuron import Neuron
from .rng import RandomSource, seeded

__version__ = "0.1.0"

__all__ = [
    "DimensionMismatchError",
    "Layer",
    "LayerTopology",
    "Network",
    "NeuralNetworkError",
    "Neuron",
    "RandomSource",
    "TopologyError",
    "seeded",
]
