# errors.py


class NeuralNetworkError(Exception):
    """Base class for everything this package raises."""


class DimensionMismatchError(NeuralNetworkError, ValueError):
    """A vector does not have the length a neuron (or layer) was built for."""

    def __init__(self, expected, actual, what="inputs"):
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected {expected} {what}, got {actual}")


class TopologyError(NeuralNetworkError, ValueError):
    pass
