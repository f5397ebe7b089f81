import pytest

from neural_network import Neuron, seeded


@pytest.fixture
def rng():
    return seeded(0)


@pytest.fixture
def neuron():
    return Neuron(weights=[-0.3, 0.8], bias=0.5)


class CountingSource:
    """Hands out 0.0, 0.01, 0.02, ... so tests can see the draw order."""

    def __init__(self):
        self.calls = []

    def uniform(self, low, high):
        value = len(self.calls) / 100
        self.calls.append((low, high))
        return value


@pytest.fixture
def counting_source():
    return CountingSource()
