import numpy as np
import pytest

from neural_network import DimensionMismatchError, Layer, Neuron, TopologyError, seeded


@pytest.fixture
def layer():
    return Layer([
        Neuron([-0.3, 0.8], 0.5),
        Neuron([1.0, 1.0], -10.0),
        Neuron([0.5, 0.25], 0.0),
    ])


def test_fan_out(layer):
    inputs = [0.5, 1.0]
    outputs = layer.propagate(inputs)

    assert outputs.dtype == np.float32
    assert len(outputs) == 3
    for i, neuron in enumerate(layer.neurons):
        assert outputs[i] == neuron.propagate(inputs)


def test_sizes(layer):
    assert layer.input_size == 2
    assert layer.output_size == 3


def test_mismatched_neurons_rejected():
    with pytest.raises(DimensionMismatchError):
        Layer([Neuron([1.0, 2.0], 0.0), Neuron([1.0], 0.0)])


def test_empty_layer_rejected():
    with pytest.raises(TopologyError):
        Layer([])


def test_wrong_input_size(layer):
    with pytest.raises(DimensionMismatchError):
        layer.propagate([1.0, 2.0, 3.0])


def test_random_shape(rng):
    layer = Layer.random(rng, 4, 3)
    assert layer.output_size == 3
    assert all(len(n.weights) == 4 for n in layer.neurons)


def test_random_draws_neuron_by_neuron(counting_source):
    layer = Layer.random(counting_source, 2, 2)

    # neuron 0 draws w0, w1, b; then neuron 1 draws w0, w1, b
    first, second = layer.neurons
    np.testing.assert_allclose(first.weights, [0.0, 0.01], rtol=1e-6)
    assert first.bias == pytest.approx(0.02)
    np.testing.assert_allclose(second.weights, [0.03, 0.04], rtol=1e-6)
    assert second.bias == pytest.approx(0.05)


def test_random_matches_neuron_random():
    layer = Layer.random(seeded(11), 3, 2)
    rng = seeded(11)
    expected = [Neuron.random(rng, 3) for _ in range(2)]

    for got, want in zip(layer.neurons, expected):
        assert got.weights.tobytes() == want.weights.tobytes()
        assert got.bias == want.bias
