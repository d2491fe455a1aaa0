import numpy as np
import pytest

from chainnet.layer import Layer, sigmoid
from chainnet.network import Network
from chainnet.tensor import DimensionError, UninitializedWeightsError


def _nor_net(seed: int = 0, learning_rate: float = 0.1) -> Network:
    nn = Network.from_sizes([(2, 4), (4, 1), (1, 1)], learning_rate=learning_rate)
    nn.init(np.random.default_rng(seed))
    return nn


def test_add_rejects_mismatched_sizes() -> None:
    nn = Network([Layer(2, 4)])
    with pytest.raises(DimensionError):
        nn.add(Layer(3, 1))


def test_empty_network_has_no_head_or_tail() -> None:
    nn = Network()
    assert nn.empty()
    assert nn.head is None
    assert nn.tail is None
    nn.forward()


def test_empty_network_output_is_empty() -> None:
    nn = Network()
    nn.backward([1.0])
    assert nn.output().shape == (0,)


def test_empty_network_rejects_input() -> None:
    with pytest.raises(DimensionError):
        Network().set_input([1.0, 0.0])


def test_add_rejects_same_layer_twice() -> None:
    lay = Layer(2, 2)
    with pytest.raises(ValueError, match="already in the network"):
        Network([lay, lay])


def test_output_follows_latest_input() -> None:
    nn = Network.from_sizes([(2, 1), (1, 1)])
    nn.layers[0].weights = np.array([[1.0, -1.0]])

    nn.forward([1.0, 0.0])
    first = nn.output()
    nn.forward([0.0, 1.0])
    second = nn.output()

    assert first[0] == pytest.approx(sigmoid(1.0))
    assert second[0] == pytest.approx(sigmoid(-1.0))
    assert first[0] != second[0]


def test_init_skips_tail() -> None:
    nn = _nor_net()
    assert nn.layers[0].weights.shape == (4, 2)
    assert nn.layers[1].weights.shape == (1, 4)
    assert nn.tail.weights is None


def test_forward_matches_direct_computation() -> None:
    nn = Network.from_sizes([(2, 4), (4, 1), (1, 1)])
    w1 = np.array([[0.1, -0.2], [0.3, 0.4], [-0.5, 0.6], [0.7, -0.8]])
    w2 = np.array([[0.2, -0.4, 0.6, -0.8]])
    b1 = np.array([0.05, -0.05, 0.1, -0.1])
    b2 = np.array([0.3])
    nn.layers[0].weights = w1.copy()
    nn.layers[1].weights = w2.copy()
    nn.layers[1].biases[:] = b1
    nn.layers[2].biases[:] = b2
    x = np.array([1.0, 0.0])

    nn.forward(x)

    hidden = sigmoid(w1 @ x + b1)
    expected = sigmoid(w2 @ hidden + b2)
    np.testing.assert_allclose(nn.output(), expected)
    first = nn.output()
    nn.forward(x)
    np.testing.assert_allclose(nn.output(), first)


def test_forward_without_init_raises() -> None:
    nn = Network.from_sizes([(2, 1), (1, 1)])
    with pytest.raises(UninitializedWeightsError):
        nn.forward([1.0, 1.0])


def test_forward_rejects_wrong_input_length() -> None:
    with pytest.raises(DimensionError):
        _nor_net().forward([1.0, 0.0, 1.0])


def test_backward_rejects_wrong_label_length() -> None:
    nn = _nor_net()
    nn.forward([1.0, 0.0])
    with pytest.raises(DimensionError):
        nn.backward([1.0, 0.0])


def test_output_is_zero_before_forward() -> None:
    assert _nor_net().output().tolist() == [0.0]


def test_output_is_a_copy() -> None:
    nn = _nor_net()
    nn.forward([0.0, 1.0])
    out = nn.output()
    out[0] = 42.0
    assert nn.tail.values[0] != 42.0


def test_backward_on_single_layer_is_noop() -> None:
    nn = Network([Layer(2, 2)])
    nn.init(np.random.default_rng(0))
    nn.forward([0.3, 0.7])
    before = nn.head.values.copy()

    nn.backward([1.0, 0.0])

    np.testing.assert_array_equal(nn.head.values, before)
    assert nn.head.weights is None


def test_backward_updates_every_weight_layer() -> None:
    nn = _nor_net(seed=3)
    w1 = nn.layers[0].weights.copy()
    w2 = nn.layers[1].weights.copy()

    nn.forward([1.0, 1.0])
    nn.backward([0.0])

    assert not np.array_equal(nn.layers[0].weights, w1)
    assert not np.array_equal(nn.layers[1].weights, w2)
    assert nn.layers[1].biases.tolist() == [0.0, 0.0, 0.0, 0.0]


def test_single_example_loss_strictly_decreases() -> None:
    nn = Network.from_sizes([(2, 1), (1, 1)], learning_rate=0.1)
    nn.init(np.random.default_rng(7))
    x = [1.0, 0.5]
    label = np.array([1.0])

    losses = []
    for _ in range(50):
        nn.forward(x)
        losses.append(float(np.sum((label - nn.output())**2)))
        nn.backward(label)

    assert all(b < a for a, b in zip(losses, losses[1:]))
