import numpy as np
import pytest

from shallownet import (
    ConstructionError,
    ErrorKind,
    NetworkConfig,
    ShapeMismatch,
    TwoLayerNetwork,
    construct,
    evaluate,
    predict,
    train,
)
from shallownet.core import sigmoid, sigmoid_derivative


def make_and_dataset():
    x = np.array(
        [
            [0.0, 0.0],
            [0.0, 1.0],
            [1.0, 0.0],
            [1.0, 1.0],
        ]
    )
    labels = [0, 0, 0, 1]
    y = np.eye(2)[labels]
    return x, y


@pytest.mark.parametrize("sizes", [(1, 1, 1), (2, 4, 2), (7, 16, 3), (30, 5, 9)])
def test_weights_have_expected_shapes_and_range(sizes):
    input_size, hidden_size, output_size = sizes
    network = construct(input_size, hidden_size, output_size, 0.1, seed=3)

    w1 = network.weights_input_hidden
    w2 = network.weights_hidden_output
    assert w1.shape == (input_size, hidden_size)
    assert w2.shape == (hidden_size, output_size)
    for weights in (w1, w2):
        assert np.all(weights >= -0.5)
        assert np.all(weights < 0.5)


def test_injected_generator_makes_initialisation_reproducible():
    config = NetworkConfig(input_size=3, hidden_size=5, output_size=2, learning_rate=0.1)
    first = TwoLayerNetwork(config, rng=np.random.default_rng(11))
    second = TwoLayerNetwork(config, rng=np.random.default_rng(11))
    third = TwoLayerNetwork(config, rng=np.random.default_rng(12))

    np.testing.assert_array_equal(first.weights_input_hidden, second.weights_input_hidden)
    np.testing.assert_array_equal(first.weights_hidden_output, second.weights_hidden_output)
    assert not np.array_equal(first.weights_input_hidden, third.weights_input_hidden)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"input_size": 0, "hidden_size": 4, "output_size": 2, "learning_rate": 0.1},
        {"input_size": 2, "hidden_size": -1, "output_size": 2, "learning_rate": 0.1},
        {"input_size": 2, "hidden_size": 4, "output_size": 2.5, "learning_rate": 0.1},
        {"input_size": 2, "hidden_size": 4, "output_size": 2, "learning_rate": 0.0},
        {"input_size": 2, "hidden_size": 4, "output_size": 2, "learning_rate": float("nan")},
    ],
)
def test_invalid_construction_is_rejected(kwargs):
    with pytest.raises(ConstructionError) as excinfo:
        construct(**kwargs)
    assert excinfo.value.kind is ErrorKind.CONSTRUCTION


def test_sigmoid_stays_in_open_unit_interval_and_is_symmetric():
    v = np.linspace(-30.0, 30.0, 121).reshape(11, 11)
    activated = sigmoid(v)

    assert np.all(activated > 0.0)
    assert np.all(activated < 1.0)
    np.testing.assert_allclose(activated + sigmoid(-v), np.ones_like(v), atol=1e-12)
    assert sigmoid(np.array([[0.0]]))[0, 0] == pytest.approx(0.5)


def test_sigmoid_handles_large_magnitudes_without_warnings():
    with np.errstate(over="raise", invalid="raise"):
        activated = sigmoid(np.array([[-1000.0, 1000.0]]))
    assert activated[0, 0] == pytest.approx(0.0)
    assert activated[0, 1] == pytest.approx(1.0)


def test_sigmoid_derivative_uses_activated_values():
    a = np.array([[0.0, 0.25, 0.5, 1.0]])
    np.testing.assert_allclose(sigmoid_derivative(a), [[0.0, 0.1875, 0.25, 0.0]])


def test_forward_shapes_and_range():
    x, _ = make_and_dataset()
    network = construct(2, 4, 2, 0.5, seed=0)
    cache = network.forward(x)

    assert cache.hidden.shape == (4, 4)
    assert cache.output.shape == (4, 2)
    assert np.all((cache.output > 0.0) & (cache.output < 1.0))


def test_backward_matches_manual_update():
    x, y = make_and_dataset()
    network = construct(2, 3, 2, 0.5, seed=5)
    w1 = network.weights_input_hidden.copy()
    w2 = network.weights_hidden_output.copy()

    hidden = 1.0 / (1.0 + np.exp(-(x @ w1)))
    output = 1.0 / (1.0 + np.exp(-(hidden @ w2)))
    output_delta = (y - output) * output * (1.0 - output)
    hidden_delta = (output_delta @ w2.T) * hidden * (1.0 - hidden)
    expected_w2 = w2 + 0.5 * hidden.T @ output_delta
    expected_w1 = w1 + 0.5 * x.T @ hidden_delta

    network.backward(x, y, network.forward(x))

    np.testing.assert_allclose(network.weights_hidden_output, expected_w2, rtol=1e-12)
    np.testing.assert_allclose(network.weights_input_hidden, expected_w1, rtol=1e-12)


def test_training_with_zero_epochs_leaves_weights_unchanged():
    x, y = make_and_dataset()
    network = construct(2, 4, 2, 0.5, seed=1)
    before = network.parameters()

    train(network, x, y, 0)

    after = network.parameters()
    for name, value in before.items():
        np.testing.assert_array_equal(after[name], value)


def test_negative_epochs_are_rejected():
    x, y = make_and_dataset()
    network = construct(2, 4, 2, 0.5, seed=1)
    with pytest.raises(ValueError):
        network.train(x, y, -1)


def test_predict_is_pure():
    x, _ = make_and_dataset()
    network = construct(2, 4, 2, 0.5, seed=2)
    before = network.parameters()

    first = predict(network, x)
    second = predict(network, x)

    np.testing.assert_array_equal(first, second)
    np.testing.assert_array_equal(network.weights_input_hidden, before["weights_input_hidden"])


def test_network_learns_logical_and():
    x, y = make_and_dataset()
    network = construct(2, 4, 2, 0.5, seed=0)

    untrained = evaluate(network, x, y)
    network.train(x, y, 1000)
    trained = evaluate(network, x, y)

    assert trained >= 75.0
    assert trained >= untrained


def test_and_accuracy_does_not_drop_as_epochs_grow():
    x, y = make_and_dataset()
    scores = []
    for epochs in (0, 100, 500, 1000):
        network = construct(2, 4, 2, 0.5, seed=0)
        network.train(x, y, epochs)
        scores.append(evaluate(network, x, y))

    assert scores == sorted(scores)
    assert scores[-1] >= 75.0


def test_numpy_integer_epoch_counts_are_accepted():
    x, y = make_and_dataset()
    first = construct(2, 4, 2, 0.5, seed=6)
    second = construct(2, 4, 2, 0.5, seed=6)

    first.train(x, y, np.int64(20))
    second.train(x, y, 20)

    np.testing.assert_array_equal(first.weights_input_hidden, second.weights_input_hidden)


@pytest.mark.parametrize("epochs", [True, 2.0, "3"])
def test_non_integer_epoch_counts_are_rejected(epochs):
    x, y = make_and_dataset()
    network = construct(2, 4, 2, 0.5, seed=1)
    with pytest.raises(ValueError):
        network.train(x, y, epochs)


def test_callback_sees_every_epoch_before_update():
    x, y = make_and_dataset()
    network = construct(2, 4, 2, 0.5, seed=4)
    initial_output = network.predict(x)
    seen = []

    network.train(x, y, 5, callback=lambda epoch, outputs: seen.append((epoch, outputs.copy())))

    assert [epoch for epoch, _ in seen] == [0, 1, 2, 3, 4]
    np.testing.assert_allclose(seen[0][1], initial_output)


def test_accuracy_is_a_percentage():
    rng = np.random.default_rng(9)
    network = construct(3, 4, 4, 0.1, seed=9)
    for rows in (1, 2, 7, 50):
        x = rng.normal(size=(rows, 3))
        y = np.eye(4)[rng.integers(0, 4, size=rows)]
        score = network.evaluate(x, y)
        assert 0.0 <= score <= 100.0


def test_predict_rejects_wrong_feature_count():
    network = construct(2, 4, 2, 0.5, seed=0)
    with pytest.raises(ShapeMismatch) as excinfo:
        network.predict(np.ones((4, 3)))
    assert excinfo.value.kind is ErrorKind.SHAPE_MISMATCH
    assert excinfo.value.actual == (4, 3)


def test_train_rejects_mismatched_targets():
    x, _ = make_and_dataset()
    network = construct(2, 4, 2, 0.5, seed=0)
    before = network.parameters()

    with pytest.raises(ShapeMismatch):
        network.train(x, np.ones((4, 3)), 10)
    with pytest.raises(ShapeMismatch):
        network.train(x, np.ones((3, 2)), 10)

    np.testing.assert_array_equal(network.weights_input_hidden, before["weights_input_hidden"])


def test_one_dimensional_input_is_rejected():
    network = construct(2, 4, 2, 0.5, seed=0)
    with pytest.raises(ShapeMismatch):
        network.predict(np.array([0.0, 1.0]))
