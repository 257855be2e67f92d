"""Two-layer sigmoid network trained by full-batch gradient descent."""
from __future__ import annotations

from typing import Callable, NamedTuple, Optional

import numpy as np
from tqdm.auto import tqdm

from ..config import NetworkConfig, is_epoch_count
from ..errors import ShapeMismatch
from .activations import sigmoid, sigmoid_derivative

EpochCallback = Callable[[int, np.ndarray], None]

INIT_LOW = -0.5
INIT_HIGH = 0.5


class ForwardCache(NamedTuple):
    """Activations produced by :meth:`TwoLayerNetwork.forward`."""

    hidden: np.ndarray
    output: np.ndarray


def _as_matrix(values, name: str) -> np.ndarray:
    try:
        matrix = np.asarray(values, dtype=np.float64)
    except ValueError as exc:
        raise ShapeMismatch(f"{name} is not a rectangular numeric matrix") from exc
    if matrix.ndim != 2:
        raise ShapeMismatch(
            f"{name} must be two-dimensional, got shape {matrix.shape}",
            actual=tuple(matrix.shape),
        )
    return matrix


class TwoLayerNetwork:
    """Input → sigmoid hidden layer → sigmoid output layer, without biases.

    Weights are drawn once from ``U[-0.5, 0.5)`` using either the generator
    passed in ``rng`` or a fresh one seeded from ``config.seed``. They are
    then only changed by :meth:`train` (or a direct :meth:`backward` call).

    Parameters
    ----------
    config:
        Layer sizes and learning rate.
    rng:
        Caller-owned random source. Passing the same seeded generator state
        yields identical initial weights.
    """

    def __init__(self, config: NetworkConfig, *, rng: Optional[np.random.Generator] = None):
        self.config = config
        self.learning_rate = float(config.learning_rate)
        self.rng = rng if rng is not None else np.random.default_rng(config.seed)
        self.weights_input_hidden, self.weights_hidden_output = self._initialise_parameters()

    def _initialise_parameters(self) -> tuple[np.ndarray, np.ndarray]:
        cfg = self.config
        w1 = self.rng.uniform(INIT_LOW, INIT_HIGH, size=(cfg.input_size, cfg.hidden_size))
        w2 = self.rng.uniform(INIT_LOW, INIT_HIGH, size=(cfg.hidden_size, cfg.output_size))
        return w1, w2

    @property
    def input_size(self) -> int:
        return self.weights_input_hidden.shape[0]

    @property
    def hidden_size(self) -> int:
        return self.weights_input_hidden.shape[1]

    @property
    def output_size(self) -> int:
        return self.weights_hidden_output.shape[1]

    def _check_inputs(self, x) -> np.ndarray:
        inputs = _as_matrix(x, "inputs")
        if inputs.shape[1] != self.input_size:
            raise ShapeMismatch(
                f"inputs have {inputs.shape[1]} features but the network expects {self.input_size}",
                expected=(inputs.shape[0], self.input_size),
                actual=tuple(inputs.shape),
            )
        return inputs

    def _check_targets(self, y, num_samples: int) -> np.ndarray:
        targets = _as_matrix(y, "targets")
        expected = (num_samples, self.output_size)
        if targets.shape != expected:
            raise ShapeMismatch(
                f"targets have shape {targets.shape}, expected {expected}",
                expected=expected,
                actual=tuple(targets.shape),
            )
        return targets

    def forward(self, x) -> ForwardCache:
        """Compute hidden and output activations for ``x`` with the current weights."""

        inputs = self._check_inputs(x)
        hidden = sigmoid(inputs @ self.weights_input_hidden)
        output = sigmoid(hidden @ self.weights_hidden_output)
        return ForwardCache(hidden=hidden, output=output)

    def backward(self, x, y, cache: ForwardCache) -> None:
        """Apply one gradient step in place using the activations in ``cache``."""

        inputs = self._check_inputs(x)
        targets = self._check_targets(y, inputs.shape[0])
        hidden, output = cache

        output_error = targets - output
        output_delta = output_error * sigmoid_derivative(output)

        # hidden error uses W2 before it is updated
        hidden_error = output_delta @ self.weights_hidden_output.T
        hidden_delta = hidden_error * sigmoid_derivative(hidden)

        self.weights_hidden_output += self.learning_rate * (hidden.T @ output_delta)
        self.weights_input_hidden += self.learning_rate * (inputs.T @ hidden_delta)

    def train(
        self,
        x,
        y,
        epochs: int,
        *,
        callback: Optional[EpochCallback] = None,
        progress: bool = False,
    ) -> None:
        """Run ``epochs`` rounds of forward pass followed by a weight update.

        ``callback`` is invoked after each forward pass with the zero-based
        epoch index and the output activations of that epoch (computed before
        the update). It must not modify the array.
        """

        if not is_epoch_count(epochs):
            raise ValueError("epochs must be a non-negative integer")
        inputs = self._check_inputs(x)
        targets = self._check_targets(y, inputs.shape[0])

        for epoch in tqdm(range(epochs), desc="Training", disable=not progress):
            cache = self.forward(inputs)
            if callback is not None:
                callback(epoch, cache.output)
            self.backward(inputs, targets, cache)

    def predict(self, x) -> np.ndarray:
        """Return the output activations for ``x``."""

        return self.forward(x).output

    def evaluate(self, x, y) -> float:
        """Percentage of rows whose highest output matches the one-hot target."""

        outputs = self.predict(x)
        targets = self._check_targets(y, outputs.shape[0])
        if outputs.shape[0] == 0:
            raise ShapeMismatch("cannot evaluate an empty batch", actual=tuple(outputs.shape))
        return accuracy(outputs, targets)

    def parameters(self) -> dict[str, np.ndarray]:
        return {
            "weights_input_hidden": self.weights_input_hidden.copy(),
            "weights_hidden_output": self.weights_hidden_output.copy(),
        }

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(input_size={self.input_size}, hidden_size={self.hidden_size}, "
            f"output_size={self.output_size}, learning_rate={self.learning_rate})"
        )


def accuracy(outputs: np.ndarray, targets: np.ndarray) -> float:
    """Share of rows, in percent, where the argmax of ``outputs`` and ``targets`` agree."""

    predicted = np.argmax(outputs, axis=1)
    expected = np.argmax(targets, axis=1)
    return float(np.mean(predicted == expected) * 100.0)


def construct(
    input_size: int,
    hidden_size: int,
    output_size: int,
    learning_rate: float,
    *,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
) -> TwoLayerNetwork:
    """Build a network with freshly drawn weights."""

    config = NetworkConfig(
        input_size=input_size,
        hidden_size=hidden_size,
        output_size=output_size,
        learning_rate=learning_rate,
        seed=seed,
    )
    return TwoLayerNetwork(config, rng=rng)


def train(network: TwoLayerNetwork, x, y, epochs: int, **kwargs) -> None:
    network.train(x, y, epochs, **kwargs)


def predict(network: TwoLayerNetwork, x) -> np.ndarray:
    return network.predict(x)


def evaluate(network: TwoLayerNetwork, x, y) -> float:
    return network.evaluate(x, y)


__all__ = [
    "EpochCallback",
    "ForwardCache",
    "TwoLayerNetwork",
    "accuracy",
    "construct",
    "evaluate",
    "predict",
    "train",
]
