"""Configuration dataclasses for the network and the training pipeline."""
from __future__ import annotations

from dataclasses import dataclass
import math
import numbers

from .errors import ConstructionError


def _is_integral(value: object) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _is_positive_int(value: object) -> bool:
    return _is_integral(value) and value > 0


def is_epoch_count(value: object) -> bool:
    """True for non-negative integers, including numpy integers but not bools."""

    return _is_integral(value) and value >= 0


@dataclass(slots=True)
class NetworkConfig:
    """Structure of a :class:`~shallownet.core.network.TwoLayerNetwork`.

    Parameters
    ----------
    input_size:
        Number of features per sample. Must match the column count of every
        input matrix passed to the network.
    hidden_size:
        Width of the single hidden layer.
    output_size:
        Number of classes, i.e. the column count of the one-hot targets.
    learning_rate:
        Scalar applied to every weight update. Must be positive and finite.
    seed:
        Optional seed for the weight initialisation. Ignored when the caller
        passes its own random generator to the network.
    """

    input_size: int
    hidden_size: int
    output_size: int
    learning_rate: float = 0.1
    seed: int | None = None

    def __post_init__(self) -> None:
        for name in ("input_size", "hidden_size", "output_size"):
            value = getattr(self, name)
            if not _is_positive_int(value):
                raise ConstructionError(f"{name} must be a positive integer, got {value!r}")
        rate = self.learning_rate
        if isinstance(rate, bool) or not isinstance(rate, (int, float)) or not math.isfinite(rate) or rate <= 0:
            raise ConstructionError(f"learning_rate must be a positive finite number, got {rate!r}")


@dataclass(slots=True)
class TrainingConfig:
    """Settings for :func:`~shallownet.training.pipeline.run_training`.

    The input and output sizes are not configured here; they are taken from
    the loaded dataset.
    """

    hidden_size: int = 16
    learning_rate: float = 0.1
    epochs: int = 1000
    feature_scale: float = 100.0
    chart_path: str | None = "output.png"
    seed: int | None = None
    progress: bool = False

    def __post_init__(self) -> None:
        if not _is_positive_int(self.hidden_size):
            raise ConstructionError(f"hidden_size must be a positive integer, got {self.hidden_size!r}")
        if not self.learning_rate > 0:
            raise ValueError("learning_rate must be positive")
        if not is_epoch_count(self.epochs):
            raise ValueError("epochs must be a non-negative integer")
        if not self.feature_scale or not math.isfinite(self.feature_scale):
            raise ValueError("feature_scale must be a non-zero finite number")
