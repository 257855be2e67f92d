"""Elementwise sigmoid activation and its derivative."""

from __future__ import annotations

import numpy as np


def sigmoid(x: np.ndarray) -> np.ndarray:
    """Return ``1 / (1 + exp(-x))`` elementwise.

    Evaluated as ``exp(-log(1 + exp(-x)))`` so large magnitudes neither
    overflow nor emit floating point warnings.
    """

    x = np.asarray(x, dtype=np.float64)
    return np.exp(-np.logaddexp(0.0, -x))


def sigmoid_derivative(activated: np.ndarray) -> np.ndarray:
    """Derivative of the sigmoid expressed through its output ``a``: ``a * (1 - a)``."""

    return activated * (1.0 - activated)


__all__ = ["sigmoid", "sigmoid_derivative"]
