"""Utility helpers for shallownet."""

from __future__ import annotations

from importlib import import_module
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - import-time hinting only
    from .visualization import plot_accuracy_history, render_training_chart

__all__ = ["plot_accuracy_history", "render_training_chart"]


def __getattr__(name: str):  # pragma: no cover - small wrapper
    if name in {"plot_accuracy_history", "render_training_chart"}:
        return getattr(import_module("shallownet.utils.visualization"), name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
