"""Plotting of training curves."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt

from ..errors import RenderError

CHART_SIZE_INCHES = (6.4, 4.8)
CHART_DPI = 100


def plot_accuracy_history(accuracies: Sequence[float]):
    """Draw accuracy per epoch on a new figure and return it."""

    fig, ax = plt.subplots(figsize=CHART_SIZE_INCHES, dpi=CHART_DPI)
    ax.plot(range(len(accuracies)), accuracies, color="red")
    ax.set_xlim(0, max(len(accuracies) - 1, 1))
    ax.set_ylim(0, 100)
    ax.set_xlabel("Epoch")
    ax.set_ylabel("Accuracy (%)")
    ax.set_title("Training Accuracy")
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    return fig


def render_training_chart(path: str | Path, accuracies: Sequence[float]) -> Path:
    """Write a 640x480 PNG of ``accuracies`` to ``path``.

    Raises :class:`RenderError` when there is nothing to draw or the image
    cannot be written.
    """

    if len(accuracies) == 0:
        raise RenderError("no training history to plot")
    path = Path(path)
    fig = plot_accuracy_history(accuracies)
    try:
        fig.savefig(path, format="png")
    except (OSError, ValueError, RuntimeError) as exc:
        raise RenderError(f"Cannot write chart to {path}: {exc}") from exc
    finally:
        plt.close(fig)
    return path


__all__ = ["plot_accuracy_history", "render_training_chart"]
