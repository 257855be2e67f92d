"""Load, train, evaluate and chart in one call."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Optional

from ..config import NetworkConfig, TrainingConfig
from ..core.network import TwoLayerNetwork
from ..data import load_dataset
from ..errors import RenderError
from .history import TrainingHistory

logger = logging.getLogger(__name__)


@dataclass
class TrainingReport:
    """Outcome of :func:`run_training`."""

    accuracy: float
    history: TrainingHistory
    network: TwoLayerNetwork
    num_samples: int
    num_features: int
    num_classes: int
    chart_path: Optional[Path] = None

    def summary(self) -> str:
        return f"Training complete! Accuracy: {self.accuracy:.2f}%"


def run_training(path: str | Path, config: Optional[TrainingConfig] = None) -> TrainingReport:
    """Train a fresh network on the CSV at ``path`` and score it on the same rows.

    Load errors propagate before any training happens. A chart that cannot be
    rendered is logged and leaves ``chart_path`` unset.
    """

    config = config or TrainingConfig()
    dataset = load_dataset(path, feature_scale=config.feature_scale)
    logger.info(
        "Training on %d samples, %d features, %d classes",
        dataset.num_samples,
        dataset.num_features,
        dataset.num_classes,
    )

    network = TwoLayerNetwork(
        NetworkConfig(
            input_size=dataset.num_features,
            hidden_size=config.hidden_size,
            output_size=dataset.num_classes,
            learning_rate=config.learning_rate,
            seed=config.seed,
        )
    )
    history = TrainingHistory(targets=dataset.targets)
    network.train(
        dataset.inputs,
        dataset.targets,
        config.epochs,
        callback=history,
        progress=config.progress,
    )

    accuracy = network.evaluate(dataset.inputs, dataset.targets)
    logger.info("Finished %d epochs with accuracy %.2f%%", config.epochs, accuracy)

    chart_path = None
    if config.chart_path:
        # matplotlib is only imported when a chart is requested
        from ..utils.visualization import render_training_chart

        try:
            chart_path = render_training_chart(config.chart_path, history.accuracies)
        except RenderError as exc:
            logger.warning("Skipping training chart: %s", exc)

    return TrainingReport(
        accuracy=accuracy,
        history=history,
        network=network,
        num_samples=dataset.num_samples,
        num_features=dataset.num_features,
        num_classes=dataset.num_classes,
        chart_path=chart_path,
    )


__all__ = ["TrainingReport", "run_training"]
