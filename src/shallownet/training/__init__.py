"""Training history and the end-to-end pipeline."""

from .history import TrainingHistory
from .pipeline import TrainingReport, run_training

__all__ = ["TrainingHistory", "TrainingReport", "run_training"]
