"""Per-epoch metrics collected while a network trains."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from ..core.network import accuracy


@dataclass
class TrainingHistory:
    """Loss and accuracy for every epoch, measured before that epoch's update.

    An instance is callable with the signature expected by the ``callback``
    argument of :meth:`TwoLayerNetwork.train`; it closes over the targets the
    network is trained against.
    """

    targets: np.ndarray
    losses: list[float] = field(default_factory=list)
    accuracies: list[float] = field(default_factory=list)

    def __call__(self, epoch: int, outputs: np.ndarray) -> None:
        error = self.targets - outputs
        self.losses.append(float(np.mean(error * error)))
        self.accuracies.append(accuracy(outputs, self.targets))

    def __len__(self) -> int:
        return len(self.losses)

    @property
    def final_accuracy(self) -> float | None:
        return self.accuracies[-1] if self.accuracies else None
