"""Single "train and report" entry point for embedding applications.

:func:`train_model` hands the caller a :class:`ReportBuffer` holding the
UTF-8 status line. The caller owns the buffer and must give it back exactly
once through :func:`free_report` (or :meth:`ReportBuffer.release`, or by
using the buffer as a context manager).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Union

from .config import TrainingConfig
from .errors import BufferReleasedError, DataIOError, ParseError, ShallowNetError
from .training.pipeline import run_training

logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH = "WaterQualityTesting.csv"

PathArg = Union[str, bytes, os.PathLike, None]


class ReportBuffer:
    """Owned, release-once byte buffer carrying a status message."""

    __slots__ = ("_data",)

    def __init__(self, data: bytes) -> None:
        self._data: Optional[bytes] = bytes(data)

    @property
    def released(self) -> bool:
        return self._data is None

    @property
    def value(self) -> bytes:
        if self._data is None:
            raise BufferReleasedError("report buffer has already been released")
        return self._data

    def text(self) -> str:
        return self.value.decode("utf-8")

    def __len__(self) -> int:
        return len(self.value)

    def release(self) -> None:
        if self._data is None:
            raise BufferReleasedError("report buffer released twice")
        self._data = None

    def __enter__(self) -> "ReportBuffer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self.released:
            self.release()

    def __repr__(self) -> str:
        state = "released" if self.released else f"{len(self._data)} bytes"
        return f"ReportBuffer({state})"


def _resolve_path(path: PathArg) -> Path:
    if path is None:
        return Path(DEFAULT_DATA_PATH)
    if isinstance(path, bytes):
        try:
            return Path(path.decode("utf-8"))
        except UnicodeDecodeError:
            logger.warning("Data path is not valid UTF-8, using %s", DEFAULT_DATA_PATH)
            return Path(DEFAULT_DATA_PATH)
    return Path(path)


def report_message(path: PathArg, config: Optional[TrainingConfig] = None) -> str:
    """Run the pipeline and describe its outcome in one line. Never raises library errors."""

    try:
        report = run_training(_resolve_path(path), config)
    except (DataIOError, ParseError) as exc:
        return f"Error: {exc}"
    except ShallowNetError as exc:
        logger.error("Training failed: %s", exc)
        return f"Training failed: {exc}"
    return report.summary()


def train_model(path: PathArg = None, config: Optional[TrainingConfig] = None) -> ReportBuffer:
    """Train on the CSV at ``path`` and return an owned status buffer."""

    return ReportBuffer(report_message(path, config).encode("utf-8"))


def free_report(buffer: ReportBuffer) -> None:
    """Release a buffer returned by :func:`train_model`."""

    buffer.release()


__all__ = [
    "DEFAULT_DATA_PATH",
    "ReportBuffer",
    "free_report",
    "report_message",
    "train_model",
]
