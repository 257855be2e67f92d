"""CSV loading for labelled tabular classification data."""

from __future__ import annotations

import csv
from dataclasses import dataclass
import logging
import math
from pathlib import Path
from typing import List, Sequence

import numpy as np

from ..errors import DataIOError, ParseError

logger = logging.getLogger(__name__)

# one-hot targets get max(label) + 1 columns
MAX_LABEL = 65535


@dataclass
class Dataset:
    """Feature matrix, one-hot targets and the raw integer labels."""

    inputs: np.ndarray
    targets: np.ndarray
    labels: np.ndarray

    @property
    def num_samples(self) -> int:
        return self.inputs.shape[0]

    @property
    def num_features(self) -> int:
        return self.inputs.shape[1]

    @property
    def num_classes(self) -> int:
        return self.targets.shape[1]


def one_hot(labels: Sequence[int]) -> np.ndarray:
    """Encode ``labels`` as rows with ``max(labels) + 1`` columns."""

    indices = np.asarray(labels, dtype=np.int64)
    if indices.ndim != 1 or indices.size == 0:
        raise ValueError("labels must be a non-empty one-dimensional sequence")
    if indices.min() < 0:
        raise ValueError("labels must be non-negative")
    targets = np.zeros((indices.size, int(indices.max()) + 1), dtype=np.float64)
    targets[np.arange(indices.size), indices] = 1.0
    return targets


def _parse_feature(raw: str, *, row: int, column: int, scale: float) -> float:
    text = raw.strip().replace(",", ".")
    try:
        value = float(text)
    except ValueError:
        raise ParseError(
            f"Invalid float at row {row}, column {column}: '{text}'", row=row, column=column
        ) from None
    if not math.isfinite(value):
        raise ParseError(
            f"Non-finite value at row {row}, column {column}: '{text}'", row=row, column=column
        )
    return value / scale


def _parse_label(raw: str, *, row: int, column: int) -> int:
    text = raw.strip()
    try:
        label = int(text)
    except ValueError:
        raise ParseError(f"Invalid label at row {row}: '{text}'", row=row, column=column) from None
    if label < 0:
        raise ParseError(f"Negative label at row {row}: '{text}'", row=row, column=column)
    if label > MAX_LABEL:
        raise ParseError(
            f"Invalid label at row {row}: '{text}' exceeds {MAX_LABEL}", row=row, column=column
        )
    return label


def load_dataset(
    path: str | Path,
    *,
    feature_scale: float = 100.0,
    delimiter: str = ",",
) -> Dataset:
    """Read a headed CSV whose last column is an integer class label.

    Every other column is a numeric feature. Fields may use a decimal comma
    when quoted. Features are divided by ``feature_scale``.
    """

    path = Path(path)
    try:
        with path.open(newline="", encoding="utf-8") as handle:
            records = list(csv.reader(handle, delimiter=delimiter))
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        raise DataIOError(f"Cannot read {path}: {exc}") from exc

    features: List[List[float]] = []
    labels: List[int] = []
    # every record must be as wide as the header
    width = len(records[0]) if records and records[0] else None
    row = 0
    for record in records[1:]:
        if not record or all(not field.strip() for field in record):
            continue
        row += 1
        if len(record) < 2:
            raise ParseError(f"Row {row} needs at least one feature and a label", row=row)
        if width is None:
            width = len(record)
        elif len(record) != width:
            raise ParseError(f"Row {row} has {len(record)} columns, expected {width}", row=row)
        features.append(
            [
                _parse_feature(field, row=row, column=column, scale=feature_scale)
                for column, field in enumerate(record[:-1], start=1)
            ]
        )
        labels.append(_parse_label(record[-1], row=row, column=len(record)))

    if not labels:
        raise ParseError(f"No data rows found in {path}")

    dataset = Dataset(
        inputs=np.asarray(features, dtype=np.float64),
        targets=one_hot(labels),
        labels=np.asarray(labels, dtype=np.int64),
    )
    logger.debug(
        "Loaded %d samples with %d features and %d classes from %s",
        dataset.num_samples,
        dataset.num_features,
        dataset.num_classes,
        path,
    )
    return dataset


__all__ = ["Dataset", "load_dataset", "one_hot"]
