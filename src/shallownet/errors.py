"""Error types raised across the trainer, loader, renderer and bridge."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple


class ErrorKind(str, Enum):
    """Closed set of failure categories callers can branch on."""

    IO = "io"
    PARSE = "parse"
    SHAPE_MISMATCH = "shape_mismatch"
    CONSTRUCTION = "construction"
    RENDER = "render"


class ShallowNetError(Exception):
    """Base class for every error raised by :mod:`shallownet`."""

    kind: ErrorKind


class DataIOError(ShallowNetError):
    """The data source could not be opened or read."""

    kind = ErrorKind.IO


class ParseError(ShallowNetError, ValueError):
    """A field of the data source is malformed.

    ``row`` is the one-indexed data row (the header is not counted) and
    ``column`` the one-indexed column, when known.
    """

    kind = ErrorKind.PARSE

    def __init__(self, message: str, *, row: Optional[int] = None, column: Optional[int] = None) -> None:
        super().__init__(message)
        self.row = row
        self.column = column


class ShapeMismatch(ShallowNetError, ValueError):
    """Matrix dimensions disagree for a product or comparison."""

    kind = ErrorKind.SHAPE_MISMATCH

    def __init__(
        self,
        message: str,
        *,
        expected: Optional[Tuple[int, ...]] = None,
        actual: Optional[Tuple[int, ...]] = None,
    ) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class ConstructionError(ShallowNetError, ValueError):
    """Requested network dimensions or learning rate are invalid."""

    kind = ErrorKind.CONSTRUCTION


class RenderError(ShallowNetError):
    """The training chart could not be produced."""

    kind = ErrorKind.RENDER


class BufferReleasedError(RuntimeError):
    """A report buffer was read or released after it had been released."""


__all__ = [
    "BufferReleasedError",
    "ConstructionError",
    "DataIOError",
    "ErrorKind",
    "ParseError",
    "RenderError",
    "ShallowNetError",
    "ShapeMismatch",
]
