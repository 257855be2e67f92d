"""Two-layer sigmoid network for classifying tabular data.

The package is organised as:
- ``core``: activations, the network and its training loop,
- ``data``: CSV loading and one-hot encoding,
- ``training``: per-epoch history and the load/train/evaluate pipeline,
- ``utils``: chart rendering,
- ``bridge``: a single train-and-report entry point returning an owned buffer.
"""

from .config import NetworkConfig, TrainingConfig
from .core import TwoLayerNetwork, construct, evaluate, predict, train
from .errors import (
    BufferReleasedError,
    ConstructionError,
    DataIOError,
    ErrorKind,
    ParseError,
    RenderError,
    ShallowNetError,
    ShapeMismatch,
)

__all__ = [
    "BufferReleasedError",
    "ConstructionError",
    "DataIOError",
    "ErrorKind",
    "NetworkConfig",
    "ParseError",
    "RenderError",
    "ShallowNetError",
    "ShapeMismatch",
    "TrainingConfig",
    "TwoLayerNetwork",
    "construct",
    "evaluate",
    "predict",
    "train",
]
