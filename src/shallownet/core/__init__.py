"""Network core: activations, forward/backward passes and training loop."""

from .activations import sigmoid, sigmoid_derivative
from .network import (
    ForwardCache,
    TwoLayerNetwork,
    accuracy,
    construct,
    evaluate,
    predict,
    train,
)

__all__ = [
    "ForwardCache",
    "TwoLayerNetwork",
    "accuracy",
    "construct",
    "evaluate",
    "predict",
    "sigmoid",
    "sigmoid_derivative",
    "train",
]
