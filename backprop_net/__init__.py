from .config import Config
from .exceptions import InputSizeMismatch, InvalidInputIds, InvalidShape, NetworkError
from .network import (
    Activation,
    ErrorFunction,
    Network,
    Regularization,
    back_prop,
    build_network,
    forward_prop,
    update_weights,
)
from .training_loop import TrainingLoop, get_loss

__all__ = [
    "Config",
    "TrainingLoop",
    "get_loss",
    "Activation",
    "ErrorFunction",
    "Regularization",
    "Network",
    "build_network",
    "forward_prop",
    "back_prop",
    "update_weights",
    "NetworkError",
    "InvalidShape",
    "InvalidInputIds",
    "InputSizeMismatch",
]
