from .functions import Activation, ErrorFunction, Regularization
from .genes import Link, Node
from .network import Network, build_network
from .propagation import back_prop, forward_prop, update_weights

__all__ = [
    "Activation",
    "ErrorFunction",
    "Regularization",
    "Link",
    "Node",
    "Network",
    "build_network",
    "forward_prop",
    "back_prop",
    "update_weights",
]
