from .link import Link
from .node import Node

__all__ = ["Link", "Node"]
