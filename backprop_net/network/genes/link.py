import random
from typing import Optional

from ..functions import Regularization


class Link:
    """A weighted connection from a node in one layer to a node in the next."""
    def __init__(
        self,
        id: str,
        source: int,
        dest: int,
        regularization: Optional[Regularization] = None,
        weight: Optional[float] = None,
        rng: Optional[random.Random] = None,
    ):
        self.id = id
        self.source = source
        self.dest = dest
        self.regularization = regularization
        if weight is None:
            if rng is None:
                raise ValueError(f"Link {id} needs either a weight or a random source")
            weight = rng.random() - 0.5
        self.weight = weight
        self.is_dead = False

        self.error_der = 0.0
        self.acc_error_der = 0.0
        self.num_accumulated_ders = 0

    def __repr__(self):
        status = "D" if self.is_dead else "A"
        return f"Link({self.id}, w={self.weight:.2f}, {status})"
