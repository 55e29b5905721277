from typing import List, Optional

from ..functions import Activation


class Node:
    """A neuron. Its state (total input, output and their derivatives)
    changes after every forward and back propagation run."""
    def __init__(self, id: str, activation: Activation, layer: int, init_zero: bool = False):
        self.id = id
        self.activation = activation
        self.layer = layer
        self.bias = 0.0 if init_zero else 0.1

        # Link indices into the owning network's link arena
        self.input_links: List[int] = []
        self.outputs: List[int] = []

        self.total_input: Optional[float] = None
        self.output: Optional[float] = None

        # dE/d(output) and dE/d(total input)
        self.output_der = 0.0
        self.input_der = 0.0

        # Accumulated dE/d(bias) since the last weight update
        self.acc_input_der = 0.0
        self.num_accumulated_ders = 0

    def __repr__(self):
        return f"Node(id={self.id}, layer={self.layer}, bias={self.bias:.3f}, activation={self.activation.value})"
