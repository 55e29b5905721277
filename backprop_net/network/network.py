import logging
import random
from typing import Callable, Dict, List, Optional, Sequence

from .functions import Activation, Regularization
from .genes import Link, Node
from ..exceptions import InvalidInputIds, InvalidShape

logger = logging.getLogger(__name__)


class Network:
    """Layered feed-forward graph.

    Nodes and links live in two arenas keyed by a stable integer index.
    Links refer to their endpoints by node index and nodes refer to their
    links by link index, so no object holds a direct reference to another.
    """
    def __init__(self):
        self.nodes: Dict[int, Node] = {}
        self.links: Dict[int, Link] = {}
        self.layers: List[List[int]] = []
        self.node_idx = 0
        self.link_idx = 0

    def add_layer(self) -> List[int]:
        layer: List[int] = []
        self.layers.append(layer)
        return layer

    def add_node(self, node: Node) -> int:
        idx = self.node_idx
        self.nodes[idx] = node
        self.layers[node.layer].append(idx)
        self.node_idx += 1
        return idx

    def connect(self, source: int, dest: int, regularization: Optional[Regularization] = None,
                weight: Optional[float] = None, rng: Optional[random.Random] = None) -> int:
        src_node = self.nodes[source]
        dest_node = self.nodes[dest]
        idx = self.link_idx
        self.links[idx] = Link(
            id=f"{src_node.id}-{dest_node.id}",
            source=source,
            dest=dest,
            regularization=regularization,
            weight=weight,
            rng=rng,
        )
        src_node.outputs.append(idx)
        dest_node.input_links.append(idx)
        self.link_idx += 1
        return idx

    # --- accessors ---
    @property
    def num_layers(self) -> int:
        return len(self.layers)

    @property
    def input_layer(self) -> List[Node]:
        return [self.nodes[i] for i in self.layers[0]]

    def layer(self, layer_idx: int) -> List[Node]:
        return [self.nodes[i] for i in self.layers[layer_idx]]

    @property
    def output_node(self) -> Node:
        """The single node the network's output and loss are read from."""
        return self.nodes[self.layers[-1][0]]

    def node_by_id(self, node_id: str) -> Node:
        for node in self.nodes.values():
            if node.id == node_id:
                return node
        raise KeyError(node_id)

    def link_by_id(self, link_id: str) -> Link:
        for link in self.links.values():
            if link.id == link_id:
                return link
        raise KeyError(link_id)

    def for_each_node(self, ignore_inputs: bool, accessor: Callable[[Node], None]) -> None:
        for layer in self.layers[1 if ignore_inputs else 0:]:
            for idx in layer:
                accessor(self.nodes[idx])

    def num_dead_links(self) -> int:
        return sum(1 for link in self.links.values() if link.is_dead)

    def describe_node(self, node: Node) -> str:
        """Node id followed by the id and weight of each outgoing link."""
        parts = [f"{self.links[i].id} w={self.links[i].weight}," for i in node.outputs]
        return f"{node.id} " + "".join(parts)

    def __repr__(self):
        shape = [len(layer) for layer in self.layers]
        return f"Network(shape={shape}, links={len(self.links)}, dead={self.num_dead_links()})"


def build_network(
    network_shape: Sequence[int],
    activation: Activation,
    output_activation: Activation,
    regularization: Optional[Regularization],
    input_ids: Sequence[str],
    init_zero: bool = False,
    rng: Optional[random.Random] = None,
) -> Network:
    """
    Builds a fully connected layered network.

    Parameters
    ----------
    network_shape: sequence of int
        Number of nodes per layer, e.g. [2, 3, 1] is two inputs, a hidden
        layer of three nodes and one output node.

    activation: Activation
        Activation of every hidden node.

    output_activation: Activation
        Activation of the output layer's nodes.

    regularization: Regularization or None
        Penalty applied to every link's weight. None disables it.

    input_ids: sequence of str
        Ids given to the input nodes, in order.

    init_zero: bool, default=False
        If True, every weight and bias starts at 0.

    rng: random.Random, default=None
        Source of the initial weights. A single unseeded generator is
        created for the whole build if not given.
    """
    shape = list(network_shape)
    if len(shape) < 2:
        raise InvalidShape(f"A network needs at least 2 layers, got {len(shape)}")
    for size in shape:
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise InvalidShape(f"Layer sizes must be positive integers, got {shape}")

    input_ids = list(input_ids)
    if len(input_ids) != shape[0]:
        raise InvalidInputIds(
            f"Got {len(input_ids)} input ids for an input layer of {shape[0]} nodes")
    if len(set(input_ids)) != len(input_ids):
        raise InvalidInputIds(f"Input ids must be unique, got {input_ids}")
    generated_ids = {str(i) for i in range(1, sum(shape[1:]) + 1)}
    clashes = [node_id for node_id in input_ids if node_id in generated_ids]
    if clashes:
        raise InvalidInputIds(f"Input ids {clashes} clash with the ids given to hidden and output nodes")

    activation = Activation.from_name(activation)
    output_activation = Activation.from_name(output_activation)
    if regularization is not None:
        regularization = Regularization.from_name(regularization)
    if rng is None and not init_zero:
        rng = random.Random()

    network = Network()
    next_id = 1
    num_layers = len(shape)
    for layer_idx, num_nodes in enumerate(shape):
        is_output_layer = layer_idx == num_layers - 1
        network.add_layer()
        for i in range(num_nodes):
            if layer_idx == 0:
                node_id = input_ids[i]
            else:
                node_id = str(next_id)
                next_id += 1
            node = Node(
                node_id,
                output_activation if is_output_layer else activation,
                layer=layer_idx,
                init_zero=init_zero,
            )
            node_idx = network.add_node(node)

            # Link every node of the previous layer to this one
            if layer_idx >= 1:
                for prev_idx in network.layers[layer_idx - 1]:
                    network.connect(
                        prev_idx,
                        node_idx,
                        regularization,
                        weight=0.0 if init_zero else None,
                        rng=rng,
                    )

    logger.debug(f"Built {network!r}")
    return network
