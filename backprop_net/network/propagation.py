import logging
from typing import Sequence

from .functions import ErrorFunction, Regularization
from .network import Network
from ..exceptions import InputSizeMismatch

logger = logging.getLogger(__name__)


def forward_prop(network: Network, inputs: Sequence[float]) -> float:
    """
    Runs the inputs through the network, overwriting the total input and
    output of every node. Returns the output of the network's output node.
    """
    input_layer = network.input_layer
    if len(inputs) != len(input_layer):
        raise InputSizeMismatch(
            f"Got {len(inputs)} inputs for an input layer of {len(input_layer)} nodes")

    for node, value in zip(input_layer, inputs):
        node.output = value

    for layer in network.layers[1:]:
        for node_idx in layer:
            node = network.nodes[node_idx]
            total = node.bias
            for link_idx in node.input_links:
                link = network.links[link_idx]
                if link.is_dead:
                    continue
                total += link.weight * network.nodes[link.source].output
            node.total_input = total
            node.output = node.activation.output(total)

    return network.output_node.output


def back_prop(network: Network, target: float, error_func: ErrorFunction) -> None:
    """
    Accumulates the error derivatives of every node and live link using the
    state left by the preceding forward_prop call. Accumulators keep growing
    until update_weights consumes them.
    """
    output_node = network.output_node
    output_node.output_der = error_func.der(output_node.output, target)

    for layer_idx in range(network.num_layers - 1, 0, -1):
        current_layer = network.layer(layer_idx)

        # dE/d(total input) for each node
        for node in current_layer:
            node.input_der = node.output_der * node.activation.der(node.total_input)
            node.acc_input_der += node.input_der
            node.num_accumulated_ders += 1

        # dE/dw for each weight coming into the node
        for node in current_layer:
            for link_idx in node.input_links:
                link = network.links[link_idx]
                if link.is_dead:
                    continue
                link.error_der = node.input_der * network.nodes[link.source].output
                link.acc_error_der += link.error_der
                link.num_accumulated_ders += 1

        if layer_idx == 1:
            continue

        # dE/d(output) for each node of the previous layer
        for node in network.layer(layer_idx - 1):
            node.output_der = 0.0
            for link_idx in node.outputs:
                link = network.links[link_idx]
                if link.is_dead:
                    continue
                node.output_der += link.weight * network.nodes[link.dest].input_der


def update_weights(network: Network, learning_rate: float, regularization_rate: float) -> None:
    """
    Applies the averaged accumulated derivatives to biases and weights, then
    the regularization penalty. An L1 penalty that pushes a weight across
    zero kills the link for good.
    """
    if learning_rate <= 0:
        raise ValueError(f"learning_rate must be positive, got {learning_rate}")
    if regularization_rate < 0:
        raise ValueError(f"regularization_rate must be non-negative, got {regularization_rate}")

    for layer in network.layers[1:]:
        for node_idx in layer:
            node = network.nodes[node_idx]
            if node.num_accumulated_ders > 0:
                node.bias -= learning_rate * node.acc_input_der / node.num_accumulated_ders
                node.acc_input_der = 0.0
                node.num_accumulated_ders = 0

            for link_idx in node.input_links:
                link = network.links[link_idx]
                if link.is_dead or link.num_accumulated_ders == 0:
                    continue
                regul_der = link.regularization.der(link.weight) if link.regularization is not None else 0.0

                link.weight -= (learning_rate / link.num_accumulated_ders) * link.acc_error_der
                new_weight = link.weight - (learning_rate * regularization_rate) * regul_der
                if link.regularization is Regularization.L1 and link.weight * new_weight < 0:
                    link.weight = 0.0
                    link.is_dead = True
                    logger.debug(f"Pruned link {link.id}")
                else:
                    link.weight = new_weight

                link.acc_error_der = 0.0
                link.num_accumulated_ders = 0
