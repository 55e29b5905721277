import matplotlib.pyplot as plt
import networkx as nx

from .network import Network


def to_networkx(network: Network) -> nx.DiGraph:
    """Directed graph of the network keyed by node id."""
    G = nx.DiGraph()
    last_layer = network.num_layers - 1

    for layer_idx, layer in enumerate(network.layers):
        for node_idx in layer:
            node = network.nodes[node_idx]
            if layer_idx == 0:
                kind = "input"
            elif layer_idx == last_layer:
                kind = "output"
            else:
                kind = "hidden"
            G.add_node(node.id, layer=layer_idx, bias=node.bias, kind=kind)

    for link in network.links.values():
        G.add_edge(
            network.nodes[link.source].id,
            network.nodes[link.dest].id,
            id=link.id,
            weight=link.weight,
            dead=link.is_dead,
        )
    return G


def visualize_network(network: Network, ax=None):
    """
    Draw the network layer by layer.
    Inputs = green, hidden = blue, outputs = red.
    Live links = solid, dead links = dashed.
    """
    G = to_networkx(network)
    colors = {"input": "lightgreen", "hidden": "lightblue", "output": "salmon"}

    pos = {}
    for layer_idx, layer in enumerate(network.layers):
        for i, node_idx in enumerate(layer):
            pos[network.nodes[node_idx].id] = (layer_idx, -i)

    node_colors = [colors[G.nodes[n]["kind"]] for n in G.nodes()]
    nx.draw_networkx_nodes(G, pos, node_color=node_colors, node_size=800, ax=ax)

    edges = list(G.edges(data=True))
    styles = ["dashed" if data["dead"] else "solid" for _, _, data in edges]
    widths = [0.5 + 3 * min(abs(data["weight"]), 1.0) for _, _, data in edges]
    nx.draw_networkx_edges(
        G, pos, edgelist=[(u, v) for u, v, _ in edges],
        edge_color="black", style=styles, width=widths, ax=ax,
    )

    labels = {n: str(n) for n in G.nodes()}
    nx.draw_networkx_labels(G, pos, labels=labels, font_size=8, ax=ax)

    if ax is None:
        plt.show()
    return G
