"""Graph conversion utilities between LabeledGraph and NetworkX graphs.

Vertices become NetworkX nodes keyed by vertex index, carrying their label in
a ``label`` attribute; edges carry their weight in a ``weight`` attribute.
Keying by index keeps unlabeled vertices representable.
"""

from typing import Dict, Hashable, Optional

import networkx as nx

from routegraph.graph.labeled_graph import LabeledGraph


def to_digraph(graph: LabeledGraph, weight_attr: str = "weight") -> nx.DiGraph:
    """Convert a LabeledGraph to a NetworkX DiGraph.

    Args:
        graph: The LabeledGraph to convert.
        weight_attr: Edge attribute name that receives the edge weight.

    Returns:
        A NetworkX DiGraph with nodes ``0..graph.size()-1``.
    """
    nx_graph = nx.DiGraph()
    nx_graph.add_nodes_from(
        (vertex, {"label": label}) for vertex, label in enumerate(graph.labels)
    )
    nx_graph.add_edges_from((u, v, {weight_attr: w}) for u, v, w in graph.edges())
    return nx_graph


def from_digraph(
    nx_graph: nx.DiGraph,
    weight_attr: str = "weight",
    label_attr: Optional[str] = "label",
    default_weight: int = 1,
) -> LabeledGraph:
    """Convert a NetworkX DiGraph to a LabeledGraph.

    Nodes are assigned vertex indices in ``nx_graph.nodes`` order. A node's
    label is its ``label_attr`` attribute when present, otherwise the node
    key itself. Pass ``label_attr=None`` to always use node keys.

    Args:
        nx_graph: A directed NetworkX graph.
        weight_attr: Edge attribute holding the weight.
        label_attr: Node attribute holding the label.
        default_weight: Weight for edges lacking ``weight_attr``.

    Returns:
        A new LabeledGraph.

    Raises:
        ValueError: If the graph is undirected or a multigraph, labels collide,
            or a weight is negative.
    """
    if not nx_graph.is_directed() or nx_graph.is_multigraph():
        raise ValueError("from_digraph expects a simple directed graph (nx.DiGraph).")

    position: Dict[Hashable, int] = {}
    labels = []
    for vertex, (node, data) in enumerate(nx_graph.nodes(data=True)):
        position[node] = vertex
        label = data.get(label_attr) if label_attr is not None else None
        labels.append(node if label is None else label)

    graph = LabeledGraph(len(labels), labels)
    graph.add_edges_from(
        (labels[position[u]], labels[position[v]], data.get(weight_attr, default_weight))
        for u, v, data in nx_graph.edges(data=True)
    )
    return graph
