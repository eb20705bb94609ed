from __future__ import annotations

from typing import Hashable, Mapping, Optional, Union

#: Represents numeric cost of an edge or path (e.g. price, distance, latency).
Cost = Union[int, float]

#: Any hashable value identifying a vertex to callers.
Label = Hashable

#: Dense integer index of a vertex, in ``[0, vertex_count)``.
VertexIndex = int

#: Distance entry of a shortest-path result; ``None`` marks an unreachable vertex.
Distance = Optional[Cost]


def validate_cost(value: Cost, what: str = "weight") -> Cost:
    """Return ``value`` unchanged if it is a non-negative number.

    Args:
        value: Candidate cost.
        what: Name used in the error message.

    Raises:
        ValueError: If ``value`` is negative or not a real number.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{what} must be a number, got {value!r}")
    if value != value:
        raise ValueError(f"{what} must not be NaN")
    if value < 0:
        raise ValueError(f"{what} must be >= 0, got {value}")
    return value


def resolve_vertex(key: Label, index: Mapping[Label, VertexIndex], size: int) -> VertexIndex:
    """Map a vertex label or vertex index to a vertex index.

    Labels take precedence: an ``int`` that is also a label of the graph
    resolves to that label's vertex. Any other ``int`` is treated as a
    vertex index.

    Args:
        key: Label or vertex index.
        index: Mapping of label to vertex index.
        size: Number of vertices.

    Returns:
        The vertex index.

    Raises:
        KeyError: If ``key`` is neither a known label nor an ``int``, including
            unhashable keys.
        IndexError: If ``key`` is an ``int`` outside ``[0, size)``.
    """
    try:
        found = index.get(key)
    except TypeError:
        raise KeyError(f"Label '{key}' does not exist in this graph.") from None
    if found is not None:
        return found
    if isinstance(key, int) and not isinstance(key, bool):
        if not 0 <= key < size:
            raise IndexError(f"Vertex {key} is out of range for a graph of {size} vertices.")
        return key
    raise KeyError(f"Label '{key}' does not exist in this graph.")
