from __future__ import annotations

import copy
from typing import (
    TYPE_CHECKING,
    Dict,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
)

from routegraph.algorithms.base import (
    Cost,
    Label,
    VertexIndex,
    resolve_vertex,
    validate_cost,
)

if TYPE_CHECKING:
    from routegraph.algorithms.spf import ShortestPathResult
    from routegraph.model.path import Path

T = TypeVar("T")

#: A directed edge as (source_index, target_index, weight).
EdgeTuple = Tuple[VertexIndex, VertexIndex, Cost]


class LabeledGraph(Generic[T]):
    """
    A weighted, labeled, directed graph with a fixed number of vertices.

    This class enforces:
      - Vertices are dense indices in ``[0, vertex_count)``; the count never changes.
      - Each label identifies exactly one vertex; ``None`` is not a label.
      - At most one edge per ordered pair of vertices. Adding an edge that
        already exists overwrites its weight.
      - Edge weights are non-negative numbers.
      - Self-loops are allowed.

    Vertices may be addressed either by index or by label wherever a method
    takes a ``source``, ``target`` or ``vertex`` argument. An ``int`` that is
    also a label of this graph resolves to that label's vertex.

    Example:
        >>> g = LabeledGraph(3, ["A", "B", "C"])
        >>> g.add_edge("A", "B", 10).add_edge("B", "C", 5)
        LabeledGraph(vertices=3, edges=2)
        >>> g.shortest_path("A", "C").stops
        ('A', 'B', 'C')
    """

    def __init__(self, vertex_count: int, labels: Optional[Sequence[T]] = None) -> None:
        """
        Initialize a LabeledGraph with ``vertex_count`` vertices and no edges.

        Args:
            vertex_count: Number of vertices. Must be non-negative.
            labels: Optional labels, one per vertex in index order. When
                omitted, every vertex starts unlabeled.

        Raises:
            ValueError: If ``vertex_count`` is negative, or if ``labels`` has the
                wrong length, contains ``None`` or contains duplicates.
        """
        if isinstance(vertex_count, bool) or not isinstance(vertex_count, int):
            raise ValueError(f"vertex_count must be an int, got {vertex_count!r}")
        if vertex_count < 0:
            raise ValueError(f"vertex_count must be >= 0, got {vertex_count}")

        self._labels: List[Optional[T]] = [None] * vertex_count
        self._index: Dict[T, VertexIndex] = {}

        if labels is not None:
            labels = list(labels)
            if len(labels) != vertex_count:
                raise ValueError(
                    f"Incorrect number of labels: expected {vertex_count}, got {len(labels)}."
                )
            for vertex, label in enumerate(labels):
                if label is None:
                    raise ValueError(f"Label of vertex {vertex} is None; null labels are not allowed.")
                if label in self._index:
                    raise ValueError(f"Labels must be unique: '{label}' appears more than once.")
                self._index[label] = vertex
            self._labels = labels

        # Outgoing adjacency: self._succ[u][v] is the weight of edge u -> v
        self._succ: List[Dict[VertexIndex, Cost]] = [{} for _ in range(vertex_count)]

    #
    # Vertices and labels
    #
    def size(self) -> int:
        """Return the number of vertices."""
        return len(self._labels)

    def __len__(self) -> int:
        return len(self._labels)

    def __contains__(self, label: object) -> bool:
        """Check whether ``label`` labels a vertex of this graph."""
        try:
            return label in self._index
        except TypeError:
            return False

    @property
    def labels(self) -> Tuple[Optional[T], ...]:
        """Labels in vertex-index order; unlabeled vertices appear as ``None``."""
        return tuple(self._labels)

    def label_of(self, vertex: VertexIndex) -> Optional[T]:
        """
        Return the label of a vertex.

        Args:
            vertex: Vertex index.

        Returns:
            The label, or ``None`` if the vertex is unlabeled.

        Raises:
            IndexError: If ``vertex`` is out of range.
        """
        return self._labels[self._check_index(vertex)]

    def vertex_of(self, label: T) -> VertexIndex:
        """
        Return the index of the vertex carrying ``label``.

        Raises:
            KeyError: If no vertex carries ``label``.
        """
        try:
            return self._index[label]
        except (KeyError, TypeError):
            raise KeyError(f"Label '{label}' does not exist in this graph.") from None

    def set_label(self, vertex: VertexIndex, label: T) -> None:
        """
        Assign a new label to a vertex, replacing its previous label.

        Args:
            vertex: Vertex index.
            label: New label. Must not be carried by any other vertex.

        Raises:
            ValueError: If ``label`` is ``None`` or already labels another vertex.
            IndexError: If ``vertex`` is out of range.
        """
        vertex = self._check_index(vertex)
        if label is None:
            raise ValueError("Label cannot be None.")
        owner = self._index.get(label)
        if owner is not None:
            if owner == vertex:
                return
            raise ValueError(f"Label must be unique: '{label}' already exists in this graph.")

        old = self._labels[vertex]
        if old is not None:
            del self._index[old]
        self._labels[vertex] = label
        self._index[label] = vertex

    #
    # Edges
    #
    def add_edge(self, source: Label, target: Label, weight: Cost) -> LabeledGraph[T]:
        """
        Add a directed edge, or overwrite the weight of an existing one.

        Args:
            source: Source vertex (index or label).
            target: Target vertex (index or label).
            weight: Non-negative edge weight.

        Returns:
            This graph, so edge declarations can be chained.

        Raises:
            ValueError: If ``weight`` is negative. The graph is left unchanged.
            KeyError: If a label does not exist in this graph.
            IndexError: If an index is out of range.
        """
        validate_cost(weight)
        u = self._resolve(source)
        v = self._resolve(target)
        self._succ[u][v] = weight
        return self

    def add_edges_from(self, edges: Iterable[Tuple[Label, Label, Cost]]) -> LabeledGraph[T]:
        """
        Add several edges given as ``(source, target, weight)`` triples.

        All triples are validated before any edge is added.

        Returns:
            This graph.
        """
        resolved = [
            (self._resolve(source), self._resolve(target), validate_cost(weight))
            for source, target, weight in edges
        ]
        for u, v, weight in resolved:
            self._succ[u][v] = weight
        return self

    def remove_edge(self, source: Label, target: Label) -> None:
        """Remove the edge from ``source`` to ``target`` if present."""
        u = self._resolve(source)
        v = self._resolve(target)
        self._succ[u].pop(v, None)

    def is_edge(self, source: Label, target: Label) -> bool:
        """Check whether there is an edge from ``source`` to ``target``."""
        return self._resolve(target) in self._succ[self._resolve(source)]

    def edge_weight(self, source: Label, target: Label) -> Optional[Cost]:
        """
        Return the weight of the edge from ``source`` to ``target``.

        Returns:
            The weight, or ``None`` if there is no such edge. A zero-weight
            edge returns ``0``.
        """
        u = self._resolve(source)
        v = self._resolve(target)
        return self._succ[u].get(v)

    def neighbors(self, vertex: Label) -> List[VertexIndex]:
        """Return the targets of all edges leaving ``vertex``, in ascending index order."""
        return self._neighbors(self._resolve(vertex))

    def out_edges(self, vertex: Label) -> List[Tuple[VertexIndex, Cost]]:
        """Return ``(target, weight)`` pairs for edges leaving ``vertex``, ascending by target."""
        return self._out_edges(self._resolve(vertex))

    def _neighbors(self, vertex: VertexIndex) -> List[VertexIndex]:
        return sorted(self._succ[vertex])

    def _out_edges(self, vertex: VertexIndex) -> List[Tuple[VertexIndex, Cost]]:
        return sorted(self._succ[vertex].items())

    def edges(self) -> Iterator[EdgeTuple]:
        """Iterate over all edges as ``(source, target, weight)`` in index order."""
        for u, succ in enumerate(self._succ):
            for v in sorted(succ):
                yield u, v, succ[v]

    @property
    def edge_count(self) -> int:
        """Number of edges in the graph."""
        return sum(len(succ) for succ in self._succ)

    #
    # Traversal
    #
    def depth_first_traverse(self, start: Label) -> Iterator[Optional[T]]:
        """
        Lazily yield the labels of vertices reachable from ``start``, depth first.

        Each reachable vertex is yielded once, ``start`` first. Neighbors are
        explored in ascending index order. Every call starts a new traversal.

        Raises:
            KeyError, IndexError: Immediately, if ``start`` is not a vertex.
        """
        return self._dfs(self._resolve(start))

    def _dfs(self, start: VertexIndex) -> Iterator[Optional[T]]:
        visited = {start}
        yield self._labels[start]
        stack = [iter(self._neighbors(start))]
        while stack:
            for neighbor in stack[-1]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    yield self._labels[neighbor]
                    stack.append(iter(self._neighbors(neighbor)))
                    break
            else:
                stack.pop()

    #
    # Shortest paths
    #
    def dijkstra(self, source: Label) -> ShortestPathResult:
        """Compute shortest distances from ``source`` to every vertex. See `spf`."""
        from routegraph.algorithms.spf import spf

        return spf(self, source)

    def shortest_path(self, source: Label, target: Label) -> Optional[Path[T]]:
        """
        Find a least-weight path between two vertices, as labels.

        Returns:
            A `Path` whose stops are labels, or ``None`` if ``target`` cannot be
            reached from ``source``. When ``source == target`` the path has a
            single stop and weight 0.

        Raises:
            KeyError: If a label does not exist in this graph.
        """
        target_idx = self._resolve(target)
        return self.dijkstra(source)._labeled_path(target_idx)

    def shortest_index_path(self, source: Label, target: Label) -> Optional[Path[int]]:
        """Same as `shortest_path`, but the path stops are vertex indices."""
        target_idx = self._resolve(target)
        return self.dijkstra(source)._index_path(target_idx)

    #
    # Utility
    #
    def clone(self) -> LabeledGraph[T]:
        """Return a deep copy; later changes to either graph do not affect the other."""
        return copy.deepcopy(self)

    def __repr__(self) -> str:
        return f"LabeledGraph(vertices={self.size()}, edges={self.edge_count})"

    def __str__(self) -> str:
        lines = [f"Graph (vertices: {self.size()})"]
        lines.extend(f"v{i}: {label}" for i, label in enumerate(self._labels))
        return "\n".join(lines)

    def _check_index(self, vertex: VertexIndex) -> VertexIndex:
        if isinstance(vertex, bool) or not isinstance(vertex, int):
            raise TypeError(f"Vertex index must be an int, got {vertex!r}")
        if not 0 <= vertex < len(self._labels):
            raise IndexError(
                f"Vertex {vertex} is out of range for a graph of {len(self._labels)} vertices."
            )
        return vertex

    def _resolve(self, key: Label) -> VertexIndex:
        return resolve_vertex(key, self._index, len(self._labels))
