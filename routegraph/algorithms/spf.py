"""Shortest-path-first (SPF) computation.

Implements single-source Dijkstra over a `LabeledGraph` with non-negative
edge weights. Among vertices at equal tentative distance the one with the
lowest index is settled first, so results are reproducible for a given graph.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from heapq import heappop, heappush
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from routegraph.algorithms.base import Cost, Distance, Label, VertexIndex, resolve_vertex
from routegraph.model.path import Path

if TYPE_CHECKING:
    from routegraph.graph.labeled_graph import LabeledGraph


@dataclass(frozen=True)
class ShortestPathResult:
    """
    Distances and predecessors from one source vertex to every vertex.

    Attributes:
        source: Index of the source vertex.
        distances: Least total weight from ``source`` per vertex index, or
            ``None`` where the vertex is unreachable.
        predecessors: Previous vertex on the shortest path per vertex index, or
            ``None`` for the source and for unreachable vertices.
        labels: Vertex labels at the time of computation.
    """

    source: VertexIndex
    distances: Tuple[Distance, ...]
    predecessors: Tuple[Optional[VertexIndex], ...]
    labels: Tuple[Any, ...] = field(repr=False)
    _index: Dict[Any, VertexIndex] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        index = {label: i for i, label in enumerate(self.labels) if label is not None}
        object.__setattr__(self, "_index", index)

    @property
    def source_label(self) -> Any:
        """Label of the source vertex."""
        return self.labels[self.source]

    @property
    def reachable(self) -> Tuple[VertexIndex, ...]:
        """Indices of all vertices reachable from the source, including itself."""
        return tuple(i for i, dist in enumerate(self.distances) if dist is not None)

    def path_exists(self, target: Label) -> bool:
        """Check whether ``target`` is reachable from the source."""
        return self.distances[self._resolve(target)] is not None

    def distance_to(self, target: Label) -> Distance:
        """Return the least total weight to ``target``, or ``None`` if unreachable."""
        return self.distances[self._resolve(target)]

    def path_to(self, target: Label) -> Optional[Path[int]]:
        """
        Reconstruct the shortest path to ``target`` as vertex indices.

        Returns:
            The path, or ``None`` if ``target`` is unreachable.
        """
        return self._index_path(self._resolve(target))

    def labeled_path_to(self, target: Label) -> Optional[Path]:
        """Reconstruct the shortest path to ``target`` as vertex labels."""
        return self._labeled_path(self._resolve(target))

    def _index_path(self, target: VertexIndex) -> Optional[Path[int]]:
        if self.distances[target] is None:
            return None
        return Path(self._walk_back(target), self.distances[target])

    def _labeled_path(self, target: VertexIndex) -> Optional[Path]:
        if self.distances[target] is None:
            return None
        stops = [self.labels[vertex] for vertex in self._walk_back(target)]
        return Path(stops, self.distances[target])

    def _walk_back(self, target: VertexIndex) -> List[VertexIndex]:
        stops = [target]
        vertex = target
        while vertex != self.source:
            vertex = self.predecessors[vertex]
            stops.append(vertex)
        stops.reverse()
        return stops

    def _resolve(self, key: Label) -> VertexIndex:
        return resolve_vertex(key, self._index, len(self.distances))

    def __str__(self) -> str:
        return (
            f"Vertex: {self.source} ({self.source_label})\n"
            f"Distances: {list(self.distances)}"
        )


def spf(graph: LabeledGraph, source: Label) -> ShortestPathResult:
    """
    Dijkstra's shortest path first algorithm from a single source.

    Uses a min-priority queue keyed by ``(distance, vertex_index)``. A vertex is
    settled when it is popped at its current distance; stale queue entries are
    skipped. Edges into already-settled vertices are not relaxed, and a
    tentative distance is only replaced on strict improvement.

    Args:
        graph: Graph with non-negative edge weights.
        source: Source vertex (index or label).

    Returns:
        The `ShortestPathResult` for ``source``.

    Raises:
        ValueError: If ``graph`` is empty or ``source`` is an out-of-range index.
        KeyError: If ``source`` is a label that does not exist in ``graph``.
    """
    vertex_count = graph.size()
    if vertex_count == 0:
        raise ValueError("Cannot compute shortest paths for an empty graph.")
    try:
        src = graph._resolve(source)
    except IndexError as exc:
        raise ValueError(str(exc)) from exc

    distances: List[Distance] = [None] * vertex_count
    predecessors: List[Optional[VertexIndex]] = [None] * vertex_count
    settled = [False] * vertex_count

    distances[src] = 0
    min_pq: List[Tuple[Cost, VertexIndex]] = [(0, src)]

    while min_pq:
        dist, vertex = heappop(min_pq)
        if settled[vertex] or dist > distances[vertex]:
            continue
        settled[vertex] = True

        for neighbor, weight in graph._out_edges(vertex):
            if settled[neighbor]:
                continue
            candidate = dist + weight
            if distances[neighbor] is None or candidate < distances[neighbor]:
                distances[neighbor] = candidate
                predecessors[neighbor] = vertex
                heappush(min_pq, (candidate, neighbor))

    return ShortestPathResult(
        source=src,
        distances=tuple(distances),
        predecessors=tuple(predecessors),
        labels=graph.labels,
    )
