"""routegraph: labeled weighted directed graphs and shortest paths.

Primary API:
    LabeledGraph - fixed-size graph with unique vertex labels
    spf() / ShortestPathResult - single-source Dijkstra and its result
    Path - stops and total weight of a shortest path
    Airline, Flight - cheapest-flight queries over a city network

Example:
    from routegraph import LabeledGraph

    g = LabeledGraph(4, ["A", "B", "C", "D"])
    g.add_edge("A", "B", 10).add_edge("B", "C", 5).add_edge("A", "C", 20)
    g.add_edge("C", "D", 1)

    path = g.shortest_path("A", "D")
    path.stops   # ('A', 'B', 'C', 'D')
    path.weight  # 16
"""

from __future__ import annotations

from routegraph import logging
from routegraph._version import __version__
from routegraph.airline import Airline, Flight
from routegraph.algorithms.base import Cost
from routegraph.algorithms.spf import ShortestPathResult, spf
from routegraph.graph.labeled_graph import LabeledGraph
from routegraph.model.path import Path

__all__ = [
    # Version
    "__version__",
    # Core
    "LabeledGraph",
    "ShortestPathResult",
    "spf",
    "Path",
    "Cost",
    # Airline
    "Airline",
    "Flight",
    # Utilities
    "logging",
]
