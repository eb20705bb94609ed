"""Shared graph fixtures.

Each fixture returns a fresh graph so tests may mutate it freely.
"""

from __future__ import annotations

import pytest

from routegraph.graph.labeled_graph import LabeledGraph


@pytest.fixture
def chain_with_shortcut():
    #  A ──10──► B ──5──► C ──1──► D
    #  └─────────20──────►┘
    g = LabeledGraph(4, ["A", "B", "C", "D"])
    g.add_edge("A", "B", 10).add_edge("B", "C", 5).add_edge("A", "C", 20).add_edge(
        "C", "D", 1
    )
    return g


@pytest.fixture
def chain_with_isolated():
    # Same as chain_with_shortcut plus an isolated vertex E.
    g = LabeledGraph(5, ["A", "B", "C", "D", "E"])
    g.add_edge("A", "B", 10).add_edge("B", "C", 5).add_edge("A", "C", 20).add_edge(
        "C", "D", 1
    )
    return g


@pytest.fixture
def square_equal_cost():
    #       [1]       [1]
    #   ┌───────►B────────┐
    #   │                 ▼
    #   A                 D
    #   │                 ▲
    #   └───────►C────────┘
    #       [1]       [1]
    g = LabeledGraph(4, ["A", "B", "C", "D"])
    g.add_edge("A", "B", 1).add_edge("A", "C", 1).add_edge("B", "D", 1).add_edge(
        "C", "D", 1
    )
    return g


@pytest.fixture
def diamond_with_cycle():
    # A→B, A→C, B→D, C→D, D→A; all weights 1.
    g = LabeledGraph(4, ["A", "B", "C", "D"])
    g.add_edges_from(
        [("A", "B", 1), ("A", "C", 1), ("B", "D", 1), ("C", "D", 1), ("D", "A", 1)]
    )
    return g


@pytest.fixture
def int_labeled_chain():
    # Labels are a permutation of the indices: label 1 is vertex 0,
    # label 2 is vertex 1, label 0 is vertex 2.
    #  1 ──5──► 2 ──1──► 0
    g = LabeledGraph(3, [1, 2, 0])
    g.add_edge(1, 2, 5).add_edge(2, 0, 1)
    return g
