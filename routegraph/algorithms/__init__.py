"""Shortest-path algorithms over `LabeledGraph`.

`base` holds the shared cost types and validation; `spf` implements
single-source Dijkstra and its `ShortestPathResult`.
"""
