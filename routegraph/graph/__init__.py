"""Graph primitives and helpers.

This package provides the fixed-size labeled directed graph `LabeledGraph`
and a helper module for NetworkX conversion (`convert`).
"""
