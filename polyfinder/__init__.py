"""Enumerate the polygons (simple cycles) of small weighted undirected graphs."""

from polyfinder.cycles import Cycle, CycleConsistencyError, edge_weight, find_cycles, perimeter
from polyfinder.dedupe import dedupe, rotation_key, vertex_set_key
from polyfinder.graph import WeightedGraph, add_edge, build_graph

__all__ = [
    "Cycle",
    "CycleConsistencyError",
    "WeightedGraph",
    "add_edge",
    "build_graph",
    "dedupe",
    "edge_weight",
    "find_cycles",
    "perimeter",
    "rotation_key",
    "vertex_set_key",
]
