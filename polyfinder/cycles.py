"""
Simple cycle ("polygon") enumeration over a WeightedGraph.

Every vertex is used as a root for a backtracking depth-first search; a cycle is
recorded whenever the walk can step back onto its root after at least three
vertices. A cycle of k vertices is therefore reported 2k times (each member vertex
as root, both directions), more when parallel edges close it. Use
``polyfinder.dedupe.dedupe`` on the result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Set, Tuple

from polyfinder.graph import WeightedGraph


class CycleConsistencyError(LookupError):
    """A recorded cycle uses a vertex pair that has no edge in the graph."""


@dataclass(frozen=True)
class Cycle:
    vertices: Tuple[int, ...]
    perimeter: int

    @property
    def size(self) -> int:
        return len(self.vertices)

    def edge_pairs(self) -> List[Tuple[int, int]]:
        """Consecutive vertex pairs, closing back to the first vertex."""
        k = len(self.vertices)
        return [(self.vertices[i], self.vertices[(i + 1) % k]) for i in range(k)]


# -------------------- Perimeter --------------------

def edge_weight(graph: WeightedGraph, a: int, b: int) -> int:
    """Weight of the first stored edge a -> b (not the lightest of parallel edges)."""
    for neighbor, weight in graph.neighbors(a):
        if neighbor == b:
            return weight
    raise CycleConsistencyError(f"no edge between {a} and {b}")


def perimeter(graph: WeightedGraph, vertices: Sequence[int]) -> int:
    k = len(vertices)
    return sum(edge_weight(graph, vertices[i], vertices[(i + 1) % k]) for i in range(k))


# -------------------- Search --------------------

def find_cycles(graph: WeightedGraph, vertex_count: Optional[int] = None) -> List[Cycle]:
    """
    Enumerate all simple cycles reachable from roots 0 .. vertex_count-1.

    The result is raw: each cycle appears once per root it passes through and per
    direction of travel. Emission order follows root index, then incident edge
    insertion order.
    """
    if vertex_count is None:
        vertex_count = graph.vertex_count

    found: List[Cycle] = []
    visited: Set[int] = set()
    path: List[int] = []

    def visit(root: int, current: int, parent: int) -> None:
        visited.add(current)
        path.append(current)

        for neighbor, _weight in graph.neighbors(current):
            if neighbor not in visited:
                visit(root, neighbor, current)
            elif neighbor == root and len(path) >= 3:
                snapshot = tuple(path)
                found.append(Cycle(snapshot, perimeter(graph, snapshot)))

        visited.discard(current)
        path.pop()

    for root in range(vertex_count):
        visited.clear()
        path.clear()
        visit(root, root, -1)

    return found


__all__ = ["Cycle", "CycleConsistencyError", "edge_weight", "perimeter", "find_cycles"]
