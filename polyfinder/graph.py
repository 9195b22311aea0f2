"""Weighted undirected adjacency store used by the cycle search."""

from __future__ import annotations

from typing import Iterator, List, Tuple

Edge = Tuple[int, int]  # (neighbor, weight) as stored in a vertex's incident list
WeightedEdge = Tuple[int, int, int]  # (u, v, weight)


class WeightedGraph:
    """Per-vertex incident edge lists, in insertion order.

    Edges are stored symmetrically: ``add_edge(u, v, w)`` appends ``(v, w)`` to
    ``u``'s list and ``(u, w)`` to ``v``'s list. Parallel edges occupy separate
    slots. There is no removal; once built the graph is only read.
    """

    def __init__(self, n: int):
        self.n = n
        self.adj: List[List[Edge]] = [[] for _ in range(n)]
        self._edges: List[WeightedEdge] = []

    @property
    def vertex_count(self) -> int:
        return self.n

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def add_edge(self, u: int, v: int, weight: int) -> None:
        if u < 0 or v < 0:
            raise IndexError(f"negative vertex index in edge ({u}, {v})")
        u_edges, v_edges = self.adj[u], self.adj[v]
        u_edges.append((v, weight))
        v_edges.append((u, weight))
        self._edges.append((u, v, weight))

    def neighbors(self, u: int) -> List[Edge]:
        return self.adj[u]

    def edges(self) -> Iterator[WeightedEdge]:
        """Each undirected edge once, as added."""
        return iter(self._edges)

    def degree(self, u: int) -> int:
        return len(self.adj[u])

    def __repr__(self) -> str:
        return f"WeightedGraph(n={self.n}, edges={self.edge_count})"


def build_graph(vertex_capacity: int) -> WeightedGraph:
    return WeightedGraph(vertex_capacity)


def add_edge(graph: WeightedGraph, u: int, v: int, weight: int) -> None:
    graph.add_edge(u, v, weight)


__all__ = ["Edge", "WeightedEdge", "WeightedGraph", "build_graph", "add_edge"]
