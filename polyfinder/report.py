"""Classify deduplicated polygons and render them for the console or JSON."""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Callable, Dict, List, Sequence

import networkx as nx
import numpy as np

from polyfinder.cycles import Cycle
from polyfinder.graph import WeightedGraph
from polyfinder.models import Model

POLYGON_NAMES = {3: "triangle", 4: "quadrilateral", 5: "pentagon"}


def classify(cycles: Sequence[Cycle]) -> Dict[int, List[Cycle]]:
    """Group cycles by vertex count, keeping emission order inside each group."""
    groups: Dict[int, List[Cycle]] = defaultdict(list)
    for c in cycles:
        groups[c.size].append(c)
    return dict(groups)


def render_text(cycles: Sequence[Cycle], label: Callable[[int], str] = str) -> str:
    groups = classify(cycles)
    lines = [f"Number of Polygons: {len(cycles)}"]
    for k in sorted(POLYGON_NAMES):
        lines.append(f"Number of {k}-gons: {len(groups.get(k, []))}")

    index: Dict[int, int] = defaultdict(int)
    for c in cycles:
        index[c.size] += 1
        walk = " ".join(label(v) for v in c.vertices + c.vertices[:1])
        lines.append(f"{index[c.size]}. {c.size}-gon:  {walk} Length: {c.perimeter}")
    return "\n".join(lines)


# -------------------- Graph / cycle statistics --------------------

def to_networkx(graph: WeightedGraph) -> nx.MultiGraph:
    G = nx.MultiGraph()
    for u, v, w in graph.edges():
        G.add_edge(u, v, weight=w)
    return G


def graph_summary(graph: WeightedGraph) -> Dict[str, int]:
    """Counts over vertices that carry at least one edge."""
    G = to_networkx(graph)
    n_vertices = G.number_of_nodes()
    n_edges = G.number_of_edges()
    components = nx.number_connected_components(G) if n_vertices else 0
    return {
        "n_vertices": n_vertices,
        "n_edges": n_edges,
        "components": components,
        "cyclomatic_number": n_edges - n_vertices + components,
    }


def cycle_stats(cycles: Sequence[Cycle], graph: WeightedGraph) -> Dict[str, Any]:
    """
    Perimeter range and how many polygons use each edge.

    Parallel edges between the same pair share one row of the edge-cycle
    incidence matrix.
    """
    edges_list = sorted({(min(u, v), max(u, v)) for u, v, _ in graph.edges()})
    n_edges = len(edges_list)
    n_cycles = len(cycles)

    if n_edges == 0 or n_cycles == 0:
        return {
            "perimeter_min": 0,
            "perimeter_max": 0,
            "perimeter_mean": 0.0,
            "edge_participation": {f"{u}-{v}": 0 for u, v in edges_list},
            "unused_edges": n_edges,
        }

    A = np.zeros((n_edges, n_cycles), dtype=int)
    edge_to_idx = {e: i for i, e in enumerate(edges_list)}
    for j, c in enumerate(cycles):
        for a, b in c.edge_pairs():
            A[edge_to_idx[(min(a, b), max(a, b))], j] = 1

    participation = A.sum(axis=1)
    perimeters = np.array([c.perimeter for c in cycles])

    return {
        "perimeter_min": int(perimeters.min()),
        "perimeter_max": int(perimeters.max()),
        "perimeter_mean": round(float(perimeters.mean()), 4),
        "edge_participation": {
            f"{e[0]}-{e[1]}": int(count) for e, count in zip(edges_list, participation)
        },
        "unused_edges": int((participation == 0).sum()),
    }


def to_record(model: Model, cycles: Sequence[Cycle]) -> Dict[str, Any]:
    """JSON-ready result for one model."""
    groups = classify(cycles)
    return {
        "model": model.name,
        "ok": True,
        **graph_summary(model.graph),
        "num_polygons": len(cycles),
        "counts_by_size": {str(k): len(groups[k]) for k in sorted(groups)},
        "polygons": [
            {
                "size": c.size,
                "kind": POLYGON_NAMES.get(c.size, f"{c.size}-gon"),
                "vertices": [model.label(v) for v in c.vertices],
                "perimeter": c.perimeter,
            }
            for c in cycles
        ],
        "stats": cycle_stats(cycles, model.graph),
    }


__all__ = [
    "POLYGON_NAMES",
    "classify",
    "render_text",
    "to_networkx",
    "graph_summary",
    "cycle_stats",
    "to_record",
]
