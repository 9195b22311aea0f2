"""Collapse repeated discoveries of the same polygon."""

from __future__ import annotations

from typing import Callable, Hashable, Iterable, List, Set, Tuple

from polyfinder.cycles import Cycle

CycleKey = Callable[[Cycle], Hashable]


def vertex_set_key(cycle: Cycle) -> Tuple[int, ...]:
    """Vertex indices in ascending numeric order."""
    return tuple(sorted(cycle.vertices))


def rotation_key(cycle: Cycle) -> Tuple[int, ...]:
    """
    Smallest rotation of the forward or reversed vertex sequence.

    Unlike vertex_set_key this tells apart different cycles that share a vertex
    set, e.g. the three Hamiltonian 4-cycles of K4.
    """
    cyc = tuple(cycle.vertices)
    rev = tuple(reversed(cyc))
    k = len(cyc)
    rotations = []
    for i in range(k):
        rotations.append(cyc[i:] + cyc[:i])
        rotations.append(rev[i:] + rev[:i])
    return min(rotations)


def dedupe(cycles: Iterable[Cycle], key: CycleKey = vertex_set_key) -> List[Cycle]:
    """Keep the first cycle for each key; survivors stay in input order."""
    seen: Set[Hashable] = set()
    unique: List[Cycle] = []
    for cycle in cycles:
        canon = key(cycle)
        if canon in seen:
            continue
        seen.add(canon)
        unique.append(cycle)
    return unique


KEYS = {
    "vertices": vertex_set_key,
    "rotation": rotation_key,
}

__all__ = ["CycleKey", "KEYS", "vertex_set_key", "rotation_key", "dedupe"]
