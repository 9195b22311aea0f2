"""
Load graphs for polygon search.

Two input shapes are accepted:

  Edge list text (one edge per line, '#' starts a comment line):
      A B 3
      B C 4
      0 2 1

  JSON model:
      {"name": "...", "vertices": [...], "edges": [[u, v, w], ...]}
      {"vertices": [...], "edges": [{"source": u, "target": v, "weight": w}, ...]}
      {"vertices": [...], "faces": [[0, 1, 2], ...]}     # unit weights

Letter labels map to indices by their first character (A -> 0, B -> 1, ...,
case-insensitive); integer labels are used as indices directly. One file uses
one kind of label: mixing letters and integers is rejected, since "A" and "0"
would name the same vertex. JSON weights must be whole numbers.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple

from polyfinder.graph import WeightedEdge, WeightedGraph

DEFAULT_WEIGHT = 1


@dataclass
class Model:
    name: str
    graph: WeightedGraph
    labels: Dict[int, str] = field(default_factory=dict)

    def label(self, v: int) -> str:
        return self.labels.get(v, str(v))


def model_from_edges(
    name: str,
    n: int,
    edges: Iterable[WeightedEdge],
    labels: Optional[Dict[int, str]] = None,
) -> Model:
    graph = WeightedGraph(n)
    for u, v, w in edges:
        graph.add_edge(u, v, w)
    return Model(name, graph, dict(labels or {}))


# ----------------------------
# Edge list text
# ----------------------------

def parse_label(token: str) -> Tuple[int, str]:
    """Return (index, display label) for a vertex token."""
    if token.isdigit():
        return int(token), token
    first = token[0]
    if "A" <= first.upper() <= "Z":
        return ord(first.upper()) - ord("A"), first.upper()
    raise ValueError(f"bad vertex label {token!r}")


def parse_weight(token: str) -> int:
    try:
        weight = int(token)
    except ValueError:
        raise ValueError(f"bad weight {token!r}") from None
    if weight < 0:
        raise ValueError(f"negative weight {weight}")
    return weight


def parse_edge_list(lines: Iterable[str], name: str = "<edges>") -> Model:
    edges: List[WeightedEdge] = []
    labels: Dict[int, str] = {}
    numeric: Optional[bool] = None

    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        parts = line.split()
        if len(parts) not in (2, 3):
            raise ValueError(f"{name}:{lineno}: expected 'u v weight', got {line!r}")
        try:
            u, u_label = parse_label(parts[0])
            v, v_label = parse_label(parts[1])
            w = parse_weight(parts[2]) if len(parts) == 3 else DEFAULT_WEIGHT
        except ValueError as e:
            raise ValueError(f"{name}:{lineno}: {e}") from None
        for token in parts[:2]:
            if numeric is None:
                numeric = token.isdigit()
            elif numeric != token.isdigit():
                raise ValueError(f"{name}:{lineno}: mixed letter and integer labels ({token!r})")
        if u == v:
            raise ValueError(f"{name}:{lineno}: self-loop on {u_label}")
        labels.setdefault(u, u_label)
        labels.setdefault(v, v_label)
        edges.append((u, v, w))

    n = max(labels) + 1 if labels else 0
    return model_from_edges(name, n, edges, labels)


def load_edge_list(path: str) -> Model:
    name = os.path.splitext(os.path.basename(path))[0]
    with open(path, "r", encoding="utf-8") as f:
        return parse_edge_list(f, name)


# ----------------------------
# JSON models
# ----------------------------

def _vertex_label(v: Any) -> Optional[str]:
    if isinstance(v, str):
        return v
    if isinstance(v, dict):
        for k in ("name", "id", "label"):
            if k in v:
                return str(v[k])
    return None


def _json_weight(value: Any, e: Any, path: str) -> int:
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"{path}: weight is not a whole number in {e}")
    return int(value)


def _edge_record(e: Any, path: str) -> WeightedEdge:
    if isinstance(e, (list, tuple)) and len(e) >= 2:
        u, v = int(e[0]), int(e[1])
        w = _json_weight(e[2], e, path) if len(e) >= 3 else DEFAULT_WEIGHT
    elif isinstance(e, dict):
        u = e.get("source", e.get("u"))
        v = e.get("target", e.get("v"))
        if u is None or v is None:
            raise ValueError(f"{path}: edge dict missing endpoints: {e}")
        u, v = int(u), int(v)
        w = _json_weight(e.get("weight", e.get("w", DEFAULT_WEIGHT)), e, path)
    else:
        raise ValueError(f"{path}: unsupported edge record: {e}")
    if u < 0 or v < 0:
        raise ValueError(f"{path}: negative vertex index in {e}")
    if u == v:
        raise ValueError(f"{path}: self-loop on vertex {u}")
    if w < 0:
        raise ValueError(f"{path}: negative weight in {e}")
    return u, v, w


def _edges_from_faces(faces: List[Any], path: str) -> List[WeightedEdge]:
    seen: Set[Tuple[int, int]] = set()
    edges: List[WeightedEdge] = []
    for face in faces:
        k = len(face)
        for i in range(k):
            u, v = int(face[i]), int(face[(i + 1) % k])
            if u < 0 or v < 0:
                raise ValueError(f"{path}: negative vertex index in face {face}")
            key = (min(u, v), max(u, v))
            if u == v or key in seen:
                continue
            seen.add(key)
            edges.append((key[0], key[1], DEFAULT_WEIGHT))
    return edges


def load_json_model(path: str) -> Model:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object")

    name = data.get("name") or os.path.splitext(os.path.basename(path))[0]
    verts = data.get("vertices") or []

    raw_edges = data.get("edges")
    if raw_edges is not None:
        if not isinstance(raw_edges, list):
            raise ValueError(f"{path}: 'edges' must be a list")
        edges = [_edge_record(e, path) for e in raw_edges]
    else:
        edges = _edges_from_faces(data.get("faces") or [], path)

    n = len(verts)
    if edges:
        n = max(n, max(max(u, v) for u, v, _ in edges) + 1)

    labels: Dict[int, str] = {}
    for i, v in enumerate(verts):
        label = _vertex_label(v)
        if label is not None:
            labels[i] = label

    return model_from_edges(name, n, edges, labels)


def load_model(path: str) -> Model:
    if path.lower().endswith(".json"):
        return load_json_model(path)
    return load_edge_list(path)


__all__ = [
    "Model",
    "model_from_edges",
    "parse_label",
    "parse_edge_list",
    "load_edge_list",
    "load_json_model",
    "load_model",
]
