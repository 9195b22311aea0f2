import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from polyfinder.models import (
    load_edge_list,
    load_json_model,
    load_model,
    model_from_edges,
    parse_edge_list,
    parse_label,
)


@pytest.mark.parametrize("token, index, label", [
    ("A", 0, "A"),
    ("C", 2, "C"),
    ("c", 2, "C"),
    ("Dx", 3, "D"),
    ("0", 0, "0"),
    ("12", 12, "12"),
])
def test_parse_label(token, index, label):
    assert parse_label(token) == (index, label)


@pytest.mark.parametrize("token", ["-1", "?", "_a"])
def test_parse_label_rejects(token):
    with pytest.raises(ValueError):
        parse_label(token)


def test_parse_edge_list_letters():
    lines = [
        "# square with a diagonal",
        "A B 1",
        "",
        "B C 1",
        "C D 1",
        "D A 1",
        "A C 5",
    ]
    model = parse_edge_list(lines, "square")
    g = model.graph
    assert model.name == "square"
    assert g.vertex_count == 4
    assert g.edge_count == 5
    assert g.neighbors(0) == [(1, 1), (3, 1), (2, 5)]
    assert [model.label(v) for v in range(4)] == ["A", "B", "C", "D"]


def test_parse_edge_list_sparse_labels_and_default_weight():
    model = parse_edge_list(["A C", "C E 2"])
    assert model.graph.vertex_count == 5
    assert model.graph.neighbors(0) == [(2, 1)]
    assert model.label(1) == "1"  # never mentioned
    assert model.label(4) == "E"


def test_parse_edge_list_empty():
    model = parse_edge_list(["# nothing", "   "])
    assert model.graph.vertex_count == 0


@pytest.mark.parametrize("line, message", [
    ("A", "expected 'u v weight'"),
    ("A B 1 2", "expected 'u v weight'"),
    ("A B x", "bad weight"),
    ("A B -3", "negative weight"),
    ("A ? 1", "bad vertex label"),
    ("A a 1", "self-loop"),
    ("B 0 1", "mixed letter and integer labels"),
])
def test_parse_edge_list_errors(line, message):
    with pytest.raises(ValueError, match=message) as exc:
        parse_edge_list(["A B 1", line], "bad")
    assert str(exc.value).startswith("bad:2:")


def test_load_edge_list(tmp_path):
    path = tmp_path / "triangle.txt"
    path.write_text("A B 1\nB C 1\nC A 1\n", encoding="utf-8")
    model = load_edge_list(str(path))
    assert model.name == "triangle"
    assert model.graph.edge_count == 3
    assert load_model(str(path)).graph.edge_count == 3


def test_load_json_edges(tmp_path):
    path = tmp_path / "m.json"
    path.write_text(json.dumps({
        "name": "kite",
        "vertices": ["P", {"name": "Q"}, {"id": 7}, [0, 0, 0]],
        "edges": [[0, 1, 3], [1, 2], {"source": 2, "target": 0, "weight": 4}, {"u": 2, "v": 3, "w": 0}],
    }), encoding="utf-8")
    model = load_model(str(path))
    assert model.name == "kite"
    assert model.graph.vertex_count == 4
    assert list(model.graph.edges()) == [(0, 1, 3), (1, 2, 1), (2, 0, 4), (2, 3, 0)]
    assert [model.label(v) for v in range(4)] == ["P", "Q", "7", "3"]


def test_load_json_faces(tmp_path):
    path = tmp_path / "two_faces.json"
    path.write_text(json.dumps({
        "vertices": [[0, 0, 0], [1, 0, 0], [1, 1, 0], [0, 1, 0]],
        "faces": [[0, 1, 2], [0, 2, 3]],
    }), encoding="utf-8")
    model = load_json_model(str(path))
    assert model.name == "two_faces"
    assert sorted((u, v) for u, v, _ in model.graph.edges()) == [(0, 1), (0, 2), (0, 3), (1, 2), (2, 3)]
    assert {w for _, _, w in model.graph.edges()} == {1}


def test_load_json_grows_capacity_from_edges(tmp_path):
    path = tmp_path / "m.json"
    path.write_text(json.dumps({"edges": [[0, 5, 1]]}), encoding="utf-8")
    assert load_json_model(str(path)).graph.vertex_count == 6


@pytest.mark.parametrize("edges, message", [
    ([[1, 1, 2]], "self-loop"),
    ([[0, 1, -2]], "negative weight"),
    ([{"source": 0}], "missing endpoints"),
    (["0-1"], "unsupported edge record"),
    ({"0": [1]}, "must be a list"),
    ([[0, 1, 2.7]], "not a whole number"),
    ([{"source": 0, "target": 1, "weight": 0.5}], "not a whole number"),
])
def test_load_json_errors(tmp_path, edges, message):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"edges": edges}), encoding="utf-8")
    with pytest.raises(ValueError, match=message):
        load_json_model(str(path))


@pytest.mark.parametrize("data, message", [
    ({"faces": [[-1, 0, 1]]}, "negative vertex index in face"),
    ([1, 2], "expected a JSON object"),
    ("cube", "expected a JSON object"),
])
def test_load_json_rejects_bad_documents(tmp_path, data, message):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    with pytest.raises(ValueError, match=message):
        load_json_model(str(path))


def test_load_json_accepts_whole_float_weights(tmp_path):
    path = tmp_path / "m.json"
    path.write_text(json.dumps({"edges": [[0, 1, 3.0]]}), encoding="utf-8")
    assert list(load_json_model(str(path)).graph.edges()) == [(0, 1, 3)]


def test_parse_edge_list_single_label_kind():
    assert parse_edge_list(["0 1 1", "1 12 1"]).graph.vertex_count == 13
    assert parse_edge_list(["A B 1", "b c 1"]).graph.vertex_count == 3


def test_model_from_edges():
    model = model_from_edges("tri", 3, [(0, 1, 1), (1, 2, 2), (2, 0, 3)], {0: "X"})
    assert model.graph.edge_count == 3
    assert model.label(0) == "X"
    assert model.label(2) == "2"
