import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from polyfinder.cycles import Cycle
from polyfinder.dedupe import KEYS, dedupe, rotation_key, vertex_set_key


def test_vertex_set_key_sorts_numerically():
    # a text sort would give ('10', '2', '3')
    assert vertex_set_key(Cycle((10, 2, 3), 0)) == (2, 3, 10)
    assert vertex_set_key(Cycle((3, 10, 2), 0)) == vertex_set_key(Cycle((2, 3, 10), 0))


def test_rotation_key_ignores_start_and_direction():
    base = rotation_key(Cycle((0, 1, 2, 3), 4))
    assert base == (0, 1, 2, 3)
    assert rotation_key(Cycle((2, 3, 0, 1), 4)) == base
    assert rotation_key(Cycle((3, 2, 1, 0), 4)) == base
    # same vertex set, different cycle
    assert rotation_key(Cycle((0, 2, 1, 3), 4)) != base


def test_first_instance_wins_and_order_is_kept():
    c1 = Cycle((0, 1, 2), 3)
    c2 = Cycle((3, 4, 5), 9)
    c3 = Cycle((2, 1, 0), 99)
    c4 = Cycle((5, 3, 4), 9)
    c5 = Cycle((0, 1, 2, 3), 4)
    assert dedupe([c1, c2, c3, c4, c5]) == [c1, c2, c5]


def test_different_sizes_never_collide():
    tri = Cycle((0, 1, 2), 3)
    quad = Cycle((0, 1, 2, 3), 4)
    assert dedupe([tri, quad]) == [tri, quad]


def test_idempotent():
    cycles = [
        Cycle((0, 1, 2), 3),
        Cycle((1, 2, 0), 3),
        Cycle((0, 1, 2, 3), 4),
        Cycle((0, 2, 1, 3), 4),
        Cycle((3, 2, 1, 0), 4),
    ]
    for key in KEYS.values():
        once = dedupe(cycles, key=key)
        assert dedupe(once, key=key) == once
    assert len(dedupe(cycles)) == 2
    assert len(dedupe(cycles, key=rotation_key)) == 3


def test_empty_and_generator_input():
    assert dedupe([]) == []
    assert dedupe(c for c in [Cycle((0, 1, 2), 1), Cycle((1, 0, 2), 1)]) == [Cycle((0, 1, 2), 1)]
