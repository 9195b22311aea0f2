"""Built-in polyhedron graphs with integer edge lengths as weights."""

from __future__ import annotations

from math import cos, pi, sin, sqrt

from polyfinder.models import Model, model_from_edges


class PolyhedronGenerators:
    """Build weighted polyhedron graphs as (vertices, edges) tuples.

    Edges are (u, v, w) with u < v, sorted; w is the Euclidean edge length times
    ``scale``, rounded, at least 1.
    """

    @staticmethod
    def _finalize(coords, edges, scale, return_coords):
        vertices = list(range(len(coords)))
        weighted = []
        for u, v in sorted(edges):
            length = sqrt(PolyhedronGenerators._dist2(coords[u], coords[v])) * scale
            weighted.append((u, v, max(1, round(length))))
        return (vertices, weighted, coords) if return_coords else (vertices, weighted)

    @staticmethod
    def _dist2(p, q):
        return (p[0] - q[0]) ** 2 + (p[1] - q[1]) ** 2 + (p[2] - q[2]) ** 2

    @staticmethod
    def _ring(sides, z, phase=0.0):
        return [
            (cos(2 * pi * i / sides + phase), sin(2 * pi * i / sides + phase), z)
            for i in range(sides)
        ]

    @staticmethod
    def tetrahedron(scale: float = 1, return_coords: bool = False):
        coords = [
            (1, 1, 1),
            (1, -1, -1),
            (-1, 1, -1),
            (-1, -1, 1),
        ]
        edges = [(i, j) for i in range(4) for j in range(i + 1, 4)]
        return PolyhedronGenerators._finalize(coords, edges, scale, return_coords)

    @staticmethod
    def cube(scale: float = 1, return_coords: bool = False):
        coords = [
            (
                1 if (idx & 1) else -1,
                1 if (idx & 2) else -1,
                1 if (idx & 4) else -1,
            )
            for idx in range(8)
        ]
        edges = set()
        for u in range(8):
            for bit in (1, 2, 4):
                v = u ^ bit
                edges.add((min(u, v), max(u, v)))
        return PolyhedronGenerators._finalize(coords, edges, scale, return_coords)

    @staticmethod
    def octahedron(scale: float = 1, return_coords: bool = False):
        coords = [
            (0, 0, 1),
            (0, 0, -1),
            (-1, 0, 0),
            (1, 0, 0),
            (0, -1, 0),
            (0, 1, 0),
        ]
        opposite = {(0, 1), (2, 3), (4, 5)}
        edges = {(u, v) for u in range(6) for v in range(u + 1, 6) if (u, v) not in opposite}
        return PolyhedronGenerators._finalize(coords, edges, scale, return_coords)

    @staticmethod
    def prism(sides: int, scale: float = 1, return_coords: bool = False):
        """Two n-gons (top 0..n-1, bottom n..2n-1) joined by vertical edges."""
        if sides < 3:
            raise ValueError("Prism requires at least 3 sides")
        coords = PolyhedronGenerators._ring(sides, 1) + PolyhedronGenerators._ring(sides, -1)
        edges = set()
        for i in range(sides):
            j = (i + 1) % sides
            edges.add((min(i, j), max(i, j)))
            edges.add((sides + min(i, j), sides + max(i, j)))
            edges.add((i, sides + i))
        return PolyhedronGenerators._finalize(coords, edges, scale, return_coords)

    @staticmethod
    def triangular_prism(scale: float = 1, return_coords: bool = False):
        return PolyhedronGenerators.prism(3, scale, return_coords)

    @staticmethod
    def pentagonal_prism(scale: float = 1, return_coords: bool = False):
        return PolyhedronGenerators.prism(5, scale, return_coords)

    @staticmethod
    def square_pyramid(scale: float = 1, return_coords: bool = False):
        # Apex is vertex 0, base square 1..4
        coords = [(0, 0, 1)] + PolyhedronGenerators._ring(4, 0)
        edges = set()
        for i in range(1, 5):
            edges.add((0, i))
            j = i % 4 + 1
            edges.add((min(i, j), max(i, j)))
        return PolyhedronGenerators._finalize(coords, edges, scale, return_coords)

    @staticmethod
    def bipyramid(sides: int, scale: float = 1, return_coords: bool = False):
        """Bottom apex 0, middle n-gon 1..n, top apex n+1."""
        if sides < 3:
            raise ValueError("Bipyramid requires at least 3 sides")
        coords = [(0, 0, -1)] + PolyhedronGenerators._ring(sides, 0) + [(0, 0, 1)]
        top = sides + 1
        edges = set()
        for i in range(1, sides + 1):
            j = i % sides + 1
            edges.add((0, i))
            edges.add((min(i, j), max(i, j)))
            edges.add((i, top))
        return PolyhedronGenerators._finalize(coords, edges, scale, return_coords)

    @staticmethod
    def triangular_bipyramid(scale: float = 1, return_coords: bool = False):
        return PolyhedronGenerators.bipyramid(3, scale, return_coords)

    @staticmethod
    def square_bipyramid(scale: float = 1, return_coords: bool = False):
        return PolyhedronGenerators.bipyramid(4, scale, return_coords)

    @staticmethod
    def antiprism(sides: int, scale: float = 1, return_coords: bool = False):
        """Two n-gons, the bottom one rotated half a step, joined by a band of triangles."""
        if sides < 3:
            raise ValueError("Antiprism requires at least 3 sides")
        coords = (
            PolyhedronGenerators._ring(sides, 1)
            + PolyhedronGenerators._ring(sides, -1, pi / sides)
        )
        edges = set()
        for i in range(sides):
            j = (i + 1) % sides
            edges.add((min(i, j), max(i, j)))
            edges.add((sides + min(i, j), sides + max(i, j)))
            edges.add((i, sides + i))
            edges.add((i, sides + (i - 1) % sides))
        return PolyhedronGenerators._finalize(coords, edges, scale, return_coords)

    @staticmethod
    def square_antiprism(scale: float = 1, return_coords: bool = False):
        return PolyhedronGenerators.antiprism(4, scale, return_coords)


NAMED = (
    "tetrahedron",
    "cube",
    "octahedron",
    "triangular_prism",
    "pentagonal_prism",
    "square_pyramid",
    "triangular_bipyramid",
    "square_bipyramid",
    "square_antiprism",
)


def available():
    return list(NAMED)


def build_model(name: str, scale: float = 1) -> Model:
    if name not in NAMED:
        raise ValueError(f"unknown generator {name!r} (choose from: {', '.join(NAMED)})")
    vertices, edges = getattr(PolyhedronGenerators, name)(scale)
    return model_from_edges(name, len(vertices), edges)


__all__ = ["PolyhedronGenerators", "available", "build_model"]
