"""
Lattice geometry helpers: polygon area, Pick's theorem and Manhattan metrics.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Iterator, Sequence

from grid_types import Point

__all__ = [
    "shoelace_area",
    "interior_point_count",
    "manhattan_distance",
    "manhattan_ring",
    "is_collinear",
    "slope",
]


def _closed(points: Sequence[Point]) -> list[Point]:
    path = list(points)
    if path and path[0] != path[-1]:
        path.append(path[0])
    return path


def _doubled_area(path: Sequence[Point]) -> int:
    total = sum(a.row * b.col - b.row * a.col for a, b in zip(path, path[1:]))
    return abs(total)


def shoelace_area(points: Sequence[Point]) -> int:
    """
    Area enclosed by a polygon given by its vertices, rounded down.

    The closing edge back to the first point is implied; a path that already
    repeats its first point at the end gives the same area.
    The polygon must be simple; self-intersecting paths give meaningless results.
    """
    return _doubled_area(_closed(points)) // 2


def interior_point_count(points: Sequence[Point], boundary: int | None = None) -> int:
    """
    Number of lattice points strictly inside a simple lattice polygon (Pick's theorem).

    Args:
        points: Polygon path, closed implicitly as in shoelace_area
        boundary: Number of lattice points on the boundary. Defaults to the
                  number of edges of the closed path, which is right when the
                  path visits every boundary point with unit steps. Pass the
                  perimeter when the path lists corners only.
    """
    path = _closed(points)
    if boundary is None:
        boundary = max(len(path) - 1, 0)
    return (_doubled_area(path) - boundary) // 2 + 1


def manhattan_distance(a: Point, b: Point) -> int:
    return abs(a.row - b.row) + abs(a.col - b.col)


def manhattan_ring(center: Point, distance: int) -> Iterator[Point]:
    """Every lattice point at exactly the given Manhattan distance from center, top to bottom."""
    if distance == 0:
        yield center
        return
    for d_row in range(-distance, distance + 1):
        remaining = distance - abs(d_row)
        yield Point(center.row + d_row, center.col - remaining)
        if remaining:
            yield Point(center.row + d_row, center.col + remaining)


def is_collinear(p: Point, a: Point, b: Point) -> bool:
    """Whether p lies on the infinite line through a and b."""
    return (b.row - a.row) * (p.col - a.col) == (p.row - a.row) * (b.col - a.col)


def slope(a: Point, b: Point) -> Fraction:
    """
    Rise over run of the line through a and b, with col as x and row as y.

    Raises:
        ValueError: If a and b share a column (vertical line)
    """
    if a.col == b.col:
        raise ValueError(f"Slope is undefined for points sharing x = {a.col}: {a} and {b}")
    return Fraction(b.row - a.row, b.col - a.col)
