"""
2023 Day 23: A Long Walk.

Find the longest hike from the single path tile in the top row to the single
path tile in the bottom row, never stepping on a tile twice. The trail map is
compressed to a graph of junctions (tiles with three or more open neighbors)
joined by corridor lengths, and the longest simple path is found by
exhaustive depth-first search over that graph.
"""

from __future__ import annotations

import logging

from grid_parser import parse_grid
from grid_types import CardinalDirection, Point
from gridwalk import Grid
from search import bfs

logger = logging.getLogger(__name__)

FOREST = "#"
PATH = "."
SLOPES = {char: CardinalDirection.from_char(char) for char in "^v<>"}

Graph = dict[Point, dict[Point, int]]


def _open_row_tile(grid: Grid[str], row: int) -> Point:
    tiles = [Point(row, c) for c, cell in enumerate(grid.row_values(row)) if cell == PATH]
    if len(tiles) != 1:
        raise ValueError(f"Row {row} must have exactly one path tile, found {len(tiles)}")
    return tiles[0]


def _moves(grid: Grid[str], point: Point, slippery: bool) -> list[Point]:
    cell = grid[point]
    if slippery and cell in SLOPES:
        following = grid.neighbor(point, SLOPES[cell])
        return [] if following is None or grid[following] == FOREST else [following]
    return [n for n in grid.neighbors(point) if grid[n] != FOREST]


def junction_graph(grid: Grid[str], start: Point, end: Point, slippery: bool) -> Graph:
    """Corridor lengths between junctions, following slopes one way when slippery."""
    junctions = {start, end}
    for point, cell in grid.items():
        if cell != FOREST and len(_moves(grid, point, slippery=False)) >= 3:
            junctions.add(point)

    graph: Graph = {}
    for junction in junctions:

        def corridor(point: Point, origin: Point = junction) -> list[Point]:
            if point != origin and point in junctions:
                return []
            return _moves(grid, point, slippery)

        distances = bfs([junction], corridor).distances
        graph[junction] = {
            other: distance for other, distance in distances.items() if other != junction and other in junctions
        }
    logger.info("Compressed trail map to %d junctions", len(junctions))
    return graph


def longest_hike(graph: Graph, start: Point, end: Point) -> int | None:
    """Length of the longest simple path from start to end, or None if end is unreachable."""
    index = {point: i for i, point in enumerate(graph)}
    edges = [[(index[other], length) for other, length in graph[point].items()] for point in graph]
    target = index[end]
    best = -1

    def walk(node: int, visited: int, length: int) -> None:
        nonlocal best
        if node == target:
            best = max(best, length)
            return
        for other, step in edges[node]:
            if not visited & (1 << other):
                walk(other, visited | (1 << other), length + step)

    origin = index[start]
    walk(origin, 1 << origin, 0)
    return best if best >= 0 else None


def hike(lines: list[str], slippery: bool) -> int | None:
    grid = parse_grid(lines)
    start = _open_row_tile(grid, 0)
    end = _open_row_tile(grid, grid.rows - 1)
    return longest_hike(junction_graph(grid, start, end, slippery), start, end)


def part1(lines: list[str]) -> int | None:
    """Longest hike when slopes can only be walked downhill."""
    return hike(lines, slippery=True)


def part2(lines: list[str]) -> int | None:
    """Longest hike treating slopes as ordinary path."""
    return hike(lines, slippery=False)
