"""
2022 Day 12: Hill Climbing Algorithm.

Heights run from 'a' to 'z'; S is at height 'a' and E at height 'z'. A step
may climb at most one unit but descend any amount. Both parts search backwards
from E, where the reversed rule is: descend at most one unit.
"""

from __future__ import annotations

import logging

from ascii_render import render_distances
from grid_parser import parse_grid
from grid_types import Point
from gridwalk import Grid
from search import BfsResult, bfs

logger = logging.getLogger(__name__)

START = "S"
END = "E"


def height(mark: str) -> int:
    match mark:
        case "S":
            return ord("a")
        case "E":
            return ord("z")
        case _:
            return ord(mark)


def _search_from_end(grid: Grid[str], goal_marks: set[str]) -> BfsResult[Point]:
    end = grid.find(END)
    if end is None:
        raise ValueError(f"Heightmap has no '{END}' location")

    def downhill(point: Point) -> list[Point]:
        current = height(grid[point])
        return [n for n in grid.neighbors(point) if current - height(grid[n]) <= 1]

    return bfs([end], downhill, goal=lambda point: grid[point] in goal_marks)


def fewest_steps(lines: list[str], goal_marks: set[str]) -> int | None:
    grid = parse_grid(lines)
    result = _search_from_end(grid, goal_marks)
    logger.info("Reached %d locations, goal at %s", len(result.distances), result.goal_state)
    return result.goal_distance


def part1(lines: list[str]) -> int | None:
    """Fewest steps from S to E."""
    return fewest_steps(lines, {START})


def part2(lines: list[str]) -> int | None:
    """Fewest steps to E from any square at height 'a'."""
    return fewest_steps(lines, {START, "a"})


def visualize(lines: list[str]) -> str:
    grid = parse_grid(lines)
    return render_distances(grid, _search_from_end(grid, set()).distances)
