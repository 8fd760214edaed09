"""
2023 Day 14: Parabolic Reflector Dish.

Round rocks (O) roll until they hit a cube rock (#), another round rock or the
edge. The load of a rock is its distance from the south edge, counting the
row it sits on.
"""

from __future__ import annotations

import logging

from grid_parser import parse_grid
from grid_types import CardinalDirection, Point
from gridwalk import Grid

logger = logging.getLogger(__name__)

ROUND = "O"
CUBE = "#"

SPIN_CYCLE = (
    CardinalDirection.TOP,
    CardinalDirection.LEFT,
    CardinalDirection.BOTTOM,
    CardinalDirection.RIGHT,
)


def _edge_points(grid: Grid[str], direction: CardinalDirection) -> list[Point]:
    """Points on the edge of the grid that faces the given direction."""
    match direction:
        case CardinalDirection.TOP:
            return [Point(0, c) for c in range(grid.cols)]
        case CardinalDirection.BOTTOM:
            return [Point(grid.rows - 1, c) for c in range(grid.cols)]
        case CardinalDirection.LEFT:
            return [Point(r, 0) for r in range(grid.rows)]
        case CardinalDirection.RIGHT:
            return [Point(r, grid.cols - 1) for r in range(grid.rows)]
    raise ValueError(f"Invalid tilt direction: {direction}")


def tilt(grid: Grid[str], direction: CardinalDirection) -> None:
    """Roll every round rock as far as it goes in a direction, in place."""
    for edge in _edge_points(grid, direction):
        lane = list(grid.cells_in_direction(edge, direction.opposite))
        free = 0
        for index, point in enumerate(lane):
            cell = grid[point]
            if cell == CUBE:
                free = index + 1
            elif cell == ROUND:
                if index != free:
                    grid.swap(lane[free], point)
                free += 1


def spin(grid: Grid[str]) -> None:
    for direction in SPIN_CYCLE:
        tilt(grid, direction)


def north_load(grid: Grid[str]) -> int:
    return sum(grid.rows - point.row for point in grid.find_all(lambda cell: cell == ROUND))


def part1(lines: list[str]) -> int:
    """Load on the north beams after tilting north."""
    grid = parse_grid(lines)
    tilt(grid, CardinalDirection.TOP)
    return north_load(grid)


def part2(lines: list[str], cycles: int = 1_000_000_000) -> int:
    """Load on the north beams after the given number of spin cycles."""
    grid = parse_grid(lines)
    seen: dict[tuple[tuple[str, ...], ...], int] = {}
    done = 0
    while done < cycles:
        snapshot = grid.snapshot()
        if snapshot in seen:
            period = done - seen[snapshot]
            logger.info("Spin cycle repeats after %d cycles with period %d", done, period)
            for _ in range((cycles - done) % period):
                spin(grid)
            return north_load(grid)
        seen[snapshot] = done
        spin(grid)
        done += 1
    return north_load(grid)
