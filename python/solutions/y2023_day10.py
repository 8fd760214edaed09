"""
2023 Day 10: Pipe Maze.

The animal at S sits on one continuous loop of pipes. Part 1 is the distance
to the farthest loop tile (half the loop), part 2 the number of tiles the loop
encloses, counted with Pick's theorem on the loop as a lattice polygon.
"""

from __future__ import annotations

import logging

from ascii_render import render_grid
from grid_math import interior_point_count
from grid_parser import parse_grid
from grid_types import CardinalDirection, Point
from gridwalk import Grid

logger = logging.getLogger(__name__)

START = "S"

TOP = CardinalDirection.TOP
BOTTOM = CardinalDirection.BOTTOM
LEFT = CardinalDirection.LEFT
RIGHT = CardinalDirection.RIGHT

# Openings of each pipe
CONNECTIONS: dict[str, frozenset[CardinalDirection]] = {
    "|": frozenset({TOP, BOTTOM}),
    "-": frozenset({LEFT, RIGHT}),
    "L": frozenset({TOP, RIGHT}),
    "J": frozenset({TOP, LEFT}),
    "7": frozenset({BOTTOM, LEFT}),
    "F": frozenset({BOTTOM, RIGHT}),
    ".": frozenset(),
}


def start_connections(grid: Grid[str], start: Point) -> list[CardinalDirection]:
    """Directions from S whose neighboring pipe opens back towards S."""
    result = []
    for direction, adjacent in grid.neighbors_with_direction(start).items():
        if direction.opposite in CONNECTIONS.get(grid[adjacent], frozenset()):
            result.append(direction)
    return result


def trace_loop(grid: Grid[str]) -> list[Point]:
    """
    The loop through S, starting at S, each tile once.

    Raises:
        ValueError: If there is no S, S does not join exactly two pipes, or the
                    loop breaks off before returning to S
    """
    start = grid.find(START)
    if start is None:
        raise ValueError(f"Pipe maze has no '{START}' tile")
    openings = start_connections(grid, start)
    if len(openings) != 2:
        raise ValueError(
            f"Start tile at {start} must connect to exactly two pipes\n"
            f"  Connected: {', '.join(d.name for d in openings) or 'none'}"
        )

    loop = [start]
    heading = openings[0]
    current = grid.neighbor(start, heading)
    while current != start:
        if current is None:
            raise ValueError(f"Pipe loop from {start} runs off the grid heading {heading.name}")
        pipe = grid[current]
        pipe_openings = CONNECTIONS.get(pipe, frozenset())
        if heading.opposite not in pipe_openings:
            raise ValueError(
                f"Pipe loop from {start} is broken at {current}\n"
                f"  Tile '{pipe}' has no opening to the {heading.opposite.name}"
            )
        loop.append(current)
        (heading,) = pipe_openings - {heading.opposite}
        current = grid.neighbor(current, heading)
    logger.info("Loop of %d tiles from %s", len(loop), start)
    return loop


def part1(lines: list[str]) -> int:
    """Steps along the loop to the point farthest from the start."""
    return len(trace_loop(parse_grid(lines))) // 2


def part2(lines: list[str]) -> int:
    """Tiles enclosed by the loop."""
    return interior_point_count(trace_loop(parse_grid(lines)))


def visualize(lines: list[str]) -> str:
    grid = parse_grid(lines)
    return render_grid(grid, highlight=trace_loop(grid))
