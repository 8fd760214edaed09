"""
2023 Day 16: The Floor Will Be Lava.

A beam enters the contraption and is bent by mirrors (/ and \\) and split by
splitters (| and -) it meets side-on. A tile is energized when any beam
passes through it. Beam states are (point, heading) pairs, so loops end when
a state repeats.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from ascii_render import render_grid
from grid_parser import parse_grid
from grid_types import CardinalDirection, Point
from gridwalk import Grid
from search import bfs

logger = logging.getLogger(__name__)

TOP = CardinalDirection.TOP
BOTTOM = CardinalDirection.BOTTOM
LEFT = CardinalDirection.LEFT
RIGHT = CardinalDirection.RIGHT

# Heading after meeting a mirror
SLASH = {RIGHT: TOP, LEFT: BOTTOM, TOP: RIGHT, BOTTOM: LEFT}
BACKSLASH = {RIGHT: BOTTOM, LEFT: TOP, TOP: LEFT, BOTTOM: RIGHT}


class Beam(NamedTuple):
    point: Point
    heading: CardinalDirection


def outgoing(tile: str, heading: CardinalDirection) -> list[CardinalDirection]:
    """Headings of the beams leaving a tile entered with the given heading."""
    match tile:
        case "/":
            return [SLASH[heading]]
        case "\\":
            return [BACKSLASH[heading]]
        case "|" if heading in (LEFT, RIGHT):
            return [TOP, BOTTOM]
        case "-" if heading in (TOP, BOTTOM):
            return [LEFT, RIGHT]
        case _:
            return [heading]


def energized(grid: Grid[str], entry: Beam) -> set[Point]:
    """Tiles a beam energizes, starting on the entry tile."""

    def advance(beam: Beam) -> list[Beam]:
        result = []
        for heading in outgoing(grid[beam.point], beam.heading):
            following = grid.neighbor(beam.point, heading)
            if following is not None:
                result.append(Beam(following, heading))
        return result

    return {beam.point for beam in bfs([entry], advance).distances}


def entries(grid: Grid[str]) -> list[Beam]:
    """Every beam entering the grid from an edge."""
    beams = []
    for r in range(grid.rows):
        beams.append(Beam(Point(r, 0), RIGHT))
        beams.append(Beam(Point(r, grid.cols - 1), LEFT))
    for c in range(grid.cols):
        beams.append(Beam(Point(0, c), BOTTOM))
        beams.append(Beam(Point(grid.rows - 1, c), TOP))
    return beams


def part1(lines: list[str]) -> int:
    """Energized tiles for a beam entering the top-left corner heading right."""
    return len(energized(parse_grid(lines), Beam(Point(0, 0), RIGHT)))


def part2(lines: list[str]) -> int:
    """Most energized tiles over every edge entry."""
    grid = parse_grid(lines)
    best = max(len(energized(grid, entry)) for entry in entries(grid))
    logger.info("Tried %d entries, best energizes %d tiles", len(entries(grid)), best)
    return best


def visualize(lines: list[str]) -> str:
    grid = parse_grid(lines)
    return render_grid(grid, highlight=energized(grid, Beam(Point(0, 0), RIGHT)), highlight_char="#")
