"""
2023 Day 21: Step Counter.

Count the garden plots the elf can stand on after exactly a given number of
steps from S. A plot reached in d steps is also reachable in d + 2, 4, ...
steps by stepping back and forth, so the answer for n steps is the number of
plots at distance d <= n with d of the same parity as n.

On the infinite (wrapped) garden the counts taken every `cols` steps grow
quadratically once the frontier is spread across whole tiles, so large step
counts are extrapolated from four measured terms.
"""

from __future__ import annotations

import logging

from grid_parser import parse_grid
from grid_types import Point
from gridwalk import Grid
from number_theory import is_quadratic, quadratic_coefficients, quadratic_term
from search import bfs

logger = logging.getLogger(__name__)

START = "S"
ROCK = "#"


def _start(grid: Grid[str]) -> Point:
    start = grid.find(START)
    if start is None:
        raise ValueError(f"Garden map has no '{START}' tile")
    return start


def plots_by_distance(grid: Grid[str], max_steps: int) -> list[int]:
    """counts[d] is the number of plots first reached after d steps."""

    def steps(point: Point) -> list[Point]:
        return [n for n in grid.neighbors(point) if grid[n] != ROCK]

    return bfs([_start(grid)], steps, max_distance=max_steps).layers


def plots_reached(layers: list[int], steps: int) -> int:
    return sum(count for d, count in enumerate(layers[: steps + 1]) if d % 2 == steps % 2)


def part1(lines: list[str], steps: int = 64) -> int:
    """Plots reachable in exactly the given number of steps on the bounded map."""
    grid = parse_grid(lines)
    return plots_reached(plots_by_distance(grid, steps), steps)


def part2(lines: list[str], steps: int = 26_501_365) -> int:
    """Plots reachable in exactly the given number of steps on the infinitely repeating map."""
    grid = parse_grid(lines, wrap=True)
    interval = grid.cols
    first = steps % interval or interval

    limit = min(steps, first + 3 * interval)
    while True:
        layers = plots_by_distance(grid, limit)
        starter = first
        while starter + 3 * interval <= limit:
            series = [plots_reached(layers, starter + k * interval) for k in range(4)]
            if is_quadratic(series):
                term_number = (steps - starter) // interval + 1
                logger.info("Quadratic series from %d steps: %s", starter, series)
                return int(quadratic_term(quadratic_coefficients(series), term_number))
            starter += interval
        if limit == steps:
            return plots_reached(layers, steps)
        limit = min(steps, limit + 4 * interval)
