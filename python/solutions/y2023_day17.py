"""
2023 Day 17: Clumsy Crucible.

Minimise heat loss from the top-left to the bottom-right block. A crucible
cannot reverse, must turn after max_run straight blocks, and (ultra crucibles)
must go min_run straight blocks before it may turn or stop.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, NamedTuple

from grid_parser import parse_digit_grid
from grid_types import CardinalDirection, Point
from gridwalk import Grid
from search import priority_search

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CrucibleRules:
    """Straight-line limits of a crucible."""

    min_run: int
    max_run: int


CRUCIBLE = CrucibleRules(min_run=1, max_run=3)
ULTRA_CRUCIBLE = CrucibleRules(min_run=4, max_run=10)


class Crucible(NamedTuple):
    point: Point
    heading: CardinalDirection | None  # None before the first move
    run: int  # Blocks moved in a straight line so far


def least_heat_loss(grid: Grid[int], rules: CrucibleRules) -> int | None:
    """Least heat loss to the bottom-right block, or None if it cannot be reached."""
    end = Point(grid.rows - 1, grid.cols - 1)

    def moves(crucible: Crucible) -> Iterator[tuple[Crucible, int]]:
        for heading in CardinalDirection:
            if crucible.heading is not None:
                if heading is crucible.heading.opposite:
                    continue
                straight = heading is crucible.heading
                if straight and crucible.run >= rules.max_run:
                    continue
                if not straight and crucible.run < rules.min_run:
                    continue
            else:
                straight = False
            following = grid.neighbor(crucible.point, heading)
            if following is None:
                continue
            run = crucible.run + 1 if straight else 1
            yield Crucible(following, heading, run), grid[following]

    result = priority_search(
        [Crucible(Point(0, 0), None, 0)],
        moves,
        is_goal=lambda crucible: crucible.point == end,
        accept=lambda crucible: crucible.run >= rules.min_run,
    )
    if result is None:
        return None
    logger.info("Least heat loss %d over %d blocks", result.cost, len(result.path) - 1)
    return result.cost


def part1(lines: list[str]) -> int | None:
    return least_heat_loss(parse_digit_grid(lines), CRUCIBLE)


def part2(lines: list[str]) -> int | None:
    return least_heat_loss(parse_digit_grid(lines), ULTRA_CRUCIBLE)
