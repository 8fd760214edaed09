"""
2023 Day 18: Lavaduct Lagoon.

The dig plan traces a closed trench one cubic metre wide. The lagoon holds the
trench plus everything it encloses: the interior lattice points (Pick's
theorem over the corner path) plus the boundary points (the perimeter).
"""

from __future__ import annotations

import logging
import re
from typing import NamedTuple

from grid_math import interior_point_count
from grid_types import CardinalDirection, Point

logger = logging.getLogger(__name__)

_STEP_PATTERN = re.compile(r"^([UDLR])\s+(\d+)\s+\(#([0-9a-fA-F]{5})([0-3])\)$")

# Direction encoded by the last hex digit of a colour code
HEX_DIRECTIONS = {
    "0": CardinalDirection.RIGHT,
    "1": CardinalDirection.BOTTOM,
    "2": CardinalDirection.LEFT,
    "3": CardinalDirection.TOP,
}


class DigStep(NamedTuple):
    direction: CardinalDirection
    length: int


def parse_plan(lines: list[str], from_colour: bool = False) -> list[DigStep]:
    """
    Parse dig plan lines such as 'R 6 (#70c710)'.

    With from_colour, the colour code is the real instruction: five hex digits
    of length followed by one digit of direction.
    """
    steps = []
    for line in lines:
        if not line.strip():
            continue
        match = _STEP_PATTERN.match(line.strip())
        if match is None:
            raise ValueError(
                f"Invalid dig plan step: '{line}'\n"
                f"  Expected: '<U|D|L|R> <length> (#<6 hex digits>)'"
            )
        letter, length, hex_length, hex_direction = match.groups()
        if from_colour:
            steps.append(DigStep(HEX_DIRECTIONS[hex_direction], int(hex_length, 16)))
        else:
            steps.append(DigStep(CardinalDirection.from_char(letter), int(length)))
    return steps


def lagoon_volume(steps: list[DigStep]) -> int:
    corners = [Point(0, 0)]
    perimeter = 0
    for step in steps:
        corners.append(corners[-1].moved(step.direction, step.length))
        perimeter += step.length
    if corners[-1] != corners[0]:
        raise ValueError(f"Dig plan does not return to its start: ends at {corners[-1]}")
    interior = interior_point_count(corners, boundary=perimeter)
    logger.info("Trench of %d corners: perimeter %d, interior %d", len(steps), perimeter, interior)
    return interior + perimeter


def part1(lines: list[str]) -> int:
    return lagoon_volume(parse_plan(lines))


def part2(lines: list[str]) -> int:
    return lagoon_volume(parse_plan(lines, from_colour=True))
