"""
2022 Day 15: Beacon Exclusion Zone.

Each sensor rules out every position no farther (in Manhattan distance) than
its closest beacon. Coverage of a single row is a set of intervals.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass

from grid_math import manhattan_distance
from grid_parser import find_all_ints
from grid_types import Point
from ranges import EMPTY, Interval, intersect, merge_all, subtract_all, total_length

logger = logging.getLogger(__name__)

TUNING_MULTIPLIER = 4_000_000


@dataclass(frozen=True)
class Sensor:
    position: Point
    beacon: Point

    @property
    def radius(self) -> int:
        return manhattan_distance(self.position, self.beacon)

    def coverage(self, y: int) -> Interval:
        """Columns this sensor rules out on row y."""
        reach = self.radius - abs(self.position.row - y)
        if reach < 0:
            return EMPTY
        return Interval(self.position.col - reach, self.position.col + reach)


def parse_sensors(lines: list[str]) -> list[Sensor]:
    sensors = []
    for line in lines:
        if not line.strip():
            continue
        numbers = find_all_ints(line)
        if len(numbers) != 4:
            raise ValueError(
                f"Invalid sensor report: '{line}'\n"
                f"  Expected: 'Sensor at x=<x>, y=<y>: closest beacon is at x=<x>, y=<y>'"
            )
        sx, sy, bx, by = numbers
        sensors.append(Sensor(Point(sy, sx), Point(by, bx)))
    return sensors


def row_coverage(sensors: list[Sensor], y: int) -> list[Interval]:
    return merge_all(sensor.coverage(y) for sensor in sensors)


def part1(lines: list[str], y: int = 2_000_000) -> int:
    """Positions on row y that cannot hold a beacon."""
    sensors = parse_sensors(lines)
    coverage = row_coverage(sensors, y)
    beacons_on_row = {
        s.beacon.col for s in sensors if s.beacon.row == y and any(s.beacon.col in i for i in coverage)
    }
    return total_length(coverage) - len(beacons_on_row)


def candidate_rows(sensors: list[Sensor], limit: int) -> list[int]:
    """
    Rows where the edges just outside two sensor diamonds cross, within 0..limit.

    A lone uncovered position away from the search boundary sits on such a crossing:
    one edge of slope +1 (x + y constant) and one of slope -1 (x - y constant).
    """
    rising = set()
    falling = set()
    for s in sensors:
        x, y, reach = s.position.col, s.position.row, s.radius + 1
        rising.update((x + y - reach, x + y + reach))
        falling.update((x - y - reach, x - y + reach))
    rows = {(a - b) // 2 for a in rising for b in falling if (a - b) % 2 == 0}
    return sorted(row for row in rows if 0 <= row <= limit)


def part2(lines: list[str], limit: int = 4_000_000) -> int | None:
    """Tuning frequency of the only uncovered position with both coordinates in 0..limit."""
    sensors = parse_sensors(lines)
    bounds = Interval(0, limit)
    candidates = candidate_rows(sensors, limit)
    logger.debug("Checking %d candidate rows before a full scan", len(candidates))
    checked = set(candidates)
    rows = itertools.chain(candidates, (y for y in range(limit + 1) if y not in checked))
    for y in rows:
        coverage = [intersect(c, bounds) for c in row_coverage(sensors, y)]
        gaps = subtract_all(bounds, coverage)
        if gaps:
            x = gaps[0].first
            logger.info("Distress beacon at x=%d, y=%d", x, y)
            return x * TUNING_MULTIPLIER + y
    return None
