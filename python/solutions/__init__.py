"""
Day solvers, one module per puzzle.

Every module exposes part1(lines, *args) and part2(lines, *args). REGISTRY maps
(year, day) to a Puzzle carrying the module and the extra arguments each part
takes for the sample and for the actual input (a target row, a step count).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import ModuleType
from typing import Any

from solutions import (
    y2022_day12,
    y2022_day15,
    y2023_day10,
    y2023_day14,
    y2023_day16,
    y2023_day17,
    y2023_day18,
    y2023_day21,
    y2023_day23,
)

__all__ = ["Puzzle", "REGISTRY", "get_puzzle"]


@dataclass(frozen=True)
class Puzzle:
    year: int
    day: int
    title: str
    module: ModuleType
    sample_args: dict[int, tuple[Any, ...]] = field(default_factory=dict)
    actual_args: dict[int, tuple[Any, ...]] = field(default_factory=dict)

    def args_for(self, part: int, sample: bool) -> tuple[Any, ...]:
        return (self.sample_args if sample else self.actual_args).get(part, ())

    def solve(self, part: int, lines: list[str], *args: Any) -> Any:
        """
        Raises:
            ValueError: If part is not 1 or 2
        """
        match part:
            case 1:
                return self.module.part1(lines, *args)
            case 2:
                return self.module.part2(lines, *args)
            case _:
                raise ValueError(f"Invalid part: {part}\n  Valid parts: 1, 2")


REGISTRY: dict[tuple[int, int], Puzzle] = {
    (p.year, p.day): p
    for p in [
        Puzzle(2022, 12, "Hill Climbing Algorithm", y2022_day12),
        Puzzle(
            2022,
            15,
            "Beacon Exclusion Zone",
            y2022_day15,
            sample_args={1: (10,), 2: (20,)},
            actual_args={1: (2_000_000,), 2: (4_000_000,)},
        ),
        Puzzle(2023, 10, "Pipe Maze", y2023_day10),
        Puzzle(2023, 14, "Parabolic Reflector Dish", y2023_day14),
        Puzzle(2023, 16, "The Floor Will Be Lava", y2023_day16),
        Puzzle(2023, 17, "Clumsy Crucible", y2023_day17),
        Puzzle(2023, 18, "Lavaduct Lagoon", y2023_day18),
        Puzzle(
            2023,
            21,
            "Step Counter",
            y2023_day21,
            sample_args={1: (6,), 2: (100,)},
            actual_args={1: (64,), 2: (26_501_365,)},
        ),
        Puzzle(2023, 23, "A Long Walk", y2023_day23),
    ]
}


def get_puzzle(year: int, day: int) -> Puzzle:
    """
    Raises:
        KeyError: If no solver is registered for the day
    """
    try:
        return REGISTRY[(year, day)]
    except KeyError:
        available = ", ".join(f"{y}/{d:02d}" for y, d in sorted(REGISTRY))
        raise KeyError(
            f"No solver registered for {year}/{day:02d}\n"
            f"  Available: {available}"
        ) from None
