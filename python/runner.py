"""
Command-line runner for the day solvers.

Usage:
    gridwalk 2023 17                 # both parts on the actual input
    gridwalk 2023 17 --sample        # both parts on the sample input
    gridwalk 2022 15 --part 1 --arg 10 --sample
    gridwalk 2023 10 --sample --show # render the puzzle after solving
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from puzzle_input import PuzzleInput, default_root
from solutions import Puzzle, get_puzzle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunOptions:
    year: int
    day: int
    parts: tuple[int, ...] = (1, 2)
    sample: bool = False
    variant: int = 0
    args: tuple[int, ...] | None = None  # Overrides the registered per-part arguments
    inputs: Path | None = None
    show: bool = False


@dataclass(frozen=True)
class PartResult:
    part: int
    answer: Any
    elapsed: float


def run_part(puzzle: Puzzle, options: RunOptions, part: int) -> PartResult:
    """
    Load the input for one part and solve it.

    Raises:
        FileNotFoundError: If the input file is missing
    """
    source = PuzzleInput(options.year, options.day, options.inputs or default_root())
    if options.sample:
        lines = source.sample_lines(part, options.variant)
    else:
        lines = source.actual_lines(part, options.variant)
    args = options.args if options.args is not None else puzzle.args_for(part, options.sample)

    logger.info("Solving %d/%02d part %d with args %s", options.year, options.day, part, args)
    started = time.perf_counter()
    answer = puzzle.solve(part, lines, *args)
    return PartResult(part, answer, time.perf_counter() - started)


def results_table(puzzle: Puzzle, options: RunOptions, results: list[PartResult]) -> Table:
    kind = "sample" if options.sample else "actual"
    table = Table(title=f"{puzzle.year} Day {puzzle.day}: {puzzle.title} ({kind})")
    table.add_column("Part", justify="center")
    table.add_column("Answer", justify="right", style="bold green")
    table.add_column("Elapsed", justify="right")
    for result in results:
        table.add_row(str(result.part), str(result.answer), f"{result.elapsed * 1000:.1f} ms")
    return table


def parse_args(argv: list[str] | None = None) -> tuple[RunOptions, bool]:
    parser = argparse.ArgumentParser(prog="gridwalk", description="Run Advent of Code day solvers.")
    parser.add_argument("year", type=int)
    parser.add_argument("day", type=int)
    parser.add_argument("--part", type=int, choices=(1, 2), help="Solve only this part")
    parser.add_argument("--sample", action="store_true", help="Use the sample input")
    parser.add_argument("--variant", type=int, default=0, help="Numbered input variant (sample_part1_<N>.txt)")
    parser.add_argument("--arg", type=int, action="append", dest="args", help="Extra solver argument (repeatable)")
    parser.add_argument("--inputs", type=Path, help="Inputs directory (default: $GRIDWALK_INPUTS or ./inputs)")
    parser.add_argument("--show", action="store_true", help="Render the puzzle if the solver can")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    ns = parser.parse_args(argv)

    options = RunOptions(
        year=ns.year,
        day=ns.day,
        parts=(ns.part,) if ns.part else (1, 2),
        sample=ns.sample,
        variant=ns.variant,
        args=tuple(ns.args) if ns.args else None,
        inputs=ns.inputs,
        show=ns.show,
    )
    return options, ns.verbose


def main(argv: list[str] | None = None) -> int:
    options, verbose = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format='%(levelname)s: %(message)s')
    console = Console()

    try:
        puzzle = get_puzzle(options.year, options.day)
        results = [run_part(puzzle, options, part) for part in options.parts]
    except (KeyError, FileNotFoundError, ValueError) as e:
        message = e.args[0] if isinstance(e, KeyError) and e.args else str(e)
        console.print(Panel(Text(message), title="gridwalk - Error", border_style="red"))
        return 1

    console.print(results_table(puzzle, options, results))

    visualize = getattr(puzzle.module, "visualize", None)
    if options.show:
        if visualize is None:
            console.print(f"[yellow]No renderer for {options.year}/{options.day:02d}[/yellow]")
        else:
            source = PuzzleInput(options.year, options.day, options.inputs or default_root())
            lines = source.sample_lines(variant=options.variant) if options.sample else source.actual_lines()
            console.print(Text.from_ansi(visualize(lines)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
