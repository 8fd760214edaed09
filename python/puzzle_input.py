"""
Puzzle input resolution and loading.

Inputs live under a root directory, one folder per puzzle:

    <root>/<year>/day<NN>/sample.txt            sample input
    <root>/<year>/day<NN>/sample_part2.txt      sample specific to a part
    <root>/<year>/day<NN>/sample_part2_1.txt    further variants of that sample
    <root>/<year>/day<NN>/test.txt              actual puzzle input

The root is inputs/ under the working directory unless GRIDWALK_INPUTS says otherwise.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

INPUT_ROOT = Path("inputs")
INPUTS_ENV_VAR = "GRIDWALK_INPUTS"

SAMPLE = "sample"
ACTUAL = "test"


def default_root() -> Path:
    override = os.environ.get(INPUTS_ENV_VAR)
    return Path(override) if override else INPUT_ROOT


def file_suffix(part: int | None = None, variant: int = 0) -> str:
    """
    Suffix for a part/variant specific input file.

    Example:
        file_suffix() == ""
        file_suffix(2) == "_part2"
        file_suffix(2, 1) == "_part2_1"
        file_suffix(variant=3) == "_3"
    """
    suffix = f"_part{part}" if part is not None else ""
    if variant > 0:
        suffix += f"_{variant}"
    return suffix


def read_lines(path: Path) -> list[str]:
    """
    Read a text file as lines without their line endings.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    if not path.is_file():
        raise FileNotFoundError(
            f"Puzzle input not found: {path}\n"
            f"  Save the input there, or point {INPUTS_ENV_VAR} (or --inputs) at the inputs directory"
        )
    lines = path.read_text().splitlines()
    logger.debug("read_lines: %d lines from %s", len(lines), path)
    return lines


@dataclass(frozen=True)
class PuzzleInput:
    """Locates the input files of one puzzle."""

    year: int
    day: int
    root: Path = field(default_factory=default_root)

    @property
    def directory(self) -> Path:
        return Path(self.root) / str(self.year) / f"day{self.day:02d}"

    def sample_path(self, part: int | None = None, variant: int = 0) -> Path:
        return self.directory / f"{SAMPLE}{file_suffix(part, variant)}.txt"

    def actual_path(self, part: int | None = None, variant: int = 0) -> Path:
        return self.directory / f"{ACTUAL}{file_suffix(part, variant)}.txt"

    def sample_lines(self, part: int | None = None, variant: int = 0) -> list[str]:
        """
        Lines of the sample input for a part.

        Falls back to the shared sample when no part-specific file exists.
        """
        path = self.sample_path(part, variant)
        if part is not None and not path.is_file():
            path = self.sample_path(None, variant)
        return read_lines(path)

    def actual_lines(self, part: int | None = None, variant: int = 0) -> list[str]:
        path = self.actual_path(part, variant)
        if part is not None and not path.is_file():
            path = self.actual_path(None, variant)
        return read_lines(path)
