"""
Input parsing utilities for gridwalk.

Provides:
1. Grid parsing from text lines, one character per cell
2. Symbol-table grid parsing with validation of unknown characters
3. Small line helpers (integer extraction, blank-line separated blocks)
"""

from __future__ import annotations

import re
from typing import Callable, Iterable, Mapping, TypeVar

from gridwalk import Grid

__all__ = ["parse_grid", "parse_char_grid", "parse_digit_grid", "find_all_ints", "split_blocks"]

V = TypeVar("V")

_INT_PATTERN = re.compile(r"-?\d+")


def _content_lines(lines: Iterable[str]) -> list[str]:
    """Strip line endings and drop blank lines at either end."""
    rows = [line.rstrip("\r\n") for line in lines]
    while rows and not rows[0].strip():
        rows.pop(0)
    while rows and not rows[-1].strip():
        rows.pop()
    return rows


def parse_grid(
    lines: Iterable[str],
    cell_fn: Callable[[str], V] | None = None,
    *,
    wrap: bool = False,
    jagged: bool = False,
    pad: V | None = None,
) -> Grid[V]:
    """
    Parse a grid with one character per cell.

    Args:
        lines: Grid rows, top to bottom. Blank leading/trailing lines are ignored.
        cell_fn: Converts each character to a cell value (identity if None)
        wrap: Build a wrap-mode grid
        jagged: Allow rows of different widths
        pad: If given, short rows are padded to the widest row with this value

    Returns:
        The parsed Grid

    Raises:
        ValueError: If rows have inconsistent widths (and neither jagged nor pad
                    was requested), or if cell_fn rejects a character
    """
    rows: list[list[V]] = []
    for line in _content_lines(lines):
        if cell_fn is None:
            rows.append(list(line))
        else:
            rows.append([cell_fn(char) for char in line])

    # Pad rows to maximum length
    if pad is not None and rows:
        max_cols = max(len(row) for row in rows)
        rows = [row + [pad] * (max_cols - len(row)) for row in rows]

    return Grid(rows, wrap=wrap, jagged=jagged)


def parse_char_grid(
    lines: Iterable[str],
    symbols: Mapping[str, V],
    *,
    wrap: bool = False,
) -> Grid[V]:
    """
    Parse a grid through a symbol table.

    Example:
        parse_char_grid(["#.", ".#"], {"#": True, ".": False})

    Raises:
        ValueError: If a character has no entry in symbols
    """
    rows: list[list[V]] = []
    for row_idx, line in enumerate(_content_lines(lines)):
        cells: list[V] = []
        for col_idx, char in enumerate(line):
            if char not in symbols:
                raise ValueError(
                    f"Invalid character '{char}' in grid\n"
                    f"  Row {row_idx}, column {col_idx}: \"{line}\"\n"
                    f"  Valid characters: {' '.join(repr(s) for s in symbols)}"
                )
            cells.append(symbols[char])
        rows.append(cells)
    return Grid(rows, wrap=wrap)


def parse_digit_grid(lines: Iterable[str]) -> Grid[int]:
    """Parse a grid of single decimal digits."""

    def digit(char: str) -> int:
        if not char.isdigit():
            raise ValueError(f"Invalid digit '{char}' in grid\n  Expected: 0-9")
        return int(char)

    return parse_grid(lines, digit)


def find_all_ints(text: str) -> list[int]:
    """All (optionally negative) integers in a line of text, in order."""
    return [int(match) for match in _INT_PATTERN.findall(text)]


def split_blocks(lines: Iterable[str]) -> list[list[str]]:
    """Split lines into blocks separated by blank lines. Empty blocks are dropped."""
    blocks: list[list[str]] = []
    current: list[str] = []
    for line in lines:
        line = line.rstrip("\r\n")
        if line.strip():
            current.append(line)
        elif current:
            blocks.append(current)
            current = []
    if current:
        blocks.append(current)
    return blocks
