"""
ASCII rendering for gridwalk grids.

Provides two rendering approaches:
1. Cell rendering - one character per cell, coloured by value, with highlighted points
2. Distance rendering - search distances overlaid on the grid (last digit of each distance)
"""

from __future__ import annotations

import logging
from typing import Callable, Collection, Mapping

from simple_chalk import chalk  # type: ignore[import-untyped]

from grid_types import Point
from gridwalk import Grid

logger = logging.getLogger(__name__)

Colorizer = Callable[[str], str]

# Build color palette for cell values
PALETTE: list[Colorizer] = [
    chalk.red,
    chalk.green,
    chalk.yellow,
    chalk.blue,
    chalk.magenta,
    chalk.cyan,
    chalk.redBright,
    chalk.greenBright,
    chalk.yellowBright,
    chalk.blueBright,
]


def _plain(text: str) -> str:
    return text


def value_colors(chars: Collection[str]) -> dict[str, Colorizer]:
    """Assign palette colours to characters in sorted order."""
    return {char: PALETTE[i % len(PALETTE)] for i, char in enumerate(sorted(chars))}


def render_grid(
    grid: Grid,
    char_fn: Callable[[object], str] = str,
    highlight: Collection[Point] = (),
    colorize: bool = True,
    highlight_char: str | None = None,
) -> str:
    """
    Render a grid as text, one character per cell.

    Args:
        grid: The grid to render
        char_fn: Converts a cell value to its display character
        highlight: Points to highlight (white background)
        colorize: If False, no ANSI codes are emitted
        highlight_char: Optional character drawn in place of highlighted cells

    Returns:
        Rendered string, rows separated by newlines
    """
    highlighted = set(highlight)
    chars = [[char_fn(value) for value in grid.row_values(r)] for r in range(grid.rows)]
    colors = value_colors({c for row in chars for c in row}) if colorize else {}

    lines: list[str] = []
    for r, row in enumerate(chars):
        parts: list[str] = []
        for c, char in enumerate(row):
            is_highlighted = Point(r, c) in highlighted
            if is_highlighted and highlight_char is not None:
                char = highlight_char
            if not colorize:
                parts.append(char)
            elif is_highlighted:
                parts.append(chalk.bgWhite.black(char))
            else:
                parts.append(colors.get(char, _plain)(char))
        lines.append("".join(parts))

    logger.info("render_grid: %dx%d, %d highlighted", grid.rows, grid.cols, len(highlighted))
    return "\n".join(lines)


def render_distances(
    grid: Grid,
    distances: Mapping[Point, int],
    char_fn: Callable[[object], str] = str,
    colorize: bool = True,
) -> str:
    """
    Render a grid with search distances overlaid.

    Reached cells show the last digit of their distance; other cells show
    their own character. Points outside the grid extent are ignored.
    """
    lines: list[str] = []
    for r in range(grid.rows):
        parts: list[str] = []
        for c, value in enumerate(grid.row_values(r)):
            distance = distances.get(Point(r, c))
            if distance is None:
                char = char_fn(value)
                parts.append(chalk.white(char) if colorize else char)
            else:
                char = str(distance % 10)
                parts.append(chalk.greenBright(char) if colorize else char)
        lines.append("".join(parts))
    return "\n".join(lines)
