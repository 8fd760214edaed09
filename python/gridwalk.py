"""
Gridwalk - a rectangular grid container with bounded and wrap-mode addressing.

Cells are addressed by Point(row, col). A bounded grid rejects coordinates
outside its extent; a wrap grid (wrap=True) treats the plane as an infinite
tiling of itself, remapping each axis independently.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Generic, Iterable, Iterator, TypeVar

from grid_types import CardinalDirection, Direction, Point, WrappedPoint

logger = logging.getLogger(__name__)

V = TypeVar("V")


# =============================================================================
# Traversal results
# =============================================================================


class TerminationReason(Enum):
    """Reason why a directional walk terminated."""

    EDGE_REACHED = "edge_reached"  # Stepped off a bounded grid
    STOP_CELL = "stop_cell"  # stop predicate matched the next cell
    MAX_STEPS_REACHED = "max_steps_reached"  # Hit max_steps limit


class TraversalResult:
    """
    Iterator wrapper for cells_in_direction() that tracks termination reason.

    Usage:
        result = grid.cells_in_direction(start, CardinalDirection.RIGHT)
        for point in result:
            print(point)
        print(result.termination_reason)  # Why the walk ended

    termination_reason stays None until the walk has actually ended, which
    never happens for an unbounded walk on a wrap grid.
    """

    def __init__(self, generator: Iterator[Point]):
        self._iterator = generator
        self.termination_reason: TerminationReason | None = None

    def __iter__(self) -> Iterator[Point]:
        return self

    def __next__(self) -> Point:
        return next(self._iterator)


# =============================================================================
# Grid
# =============================================================================


class Grid(Generic[V]):
    """
    A mutable 2D container of cell values.

    Rectangular unless built with jagged=True, in which case each row keeps
    its own width and cols reports the widest row.
    """

    def __init__(self, cells: list[list[V]], *, wrap: bool = False, jagged: bool = False):
        if wrap and jagged:
            raise ValueError("A grid cannot be both wrapped and jagged")
        if wrap and (not cells or not cells[0]):
            raise ValueError("A wrap-mode grid needs at least one cell")
        if cells and not jagged:
            cols = len(cells[0])
            mismatched = [(i, len(row)) for i, row in enumerate(cells) if len(row) != cols]
            if mismatched:
                error_msg = (
                    f"Inconsistent row lengths in grid\n"
                    f"  Expected: {cols} columns (from row 0)\n"
                    f"  Mismatched rows:\n"
                )
                for row_idx, actual_cols in mismatched:
                    error_msg += f"    Row {row_idx}: {actual_cols} columns\n"
                error_msg += "  All rows must have the same number of cells (pass jagged=True to allow this)"
                raise ValueError(error_msg)

        self._cells = cells
        self.wrap = wrap
        self.jagged = jagged
        logger.debug("Grid: %dx%d (wrap=%s, jagged=%s)", self.rows, self.cols, wrap, jagged)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[V]], *, wrap: bool = False, jagged: bool = False) -> Grid[V]:
        """Build a grid from an iterable of rows; every row is copied."""
        return cls([list(row) for row in rows], wrap=wrap, jagged=jagged)

    @property
    def rows(self) -> int:
        return len(self._cells)

    @property
    def cols(self) -> int:
        if not self._cells:
            return 0
        if self.jagged:
            return max(len(row) for row in self._cells)
        return len(self._cells[0])

    def row_width(self, row: int) -> int:
        return len(self._cells[row])

    def __repr__(self) -> str:
        return f"Grid({self.rows}x{self.cols}, wrap={self.wrap})"

    # -------------------------------------------------------------------------
    # Addressing
    # -------------------------------------------------------------------------

    def _in_extent(self, row: int, col: int) -> bool:
        return 0 <= row < len(self._cells) and 0 <= col < len(self._cells[row])

    def location_or_none(self, row: int, col: int) -> Point | None:
        """
        The point addressing (row, col), or None if it is off a bounded grid.

        Wrap grids always succeed. Coordinates inside the extent give a plain
        Point; coordinates outside it give a WrappedPoint whose logical field
        holds the remapped cell.
        """
        if self._in_extent(row, col):
            return Point(row, col)
        if not self.wrap:
            return None
        logical = Point(row % self.rows, col % self.cols)
        return WrappedPoint(row, col, logical)

    def location(self, row: int, col: int) -> Point:
        """
        Like location_or_none(), for callers that know the cell exists.

        Raises:
            IndexError: If (row, col) is outside a bounded grid
        """
        point = self.location_or_none(row, col)
        if point is None:
            raise IndexError(
                f"Grid does not have a cell at the given location ({row}, {col})\n"
                f"  Grid size: {self.rows} rows x {self.cols} cols"
            )
        return point

    def _resolve(self, point: Point) -> tuple[int, int]:
        if self._in_extent(point.row, point.col):
            return point.row, point.col
        if self.wrap:
            return point.row % self.rows, point.col % self.cols
        raise IndexError(
            f"Point {point} is outside the grid\n"
            f"  Grid size: {self.rows} rows x {self.cols} cols"
        )

    def logical(self, point: Point) -> Point:
        """The in-extent cell a point reads, whether it is plain or wrapped."""
        row, col = self._resolve(point)
        return Point(row, col)

    def __contains__(self, point: Point) -> bool:
        return self.wrap or self._in_extent(point.row, point.col)

    def __getitem__(self, point: Point) -> V:
        row, col = self._resolve(point)
        return self._cells[row][col]

    def __setitem__(self, point: Point, value: V) -> None:
        row, col = self._resolve(point)
        self._cells[row][col] = value

    def get(self, point: Point, default: V | None = None) -> V | None:
        if point not in self:
            return default
        return self[point]

    # -------------------------------------------------------------------------
    # Neighbors
    # -------------------------------------------------------------------------

    def neighbor(self, point: Point, direction: Direction) -> Point | None:
        """The adjacent point in a direction, or None when it is off a bounded grid."""
        return self.location_or_none(point.row + direction.d_row, point.col + direction.d_col)

    def neighbors(self, point: Point, directions: Iterable[Direction] = CardinalDirection) -> list[Point]:
        """Addressable neighbors in the declaration order of ``directions``."""
        result = []
        for direction in directions:
            adjacent = self.neighbor(point, direction)
            if adjacent is not None:
                result.append(adjacent)
        return result

    def neighbors_with_direction(
        self, point: Point, directions: Iterable[Direction] = CardinalDirection
    ) -> dict[Direction, Point]:
        result = {}
        for direction in directions:
            adjacent = self.neighbor(point, direction)
            if adjacent is not None:
                result[direction] = adjacent
        return result

    def cells_in_direction(
        self,
        point: Point,
        direction: Direction,
        include_start: bool = True,
        stop: Callable[[Point, V], bool] | None = None,
        max_steps: int | None = None,
    ) -> TraversalResult:
        """
        Walk from a point in a straight line, yielding each point visited.

        Every call returns a fresh walk. On a bounded grid the walk ends at the
        edge; on a wrap grid it only ends through stop or max_steps.

        Args:
            point: Starting point
            direction: Direction to walk in
            include_start: Whether the starting point is yielded first
            stop: Optional predicate on (point, value). The walk terminates
                  before yielding the first cell (after the start) it matches.
            max_steps: Optional limit on the number of steps taken

        Returns:
            TraversalResult iterator that yields Points and tracks termination reason
        """
        result = TraversalResult.__new__(TraversalResult)
        result.termination_reason = None
        result._iterator = self._walk(point, direction, include_start, stop, max_steps, result)
        return result

    def _walk(
        self,
        point: Point,
        direction: Direction,
        include_start: bool,
        stop: Callable[[Point, V], bool] | None,
        max_steps: int | None,
        result: TraversalResult,
    ) -> Iterator[Point]:
        """Internal generator for cells_in_direction(). Do not call directly."""
        if include_start:
            yield point

        current = point
        steps = 0
        while True:
            if max_steps is not None and steps >= max_steps:
                result.termination_reason = TerminationReason.MAX_STEPS_REACHED
                return
            following = self.neighbor(current, direction)
            if following is None:
                result.termination_reason = TerminationReason.EDGE_REACHED
                return
            if stop is not None and stop(following, self[following]):
                result.termination_reason = TerminationReason.STOP_CELL
                return
            current = following
            steps += 1
            yield current

    # -------------------------------------------------------------------------
    # Whole-grid helpers
    # -------------------------------------------------------------------------

    def points(self) -> Iterator[Point]:
        """All points in row-major order."""
        for r, row in enumerate(self._cells):
            for c in range(len(row)):
                yield Point(r, c)

    def items(self) -> Iterator[tuple[Point, V]]:
        for r, row in enumerate(self._cells):
            for c, value in enumerate(row):
                yield Point(r, c), value

    def find(self, value: V) -> Point | None:
        """First point (row-major) holding value."""
        for point, cell in self.items():
            if cell == value:
                return point
        return None

    def find_all(self, predicate: Callable[[V], bool]) -> list[Point]:
        return [point for point, cell in self.items() if predicate(cell)]

    def swap(self, a: Point, b: Point) -> None:
        self[a], self[b] = self[b], self[a]

    def copy(self) -> Grid[V]:
        return Grid([list(row) for row in self._cells], wrap=self.wrap, jagged=self.jagged)

    def row_values(self, row: int) -> list[V]:
        return list(self._cells[row])

    def column_values(self, col: int) -> list[V]:
        return [row[col] for row in self._cells if col < len(row)]

    def snapshot(self) -> tuple[tuple[V, ...], ...]:
        """Hashable copy of the cell values, for cycle detection."""
        return tuple(tuple(row) for row in self._cells)

    def to_text(self, char_fn: Callable[[V], str] = str) -> str:
        return "\n".join("".join(char_fn(value) for value in row) for row in self._cells)
