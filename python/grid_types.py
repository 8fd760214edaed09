"""
Shared point and direction types for the gridwalk system.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering
from typing import Iterable


class _DeltaDirection(Enum):
    """Base for direction enumerations whose value is a (d_row, d_col) delta."""

    @property
    def d_row(self) -> int:
        return self.value[0]

    @property
    def d_col(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> _DeltaDirection:
        """The direction pointing back the way this one came."""
        return type(self)((-self.value[0], -self.value[1]))


class CardinalDirection(_DeltaDirection):
    """4-connected movement."""

    TOP = (-1, 0)  # Up (decreasing row)
    BOTTOM = (1, 0)  # Down (increasing row)
    LEFT = (0, -1)  # Decreasing col
    RIGHT = (0, 1)  # Increasing col

    def turn_right(self) -> CardinalDirection:
        """Quarter turn clockwise."""
        return CardinalDirection((self.d_col, -self.d_row))

    def turn_left(self) -> CardinalDirection:
        """Quarter turn anticlockwise."""
        return CardinalDirection((-self.d_col, self.d_row))

    def is_quarter_turn_to(self, other: CardinalDirection) -> bool:
        return other in (self.turn_left(), self.turn_right())

    def is_half_turn_to(self, other: CardinalDirection) -> bool:
        return self.opposite is other

    def to_char(self) -> str:
        return _DIRECTION_TO_CHAR[self]

    @staticmethod
    def from_char(char: str) -> CardinalDirection:
        """
        Parse a direction character.

        Accepts arrows (^ v < >), UDLR and compass letters (N S E W).

        Raises:
            ValueError: If the character names no direction
        """
        try:
            return _CHAR_TO_DIRECTION[char.upper()]
        except KeyError:
            raise ValueError(
                f"Invalid direction character: '{char}'\n"
                f"  Valid characters: {' '.join(sorted(_CHAR_TO_DIRECTION))}"
            ) from None


# Cardinal movement in contexts that also deal with diagonals
TransverseDirection = CardinalDirection


class DiagonalDirection(_DeltaDirection):
    """Ordinal movement only."""

    TOP_LEFT = (-1, -1)
    TOP_RIGHT = (-1, 1)
    BOTTOM_LEFT = (1, -1)
    BOTTOM_RIGHT = (1, 1)


class OmniDirection(_DeltaDirection):
    """8-connected movement: the cardinal directions, then the diagonals."""

    TOP = (-1, 0)
    BOTTOM = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)
    TOP_LEFT = (-1, -1)
    TOP_RIGHT = (-1, 1)
    BOTTOM_LEFT = (1, -1)
    BOTTOM_RIGHT = (1, 1)

    @property
    def is_cardinal(self) -> bool:
        return self.d_row == 0 or self.d_col == 0

    @classmethod
    def cardinals(cls) -> list[OmniDirection]:
        return [d for d in cls if d.is_cardinal]

    @classmethod
    def diagonals(cls) -> list[OmniDirection]:
        return [d for d in cls if not d.is_cardinal]


Direction = CardinalDirection | DiagonalDirection | OmniDirection

_DIRECTION_TO_CHAR: dict[CardinalDirection, str] = {
    CardinalDirection.TOP: "^",
    CardinalDirection.BOTTOM: "v",
    CardinalDirection.LEFT: "<",
    CardinalDirection.RIGHT: ">",
}

_CHAR_TO_DIRECTION: dict[str, CardinalDirection] = {
    "^": CardinalDirection.TOP,
    "V": CardinalDirection.BOTTOM,
    "<": CardinalDirection.LEFT,
    ">": CardinalDirection.RIGHT,
    "U": CardinalDirection.TOP,
    "D": CardinalDirection.BOTTOM,
    "L": CardinalDirection.LEFT,
    "R": CardinalDirection.RIGHT,
    "N": CardinalDirection.TOP,
    "S": CardinalDirection.BOTTOM,
    "W": CardinalDirection.LEFT,
    "E": CardinalDirection.RIGHT,
}


# =============================================================================
# Points
# =============================================================================


@total_ordering
@dataclass(frozen=True, eq=False)
class Point:
    """
    A lattice point. A moved point is always a new value.

    Equality, hashing and ordering go by (row, col) alone, for plain and
    wrapped points alike.
    """

    row: int
    col: int

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (self.row, self.col) == (other.row, other.col)

    def __lt__(self, other: Point) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (self.row, self.col) < (other.row, other.col)

    def __hash__(self) -> int:
        return hash((self.row, self.col))

    @property
    def logical(self) -> Point:
        """The cell this point stands for: itself, unless it is a WrappedPoint."""
        return self

    def moved(self, direction: Direction, steps: int = 1) -> Point:
        return Point(self.row + direction.d_row * steps, self.col + direction.d_col * steps)

    def __add__(self, direction: Direction) -> Point:
        return self.moved(direction)

    def direction_to(self, other: Point) -> OmniDirection | None:
        """Direction of travel to an adjacent point, or None if not adjacent."""
        delta = (other.row - self.row, other.col - self.col)
        for direction in OmniDirection:
            if direction.value == delta:
                return direction
        return None

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


@dataclass(frozen=True, eq=False)
class WrappedPoint(Point):
    """
    A point outside the extent of a wrap-mode grid.

    Keeps its unwrapped coordinates (so copies of the same cell in different
    tiles stay distinct) alongside the logical point it resolves to.
    """

    logical: Point = field(default=Point(0, 0))

    def __str__(self) -> str:
        return f"({self.row}, {self.col})->{self.logical}"


def neighbor(point: Point, direction: Direction) -> Point:
    """Coordinate addition; the result may lie outside any grid."""
    return point.moved(direction)


def all_neighbors(point: Point, directions: Iterable[Direction]) -> list[Point]:
    """Neighbors in the declaration order of ``directions``."""
    return [point.moved(direction) for direction in directions]
