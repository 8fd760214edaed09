"""
Number helpers used across day solvers.
"""

from __future__ import annotations

from fractions import Fraction
from functools import reduce
from itertools import combinations
from math import gcd, lcm
from typing import Iterable, Sequence, TypeVar

T = TypeVar("T")

Coefficients = tuple[Fraction, Fraction, Fraction]


def gcd_all(numbers: Iterable[int]) -> int:
    """
    Raises:
        ValueError: If numbers is empty
    """
    values = list(numbers)
    if not values:
        raise ValueError("Cannot compute the GCD of no numbers")
    return reduce(gcd, values)


def lcm_all(numbers: Iterable[int]) -> int:
    """
    Raises:
        ValueError: If numbers is empty
    """
    values = list(numbers)
    if not values:
        raise ValueError("Cannot compute the LCM of no numbers")
    return reduce(lcm, values)


def distinct_pairs(items: Iterable[T]) -> list[tuple[T, T]]:
    """Every unordered pair of distinct positions in items."""
    return list(combinations(items, 2))


def _differences(series: Sequence[int]) -> list[int]:
    return [b - a for a, b in zip(series, series[1:])]


def is_quadratic(series: Sequence[int]) -> bool:
    """
    Whether series follows a*n^2 + b*n + c with a != 0.

    Requires at least 4 terms so the constant second difference can be checked.

    Raises:
        ValueError: If fewer than 4 terms are given
    """
    if len(series) < 4:
        raise ValueError(
            f"Need at least 4 terms to check for a quadratic series\n"
            f"  Found {len(series)}: {list(series)}"
        )
    second = _differences(_differences(series))
    return second[0] != 0 and all(d == second[0] for d in second)


def quadratic_coefficients(series: Sequence[int]) -> Coefficients:
    """
    (a, b, c) such that term n (1-based) of the series is a*n^2 + b*n + c.

    Raises:
        ValueError: If the series is too short or not quadratic
    """
    if not is_quadratic(series):
        raise ValueError(f"Series is not quadratic: {list(series)}")
    first_difference = series[1] - series[0]
    second_difference = _differences(_differences(series))[0]
    a = Fraction(second_difference, 2)
    b = first_difference - 3 * a
    c = series[0] - a - b
    return a, b, c


def quadratic_term(coefficients: Coefficients, n: int) -> int | Fraction:
    """Term n (1-based) of the quadratic series with the given coefficients."""
    a, b, c = coefficients
    value = a * n * n + b * n + c
    return int(value) if value.denominator == 1 else value
