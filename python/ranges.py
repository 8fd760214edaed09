"""
Integer interval algebra.

An Interval covers every integer from first to last inclusive. Any interval
with first > last is empty; EMPTY is the canonical empty value returned by
operations whose result covers nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

__all__ = [
    "Interval",
    "EMPTY",
    "intersect",
    "intersect_all",
    "merge_all",
    "subtract",
    "subtract_merged",
    "subtract_all",
    "subtract_from_all",
    "to_intervals",
    "total_length",
]


@dataclass(frozen=True)
class Interval:
    """An inclusive run of integers."""

    first: int
    last: int

    @classmethod
    def of_length(cls, start: int, count: int) -> Interval:
        """The interval of count integers starting at start."""
        return cls(start, start + count - 1)

    @property
    def is_empty(self) -> bool:
        return self.first > self.last

    @property
    def length(self) -> int:
        """Number of integers covered; unlike len() this works beyond sys.maxsize."""
        return 0 if self.is_empty else self.last - self.first + 1

    def __len__(self) -> int:
        return self.length

    def __contains__(self, value: int) -> bool:
        return self.first <= value <= self.last

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.first, self.last + 1))

    def __str__(self) -> str:
        return f"{self.first}..{self.last}"


EMPTY = Interval(0, -1)


def intersect(a: Interval, b: Interval) -> Interval:
    """The overlap of two intervals, or EMPTY."""
    return intersect_all([a, b])


def intersect_all(intervals: Iterable[Interval]) -> Interval:
    """
    The overlap of every interval.

    Zero intervals give EMPTY; a single interval is returned unchanged.
    """
    items = list(intervals)
    if not items:
        return EMPTY
    if len(items) == 1:
        return items[0]
    first = max(interval.first for interval in items)
    last = min(interval.last for interval in items)
    if first > last:
        return EMPTY
    return Interval(first, last)


def merge_all(intervals: Iterable[Interval]) -> list[Interval]:
    """
    Coalesce intervals into a sorted list of disjoint, non-adjacent intervals.

    Empty inputs are dropped. Intervals that overlap or touch (the next one
    starts at most one past the previous end) are merged.
    """
    ordered = sorted((i for i in intervals if not i.is_empty), key=lambda i: (i.first, i.last))
    merged: list[Interval] = []
    for interval in ordered:
        if merged and interval.first <= merged[-1].last + 1:
            previous = merged[-1]
            if interval.last > previous.last:
                merged[-1] = Interval(previous.first, interval.last)
        else:
            merged.append(interval)
    return merged


def subtract(a: Interval, b: Interval) -> list[Interval]:
    """
    The parts of a not covered by b: zero, one or two intervals, never empty ones.
    """
    if a.is_empty:
        return []
    if intersect(a, b).is_empty:
        return [a]
    remainder: list[Interval] = []
    if a.first < b.first:
        remainder.append(Interval(a.first, b.first - 1))
    if a.last > b.last:
        remainder.append(Interval(b.last + 1, a.last))
    return remainder


def subtract_merged(a: Interval, merged: Iterable[Interval]) -> list[Interval]:
    """Subtract an already merged list of intervals from a."""
    remaining = [] if a.is_empty else [a]
    for b in merged:
        remaining = [part for interval in remaining for part in subtract(interval, b)]
        if not remaining:
            break
    return remaining


def subtract_all(a: Interval, intervals: Iterable[Interval]) -> list[Interval]:
    """Subtract arbitrary (possibly overlapping) intervals from a."""
    return subtract_merged(a, merge_all(intervals))


def subtract_from_all(intervals: Iterable[Interval], remove: Iterable[Interval]) -> list[Interval]:
    """Subtract one collection of intervals from another; the result is merged."""
    removed = merge_all(remove)
    result: list[Interval] = []
    for interval in merge_all(intervals):
        result.extend(subtract_merged(interval, removed))
    return result


def to_intervals(numbers: Iterable[int]) -> list[Interval]:
    """Group integers into maximal runs of consecutive values, in ascending order."""
    runs: list[Interval] = []
    for number in sorted(set(numbers)):
        if runs and number == runs[-1].last + 1:
            runs[-1] = Interval(runs[-1].first, number)
        else:
            runs.append(Interval(number, number))
    return runs


def total_length(intervals: Iterable[Interval]) -> int:
    """Number of distinct integers covered by the intervals."""
    return sum(interval.length for interval in merge_all(intervals))
