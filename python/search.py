"""
Generic frontier search over caller-defined states.

States only need to be hashable. Two strategies are provided:

1. bfs() - breadth-first expansion with two frontier buffers, one per distance
2. priority_search() - Dijkstra-style search with weighted steps, a visited key
   that may fold in auxiliary dimensions, and an acceptance check for goals
"""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Callable, Generic, Hashable, Iterable, TypeVar

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=Hashable)

__all__ = ["BfsResult", "SearchResult", "bfs", "priority_search", "flood_fill"]


# =============================================================================
# Breadth-first search
# =============================================================================


@dataclass
class BfsResult(Generic[S]):
    """
    Outcome of bfs().

    distances maps every reached state to its smallest distance from a start.
    layers[d] is the number of states first reached at distance d.
    goal_state/goal_distance are None unless a goal predicate was given and matched.
    """

    distances: dict[S, int] = field(default_factory=dict)
    layers: list[int] = field(default_factory=list)
    goal_state: S | None = None
    goal_distance: int | None = None

    def distance_to(self, state: S) -> int | None:
        return self.distances.get(state)

    def at_distance(self, distance: int) -> list[S]:
        return [state for state, d in self.distances.items() if d == distance]

    def within(self, max_distance: int, parity: int | None = None) -> list[S]:
        """States at most max_distance away, optionally only those whose distance has the given parity."""
        return [
            state
            for state, d in self.distances.items()
            if d <= max_distance and (parity is None or d % 2 == parity)
        ]


def bfs(
    starts: Iterable[S],
    next_states: Callable[[S], Iterable[S]],
    *,
    max_distance: int | None = None,
    goal: Callable[[S], bool] | None = None,
) -> BfsResult[S]:
    """
    Breadth-first search from one or more start states.

    The current frontier is expanded into a second buffer of newly reached
    states; when the current frontier is exhausted the buffers swap and the
    distance grows by one. A state is recorded the first time it is reached,
    which is always at its smallest distance.

    Args:
        starts: Start states, all at distance 0 (duplicates are ignored)
        next_states: Yields the states adjacent to a state
        max_distance: Optional cap; states beyond it are never recorded
        goal: Optional predicate. The search stops after the first layer that
              reaches a goal; the first goal state found (in discovery order)
              is reported.

    Returns:
        BfsResult with the distance map and, if matched, the goal
    """
    result: BfsResult[S] = BfsResult()
    distances = result.distances

    current: list[S] = []
    for state in starts:
        if state not in distances:
            distances[state] = 0
            current.append(state)
    if current:
        result.layers.append(len(current))

    distance = 0
    while current:
        if goal is not None:
            reached = next((state for state in current if goal(state)), None)
            if reached is not None:
                result.goal_state = reached
                result.goal_distance = distance
                break

        if max_distance is not None and distance >= max_distance:
            break

        distance += 1
        following: list[S] = []
        for state in current:
            for adjacent in next_states(state):
                if adjacent not in distances:
                    distances[adjacent] = distance
                    following.append(adjacent)
        if following:
            result.layers.append(len(following))
        current = following

    logger.debug(
        "bfs: %d states reached, %d layers, goal=%s",
        len(distances),
        len(result.layers),
        result.goal_distance,
    )
    return result


def flood_fill(start: S | Iterable[S], neighbors: Callable[[S], Iterable[S]]) -> set[S]:
    """
    Every state reachable from start (or from each of several starts).

    Pass a list or set for several starts; any other value is a single start.
    """
    starts = list(start) if isinstance(start, (list, set, frozenset)) else [start]
    return set(bfs(starts, neighbors).distances)


# =============================================================================
# Priority search
# =============================================================================


@dataclass(frozen=True)
class SearchResult(Generic[S]):
    """A goal reached by priority_search(), with its cost and the path from a start."""

    state: S
    cost: int
    path: list[S]


def priority_search(
    starts: Iterable[S],
    next_states: Callable[[S], Iterable[tuple[S, int]]],
    *,
    is_goal: Callable[[S], bool],
    accept: Callable[[S], bool] | None = None,
    key: Callable[[S], Hashable] | None = None,
    priority: Callable[[S, int], int] | None = None,
) -> SearchResult[S] | None:
    """
    Lowest-priority-first search with non-negative step costs.

    Queue entries are ordered by (priority, insertion counter), so states
    never need to be comparable and equal priorities pop in insertion order.
    A state is settled the first time its key pops; until then only the entry
    with the lowest priority per key is kept.

    The priority defaults to the accumulated cost (Dijkstra). A custom priority
    must never decrease along an edge: priority(next, cost + step) >=
    priority(state, cost). Cost plus a consistent heuristic (A*), a cost-major
    tie-break and a negated potential that only shrinks along a path all meet
    this; the first accepted goal popped is then the best one.

    Args:
        starts: Start states, each at cost 0
        next_states: Yields (next_state, step_cost) pairs for a state
        is_goal: Whether a popped state is a goal
        accept: Optional extra check a goal must pass to end the search
                (a goal that fails it is expanded like any other state)
        key: Visited key for a state (default: the state itself). Fold any
             auxiliary dimensions (direction, run length) into it.
        priority: Optional ordering value from (state, cost); defaults to cost

    Returns:
        SearchResult for the first accepted goal, or None if the queue runs dry
    """
    key_fn = key if key is not None else (lambda state: state)
    priority_fn = priority if priority is not None else (lambda state, cost: cost)

    counter = itertools.count()
    best: dict[Hashable, int] = {}
    parents: dict[Hashable, S | None] = {}
    settled: set[Hashable] = set()
    queue: list[tuple[int, int, int, S]] = []

    for state in starts:
        state_key = key_fn(state)
        state_priority = priority_fn(state, 0)
        if state_key in best and best[state_key] <= state_priority:
            continue
        best[state_key] = state_priority
        parents[state_key] = None
        heapq.heappush(queue, (state_priority, next(counter), 0, state))

    popped = 0
    while queue:
        order, _, cost, state = heapq.heappop(queue)
        state_key = key_fn(state)
        if state_key in settled or order > best[state_key]:
            continue
        settled.add(state_key)
        popped += 1

        if is_goal(state) and (accept is None or accept(state)):
            logger.debug("priority_search: goal at cost %d after %d expansions", cost, popped)
            return SearchResult(state, cost, _reconstruct(state, parents, key_fn))

        for adjacent, step_cost in next_states(state):
            adjacent_key = key_fn(adjacent)
            if adjacent_key in settled:
                continue
            new_cost = cost + step_cost
            new_priority = priority_fn(adjacent, new_cost)
            if adjacent_key not in best or new_priority < best[adjacent_key]:
                best[adjacent_key] = new_priority
                parents[adjacent_key] = state
                heapq.heappush(queue, (new_priority, next(counter), new_cost, adjacent))

    logger.debug("priority_search: queue exhausted after %d expansions", popped)
    return None


def _reconstruct(
    goal: S,
    parents: dict[Hashable, S | None],
    key_fn: Callable[[S], Hashable],
) -> list[S]:
    path = [goal]
    parent = parents[key_fn(goal)]
    while parent is not None:
        path.append(parent)
        parent = parents[key_fn(parent)]
    path.reverse()
    return path
