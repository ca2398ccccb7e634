"""
Shortest-path search over grids and explicit graphs.

Three families of routine live here:
1. Breadth-first search with a two-buffer frontier (unit-cost grids)
2. Flood fill that reports whether a region escapes the grid
3. Priority-queue search (Dijkstra / A*) with lazy discarding of stale entries
"""

from __future__ import annotations

import heapq
import itertools
import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Hashable, Iterable, Mapping, TypeVar, Union

from grid_types import ALL_DIRECTIONS, Coord, Direction, Grid

logger = logging.getLogger(__name__)

T = TypeVar("T")
S = TypeVar("S")
N = TypeVar("N", bound=Hashable)

# Decides whether a step from one cell value to a neighbouring one is allowed
StepRule = Callable[[T, T], bool]

# Either a fixed target or a predicate over coordinates
Goal = Union[Coord, Callable[[Coord], bool]]


class GoalUnreachable(RuntimeError):
    """Raised when a search exhausts its state space without reaching the goal."""


class TieBreak(Enum):
    """Order in which equal-priority entries leave the queue."""

    INSERTION = "insertion"  # First pushed, first popped
    LIFO = "lifo"  # Last pushed, first popped


@dataclass(frozen=True)
class SearchRules:
    """Rules governing priority-queue search behavior."""

    tie_break: TieBreak = TieBreak.INSERTION


@dataclass(frozen=True)
class PathResult(Generic[S]):
    """Outcome of a priority-queue search."""

    state: S  # The goal state that was reached
    cost: int  # Accumulated cost on arrival
    expanded: int  # Number of distinct states expanded


def _goal_predicate(goal: Goal) -> Callable[[Coord], bool]:
    if isinstance(goal, Coord):
        return lambda coord: coord == goal
    return goal


# =============================================================================
# Breadth-first search
# =============================================================================


def _bfs(
    grid: Grid[T],
    start: Coord,
    goal: Goal,
    can_step: StepRule[T],
    directions: Iterable[Direction],
    parents: Grid[Coord | None] | None,
) -> tuple[int, Coord]:
    is_goal = _goal_predicate(goal)
    if is_goal(start):
        return (0, start)

    directions = tuple(directions)
    visited = Grid.filled(grid.width, grid.height, False)
    visited.set_coord(start, True)

    frontier: deque[Coord] = deque([start])
    next_frontier: deque[Coord] = deque()
    distance = 0

    while frontier:
        while frontier:
            coord = frontier.popleft()
            if is_goal(coord):
                logger.debug("bfs: reached %s at distance %d", coord, distance)
                return (distance, coord)

            here = grid.get_unchecked(coord.x, coord.y)
            for _, target in grid.neighbors(coord, directions):
                if visited.get_unchecked(target.x, target.y):
                    continue
                if not can_step(here, grid.get_unchecked(target.x, target.y)):
                    continue
                # Marked on discovery so a cell enters the next round only once
                visited.set_unchecked(target.x, target.y, True)
                if parents is not None:
                    parents.set_unchecked(target.x, target.y, coord)
                next_frontier.append(target)

        distance += 1
        frontier, next_frontier = next_frontier, frontier

    raise GoalUnreachable(
        f"Goal unreachable from {start}\n"
        f"  Explored {visited.count(bool)} of {grid.width * grid.height} cells"
        f" over {distance} rounds"
    )


def bfs_distance(
    grid: Grid[T],
    start: Coord,
    goal: Goal,
    can_step: StepRule[T],
    directions: Iterable[Direction] = ALL_DIRECTIONS,
) -> int:
    """
    Fewest unit steps from ``start`` to the goal.

    Processes the frontier one distance level at a time, swapping the current
    and next buffers between rounds.

    Args:
        grid: The grid to search
        start: Starting cell
        goal: Target coordinate, or predicate accepting any goal coordinate
        can_step: Called as ``can_step(from_value, to_value)`` for each candidate step
        directions: Directions tried from each cell, in order

    Returns:
        The hop count; 0 when ``start`` is already a goal

    Raises:
        GoalUnreachable: If both frontier buffers empty before a goal is found
    """
    distance, _ = _bfs(grid, start, goal, can_step, directions, None)
    return distance


def bfs_path(
    grid: Grid[T],
    start: Coord,
    goal: Goal,
    can_step: StepRule[T],
    directions: Iterable[Direction] = ALL_DIRECTIONS,
) -> list[Coord]:
    """Like bfs_distance, but return the cells of one shortest path, start first."""
    parents: Grid[Coord | None] = Grid.filled(grid.width, grid.height, None)
    _, reached = _bfs(grid, start, goal, can_step, directions, parents)

    path = [reached]
    current = reached
    while current != start:
        parent = parents.get_unchecked(current.x, current.y)
        assert parent is not None, f"BFS parent chain broken at {current}"
        path.append(parent)
        current = parent
    path.reverse()
    return path


# =============================================================================
# Flood fill
# =============================================================================


def flood_fill(
    fill: Grid[bool],
    start: Coord | None,
    directions: Iterable[Direction] = ALL_DIRECTIONS,
) -> int | None:
    """
    Mark every unfilled cell connected to ``start`` as filled.

    Returns the number of newly filled cells, or None as soon as the region
    tries to step off the grid. Cells filled before that point stay filled.
    A ``start`` of None counts as off the grid.
    """
    directions = tuple(directions)
    stack: list[Coord | None] = [start]
    filled = 0
    while stack:
        coord = stack.pop()
        if coord is None or not fill.in_bounds(coord.x, coord.y):
            return None
        if fill.get_unchecked(coord.x, coord.y):
            continue
        fill.set_unchecked(coord.x, coord.y, True)
        filled += 1
        stack.extend(coord.at_dir(direction) for direction in directions)
    return filled


# =============================================================================
# Priority-queue search
# =============================================================================


def _zero(_state: object) -> int:
    return 0


def _identity(state: S) -> Hashable:
    return state  # type: ignore[return-value]


def manhattan_heuristic(goal: Coord) -> Callable[[Coord], int]:
    """Admissible estimate for 4-directional movement with unit or larger steps."""
    return lambda coord: coord.manhattan_distance(goal)


def astar(
    start: S,
    is_goal: Callable[[S], bool],
    successors: Callable[[S], Iterable[tuple[S, int]]],
    heuristic: Callable[[S], int] | None = None,
    key: Callable[[S], Hashable] | None = None,
    start_cost: int = 0,
    rules: SearchRules | None = None,
) -> PathResult[S]:
    """
    Minimum-cost search ordered by ``cost + heuristic(state)``.

    There is no decrease-key: a state may sit in the queue several times and
    every pop whose key was already expanded is dropped. With no heuristic
    this is Dijkstra's algorithm.

    Args:
        start: Initial state
        is_goal: Tested when a state is popped
        successors: Yields ``(next_state, step_cost)`` pairs, costs must be >= 0
        heuristic: Admissible cost-to-goal estimate (defaults to 0)
        key: Maps a state to its visited-set key (defaults to the state itself)
        start_cost: Cost already accumulated at ``start``
        rules: Tie-break policy

    Raises:
        GoalUnreachable: If the queue empties first
        ValueError: If a successor has negative step cost
    """
    if rules is None:
        rules = SearchRules()
    if heuristic is None:
        heuristic = _zero
    if key is None:
        key = _identity

    order = itertools.count()
    sign = 1 if rules.tie_break is TieBreak.INSERTION else -1

    # The unique order value keeps states themselves from ever being compared
    queue: list[tuple[int, int, int, S]] = [
        (start_cost + heuristic(start), next(order), start_cost, start)
    ]
    visited: set[Hashable] = set()
    pushed = 1

    while queue:
        _, _, cost, state = heapq.heappop(queue)
        state_key = key(state)
        if state_key in visited:
            continue
        if is_goal(state):
            logger.debug(
                "astar: goal at cost %d, expanded=%d, pushed=%d", cost, len(visited), pushed
            )
            return PathResult(state, cost, len(visited))
        visited.add(state_key)

        for next_state, step_cost in successors(state):
            if step_cost < 0:
                raise ValueError(f"Negative step cost {step_cost} from {state} to {next_state}")
            if key(next_state) in visited:
                continue
            next_cost = cost + step_cost
            heapq.heappush(
                queue,
                (next_cost + heuristic(next_state), sign * next(order), next_cost, next_state),
            )
            pushed += 1

    raise GoalUnreachable(f"Goal unreachable from {start!r} after expanding {len(visited)} states")


def dijkstra(graph: Mapping[N, Iterable[tuple[N, int]]], start: N, goal: N) -> int:
    """Cheapest path cost between two nodes of a weighted adjacency mapping."""
    result = astar(
        start,
        lambda node: node == goal,
        lambda node: graph.get(node, ()),
    )
    return result.cost


def dijkstra_all(graph: Mapping[N, Iterable[tuple[N, int]]], start: N) -> dict[N, int]:
    """Cheapest path cost from ``start`` to every reachable node."""
    order = itertools.count()
    queue: list[tuple[int, int, N]] = [(0, next(order), start)]
    distances: dict[N, int] = {}
    while queue:
        cost, _, node = heapq.heappop(queue)
        if node in distances:
            continue
        distances[node] = cost
        for neighbor, weight in graph.get(node, ()):
            if weight < 0:
                raise ValueError(f"Negative edge weight {weight} from {node!r} to {neighbor!r}")
            if neighbor not in distances:
                heapq.heappush(queue, (cost + weight, next(order), neighbor))
    return distances
