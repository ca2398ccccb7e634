"""
Pipe maze loop tracing (2023 day 10).

The start tile ``S`` sits on a single closed loop of pipes. Walking the loop
gives its length; flood filling the cells on each side of the walk finds the
enclosed area. The outer side is the one whose fill escapes the grid.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from grid_parser import GridParseError, parse_grid
from grid_types import ALL_DIRECTIONS, Coord, Direction, Grid
from search import flood_fill

logger = logging.getLogger(__name__)

UP, DOWN, LEFT, RIGHT = Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT


class Pipe(Enum):
    VERTICAL = "|"
    HORIZONTAL = "-"
    NORTH_EAST = "L"
    NORTH_WEST = "J"
    SOUTH_WEST = "7"
    SOUTH_EAST = "F"
    GROUND = "."
    START = "S"

    def connects_to(self, direction: Direction) -> bool:
        return direction in _CONNECTIONS[self]


_CONNECTIONS: dict[Pipe, frozenset[Direction]] = {
    Pipe.VERTICAL: frozenset({UP, DOWN}),
    Pipe.HORIZONTAL: frozenset({LEFT, RIGHT}),
    Pipe.NORTH_EAST: frozenset({UP, RIGHT}),
    Pipe.NORTH_WEST: frozenset({UP, LEFT}),
    Pipe.SOUTH_WEST: frozenset({DOWN, LEFT}),
    Pipe.SOUTH_EAST: frozenset({DOWN, RIGHT}),
    Pipe.GROUND: frozenset(),
    Pipe.START: frozenset(ALL_DIRECTIONS),
}

# (pipe, direction moved to enter it) -> (cells to its left, cells to its right)
_SIDE_CELLS: dict[tuple[Pipe, Direction], tuple[tuple[Direction, ...], tuple[Direction, ...]]] = {
    (Pipe.VERTICAL, UP): ((LEFT,), (RIGHT,)),
    (Pipe.VERTICAL, DOWN): ((RIGHT,), (LEFT,)),
    (Pipe.HORIZONTAL, RIGHT): ((UP,), (DOWN,)),
    (Pipe.HORIZONTAL, LEFT): ((DOWN,), (UP,)),
    (Pipe.NORTH_EAST, LEFT): ((LEFT, DOWN), ()),
    (Pipe.NORTH_EAST, DOWN): ((), (LEFT, DOWN)),
    (Pipe.NORTH_WEST, DOWN): ((RIGHT, DOWN), ()),
    (Pipe.NORTH_WEST, RIGHT): ((), (RIGHT, DOWN)),
    (Pipe.SOUTH_WEST, RIGHT): ((UP, RIGHT), ()),
    (Pipe.SOUTH_WEST, UP): ((), (UP, RIGHT)),
    (Pipe.SOUTH_EAST, UP): ((LEFT, UP), ()),
    (Pipe.SOUTH_EAST, LEFT): ((), (LEFT, UP)),
}


class PipeMazeFailure(Enum):
    """Reason a maze could not be solved."""

    START_NOT_FOUND = "start tile not found"
    NO_PIPE_FROM_START = "no pipe connects to the start tile"
    LOOP_BROKEN = "loop does not lead back to the start tile"
    BOTH_SIDES_TOUCH_EDGE = "both flood-fill sides touch the outer edge"


class PipeMazeError(ValueError):
    def __init__(self, reason: PipeMazeFailure, detail: str = "") -> None:
        message = reason.value if not detail else f"{reason.value}\n  {detail}"
        super().__init__(message)
        self.reason = reason


@dataclass(frozen=True)
class LoopStep:
    """A tile on the loop and the direction moved to enter it."""

    pos: Coord
    direction: Direction
    pipe: Pipe


def _tile(char: str) -> Pipe:
    try:
        return Pipe(char)
    except ValueError as exc:
        raise GridParseError(
            f"Invalid pipe tile '{char}'\n  Valid characters: | - L J 7 F . S"
        ) from exc


def parse_maze(text: str) -> Grid[Pipe]:
    return parse_grid(text, _tile)


def _enter(maze: Grid[Pipe], pos: Coord, direction: Direction) -> LoopStep | None:
    target = pos.at_dir(direction)
    if target is None:
        return None
    pipe = maze.get_coord(target)
    if pipe is None or not pipe.connects_to(direction.opposite()):
        return None
    return LoopStep(target, direction, pipe)


def _advance(maze: Grid[Pipe], step: LoopStep) -> LoopStep | None:
    for direction in ALL_DIRECTIONS:
        if direction == step.direction.opposite() or not step.pipe.connects_to(direction):
            continue
        entered = _enter(maze, step.pos, direction)
        if entered is not None:
            return entered
    return None


def _walk_from(maze: Grid[Pipe], start: Coord, direction: Direction) -> list[LoopStep] | Coord:
    """Steps of the walk leaving ``start`` toward ``direction``, or the dead-end tile."""
    straight = Pipe.VERTICAL if direction.is_vertical else Pipe.HORIZONTAL
    step = LoopStep(start, direction, straight)
    steps: list[LoopStep] = []
    while step.pipe is not Pipe.START:
        next_step = _advance(maze, step)
        if next_step is None:
            return step.pos
        step = next_step
        steps.append(step)
    return steps


def walk_loop(maze: Grid[Pipe]) -> Iterator[LoopStep]:
    """
    Yield each loop tile once, ending with the start tile.

    The start is treated as a straight pipe pointing at a connected
    neighbour. Neighbours are tried in turn, so junk pipes that merely touch
    the start are skipped in favour of the first walk that closes.
    """
    start = maze.find_coord(lambda pipe: pipe is Pipe.START)
    if start is None:
        raise PipeMazeError(PipeMazeFailure.START_NOT_FOUND)

    directions = [d for d in ALL_DIRECTIONS if _enter(maze, start, d) is not None]
    if not directions:
        raise PipeMazeError(PipeMazeFailure.NO_PIPE_FROM_START, f"start at ({start.x}, {start.y})")

    dead_ends: list[Coord] = []
    for direction in directions:
        walk = _walk_from(maze, start, direction)
        if isinstance(walk, list):
            yield from walk
            return
        logger.debug("pipe_maze: walk %s from start hit a dead end at %s", direction.name, walk)
        dead_ends.append(walk)

    raise PipeMazeError(
        PipeMazeFailure.LOOP_BROKEN,
        "dead end at " + ", ".join(f"({pos.x}, {pos.y})" for pos in dead_ends),
    )


def farthest_loop_distance(text: str) -> int:
    """Steps from the start to the point of the loop farthest from it."""
    return sum(1 for _ in walk_loop(parse_maze(text))) // 2


def _fill_side(fill: Grid[bool], pos: Coord, directions: tuple[Direction, ...]) -> int | None:
    total = 0
    for direction in directions:
        filled = flood_fill(fill, pos.at_dir(direction))
        if filled is None:
            return None
        total += filled
    return total


def _start_pipe(entered: Direction, leaving: Direction) -> Pipe:
    """The pipe shape hidden under ``S``, from how the loop enters and leaves it."""
    wanted = frozenset({entered.opposite(), leaving})
    for pipe, connections in _CONNECTIONS.items():
        if connections == wanted:
            return pipe
    raise PipeMazeError(PipeMazeFailure.LOOP_BROKEN, "loop doubles back on the start tile")


def enclosed_tiles(text: str) -> int:
    """Number of tiles enclosed by the loop."""
    maze = parse_maze(text)
    loop = list(walk_loop(maze))
    fill = Grid.filled(maze.width, maze.height, False)
    for step in loop:
        fill.set_coord(step.pos, True)

    last = loop[-1]
    loop[-1] = LoopStep(last.pos, last.direction, _start_pipe(last.direction, loop[0].direction))

    left: int | None = 0
    right: int | None = 0
    for step in loop:
        left_dirs, right_dirs = _SIDE_CELLS.get((step.pipe, step.direction), ((), ()))
        if left is not None:
            filled = _fill_side(fill, step.pos, left_dirs)
            left = None if filled is None else left + filled
        if right is not None:
            filled = _fill_side(fill, step.pos, right_dirs)
            right = None if filled is None else right + filled

    logger.debug("pipe_maze: left side=%s, right side=%s", left, right)
    if left is not None:
        return left
    if right is not None:
        return right
    raise PipeMazeError(PipeMazeFailure.BOTH_SIDES_TOUCH_EDGE)
