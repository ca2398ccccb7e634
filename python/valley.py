"""
Crossing a valley of blizzards (2022 day 24).

Blizzards move one cell per minute and wrap around the interior, so the
whole valley repeats every ``lcm(inner_width, inner_height)`` minutes. The
search keys visited states on (position, minute mod period), which keeps the
state space finite even though elapsed time is unbounded.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from math import lcm
from typing import Iterator

from grid_parser import GridParseError, parse_char_grid
from grid_types import Coord, Direction, Grid
from search import astar, manhattan_heuristic

logger = logging.getLogger(__name__)

_BLIZZARD_CHARS = {
    "^": Direction.UP,
    "v": Direction.DOWN,
    "<": Direction.LEFT,
    ">": Direction.RIGHT,
}


class ValleyParseError(ValueError):
    """Raised when the valley map is missing its entrance/exit or has unknown tiles."""


@dataclass(frozen=True)
class Blizzard:
    x: int
    y: int
    direction: Direction


@dataclass(frozen=True)
class ValleyState:
    pos: Coord
    minute: int


class Valley:
    """
    Walls, blizzards and a lazily grown list of occupancy snapshots.

    Snapshot ``t`` is derived directly from the blizzards' starting cells and
    is read-only once computed, so every search state can share it.
    """

    def __init__(self, walls: Grid[bool], blizzards: list[Blizzard], start: Coord, end: Coord) -> None:
        if walls.width < 3 or walls.height < 3:
            raise ValleyParseError(f"Valley of {walls.width}x{walls.height} has no interior")
        self.walls = walls
        self.blizzards = blizzards
        self.start = start
        self.end = end
        self.inner_width = walls.width - 2
        self.inner_height = walls.height - 2
        self.period = lcm(self.inner_width, self.inner_height)
        self._snapshots: list[Grid[bool]] = []

    def _snapshot(self, minute: int) -> Grid[bool]:
        occupied = Grid.filled(self.walls.width, self.walls.height, False)
        for blizzard in self.blizzards:
            dx, dy = blizzard.direction.delta
            x = (blizzard.x - 1 + dx * minute) % self.inner_width + 1
            y = (blizzard.y - 1 + dy * minute) % self.inner_height + 1
            occupied.set_unchecked(x, y, True)
        return occupied

    def occupied_at(self, minute: int) -> Grid[bool]:
        phase = minute % self.period
        while len(self._snapshots) <= phase:
            self._snapshots.append(self._snapshot(len(self._snapshots)))
        return self._snapshots[phase]

    def _moves(self, state: ValleyState) -> Iterator[tuple[ValleyState, int]]:
        minute = state.minute + 1
        occupied = self.occupied_at(minute)
        candidates = [state.pos] + [target for _, target in self.walls.neighbors(state.pos)]
        for pos in candidates:
            if self.walls.get_unchecked(pos.x, pos.y) or occupied.get_unchecked(pos.x, pos.y):
                continue
            yield (ValleyState(pos, minute), 1)

    def crossing(self, start: Coord, goal: Coord, minute: int = 0) -> int:
        """Earliest minute at which ``goal`` can be reached leaving ``start`` at ``minute``."""
        to_goal = manhattan_heuristic(goal)
        result = astar(
            ValleyState(start, minute),
            lambda state: state.pos == goal,
            self._moves,
            heuristic=lambda state: to_goal(state.pos),
            key=lambda state: (state.pos, state.minute % self.period),
            start_cost=minute,
        )
        logger.debug(
            "valley: %s -> %s arrives at minute %d (%d states, %d snapshots cached)",
            start,
            goal,
            result.cost,
            result.expanded,
            len(self._snapshots),
        )
        return result.cost


def parse_valley(text: str) -> Valley:
    tiles = parse_char_grid(text)
    blizzards: list[Blizzard] = []
    for coord in tiles.coords():
        char = tiles.get_unchecked(coord.x, coord.y)
        if char in _BLIZZARD_CHARS:
            blizzards.append(Blizzard(coord.x, coord.y, _BLIZZARD_CHARS[char]))
        elif char not in "#.":
            raise GridParseError(
                f"Invalid valley tile '{char}' at ({coord.x}, {coord.y})\n"
                f"  Valid characters: '#', '.', '^', 'v', '<', '>'"
            )

    top = [x for x, char in enumerate(tiles.row(0)) if char == "."]
    bottom = [x for x, char in enumerate(tiles.row(tiles.height - 1)) if char == "."]
    if len(top) != 1 or len(bottom) != 1:
        raise ValleyParseError(
            f"Expected exactly one opening in the top and bottom walls\n"
            f"  Top openings: {top}\n"
            f"  Bottom openings: {bottom}"
        )
    walls = tiles.map(lambda char: char == "#")
    return Valley(walls, blizzards, Coord(top[0], 0), Coord(bottom[0], tiles.height - 1))


def shortest_crossing(text: str) -> int:
    """Minutes to walk from the entrance to the exit."""
    valley = parse_valley(text)
    return valley.crossing(valley.start, valley.end)


def there_and_back_again(text: str) -> int:
    """Minutes to reach the exit, return to the entrance, and reach the exit again."""
    valley = parse_valley(text)
    there = valley.crossing(valley.start, valley.end)
    back = valley.crossing(valley.end, valley.start, there)
    return valley.crossing(valley.start, valley.end, back)
