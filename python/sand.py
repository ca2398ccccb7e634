"""
Falling sand in a cave scan (2022 day 14).

Rock paths are lists of ``x,y`` points joined by ``->``. Sand enters at
(500, 0) and falls down, then down-left, then down-right, coming to rest when
all three are blocked.

The cave is one pre-allocated grid: tall enough for the floor two rows below
the deepest rock, and wide enough for a pile that spreads one column per row.
"""

from __future__ import annotations

import logging
from enum import Enum

from grid_types import Coord, Grid

logger = logging.getLogger(__name__)

SOURCE_X = 500


class Tile(Enum):
    AIR = "."
    ROCK = "#"
    SAND = "o"


class RockPathError(ValueError):
    """Raised for malformed or diagonal rock paths."""


class Cave:
    """Cave scan with coordinates shifted so the leftmost needed column is 0."""

    def __init__(self, paths: list[list[Coord]]) -> None:
        points = [point for path in paths for point in path]
        if not points:
            raise RockPathError("No rock paths in scan")
        self.deepest = max(point.y for point in points)
        self.floor_y = self.deepest + 2
        left = min(min(point.x for point in points), SOURCE_X - self.floor_y - 1)
        right = max(max(point.x for point in points), SOURCE_X + self.floor_y + 1)
        self.x_offset = left
        self.grid: Grid[Tile] = Grid.filled(right - left + 1, self.floor_y + 1, Tile.AIR)
        for path in paths:
            for a, b in zip(path, path[1:]):
                self._add_rock_line(a, b)

    def _add_rock_line(self, a: Coord, b: Coord) -> None:
        if a.x != b.x and a.y != b.y:
            raise RockPathError(f"Rock line from {a} to {b} is not horizontal or vertical")
        for x in range(min(a.x, b.x), max(a.x, b.x) + 1):
            for y in range(min(a.y, b.y), max(a.y, b.y) + 1):
                self.grid.set(x - self.x_offset, y, Tile.ROCK)

    def add_floor(self) -> None:
        for x in range(self.grid.width):
            self.grid.set_unchecked(x, self.floor_y, Tile.ROCK)

    def _next_rest(self) -> tuple[int, int] | None:
        grid = self.grid
        x, y = SOURCE_X - self.x_offset, 0
        if grid.get_unchecked(x, y) is not Tile.AIR:
            return None
        # Sand moves at most one column per row, so x +/- 1 stays inside the margins
        while y + 1 < grid.height:
            if grid.get_unchecked(x, y + 1) is Tile.AIR:
                y += 1
            elif grid.get_unchecked(x - 1, y + 1) is Tile.AIR:
                x -= 1
                y += 1
            elif grid.get_unchecked(x + 1, y + 1) is Tile.AIR:
                x += 1
                y += 1
            else:
                return (x, y)
        return None

    def pour(self) -> int:
        """Drop sand until a grain falls out or the source is blocked."""
        grains = 0
        while (rest := self._next_rest()) is not None:
            self.grid.set_unchecked(rest[0], rest[1], Tile.SAND)
            grains += 1
        logger.debug("sand: %d grains at rest", grains)
        return grains


def parse_rock_paths(text: str) -> list[list[Coord]]:
    paths: list[list[Coord]] = []
    for line_idx, line in enumerate(text.splitlines()):
        if not line.strip():
            continue
        path: list[Coord] = []
        for point in line.split("->"):
            try:
                x_str, y_str = point.strip().split(",")
                x, y = int(x_str), int(y_str)
            except ValueError as exc:
                raise RockPathError(
                    f"Invalid point '{point.strip()}' on line {line_idx + 1}\n"
                    f"  Expected format: 'x,y'"
                ) from exc
            if x < 0 or y < 0:
                raise RockPathError(
                    f"Invalid point '{point.strip()}' on line {line_idx + 1}\n"
                    f"  Coordinates must be non-negative"
                )
            path.append(Coord(x, y))
        paths.append(path)
    return paths


def sand_until_abyss(text: str) -> int:
    """Grains at rest before sand starts falling past the deepest rock."""
    return Cave(parse_rock_paths(text)).pour()


def sand_until_source_blocked(text: str) -> int:
    """Grains at rest, with a floor, once the source itself is covered."""
    cave = Cave(parse_rock_paths(text))
    cave.add_floor()
    return cave.pour()
