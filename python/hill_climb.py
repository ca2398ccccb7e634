"""
Hill climbing on an elevation map (2022 day 12).

Each cell is a letter a-z giving its elevation; ``S`` is the start at
elevation a and ``E`` the summit at elevation z. A step may climb at most
one level and descend any amount.
"""

from __future__ import annotations

from dataclasses import dataclass

from grid_parser import GridParseError, parse_char_grid
from grid_types import Coord, Grid
from search import bfs_distance, bfs_path


class HillClimbError(ValueError):
    """Raised when the map lacks its start or summit marker."""


@dataclass(frozen=True)
class HeightMap:
    elevations: Grid[int]
    start: Coord
    end: Coord


def _elevation(char: str) -> int:
    if char == "S":
        return 0
    if char == "E":
        return 25
    if "a" <= char <= "z":
        return ord(char) - ord("a")
    raise GridParseError(
        f"Invalid elevation character '{char}'\n"
        f"  Valid characters: a-z, 'S' (start), 'E' (summit)"
    )


def parse_height_map(text: str) -> HeightMap:
    chars = parse_char_grid(text)
    start = chars.find_coord(lambda c: c == "S")
    if start is None:
        raise HillClimbError("Start marker 'S' not found")
    end = chars.find_coord(lambda c: c == "E")
    if end is None:
        raise HillClimbError("Summit marker 'E' not found")
    return HeightMap(chars.map(_elevation), start, end)


def _climbable(here: int, there: int) -> bool:
    return there <= here + 1


def _descendable(here: int, there: int) -> bool:
    return here <= there + 1


def fewest_steps_to_summit(text: str) -> int:
    """Shortest climb from ``S`` to ``E``."""
    height_map = parse_height_map(text)
    return bfs_distance(height_map.elevations, height_map.start, height_map.end, _climbable)


def fewest_steps_from_any_lowland(text: str) -> int:
    """
    Shortest climb to ``E`` from any cell at elevation a.

    Searched backwards from the summit with the step rule reversed, stopping
    at the first lowest cell reached.
    """
    height_map = parse_height_map(text)
    elevations = height_map.elevations
    return bfs_distance(
        elevations,
        height_map.end,
        lambda coord: elevations.get_unchecked(coord.x, coord.y) == 0,
        _descendable,
    )


def summit_route(text: str) -> list[Coord]:
    """Cells of one shortest climb from ``S`` to ``E``."""
    height_map = parse_height_map(text)
    return bfs_path(height_map.elevations, height_map.start, height_map.end, _climbable)
