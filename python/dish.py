"""
Tilting a platform of rolling rocks (2023 day 14).

Round rocks ``O`` roll as far as they can in the tilt direction; cube rocks
``#`` stay put. A spin cycle tilts north, west, south, then east. After a
billion spin cycles the platform has long since entered a loop, found by
fingerprinting the full grid after each cycle.
"""

from __future__ import annotations

from enum import Enum
from typing import Hashable

from cycles import SkipResult, run_with_cycle_skip
from grid_parser import GridParseError, parse_grid
from grid_types import Direction, Grid

SPIN_CYCLES = 1_000_000_000

SPIN_ORDER = (Direction.UP, Direction.LEFT, Direction.DOWN, Direction.RIGHT)


class Tile(Enum):
    ROUND = "O"
    CUBE = "#"
    EMPTY = "."


def _tile(char: str) -> Tile:
    try:
        return Tile(char)
    except ValueError as exc:
        raise GridParseError(f"Invalid platform tile '{char}'\n  Valid characters: O # .") from exc


def _settle(line: list[Tile]) -> list[Tile]:
    """Roll every round rock toward index 0, stopping at cube rocks."""
    settled: list[Tile] = []
    rounds = 0
    empties = 0
    for tile in line + [Tile.CUBE]:
        if tile is Tile.CUBE:
            settled.extend([Tile.ROUND] * rounds + [Tile.EMPTY] * empties + [Tile.CUBE])
            rounds = empties = 0
        elif tile is Tile.ROUND:
            rounds += 1
        else:
            empties += 1
    settled.pop()
    return settled


def tilt(platform: Grid[Tile], direction: Direction) -> None:
    """Tilt in place."""
    backwards = direction in (Direction.DOWN, Direction.RIGHT)
    if direction.is_vertical:
        for x in range(platform.width):
            column = platform.column(x)
            settled = _settle(list(reversed(column)) if backwards else list(column))
            for i, tile in enumerate(settled):
                y = platform.height - 1 - i if backwards else i
                platform.set_unchecked(x, y, tile)
    else:
        for y in range(platform.height):
            row = platform.row(y)
            settled = _settle(list(reversed(row)) if backwards else list(row))
            for i, tile in enumerate(settled):
                x = platform.width - 1 - i if backwards else i
                platform.set_unchecked(x, y, tile)


def total_load(platform: Grid[Tile]) -> int:
    """Each round rock weighs its distance from the south edge, counting its own row."""
    return sum(
        sum(1 for tile in row if tile is Tile.ROUND) * (platform.height - y)
        for y, row in enumerate(platform.rows())
    )


class Platform:
    """A platform as a Simulation: one step is one spin cycle."""

    def __init__(self, grid: Grid[Tile]) -> None:
        self.grid = grid

    def step(self) -> None:
        for direction in SPIN_ORDER:
            tilt(self.grid, direction)

    def fingerprint(self) -> Hashable:
        return self.grid.fingerprint()

    def measure(self) -> int:
        return total_load(self.grid)


def north_load(text: str) -> int:
    platform = parse_grid(text, _tile)
    tilt(platform, Direction.UP)
    return total_load(platform)


def load_after_spins(text: str, spins: int = SPIN_CYCLES) -> SkipResult:
    return run_with_cycle_skip(Platform(parse_grid(text, _tile)), spins)
