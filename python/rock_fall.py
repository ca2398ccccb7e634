"""
Falling rocks in a narrow chamber (2022 day 17).

Five rock shapes fall in a fixed order, pushed sideways by a repeating jet
pattern before each one-row drop. The chamber grid grows upwards (y = 0 is
the floor) and is extended on demand.

Long runs use cycle detection keyed on (rock index, jet index, skyline),
where the skyline is each column's depth below the tower top. The skyline is
an approximation of the full state: two different deep configurations can
share it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Hashable

from cycles import Cycler, SkipResult, run_naive, run_with_cycle_skip
from grid_types import Grid

logger = logging.getLogger(__name__)

SHORT_RUN = 2022
LONG_RUN = 1_000_000_000_000


def _shape(width: int, height: int, rows_bottom_up: str) -> Grid[bool]:
    return Grid(width, height, [char == "#" for char in rows_bottom_up])


# Built once at import and never mutated
ROCK_SHAPES: tuple[Grid[bool], ...] = (
    _shape(4, 1, "####"),
    _shape(3, 3, ".#." "###" ".#."),
    _shape(3, 3, "###" "..#" "..#"),
    _shape(1, 4, "####"),
    _shape(2, 2, "####"),
)


class Jet(Enum):
    LEFT = "<"
    RIGHT = ">"


class JetParseError(ValueError):
    """Raised for characters other than '<' and '>' in the jet pattern."""


@dataclass(frozen=True)
class ChamberRules:
    """Geometry of the chamber and rock spawn point."""

    width: int = 7
    spawn_x: int = 2  # Gap between the left wall and a new rock
    spawn_gap: int = 3  # Empty rows between the tower top and a new rock


def parse_jets(text: str) -> list[Jet]:
    jets: list[Jet] = []
    for i, char in enumerate(text.strip()):
        try:
            jets.append(Jet(char))
        except ValueError as exc:
            raise JetParseError(
                f"Invalid jet character '{char}' at offset {i}\n"
                f"  Valid characters: '<', '>'"
            ) from exc
    if not jets:
        raise JetParseError("Empty jet pattern")
    return jets


class Chamber:
    """The chamber as a Simulation: one step drops one rock."""

    def __init__(self, jets: list[Jet], rules: ChamberRules | None = None) -> None:
        self.rules = rules or ChamberRules()
        self.rocks: Cycler[Grid[bool]] = Cycler(ROCK_SHAPES)
        self.jets: Cycler[Jet] = Cycler(jets)
        self.grid: Grid[bool] = Grid.filled(self.rules.width, 64, False)
        self.height = 0
        self.dropped = 0

    def _overlaps(self, shape: Grid[bool], x: int, y: int) -> bool:
        if x < 0 or x + shape.width > self.grid.width:
            return True
        for yi in range(shape.height):
            for xi in range(shape.width):
                if shape.get_unchecked(xi, yi) and self.grid.get_unchecked(x + xi, y + yi):
                    return True
        return False

    def _ensure_rows(self, rows: int) -> None:
        if rows > self.grid.height:
            self.grid.extend_rows(max(rows - self.grid.height, self.grid.height), False)

    def drop_rock(self) -> None:
        shape = self.rocks.next()
        x = self.rules.spawn_x
        y = self.height + self.rules.spawn_gap
        self._ensure_rows(y + shape.height)

        while True:
            pushed_x = x - 1 if self.jets.next() is Jet.LEFT else x + 1
            if not self._overlaps(shape, pushed_x, y):
                x = pushed_x
            if y == 0 or self._overlaps(shape, x, y - 1):
                break
            y -= 1

        for yi in range(shape.height):
            for xi in range(shape.width):
                if shape.get_unchecked(xi, yi):
                    self.grid.set_unchecked(x + xi, y + yi, True)
        self.height = max(self.height, y + shape.height)
        self.dropped += 1

    def skyline(self) -> tuple[int, ...]:
        """Per column, rows between the tower top and the highest rock (height if none)."""
        depths: list[int] = []
        for x in range(self.grid.width):
            depth = 0
            while depth < self.height and not self.grid.get_unchecked(x, self.height - 1 - depth):
                depth += 1
            depths.append(depth)
        return tuple(depths)

    # -- Simulation protocol ---------------------------------------------------

    def step(self) -> None:
        self.drop_rock()

    def fingerprint(self) -> Hashable:
        return (self.rocks.index, self.jets.index, self.skyline())

    def measure(self) -> int:
        return self.height


def tower_height(text: str, rocks: int = SHORT_RUN, rules: ChamberRules | None = None) -> int:
    """Tower height after dropping ``rocks`` rocks one by one."""
    return run_naive(Chamber(parse_jets(text), rules), rocks)


def tower_height_with_skip(
    text: str, rocks: int = LONG_RUN, rules: ChamberRules | None = None
) -> SkipResult:
    """Tower height after ``rocks`` rocks, skipping repeated cycles."""
    chamber = Chamber(parse_jets(text), rules)
    result = run_with_cycle_skip(chamber, rocks)
    logger.debug("rock_fall: %d rocks simulated for a target of %d", chamber.dropped, rocks)
    return result
