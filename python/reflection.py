"""
Lines of reflection in patterns of ash and rocks (2023 day 13).

Each pattern has one line, between two rows or two columns, across which
it mirrors. Rows or columns that run past the edge of the pattern are
ignored. With a smudge, exactly one cell across the line must differ.
"""

from __future__ import annotations

import logging
from typing import Sequence

from grid_parser import parse_char_grid
from grid_types import Grid

logger = logging.getLogger(__name__)


class NoReflectionError(ValueError):
    """Raised when a pattern mirrors across no line with the wanted smudge count."""


def parse_patterns(text: str) -> list[Grid[str]]:
    blocks = [block for block in text.strip("\n").split("\n\n") if block.strip()]
    return [parse_char_grid(block) for block in blocks]


def _differences(first: Sequence[str], second: Sequence[str]) -> int:
    return sum(a != b for a, b in zip(first, second))


def reflection_point(lines: Sequence[Sequence[str]], smudges: int = 0) -> int | None:
    """
    Number of lines before the first mirror point, or None.

    A mirror point qualifies when the lines it reflects onto each other
    differ in exactly ``smudges`` cells in total.
    """
    for point in range(1, len(lines)):
        total = 0
        for before, after in zip(reversed(lines[:point]), lines[point:]):
            total += _differences(before, after)
            if total > smudges:
                break
        if total == smudges:
            return point
    return None


def summarize(pattern: Grid[str], smudges: int = 0) -> int:
    """
    Columns left of a vertical mirror, or 100 times the rows above a
    horizontal one.

    Raises:
        NoReflectionError: If the pattern has no such mirror
    """
    columns = [tuple(column) for column in pattern.columns()]
    found = reflection_point(columns, smudges)
    if found is not None:
        return found
    rows = [tuple(row) for row in pattern.rows()]
    found = reflection_point(rows, smudges)
    if found is not None:
        return 100 * found
    raise NoReflectionError(
        f"no reflection line found\n"
        f"  Pattern: {pattern.width}x{pattern.height} with {smudges} smudge(s)"
    )


def summarize_notes(text: str, smudges: int = 0) -> int:
    patterns = parse_patterns(text)
    logger.debug("reflection: %d patterns, %d smudge(s)", len(patterns), smudges)
    return sum(summarize(pattern, smudges) for pattern in patterns)
