"""
Grid parsing utilities.

Turns a rectangular block of puzzle text (one row per line) into a Grid.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from grid_types import Grid

__all__ = ["GridParseError", "parse_char_grid", "parse_grid"]

T = TypeVar("T")


class GridParseError(ValueError):
    """Raised when text does not describe a rectangular grid."""


def _split_rows(text: str) -> list[str]:
    rows = [line.rstrip("\r") for line in text.strip("\n").split("\n")]
    if not rows or rows == [""]:
        raise GridParseError("Empty grid definition\n  Expected at least one non-empty row")

    width = len(rows[0])
    mismatched = [(i, len(row)) for i, row in enumerate(rows) if len(row) != width]
    if mismatched:
        error_msg = (
            f"Inconsistent row lengths in grid\n"
            f"  Expected: {width} columns (from row 0)\n"
            f"  Mismatched rows:\n"
        )
        for row_idx, actual_cols in mismatched:
            error_msg += f"    Row {row_idx}: {actual_cols} columns - \"{rows[row_idx]}\"\n"
        error_msg += "  All rows must have the same number of cells"
        raise GridParseError(error_msg)
    return rows


def parse_char_grid(text: str) -> Grid[str]:
    """
    Parse a block of text into a grid of single characters.

    Leading and trailing newlines are ignored, every other line is a row.

    Example:
        "ab\\ncd\\n" -> Grid(2, 2, ["a", "b", "c", "d"])

    Raises:
        GridParseError: If the block is empty or its rows differ in length
    """
    rows = _split_rows(text)
    return Grid(len(rows[0]), len(rows), [char for row in rows for char in row])


def parse_grid(text: str, cell_fn: Callable[[str], T]) -> Grid[T]:
    """
    Parse a block of text, mapping each character through ``cell_fn``.

    Errors raised by ``cell_fn`` propagate unchanged.
    """
    rows = _split_rows(text)
    return Grid(len(rows[0]), len(rows), [cell_fn(char) for row in rows for char in row])
