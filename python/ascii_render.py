"""
ASCII rendering for grids.

Provides two rendering approaches:
1. Plain cell rendering through a per-cell character function, with optional
   highlighted coordinates coloured by simple_chalk
2. Path rendering - overlays a search path as direction arrows
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Sequence, TypeVar

import simple_chalk as chalk  # type: ignore[import-untyped]

from grid_types import Coord, Grid

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Palette cycled through when rendering several highlight groups
PALETTE: list[Callable[[str], str]] = [
    chalk.red,
    chalk.green,
    chalk.yellow,
    chalk.blue,
    chalk.magenta,
    chalk.cyan,
]

_ARROWS = {(0, -1): "^", (0, 1): "v", (-1, 0): "<", (1, 0): ">"}


def _plain(text: str) -> str:
    return text


def render_grid(
    grid: Grid[T],
    cell_char: Callable[[T], str] = str,
    highlight: Iterable[Coord] = (),
    highlight_color: Callable[[str], str] = chalk.yellowBright,
    bottom_up: bool = False,
    row_range: range | None = None,
    color: bool = True,
) -> str:
    """
    Render a grid one character per cell.

    Args:
        grid: The grid to render
        cell_char: Maps a cell value to the character shown for it
        highlight: Coordinates drawn with ``highlight_color``
        highlight_color: Colorizer for highlighted cells
        bottom_up: Print the last row first (for grids where y grows upwards)
        row_range: Only render these rows (default: all)
        color: Disable to get plain text without ANSI codes

    Returns:
        Rendered string, rows separated by newlines
    """
    marked = set(highlight)
    colorize = highlight_color if color else _plain
    rows = list(row_range if row_range is not None else range(grid.height))
    if bottom_up:
        rows.reverse()

    lines: list[str] = []
    for y in rows:
        chars: list[str] = []
        for x in range(grid.width):
            char = cell_char(grid.get_unchecked(x, y))
            chars.append(colorize(char) if Coord(x, y) in marked else char)
        lines.append("".join(chars))
    return "\n".join(lines)


def render_path(
    grid: Grid[T],
    path: Sequence[Coord],
    cell_char: Callable[[T], str] = str,
    color: bool = True,
) -> str:
    """
    Render a grid with ``path`` drawn as arrows pointing along each step.

    The last cell of the path keeps its own character.
    """
    overlay: dict[Coord, str] = {}
    for here, there in zip(path, path[1:]):
        step = (there.x - here.x, there.y - here.y)
        if step not in _ARROWS:
            raise ValueError(f"Path step from {here} to {there} is not a single orthogonal move")
        overlay[here] = _ARROWS[step]

    colorize = chalk.greenBright if color else _plain
    lines: list[str] = []
    for y in range(grid.height):
        chars: list[str] = []
        for x in range(grid.width):
            arrow = overlay.get(Coord(x, y))
            chars.append(colorize(arrow) if arrow is not None else cell_char(grid.get_unchecked(x, y)))
        lines.append("".join(chars))

    logger.debug("render_path: %d steps over %dx%d grid", len(overlay), grid.width, grid.height)
    return "\n".join(lines)


def render_regions(
    grid: Grid[T],
    regions: Sequence[Iterable[Coord]],
    cell_char: Callable[[T], str] = str,
) -> str:
    """Render with each coordinate group in its own palette colour."""
    colors: dict[Coord, Callable[[str], str]] = {}
    for i, region in enumerate(regions):
        for coord in region:
            colors[coord] = PALETTE[i % len(PALETTE)]

    lines: list[str] = []
    for y in range(grid.height):
        chars: list[str] = []
        for x in range(grid.width):
            char = cell_char(grid.get_unchecked(x, y))
            colorize = colors.get(Coord(x, y))
            chars.append(colorize(char) if colorize is not None else char)
        lines.append("".join(chars))
    return "\n".join(lines)
