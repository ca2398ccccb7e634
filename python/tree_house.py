"""
Tree visibility in a height map (2022 day 8).

A tree is visible from outside when every tree between it and some edge of
the grid is strictly shorter. Its scenic score multiplies how far one can
see in each direction before a tree at least as tall blocks the view.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from grid_parser import GridParseError, parse_grid
from grid_types import ALL_DIRECTIONS, Coord, Grid


def _height(char: str) -> int:
    if not char.isdecimal() or not char.isascii():
        raise GridParseError(f"Invalid tree height '{char}'\n  Expected a digit 0-9")
    return int(char)


def parse_forest(text: str) -> Grid[int]:
    return parse_grid(text, _height)


def _visible_along(heights: Iterable[int]) -> Iterator[int]:
    """Offsets along a line of trees that are taller than all before them."""
    tallest = -1
    for offset, height in enumerate(heights):
        if height > tallest:
            yield offset
            tallest = height
        if tallest == 9:
            return


def visible_trees(forest: Grid[int]) -> set[Coord]:
    """Trees visible from at least one edge."""
    last_x, last_y = forest.width - 1, forest.height - 1
    visible: set[Coord] = set()
    for y, row in enumerate(forest.rows()):
        visible.update(Coord(x, y) for x in _visible_along(row))
        visible.update(Coord(last_x - x, y) for x in _visible_along(reversed(row)))
    for x in range(forest.width):
        visible.update(Coord(x, y) for y in _visible_along(forest.column(x)))
        visible.update(Coord(x, last_y - y) for y in _visible_along(reversed(forest.column(x))))
    return visible


def scenic_score(forest: Grid[int], tree: Coord) -> int:
    height = forest.get_unchecked(tree.x, tree.y)
    score = 1
    for direction in ALL_DIRECTIONS:
        seen = 0
        pos = tree.at_dir(direction)
        while pos is not None and (other := forest.get_coord(pos)) is not None:
            seen += 1
            if other >= height:
                break
            pos = pos.at_dir(direction)
        score *= seen
    return score


def count_visible(text: str) -> int:
    return len(visible_trees(parse_forest(text)))


def best_scenic_score(text: str) -> int:
    forest = parse_forest(text)
    return max(scenic_score(forest, tree) for tree in forest.coords())
