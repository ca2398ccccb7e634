"""
Distances between galaxies in an expanding image (2023 day 11).

Every row and column without a galaxy counts ``expansion`` times when
measuring Manhattan distance.
"""

from __future__ import annotations

from itertools import accumulate

from grid_parser import parse_char_grid
from grid_types import Grid

GALAXY = "#"


def _empty_prefix(empties: list[bool]) -> list[int]:
    # prefix[i] = number of empty lines before index i
    return [0, *accumulate(int(empty) for empty in empties)]


def sum_galaxy_distances(image: Grid[str], expansion: int) -> int:
    """Sum of pairwise expanded distances between all galaxies."""
    empty_rows = _empty_prefix([all(cell != GALAXY for cell in row) for row in image.rows()])
    empty_columns = _empty_prefix(
        [all(cell != GALAXY for cell in column) for column in image.columns()]
    )
    galaxies = [coord for coord in image.coords() if image.get_unchecked(coord.x, coord.y) == GALAXY]

    total = 0
    for i, first in enumerate(galaxies):
        for second in galaxies[i + 1 :]:
            x0, x1 = sorted((first.x, second.x))
            y0, y1 = sorted((first.y, second.y))
            extra = (empty_columns[x1] - empty_columns[x0]) + (empty_rows[y1] - empty_rows[y0])
            total += first.manhattan_distance(second) + extra * (expansion - 1)
    return total


def expanded_distance_sum(text: str, expansion: int = 2) -> int:
    return sum_galaxy_distances(parse_char_grid(text), expansion)
