"""Tests for the console walkthrough."""

import pytest
from rich.console import Console

import demo
from grid_types import Coord


@pytest.mark.parametrize("name", list(demo.DEMOS))
def test_panel_renders(name: str) -> None:
    console = Console(record=True, width=100)
    console.print(demo.DEMOS[name]())
    assert name in console.export_text()


def test_mirror_halves_vertical() -> None:
    """Column mirror after 5 of 9 columns pairs columns 1-4 with 5-8."""
    left, right = demo._mirror_halves(9, 7, 5)
    assert {coord.x for coord in left} == {1, 2, 3, 4}
    assert {coord.x for coord in right} == {5, 6, 7, 8}
    assert len(left) == len(right) == 4 * 7


def test_mirror_halves_horizontal() -> None:
    above, below = demo._mirror_halves(9, 7, 400)
    assert {coord.y for coord in above} == {1, 2, 3}
    assert {coord.y for coord in below} == {4, 5, 6}
    assert Coord(8, 3) in above
