"""Tests for grid_parser module."""

import pytest

from grid_parser import GridParseError, parse_char_grid, parse_grid
from grid_types import Grid


class TestParseCharGrid:
    """Tests for the character grid parser."""

    def test_simple_grid(self) -> None:
        """Parse a 2x2 block into row-major cells."""
        grid = parse_char_grid("ab\ncd\n")

        assert grid.width == 2
        assert grid.height == 2
        assert grid.cells == ["a", "b", "c", "d"]
        assert grid.get(1, 0) == "b"
        assert grid.get(0, 1) == "c"

    def test_surrounding_newlines_ignored(self) -> None:
        """Leading and trailing blank lines are not rows."""
        grid = parse_char_grid("\n\n#.#\n.#.\n\n")

        assert grid.width == 3
        assert grid.height == 2

    def test_windows_line_endings(self) -> None:
        grid = parse_char_grid("ab\r\ncd\r\n")

        assert grid == Grid(2, 2, ["a", "b", "c", "d"])

    def test_single_row(self) -> None:
        grid = parse_char_grid("<<>>")

        assert grid.height == 1
        assert list(grid.row(0)) == ["<", "<", ">", ">"]


class TestParseGrid:
    """Tests for parsing with a per-cell conversion."""

    def test_cell_fn_applied(self) -> None:
        grid = parse_grid("12\n34", int)

        assert grid.cells == [1, 2, 3, 4]

    def test_cell_fn_errors_propagate(self) -> None:
        """Errors from the conversion are not wrapped."""
        with pytest.raises(ValueError, match="invalid literal"):
            parse_grid("1x\n34", int)


class TestErrorHandling:
    """Tests for malformed input."""

    def test_empty_text(self) -> None:
        with pytest.raises(GridParseError, match="Empty grid definition"):
            parse_char_grid("")

    def test_only_newlines(self) -> None:
        with pytest.raises(GridParseError, match="Empty grid definition"):
            parse_char_grid("\n\n\n")

    def test_ragged_rows(self) -> None:
        """Rows of differing length are reported by index."""
        with pytest.raises(GridParseError) as exc_info:
            parse_char_grid("abc\nde\nfgh")

        message = str(exc_info.value)
        assert "Inconsistent row lengths" in message
        assert "Expected: 3 columns" in message
        assert "Row 1: 2 columns" in message

    def test_parse_error_is_value_error(self) -> None:
        assert issubclass(GridParseError, ValueError)
