"""Tests for grid_types module."""

import pytest

from grid_types import ALL_DIRECTIONS, Coord, Coord3D, Direction, Grid, Grid3D, Turn


def numbered(width: int, height: int) -> Grid[int]:
    """Grid whose cell (x, y) holds its flat index."""
    return Grid(width, height, list(range(width * height)))


class TestDirection:
    def test_opposite_is_involution(self) -> None:
        for direction in ALL_DIRECTIONS:
            assert direction.opposite() != direction
            assert direction.opposite().opposite() == direction

    def test_four_turns_return_to_start(self) -> None:
        for direction in ALL_DIRECTIONS:
            for turn in Turn:
                current = direction
                for _ in range(4):
                    current = current.turn(turn)
                assert current == direction

    def test_clockwise_from_up(self) -> None:
        assert Direction.UP.turn(Turn.CLOCKWISE) == Direction.RIGHT
        assert Direction.UP.turn(Turn.COUNTERCLOCKWISE) == Direction.LEFT

    def test_turn_then_undo(self) -> None:
        for direction in ALL_DIRECTIONS:
            assert direction.turn(Turn.CLOCKWISE).turn(Turn.COUNTERCLOCKWISE) == direction


class TestCoord:
    def test_steps_below_zero_are_none(self) -> None:
        origin = Coord(0, 0)
        assert origin.up() is None
        assert origin.left() is None
        assert origin.down() == Coord(0, 1)
        assert origin.right() == Coord(1, 0)

    def test_at_dir_matches_named_steps(self) -> None:
        coord = Coord(3, 5)
        assert coord.at_dir(Direction.UP) == Coord(3, 4)
        assert coord.at_dir(Direction.DOWN) == Coord(3, 6)
        assert coord.at_dir(Direction.LEFT) == Coord(2, 5)
        assert coord.at_dir(Direction.RIGHT) == Coord(4, 5)

    def test_manhattan_distance(self) -> None:
        assert Coord(1, 2).manhattan_distance(Coord(4, 0)) == 5

    def test_coord3d_neighbors_stay_non_negative(self) -> None:
        assert len(list(Coord3D(0, 0, 0).neighbors())) == 3
        assert len(list(Coord3D(1, 1, 1).neighbors())) == 6


class TestGridAccess:
    def test_get_matches_construction(self) -> None:
        """Every in-bounds get returns cells[y*W+x]."""
        grid = numbered(4, 3)
        for y in range(3):
            for x in range(4):
                assert grid.get(x, y) == y * 4 + x
                assert grid.get_unchecked(x, y) == y * 4 + x

    def test_out_of_bounds_get_is_none(self) -> None:
        grid = numbered(4, 3)
        assert grid.get(4, 0) is None
        assert grid.get(0, 3) is None
        assert grid.get(-1, 0) is None

    def test_cell_count_mismatch_rejected(self) -> None:
        with pytest.raises(ValueError, match="Cell count does not match"):
            Grid(3, 3, [0] * 8)

    def test_set_out_of_bounds_raises(self) -> None:
        grid = Grid.filled(2, 2, 0)
        with pytest.raises(IndexError):
            grid.set(2, 0, 1)

    def test_from_rows(self) -> None:
        grid = Grid.from_rows([[1, 2], [3, 4]])
        assert grid == numbered(2, 2).map(lambda v: v + 1)

    def test_from_rows_ragged(self) -> None:
        with pytest.raises(ValueError, match="Inconsistent row lengths"):
            Grid.from_rows([[1, 2], [3]])

    def test_copy_is_independent(self) -> None:
        grid = numbered(2, 2)
        copied = grid.copy()
        copied.set(0, 0, 99)
        assert grid.get(0, 0) == 0

    def test_extend_rows(self) -> None:
        grid = numbered(2, 1)
        grid.extend_rows(2, -1)
        assert grid.height == 3
        assert list(grid.row(2)) == [-1, -1]

    def test_fingerprint_tracks_contents(self) -> None:
        grid = numbered(2, 2)
        before = grid.fingerprint()
        assert grid.copy().fingerprint() == before
        grid.set(1, 1, 0)
        assert grid.fingerprint() != before


class TestRowsAndColumns:
    def test_row_view(self) -> None:
        grid = numbered(3, 2)
        row = grid.row(1)
        assert len(row) == 3
        assert list(row) == [3, 4, 5]
        assert row[-1] == 5
        assert row[0:2] == [3, 4]

    def test_row_view_sees_updates(self) -> None:
        """Rows are views into the grid, not copies."""
        grid = numbered(3, 2)
        row = grid.row(0)
        grid.set(2, 0, 42)
        assert row[2] == 42

    def test_column_forward(self) -> None:
        grid = numbered(3, 4)
        assert list(grid.column(1)) == [1, 4, 7, 10]

    def test_column_reversed(self) -> None:
        grid = numbered(3, 4)
        assert list(reversed(grid.column(2))) == [11, 8, 5, 2]

    @pytest.mark.parametrize("height", [1, 2, 5, 6])
    def test_column_ends_meet(self, height: int) -> None:
        """Alternating front and back yields each cell exactly once."""
        grid = numbered(2, height)
        column = grid.column(0)
        seen: list[int] = []
        take_front = True
        while len(column) > 0:
            if take_front:
                seen.append(next(column))
            else:
                value = column.next_back()
                assert value is not None
                seen.append(value)
            take_front = not take_front

        assert sorted(seen) == [y * 2 for y in range(height)]
        assert column.next_back() is None
        with pytest.raises(StopIteration):
            next(column)

    def test_columns_count(self) -> None:
        grid = numbered(3, 2)
        assert [list(column) for column in grid.columns()] == [[0, 3], [1, 4], [2, 5]]


class TestNeighbors:
    def test_corner(self) -> None:
        grid = numbered(3, 3)
        found = grid.neighbors(Coord(0, 0))
        assert found == [(Direction.DOWN, Coord(0, 1)), (Direction.RIGHT, Coord(1, 0))]

    def test_centre_in_direction_order(self) -> None:
        grid = numbered(3, 3)
        found = grid.neighbors(Coord(1, 1), (Direction.RIGHT, Direction.UP))
        assert found == [(Direction.RIGHT, Coord(2, 1)), (Direction.UP, Coord(1, 0))]

    def test_far_edge(self) -> None:
        grid = numbered(3, 3)
        found = [coord for _, coord in grid.neighbors(Coord(2, 2))]
        assert found == [Coord(2, 1), Coord(1, 2)]


class TestGrid3D:
    def test_get_and_set(self) -> None:
        grid = Grid3D.filled(2, 3, 4, False)
        grid.set_unchecked(Coord3D(1, 2, 3), True)
        assert grid.get(Coord3D(1, 2, 3)) is True
        assert grid.get(Coord3D(0, 2, 3)) is False
        assert grid.get(Coord3D(2, 0, 0)) is None
        assert grid.cells.count(True) == 1

    @pytest.mark.parametrize("coord", [Coord3D(-1, 0, 0), Coord3D(0, -1, 0), Coord3D(0, 0, -1)])
    def test_negative_components_out_of_bounds(self, coord: Coord3D) -> None:
        """Negative indices never wrap round into the flat buffer."""
        grid = Grid3D(2, 2, 2, list(range(8)))
        assert not grid.in_bounds(coord)
        assert grid.get(coord) is None
