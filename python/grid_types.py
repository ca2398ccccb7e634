"""
Shared type definitions for the grid toolkit.

Coordinates, directions and the flat-buffer Grid / Grid3D containers that
every search routine and puzzle solution builds on.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Hashable, Iterable, Iterator, Sequence, TypeVar, overload

T = TypeVar("T")
U = TypeVar("U")


class Direction(Enum):
    """Cardinal direction for stepping on a grid."""

    UP = "U"  # Decreasing y
    DOWN = "D"  # Increasing y
    LEFT = "L"  # Decreasing x
    RIGHT = "R"  # Increasing x

    def opposite(self) -> Direction:
        return _OPPOSITE[self]

    def turn(self, turn: Turn) -> Direction:
        """Rotate a quarter turn. Four turns the same way return to self."""
        index = _CLOCKWISE_ORDER.index(self)
        step = 1 if turn is Turn.CLOCKWISE else -1
        return _CLOCKWISE_ORDER[(index + step) % 4]

    @property
    def is_vertical(self) -> bool:
        return self in (Direction.UP, Direction.DOWN)

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]


class Turn(Enum):
    """Rotation applied to a Direction."""

    CLOCKWISE = "R"
    COUNTERCLOCKWISE = "L"


_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_CLOCKWISE_ORDER = (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT)

_DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

# Scan order used when a caller does not care about direction priority
ALL_DIRECTIONS: tuple[Direction, ...] = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


# =============================================================================
# Coordinates
# =============================================================================


@dataclass(frozen=True)
class Coord:
    """
    A non-negative (x, y) position.

    Stepping below zero on either axis yields None instead of a coordinate.
    Stepping right or down always succeeds; the grid decides whether the
    result is in bounds.
    """

    x: int
    y: int

    def up(self) -> Coord | None:
        return None if self.y == 0 else Coord(self.x, self.y - 1)

    def down(self) -> Coord | None:
        return Coord(self.x, self.y + 1)

    def left(self) -> Coord | None:
        return None if self.x == 0 else Coord(self.x - 1, self.y)

    def right(self) -> Coord | None:
        return Coord(self.x + 1, self.y)

    def at_dir(self, direction: Direction) -> Coord | None:
        match direction:
            case Direction.UP:
                return self.up()
            case Direction.DOWN:
                return self.down()
            case Direction.LEFT:
                return self.left()
            case Direction.RIGHT:
                return self.right()
        raise ValueError(f"Unknown direction: {direction}")

    def manhattan_distance(self, other: Coord) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)


@dataclass(frozen=True)
class Coord3D:
    """A non-negative (x, y, z) position."""

    x: int
    y: int
    z: int

    def neighbors(self) -> Iterator[Coord3D]:
        """Face-adjacent positions that stay non-negative."""
        x, y, z = self.x, self.y, self.z
        if x > 0:
            yield Coord3D(x - 1, y, z)
        yield Coord3D(x + 1, y, z)
        if y > 0:
            yield Coord3D(x, y - 1, z)
        yield Coord3D(x, y + 1, z)
        if z > 0:
            yield Coord3D(x, y, z - 1)
        yield Coord3D(x, y, z + 1)


# =============================================================================
# Views and iterators
# =============================================================================


class RowView(Sequence[T]):
    """Zero-copy view of one grid row."""

    __slots__ = ("_cells", "_start", "_width")

    def __init__(self, cells: list[T], start: int, width: int) -> None:
        self._cells = cells
        self._start = start
        self._width = width

    def __len__(self) -> int:
        return self._width

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index: int | slice) -> T | list[T]:
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(self._width))]
        if index < 0:
            index += self._width
        if not 0 <= index < self._width:
            raise IndexError(f"row index {index} out of range for width {self._width}")
        return self._cells[self._start + index]

    def __iter__(self) -> Iterator[T]:
        cells = self._cells
        for i in range(self._start, self._start + self._width):
            yield cells[i]

    def __repr__(self) -> str:
        return f"RowView({list(self)!r})"


class ColumnIter(Generic[T]):
    """
    Lazy iterator over one grid column, consumable from both ends.

    Forward iteration (``next``) walks top to bottom, ``next_back`` walks
    bottom to top. The two cursors meet in the middle: together they yield
    each cell exactly once.
    """

    __slots__ = ("_grid", "column", "_front", "_back")

    def __init__(self, grid: Grid[T], column: int) -> None:
        self._grid = grid
        self.column = column
        self._front = 0
        self._back = grid.height

    def __iter__(self) -> ColumnIter[T]:
        return self

    def __next__(self) -> T:
        if self._front == self._back:
            raise StopIteration
        value = self._grid.get_unchecked(self.column, self._front)
        self._front += 1
        return value

    def next_back(self) -> T | None:
        """Take the bottom-most remaining cell, or None once exhausted."""
        if self._front == self._back:
            return None
        self._back -= 1
        return self._grid.get_unchecked(self.column, self._back)

    def __reversed__(self) -> Iterator[T]:
        while self._front != self._back:
            self._back -= 1
            yield self._grid.get_unchecked(self.column, self._back)

    def __len__(self) -> int:
        return self._back - self._front

    def __repr__(self) -> str:
        return f"ColumnIter(column={self.column}, front={self._front}, back={self._back})"


# =============================================================================
# Grid
# =============================================================================


class Grid(Generic[T]):
    """
    A rectangular grid backed by one flat row-major list.

    Cell (x, y) lives at index ``y * width + x``.
    """

    __slots__ = ("width", "height", "cells")

    def __init__(self, width: int, height: int, cells: list[T]) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {width}x{height}")
        if len(cells) != width * height:
            raise ValueError(
                f"Cell count does not match grid size\n"
                f"  Expected: {width} x {height} = {width * height} cells\n"
                f"  Got: {len(cells)} cells"
            )
        self.width = width
        self.height = height
        self.cells = cells

    @classmethod
    def filled(cls, width: int, height: int, value: T) -> Grid[T]:
        return cls(width, height, [value] * (width * height))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[T]]) -> Grid[T]:
        """Build a grid from equally sized rows."""
        if not rows:
            return cls(0, 0, [])
        width = len(rows[0])
        cells: list[T] = []
        for row_idx, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(
                    f"Inconsistent row lengths\n"
                    f"  Expected: {width} columns (from row 0)\n"
                    f"  Row {row_idx}: {len(row)} columns"
                )
            cells.extend(row)
        return cls(width, len(rows), cells)

    # -- access ---------------------------------------------------------------

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> T | None:
        if not self.in_bounds(x, y):
            return None
        return self.cells[y * self.width + x]

    def get_unchecked(self, x: int, y: int) -> T:
        # Caller guarantees (x, y) is in bounds
        return self.cells[y * self.width + x]

    def get_coord(self, coord: Coord) -> T | None:
        return self.get(coord.x, coord.y)

    def set(self, x: int, y: int, value: T) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside the {self.width}x{self.height} grid")
        self.cells[y * self.width + x] = value

    def set_unchecked(self, x: int, y: int, value: T) -> None:
        self.cells[y * self.width + x] = value

    def set_coord(self, coord: Coord, value: T) -> None:
        self.set(coord.x, coord.y, value)

    # -- iteration ------------------------------------------------------------

    def row(self, y: int) -> RowView[T]:
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} out of range for height {self.height}")
        return RowView(self.cells, y * self.width, self.width)

    def rows(self) -> Iterator[RowView[T]]:
        for y in range(self.height):
            yield RowView(self.cells, y * self.width, self.width)

    def column(self, x: int) -> ColumnIter[T]:
        if not 0 <= x < self.width:
            raise IndexError(f"column {x} out of range for width {self.width}")
        return ColumnIter(self, x)

    def columns(self) -> Iterator[ColumnIter[T]]:
        for x in range(self.width):
            yield ColumnIter(self, x)

    def coords(self) -> Iterator[Coord]:
        """All coordinates in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield Coord(x, y)

    def find_coord(self, predicate: Callable[[T], bool]) -> Coord | None:
        for index, cell in enumerate(self.cells):
            if predicate(cell):
                y, x = divmod(index, self.width)
                return Coord(x, y)
        return None

    def neighbors(
        self, coord: Coord, directions: Iterable[Direction] = ALL_DIRECTIONS
    ) -> list[tuple[Direction, Coord]]:
        """In-bounds neighbours of ``coord``, in the order of ``directions``."""
        result: list[tuple[Direction, Coord]] = []
        for direction in directions:
            target = coord.at_dir(direction)
            if target is not None and target.x < self.width and target.y < self.height:
                result.append((direction, target))
        return result

    # -- whole-grid helpers -----------------------------------------------------

    def count(self, predicate: Callable[[T], bool]) -> int:
        return sum(1 for cell in self.cells if predicate(cell))

    def map(self, fn: Callable[[T], U]) -> Grid[U]:
        return Grid(self.width, self.height, [fn(cell) for cell in self.cells])

    def copy(self) -> Grid[T]:
        return Grid(self.width, self.height, list(self.cells))

    def extend_rows(self, count: int, value: T) -> None:
        """Append ``count`` rows filled with ``value`` below the last row."""
        self.cells.extend([value] * (count * self.width))
        self.height += count

    def fingerprint(self) -> Hashable:
        """Hashable snapshot of the cell contents."""
        return (self.width, self.height, tuple(self.cells))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.width == other.width and self.height == other.height and self.cells == other.cells

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height})"


class Grid3D(Generic[T]):
    """A cuboid grid backed by one flat list, index ``z*W*H + y*W + x``."""

    __slots__ = ("width", "height", "depth", "cells")

    def __init__(self, width: int, height: int, depth: int, cells: list[T]) -> None:
        if len(cells) != width * height * depth:
            raise ValueError(
                f"Cell count does not match grid size\n"
                f"  Expected: {width} x {height} x {depth} = {width * height * depth} cells\n"
                f"  Got: {len(cells)} cells"
            )
        self.width = width
        self.height = height
        self.depth = depth
        self.cells = cells

    @classmethod
    def filled(cls, width: int, height: int, depth: int, value: T) -> Grid3D[T]:
        return cls(width, height, depth, [value] * (width * height * depth))

    def in_bounds(self, coord: Coord3D) -> bool:
        return (
            0 <= coord.x < self.width
            and 0 <= coord.y < self.height
            and 0 <= coord.z < self.depth
        )

    def _index(self, coord: Coord3D) -> int:
        return (coord.z * self.height + coord.y) * self.width + coord.x

    def get(self, coord: Coord3D) -> T | None:
        if not self.in_bounds(coord):
            return None
        return self.cells[self._index(coord)]

    def get_unchecked(self, coord: Coord3D) -> T:
        return self.cells[self._index(coord)]

    def set_unchecked(self, coord: Coord3D, value: T) -> None:
        self.cells[self._index(coord)] = value
