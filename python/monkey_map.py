"""
Following a path across a board with wrapping edges (2022 day 22).

The board is an irregular region of open tiles ``.`` and walls ``#``
surrounded by blank space. The path alternates step counts with turns
``R`` (clockwise) and ``L`` (counterclockwise). Walking off the region
warps to another edge cell:

1. Flat wrapping - to the far end of the same row or column
2. Cube wrapping - across a seam of the cube the region folds into

A step whose destination is a wall ends the current move.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Union

from grid_types import Coord, Direction, Grid, Turn

logger = logging.getLogger(__name__)

# A position and the direction being faced there
Warp = tuple[Coord, Direction]

# (face column, face row, side) glued to (face column, face row, side)
Seam = tuple[tuple[int, int, Direction], tuple[int, int, Direction]]

Move = Union[int, Turn]

_FACING_SCORE = {
    Direction.RIGHT: 0,
    Direction.DOWN: 1,
    Direction.LEFT: 2,
    Direction.UP: 3,
}

_PATH_TOKEN = re.compile(r"\d+|[LR]")

UP, DOWN, LEFT, RIGHT = Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT

# Cube net of the worked example: faces of size 4 laid out as
#   ..1.
#   234.
#   ..56
SAMPLE_CUBE_SEAMS: tuple[Seam, ...] = (
    ((2, 0, UP), (0, 1, UP)),
    ((2, 0, LEFT), (1, 1, UP)),
    ((2, 0, RIGHT), (3, 2, RIGHT)),
    ((0, 1, LEFT), (3, 2, DOWN)),
    ((0, 1, DOWN), (2, 2, DOWN)),
    ((1, 1, DOWN), (2, 2, LEFT)),
    ((2, 1, RIGHT), (3, 2, UP)),
)

# Cube net shared by the full-size puzzle inputs: faces of size 50 laid out as
#   .AB
#   .C.
#   DE.
#   F..
INPUT_CUBE_SEAMS: tuple[Seam, ...] = (
    ((1, 0, UP), (0, 3, LEFT)),
    ((1, 0, LEFT), (0, 2, LEFT)),
    ((2, 0, UP), (0, 3, DOWN)),
    ((2, 0, RIGHT), (1, 2, RIGHT)),
    ((2, 0, DOWN), (1, 1, RIGHT)),
    ((1, 1, LEFT), (0, 2, UP)),
    ((1, 2, DOWN), (0, 3, RIGHT)),
)


class Tile(Enum):
    VOID = " "
    OPEN = "."
    WALL = "#"


class MonkeyMapError(ValueError):
    """Raised for malformed boards or paths, or a cube net that does not close."""


@dataclass(frozen=True)
class Notes:
    board: Grid[Tile]
    path: list[Move]


def _tile(char: str, x: int, y: int) -> Tile:
    try:
        return Tile(char)
    except ValueError as exc:
        raise MonkeyMapError(
            f"Invalid board tile '{char}' at ({x}, {y})\n"
            f"  Valid characters: ' ', '.', '#'"
        ) from exc


def parse_board(text: str) -> Grid[Tile]:
    """Parse the board, padding short rows with blank space."""
    lines = [line.rstrip("\r") for line in text.split("\n")]
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        raise MonkeyMapError("Empty board")
    width = max(len(line) for line in lines)
    return Grid.from_rows(
        [[_tile(char, x, y) for x, char in enumerate(line.ljust(width))] for y, line in enumerate(lines)]
    )


def parse_path(text: str) -> list[Move]:
    """Split ``10R5L5`` into ``[10, CLOCKWISE, 5, COUNTERCLOCKWISE, 5]``."""
    text = text.strip()
    tokens = _PATH_TOKEN.findall(text)
    if not tokens or "".join(tokens) != text:
        raise MonkeyMapError(
            f"Invalid path '{text}'\n"
            f"  Expected step counts separated by 'L' or 'R'"
        )
    return [int(token) if token.isdecimal() else Turn(token) for token in tokens]


def parse_notes(text: str) -> Notes:
    board_text, separator, path_text = text.partition("\n\n")
    if not separator:
        raise MonkeyMapError("Expected the board and the path separated by a blank line")
    return Notes(parse_board(board_text), parse_path(path_text))


def _is_void(board: Grid[Tile], pos: Coord | None) -> bool:
    if pos is None:
        return True
    tile = board.get(pos.x, pos.y)
    return tile is None or tile is Tile.VOID


def flat_warps(board: Grid[Tile]) -> dict[Warp, Warp]:
    """Warps that wrap each row and column of the region onto itself."""
    warps: dict[Warp, Warp] = {}
    for y, row in enumerate(board.rows()):
        filled = [x for x, tile in enumerate(row) if tile is not Tile.VOID]
        if filled:
            left, right = Coord(filled[0], y), Coord(filled[-1], y)
            warps[(right, RIGHT)] = (left, RIGHT)
            warps[(left, LEFT)] = (right, LEFT)
    for x, column in enumerate(board.columns()):
        filled = [y for y, tile in enumerate(column) if tile is not Tile.VOID]
        if filled:
            top, bottom = Coord(x, filled[0]), Coord(x, filled[-1])
            warps[(bottom, DOWN)] = (top, DOWN)
            warps[(top, UP)] = (bottom, UP)
    return warps


def _edge_cells(face: tuple[int, int], side: Direction, size: int) -> list[Coord]:
    """Cells along one side of a face, listed clockwise around the face."""
    x0, y0 = face[0] * size, face[1] * size
    last = size - 1
    match side:
        case Direction.UP:
            return [Coord(x0 + i, y0) for i in range(size)]
        case Direction.RIGHT:
            return [Coord(x0 + last, y0 + i) for i in range(size)]
        case Direction.DOWN:
            return [Coord(x0 + last - i, y0 + last) for i in range(size)]
        case Direction.LEFT:
            return [Coord(x0, y0 + last - i) for i in range(size)]
    raise ValueError(f"Unknown direction: {side}")


def cube_warps(board: Grid[Tile], size: int, seams: Sequence[Seam]) -> dict[Warp, Warp]:
    """
    Warps that fold the region into a cube with faces of ``size`` cells.

    Each seam glues one face side to another. Walking clockwise along one
    side of a seam runs counterclockwise along the other, so cell ``i`` of one
    edge meets cell ``size - 1 - i`` of the other.

    Raises:
        MonkeyMapError: If a seam names a missing face, or some edge of the
            region is left without a seam
    """
    warps: dict[Warp, Warp] = {}
    for (ax, ay, a_side), (bx, by, b_side) in seams:
        for face in ((ax, ay), (bx, by)):
            if _is_void(board, Coord(face[0] * size, face[1] * size)):
                raise MonkeyMapError(f"Seam refers to face {face}, which is not on the board")
        a_cells = _edge_cells((ax, ay), a_side, size)
        b_cells = list(reversed(_edge_cells((bx, by), b_side, size)))
        for a, b in zip(a_cells, b_cells):
            warps[(a, a_side)] = (b, b_side.opposite())
            warps[(b, b_side)] = (a, a_side.opposite())

    for pos in board.coords():
        if _is_void(board, pos):
            continue
        for direction in (UP, DOWN, LEFT, RIGHT):
            if _is_void(board, pos.at_dir(direction)) and (pos, direction) not in warps:
                raise MonkeyMapError(
                    f"Cube net does not close\n"
                    f"  Leaving ({pos.x}, {pos.y}) heading {direction.name} crosses no seam"
                )
    logger.debug("monkey_map: %d cube warps from %d seams", len(warps), len(seams))
    return warps


class Walker:
    """Position and facing on the board, moved by path instructions."""

    def __init__(self, board: Grid[Tile], warps: dict[Warp, Warp]) -> None:
        start_x = next((x for x, tile in enumerate(board.row(0)) if tile is Tile.OPEN), None)
        if start_x is None:
            raise MonkeyMapError("No open tile on the top row to start from")
        self.board = board
        self.warps = warps
        self.pos = Coord(start_x, 0)
        self.facing = RIGHT

    def _ahead(self) -> Warp:
        warp = self.warps.get((self.pos, self.facing))
        if warp is not None:
            return warp
        target = self.pos.at_dir(self.facing)
        if _is_void(self.board, target):
            raise MonkeyMapError(
                f"Walked off the board at ({self.pos.x}, {self.pos.y}) heading {self.facing.name}"
            )
        assert target is not None
        return (target, self.facing)

    def forward(self, steps: int) -> None:
        for _ in range(steps):
            pos, facing = self._ahead()
            if self.board.get_unchecked(pos.x, pos.y) is Tile.WALL:
                break
            self.pos, self.facing = pos, facing

    def turn(self, turn: Turn) -> None:
        self.facing = self.facing.turn(turn)

    def follow(self, path: Sequence[Move]) -> None:
        for move in path:
            if isinstance(move, Turn):
                self.turn(move)
            else:
                self.forward(move)

    @property
    def password(self) -> int:
        return 1000 * (self.pos.y + 1) + 4 * (self.pos.x + 1) + _FACING_SCORE[self.facing]


def flat_password(text: str) -> int:
    """Final password when edges wrap within their row or column."""
    notes = parse_notes(text)
    walker = Walker(notes.board, flat_warps(notes.board))
    walker.follow(notes.path)
    return walker.password


def cube_password(text: str, size: int = 50, seams: Sequence[Seam] = INPUT_CUBE_SEAMS) -> int:
    """Final password when the board is folded into a cube."""
    notes = parse_notes(text)
    walker = Walker(notes.board, cube_warps(notes.board, size, seams))
    walker.follow(notes.path)
    return walker.password
