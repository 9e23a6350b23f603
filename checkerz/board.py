from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Mapping, Optional, Tuple

import numpy as np
from loguru import logger

from .config import config
from .exceptions import IllegalMove, OutOfBounds
from .types import Piece, PieceColor, PieceRank, Position

Cells = Tuple[Tuple[Optional[Piece], ...], ...]

_DIAGONALS = ((1, -1), (1, 1), (-1, -1), (-1, 1))

# Cell codes for to_array(); 1 and 2 match the grid keys used by the Android view layer.
EMPTY_CODE = 0
_CODES = {
    (PieceColor.BLACK, PieceRank.MAN): 1,
    (PieceColor.RED, PieceRank.MAN): 2,
    (PieceColor.BLACK, PieceRank.KING): 3,
    (PieceColor.RED, PieceRank.KING): 4,
}


def check_bounds(pos: Position) -> None:
    if not pos.is_valid():
        raise OutOfBounds(f"Position ({pos.row}, {pos.col}) is off the board")


@dataclass(frozen=True, slots=True)
class Square:
    position: Position
    piece: Optional[Piece] = None

    def is_empty(self) -> bool:
        return self.piece is None


@dataclass(frozen=True, slots=True)
class Board:
    """Immutable 8x8 checkers board. Every transition returns a fresh Board."""

    cells: Cells

    def __post_init__(self) -> None:
        size = config.BOARD_SIZE
        if len(self.cells) != size or any(len(r) != size for r in self.cells):
            raise ValueError(f"Board must be {size}x{size}")
        for r, row in enumerate(self.cells):
            for c, piece in enumerate(row):
                if piece is not None and not Position(r, c).is_playable():
                    raise IllegalMove(f"Piece placed on unplayable square {r}{c}")

    # --- Construction ---
    @classmethod
    def empty(cls) -> "Board":
        return cls(cells=tuple((None,) * config.BOARD_SIZE for _ in range(config.BOARD_SIZE)))

    @classmethod
    def from_pieces(cls, pieces: Mapping[Position, Piece]) -> "Board":
        grid = [[None] * config.BOARD_SIZE for _ in range(config.BOARD_SIZE)]
        for pos, piece in pieces.items():
            check_bounds(pos)
            grid[pos.row][pos.col] = piece
        return cls(cells=tuple(tuple(row) for row in grid))

    @classmethod
    def standard(cls) -> "Board":
        """Opening layout: men on the dark squares of the three rows facing each side."""
        size = config.BOARD_SIZE
        pieces: dict[Position, Piece] = {}
        for row in range(size):
            if row < config.PIECE_ROWS:
                color = PieceColor.BLACK
            elif row >= size - config.PIECE_ROWS:
                color = PieceColor.RED
            else:
                continue
            for col in range(size):
                pos = Position(row, col)
                if pos.is_playable():
                    pieces[pos] = Piece(color)
        return cls.from_pieces(pieces)

    def with_piece(self, pos: Position, piece: Optional[Piece]) -> "Board":
        """Copy of this board with `pos` set to `piece` (None clears it)."""
        check_bounds(pos)
        grid = [list(row) for row in self.cells]
        grid[pos.row][pos.col] = piece
        return Board(cells=tuple(tuple(row) for row in grid))

    # --- Queries ---
    def get_piece_at(self, pos: Position) -> Optional[Piece]:
        check_bounds(pos)
        return self.cells[pos.row][pos.col]

    def get_square(self, pos: Position) -> Square:
        return Square(position=pos, piece=self.get_piece_at(pos))

    def get_grid(self) -> Tuple[Tuple[Square, ...], ...]:
        size = config.BOARD_SIZE
        return tuple(
            tuple(self.get_square(Position(r, c)) for c in range(size))
            for r in range(size)
        )

    def pieces(self, color: PieceColor | None = None) -> Iterator[tuple[Position, Piece]]:
        for r, row in enumerate(self.cells):
            for c, piece in enumerate(row):
                if piece is not None and (color is None or piece.color is color):
                    yield Position(r, c), piece

    def count(self, color: PieceColor) -> int:
        return sum(1 for _ in self.pieces(color))

    def _occupant(self, pos: Position) -> Optional[Piece]:
        return self.cells[pos.row][pos.col] if pos.is_valid() else None

    # --- Move generation ---
    def simple_moves(self, pos: Position) -> frozenset[Position]:
        """One-step diagonal moves onto empty squares, ignoring mandatory capture."""
        piece = self.get_piece_at(pos)
        if piece is None:
            return frozenset()
        out = set()
        for dr, dc in piece.directions():
            dest = pos.offset(dr, dc)
            if dest.is_valid() and self._occupant(dest) is None:
                out.add(dest)
        return frozenset(out)

    def capture_moves(self, pos: Position) -> frozenset[Position]:
        """Jump landings for the piece at `pos`. Men may capture backwards too."""
        piece = self.get_piece_at(pos)
        if piece is None:
            return frozenset()
        out = set()
        for dr, dc in _DIAGONALS:
            over = pos.offset(dr, dc)
            land = pos.offset(2 * dr, 2 * dc)
            if not land.is_valid():
                continue
            victim = self._occupant(over)
            if (
                victim is not None
                and victim.color is not piece.color
                and self._occupant(land) is None
            ):
                out.add(land)
        return frozenset(out)

    def has_capture(self, color: PieceColor) -> bool:
        return any(self.capture_moves(pos) for pos, _ in self.pieces(color))

    def available_moves(self, pos: Position) -> frozenset[Position]:
        """Legal destinations for the piece at `pos`, with capture made mandatory board-wide."""
        piece = self.get_piece_at(pos)
        if piece is None:
            return frozenset()
        if self.has_capture(piece.color):
            return self.capture_moves(pos)
        return self.simple_moves(pos)

    # kept under the name the presentation layer used
    get_available_moves = available_moves

    def movable_positions(self, color: PieceColor) -> list[Position]:
        return [pos for pos, _ in self.pieces(color) if self.available_moves(pos)]

    def has_legal_move(self, color: PieceColor) -> bool:
        return bool(self.movable_positions(color))

    @staticmethod
    def is_jump(origin: Position, dest: Position) -> bool:
        return abs(dest.row - origin.row) == 2 and abs(dest.col - origin.col) == 2

    # --- Transition ---
    def apply_move(self, piece: Piece, origin: Position, dest: Position) -> "Board":
        check_bounds(origin)
        check_bounds(dest)
        if self.get_piece_at(origin) != piece:
            logger.debug(f"Rejected move {origin}->{dest}: {piece} is not on {origin}")
            raise IllegalMove(f"{piece} is not on square {origin}")
        if dest not in self.available_moves(origin):
            logger.debug(f"Rejected move {origin}->{dest}: not a legal destination")
            raise IllegalMove(f"Cannot move from {origin} to {dest}")

        grid = [list(row) for row in self.cells]
        grid[origin.row][origin.col] = None
        if self.is_jump(origin, dest):
            mid_row = (origin.row + dest.row) // 2
            mid_col = (origin.col + dest.col) // 2
            grid[mid_row][mid_col] = None
        moved = piece
        if not piece.is_king and dest.row == piece.color.back_rank:
            moved = piece.promoted()
        grid[dest.row][dest.col] = moved
        return Board(cells=tuple(tuple(row) for row in grid))

    # --- Rendering helpers ---
    def to_array(self) -> np.ndarray:
        """Return an (8, 8) int8 array of cell codes (0 empty, 1/2 black/red men, 3/4 kings)."""
        arr = np.full((config.BOARD_SIZE, config.BOARD_SIZE), EMPTY_CODE, dtype=np.int8)
        for pos, piece in self.pieces():
            arr[pos.row, pos.col] = _CODES[(piece.color, piece.rank)]
        return arr
