from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

BOARD_SIZE = 8


class PieceColor(IntEnum):
    BLACK = 0
    RED = 1

    def opponent(self) -> "PieceColor":
        return PieceColor.RED if self is PieceColor.BLACK else PieceColor.BLACK

    @property
    def forward(self) -> int:
        """Row delta of a man's advance (black starts at row 0 and moves down)."""
        return 1 if self is PieceColor.BLACK else -1

    @property
    def back_rank(self) -> int:
        """Row on which a man of this color is crowned."""
        return BOARD_SIZE - 1 if self is PieceColor.BLACK else 0


class PieceRank(IntEnum):
    MAN = 0
    KING = 1


@dataclass(frozen=True, slots=True)
class Position:
    row: int
    col: int

    def is_valid(self) -> bool:
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE

    def is_playable(self) -> bool:
        # dark squares only
        return self.is_valid() and (self.row + self.col) % 2 == 1

    def offset(self, drow: int, dcol: int) -> "Position":
        return Position(self.row + drow, self.col + dcol)

    def __str__(self) -> str:
        return f"{self.row}{self.col}"


@dataclass(frozen=True, slots=True)
class Piece:
    """A checker. Promotion yields a new piece rather than mutating this one."""

    color: PieceColor
    rank: PieceRank = PieceRank.MAN

    @property
    def is_king(self) -> bool:
        return self.rank is PieceRank.KING

    def promoted(self) -> "Piece":
        return Piece(color=self.color, rank=PieceRank.KING)

    def directions(self) -> tuple[tuple[int, int], ...]:
        """Diagonal steps this piece may take without capturing."""
        if self.is_king:
            return ((1, -1), (1, 1), (-1, -1), (-1, 1))
        fwd = self.color.forward
        return ((fwd, -1), (fwd, 1))


@dataclass(frozen=True, slots=True)
class Move:
    piece: Piece
    origin: Position
    destination: Position

    @property
    def is_jump(self) -> bool:
        return abs(self.destination.row - self.origin.row) == 2
