from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Optional

from loguru import logger

from .board import Board, check_bounds
from .config import config
from .exceptions import IllegalMove, MustContinueCapture, NotCurrentColor
from .types import Move, Piece, PieceColor, Position


@dataclass(frozen=True, slots=True)
class GameState:
    """Snapshot of a match: the board and whose move it is.

    ``chain_position`` is set while a multi-jump is unfinished. It names the
    square of the piece that just captured and still has a jump available;
    the same color keeps the move and only that piece may continue.
    """

    board: Board = field(default_factory=Board.standard)
    current_color: PieceColor = field(default_factory=lambda: config.STARTING_COLOR)
    chain_position: Optional[Position] = None

    @classmethod
    def initial(cls) -> "GameState":
        return cls(board=Board.standard(), current_color=config.STARTING_COLOR)

    def get_board(self) -> Board:
        return self.board

    def get_current_color(self) -> PieceColor:
        return self.current_color

    def is_chain_in_progress(self) -> bool:
        return self.chain_position is not None

    # --- Rules: legal moves for the side to move ---
    def legal_moves(self) -> List[Move]:
        origins = (
            [self.chain_position]
            if self.chain_position is not None
            else [pos for pos, _ in self.board.pieces(self.current_color)]
        )
        moves: List[Move] = []
        for origin in origins:
            piece = self.board.get_piece_at(origin)
            for dest in sorted(
                self.board.available_moves(origin), key=lambda p: (p.row, p.col)
            ):
                moves.append(Move(piece=piece, origin=origin, destination=dest))
        return moves

    def has_legal_move(self) -> bool:
        if self.chain_position is not None:
            return bool(self.legal_moves())
        return self.board.has_legal_move(self.current_color)

    def successors(self) -> List["GameState"]:
        """Every state reachable with one legal move or jump."""
        return [self.next(mv.piece, mv.origin, mv.destination) for mv in self.legal_moves()]

    # --- Transition ---
    def next(self, piece: Piece, origin: Position, dest: Position) -> "GameState":
        """Validate and apply one move or jump, returning the resulting state.

        Raises NotCurrentColor, MustContinueCapture, IllegalMove or OutOfBounds;
        ``self`` is never modified.
        """
        check_bounds(origin)
        check_bounds(dest)
        if piece.color is not self.current_color:
            logger.debug(
                f"Rejected {piece.color.name} move {origin}->{dest}: "
                f"{self.current_color.name} to play"
            )
            raise NotCurrentColor(
                f"It is {self.current_color.name}'s turn, not {piece.color.name}'s"
            )
        if self.chain_position is not None and origin != self.chain_position:
            logger.debug(
                f"Rejected move {origin}->{dest}: piece on {self.chain_position} must keep jumping"
            )
            raise MustContinueCapture(
                f"The piece on {self.chain_position} must continue capturing"
            )
        if dest not in self.board.available_moves(origin):
            logger.debug(f"Rejected move {origin}->{dest}: not a legal destination")
            raise IllegalMove(f"Cannot move from {origin} to {dest}")

        move = Move(piece=piece, origin=origin, destination=dest)
        new_board = self.board.apply_move(piece, origin, dest)
        if move.is_jump and new_board.capture_moves(dest):
            logger.debug(f"{piece.color.name} jumped {origin}->{dest}, chain continues")
            return replace(self, board=new_board, chain_position=dest)

        if move.is_jump:
            logger.debug(f"{piece.color.name} jumped {origin}->{dest}, turn ends")
        else:
            logger.debug(f"{piece.color.name} moved {origin}->{dest}")
        return GameState(
            board=new_board,
            current_color=self.current_color.opponent(),
            chain_position=None,
        )
