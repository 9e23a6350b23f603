from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from loguru import logger

from .exceptions import GameOver
from .player import Player
from .state import GameState
from .types import Piece, PieceColor, Position


@dataclass(slots=True)
class Game:
    """One match between two players.

    The only mutable object in the engine. Not safe for concurrent use: a
    caller must finish a move (including any capture chain) before sending
    the next one.
    """

    black_player: Player
    red_player: Player
    current_state: GameState = field(init=False)
    black_captures: int = field(default=0, init=False)
    red_captures: int = field(default=0, init=False)
    winner: Optional[Player] = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.current_state = GameState.initial()
        logger.info(
            f"New match: {self.black_player.name} (black) vs {self.red_player.name} (red)"
        )

    # --- Accessors ---
    def get_current_state(self) -> GameState:
        return self.current_state

    def get_black_player(self) -> Player:
        return self.black_player

    def get_red_player(self) -> Player:
        return self.red_player

    def get_black_captures(self) -> int:
        return self.black_captures

    def get_red_captures(self) -> int:
        return self.red_captures

    def get_winner(self) -> Optional[Player]:
        return self.winner

    def player_for(self, color: PieceColor) -> Player:
        return self.black_player if color is PieceColor.BLACK else self.red_player

    def current_player(self) -> Player:
        return self.player_for(self.current_state.current_color)

    # --- Turn sequencing ---
    def submit_move(self, piece: Piece, origin: Position, dest: Position) -> GameState:
        """Validate a move, let the current player confirm it, and advance the turn."""
        if self.winner is not None:
            raise GameOver(f"Match already won by {self.winner.name}")
        candidate = self.current_state.next(piece, origin, dest)
        chosen = self.current_player().choose_move(candidate)
        self.advance_turn(chosen)
        return chosen

    def advance_turn(self, new_state: GameState) -> None:
        if self.winner is not None:
            raise GameOver(f"Match already won by {self.winner.name}")
        old_board = self.current_state.board
        new_board = new_state.board

        red_lost = old_board.count(PieceColor.RED) - new_board.count(PieceColor.RED)
        black_lost = old_board.count(PieceColor.BLACK) - new_board.count(PieceColor.BLACK)
        if red_lost > 0:
            self.black_captures += red_lost
        if black_lost > 0:
            self.red_captures += black_lost

        self.current_state = new_state
        self.winner = self._detect_winner()
        if self.winner is not None:
            logger.info(
                f"{self.winner.name} wins ({self.black_captures} black captures, "
                f"{self.red_captures} red captures)"
            )

    def _detect_winner(self) -> Optional[Player]:
        board = self.current_state.board
        if board.count(PieceColor.BLACK) == 0:
            return self.red_player
        if board.count(PieceColor.RED) == 0:
            return self.black_player
        # a side that cannot move on its turn loses
        if not self.current_state.has_legal_move():
            return self.player_for(self.current_state.current_color.opponent())
        return None

    def reset_game(self) -> None:
        self.current_state = GameState.initial()
        self.black_captures = 0
        self.red_captures = 0
        self.winner = None
        logger.info("Match reset to the opening position")
