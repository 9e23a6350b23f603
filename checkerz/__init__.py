from loguru import logger

from .board import Board, Square
from .config import config
from .exceptions import (
    CheckersError,
    GameOver,
    IllegalMove,
    MustContinueCapture,
    NotCurrentColor,
    OutOfBounds,
)
from .game import Game
from .player import Human, Player
from .state import GameState
from .types import Move, Piece, PieceColor, PieceRank, Position

if not config.LOGGING_ENABLED:
    logger.disable("checkerz")

__all__ = [
    "Board",
    "Square",
    "config",
    "CheckersError",
    "GameOver",
    "IllegalMove",
    "MustContinueCapture",
    "NotCurrentColor",
    "OutOfBounds",
    "Game",
    "Human",
    "Player",
    "GameState",
    "Move",
    "Piece",
    "PieceColor",
    "PieceRank",
    "Position",
]
