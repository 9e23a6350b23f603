import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from .types import BOARD_SIZE, PieceColor

load_dotenv()


@dataclass(slots=True)
class Config:
    # --- Constants (rules of the game, never read from the environment) ---
    BOARD_SIZE: int = BOARD_SIZE
    PIECE_ROWS: int = 3
    STARTING_COLOR: PieceColor = PieceColor.BLACK

    # Engine logging; the rules above do not depend on it
    LOGGING_ENABLED: bool = bool(int(os.getenv("CHECKERZ_LOGGING", 1)))

    # Derived (populated in __post_init__ due to slots)
    PIECES_PER_SIDE: int = field(default=0, init=False)

    def __post_init__(self):
        # two empty middle rows are needed for the sides to meet
        if self.PIECE_ROWS < 1 or 2 * self.PIECE_ROWS > self.BOARD_SIZE - 2:
            raise ValueError("PIECE_ROWS must be between 1 and 3")
        self.PIECES_PER_SIDE = self.PIECE_ROWS * self.BOARD_SIZE // 2


config = Config()
