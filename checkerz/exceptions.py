# Caller errors raised by the rules engine. None of them leave engine state changed.
class CheckersError(Exception):
    """Base exception for rejected engine requests."""

    pass


class OutOfBounds(CheckersError, IndexError):
    """Raised when a position lies outside the 8x8 grid."""

    pass


class NotCurrentColor(CheckersError):
    """Raised when a piece is moved out of turn."""

    pass


class IllegalMove(CheckersError, ValueError):
    """Raised when a destination is not among the legal moves of a piece."""

    pass


class MustContinueCapture(CheckersError):
    """Raised when another piece is moved while a capture chain is pending."""

    pass


class GameOver(CheckersError):
    """Raised when a turn is advanced after the match has been decided."""

    pass
