from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:  # avoid runtime import cycle with state
    from .state import GameState


class Player(Protocol):
    name: str

    def choose_move(self, candidate: "GameState") -> "GameState":
        ...


@dataclass(slots=True)
class Human:
    """A person at the board. The move was already validated by the caller,
    so the candidate state is simply confirmed."""

    name: str = "Human"

    def choose_move(self, candidate: "GameState") -> "GameState":
        return candidate
