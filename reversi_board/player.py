"""Stone colours and the side to move."""

from __future__ import annotations

from enum import Enum


class Player(Enum):
    """The owner of a board cell, or NONE for an empty cell."""

    NONE = "none"
    BLACK = "black"
    WHITE = "white"

    def opponent(self) -> "Player":
        """Return the other side; an empty cell has no opponent."""
        if self is Player.BLACK:
            return Player.WHITE
        if self is Player.WHITE:
            return Player.BLACK
        raise ValueError("Player.NONE has no opponent")