"""Enums for game and turn states."""

from enum import Enum


class GameOutcome(str, Enum):
    """Game loop states."""

    ONGOING = "ONGOING"
    PLAYER_WON = "PLAYER_WON"
    DRAW = "DRAW"

    @property
    def is_terminal(self) -> bool:
        """Whether the loop stops in this state."""
        return self is not GameOutcome.ONGOING


class TurnResult(str, Enum):
    """How a single turn was resolved."""

    MATCH = "MATCH"
    PAIR = "PAIR"
    NO_MATCH = "NO_MATCH"
    SKIPPED_ELIMINATED = "SKIPPED_ELIMINATED"
    SKIPPED_EMPTY_HAND = "SKIPPED_EMPTY_HAND"
    SKIPPED_NO_OPPONENT = "SKIPPED_NO_OPPONENT"

    @property
    def is_skip(self) -> bool:
        """Whether the turn was a no-op."""
        return self.value.startswith("SKIPPED")


class DrawReason(str, Enum):
    """Why a game ended without a winner."""

    ALL_ELIMINATED = "ALL_ELIMINATED"
    MAX_TURNS = "MAX_TURNS"
    STALEMATE = "STALEMATE"
