"""Base class for all bot strategies."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from skeletonkeys.models.player import Player


class BaseBot(ABC):
    """Abstract base class for bot strategies.

    The turn engine asks a bot two questions each turn: which word the
    active player wants, and which opponent to ask for it.
    """

    @abstractmethod
    def choose_word(self, player: Player) -> str:
        """Pick the word the player asks for.

        Args:
            player: Active player, whose hand is not empty

        Returns:
            The wanted word, normally one the player holds

        """

    @abstractmethod
    def choose_opponent(self, player: Player, opponents: Sequence[Player]) -> Player:
        """Pick the opponent to ask.

        Args:
            player: Active player
            opponents: Non-empty list of players still in the game, excluding the active one

        Returns:
            One of the opponents

        """

    def __str__(self) -> str:
        """Return string representation."""
        return self.__class__.__name__
