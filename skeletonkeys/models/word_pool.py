"""Word pool for shuffling, dealing and drawing words."""

import random
from collections.abc import Sequence

from skeletonkeys.models.errors import InsufficientWordsError


class WordPool:
    """
    Represents the words in play.

    The source list never changes. Dealing shuffles a copy of it, hands out
    one slice per player and keeps the remainder as the draw pile, which
    only ever shrinks afterwards.
    """

    def __init__(self, words: Sequence[str]) -> None:
        """Initialize the pool from the candidate words."""
        self.words: tuple[str, ...] = tuple(words)
        self.draw_pile: list[str] = []
        self._dealt = False

    def deal(
        self, num_players: int, hand_size: int, rng: random.Random | None = None
    ) -> list[list[str]]:
        """
        Shuffle the words and deal hands to players.

        Args:
            num_players: Number of players to deal to
            hand_size: Number of words per player
            rng: Random source for the shuffle

        Returns:
            List of hands, one list of words per player

        Raises:
            InsufficientWordsError: If the pool cannot fill every hand

        """
        needed = num_players * hand_size
        if len(self.words) < needed:
            raise InsufficientWordsError(len(self.words), num_players, hand_size)

        shuffled = list(self.words)
        (rng or random.Random()).shuffle(shuffled)

        hands = [shuffled[i * hand_size : (i + 1) * hand_size] for i in range(num_players)]
        self.draw_pile = shuffled[needed:]
        self._dealt = True
        return hands

    def draw(self) -> str | None:
        """Take the next word from the draw pile, or None when exhausted."""
        if not self.draw_pile:
            return None
        return self.draw_pile.pop(0)

    @property
    def remaining(self) -> int:
        """Words left in the draw pile."""
        return len(self.draw_pile)

    @property
    def is_dealt(self) -> bool:
        """Check if hands have been dealt from this pool."""
        return self._dealt

    def __len__(self) -> int:
        return len(self.words)
