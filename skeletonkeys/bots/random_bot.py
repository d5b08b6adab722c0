"""Random bot that makes uniformly random choices."""

import random
from collections.abc import Sequence

from skeletonkeys.bots.base_bot import BaseBot
from skeletonkeys.models.player import Player


class RandomBot(BaseBot):
    """Bot that makes completely random decisions.

    All choices come from the injected random source so that a game can be
    replayed from its rng seed.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        """Initialize random bot."""
        self.rng = rng or random.Random()

    def choose_word(self, player: Player) -> str:
        """Pick a random word from the player's hand."""
        words = player.hand.words
        if not words:
            msg = f"{player.name} has no words to ask for"
            raise ValueError(msg)
        return self.rng.choice(words)

    def choose_opponent(self, player: Player, opponents: Sequence[Player]) -> Player:
        """Pick a random opponent."""
        candidates = [p for p in opponents if p.id != player.id]
        if not candidates:
            msg = f"No opponent available for {player.name}"
            raise ValueError(msg)
        return self.rng.choice(candidates)
