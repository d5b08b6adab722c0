"""Shared fixtures for Skeleton Keys tests."""

import random
from collections.abc import Sequence

import pytest

from skeletonkeys.bots.base_bot import BaseBot
from skeletonkeys.config import Settings
from skeletonkeys.models.game import Game
from skeletonkeys.models.hand import Hand
from skeletonkeys.models.player import Player
from skeletonkeys.models.word_pool import WordPool
from skeletonkeys.services.notifier import CollectingNotifier

BASE_WORDS = [
    "anchor", "barrel", "cutlass", "doubloon", "galleon", "harbor", "island",
    "jolly", "kraken", "lantern", "mast", "north", "oar", "parrot", "quarter",
    "rigging", "sextant", "tide", "umbra", "voyage",
]
# Every word appears twice so that pairs can be collected
WORDS = BASE_WORDS * 2
SEEDS = ["bone", "lock", "crypt"]


class ScriptedBot(BaseBot):
    """Bot with fixed choices that remembers what it was offered."""

    def __init__(self, word: str | None = None, opponent_id: str | None = None) -> None:
        self.word = word
        self.opponent_id = opponent_id
        self.offered: list[list[str]] = []

    def choose_word(self, player: Player) -> str:
        if self.word is not None:
            return self.word
        return player.hand.words[0]

    def choose_opponent(self, player: Player, opponents: Sequence[Player]) -> Player:
        self.offered.append([p.id for p in opponents])
        for opponent in opponents:
            if opponent.id == self.opponent_id:
                return opponent
        return opponents[0]


@pytest.fixture
def test_settings():
    """Settings that ignore any local .env file."""
    return Settings(_env_file=None, rng_seed=7)


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def notifier():
    """Notifier that keeps every message."""
    return CollectingNotifier()


@pytest.fixture
def make_player():
    """Factory for players with a given hand and key count."""

    def _make(player_id: str, words: Sequence[str] = (), keys: int = 2) -> Player:
        return Player(id=player_id, name=player_id.title(), hand=Hand(words), skeleton_keys=keys)

    return _make


@pytest.fixture
def make_game():
    """Factory for games with ready-made players and an explicit draw pile."""

    def _make(players: Sequence[Player], draw_pile: Sequence[str] = (), seed: str = "bone") -> Game:
        pool = WordPool(list(draw_pile))
        pool.draw_pile = list(draw_pile)
        game = Game(id="test_game", seed=seed, pool=pool)
        for player in players:
            game.add_player(player)
        return game

    return _make
