"""Tests for game setup and full simulated games."""

import logging
import random

import pytest
from hypothesis import given
from hypothesis import settings as hypothesis_settings
from hypothesis import strategies as st

from conftest import SEEDS, WORDS
from skeletonkeys.models.enums import GameOutcome, TurnResult
from skeletonkeys.models.errors import InsufficientWordsError, WordSourceError
from skeletonkeys.models.game_event import GameEventType
from skeletonkeys.services.event_recorder import EventRecorder
from skeletonkeys.services.game_factory import create_game, play_game
from skeletonkeys.services.notifier import CollectingNotifier
from skeletonkeys.services.word_source import StaticWordSource


@pytest.fixture
def source():
    return StaticWordSource(WORDS, SEEDS, rng=random.Random(0))


class TestCreateGame:
    """Building a dealt game."""

    def test_players_get_full_hands(self, source, test_settings, rng):
        game = create_game(source, ["Ann", "Ben", "Cid"], settings=test_settings, rng=rng)

        assert [p.name for p in game.players] == ["Ann", "Ben", "Cid"]
        assert all(len(p.hand) == test_settings.hand_size for p in game.players)
        assert all(p.skeleton_keys == 2 for p in game.players)
        assert game.pool.remaining == len(WORDS) - 3 * test_settings.hand_size
        assert game.seed in SEEDS

    def test_scenario_exact_pool(self, test_settings, rng):
        words = list("abcdefghij")
        game = create_game(StaticWordSource(words, ["s"]), ["P1", "P2"], settings=test_settings, rng=rng)

        assert [len(p.hand) for p in game.players] == [5, 5]
        assert game.pool.remaining == 0

    def test_custom_game_id(self, source, test_settings, rng):
        game = create_game(source, ["Ann", "Ben"], settings=test_settings, rng=rng, game_id="g42")

        assert game.id == "g42"

    @pytest.mark.parametrize("names", [["Solo"], [f"P{i}" for i in range(9)]])
    def test_player_count_checked(self, source, test_settings, names):
        with pytest.raises(ValueError, match="players"):
            create_game(source, names, settings=test_settings)

    def test_duplicate_names_rejected(self, source, test_settings):
        with pytest.raises(ValueError, match="unique"):
            create_game(source, ["Ann", "Ann"], settings=test_settings)

    def test_insufficient_words(self, test_settings):
        small = StaticWordSource(["a", "b", "c"], ["s"])

        with pytest.raises(InsufficientWordsError):
            create_game(small, ["Ann", "Ben"], settings=test_settings)

    def test_broken_source_surfaces(self, test_settings):
        with pytest.raises(WordSourceError):
            create_game(StaticWordSource([], ["s"]), ["Ann", "Ben"], settings=test_settings)

    def test_creation_logged(self, source, test_settings, caplog):
        with caplog.at_level(logging.INFO, logger="skeletonkeys"):
            game = create_game(source, ["Ann", "Ben"], settings=test_settings)

        assert f"Created game {game.id}" in caplog.text


class TestPlayGame:
    """Complete seeded games."""

    def test_game_finishes(self, test_settings):
        source = StaticWordSource(WORDS, SEEDS, rng=random.Random(1))

        result = play_game(source, ["Ann", "Ben", "Cid"], settings=test_settings, rng=random.Random(1))

        assert result.outcome in (GameOutcome.PLAYER_WON, GameOutcome.DRAW)
        assert result.turns_played <= test_settings.max_turns
        if result.outcome is GameOutcome.PLAYER_WON:
            assert result.winner is not None

    def test_same_seed_same_game(self, test_settings):
        def run():
            recorder = EventRecorder()
            result = play_game(
                StaticWordSource(WORDS, SEEDS, rng=random.Random(5)),
                ["Ann", "Ben", "Cid"],
                settings=test_settings,
                rng=random.Random(5),
                recorder=recorder,
            )
            return [(e.event_type, e.player_id, e.data.get("digest")) for e in result.history.events]

        assert run() == run()

    def test_narration_hides_words(self, test_settings):
        notifier = CollectingNotifier()

        play_game(
            StaticWordSource(WORDS, SEEDS, rng=random.Random(2)),
            ["Ann", "Ben"],
            settings=test_settings,
            rng=random.Random(2),
            notifier=notifier,
        )

        text = "\n".join(notifier.messages)
        assert notifier.messages[0].startswith("A new game begins")
        assert not any(word in text for word in WORDS)


class TestGameProperties:
    """Invariants over many random games."""

    @given(rng_seed=st.integers(0, 100_000), num_players=st.integers(2, 4))
    @hypothesis_settings(max_examples=40, deadline=None)
    def test_keys_bounded_and_timeline_consistent(self, rng_seed: int, num_players: int) -> None:
        recorder = EventRecorder()
        names = [f"P{i}" for i in range(num_players)]

        result = play_game(
            StaticWordSource(WORDS, SEEDS, rng=random.Random(rng_seed)),
            names,
            rng=random.Random(rng_seed),
            recorder=recorder,
        )

        events = result.history.events
        assert events[0].event_type is GameEventType.GAME_STARTED
        assert events[-1].event_type is GameEventType.GAME_ENDED

        eliminated: set[str] = set()
        for event in events:
            if event.event_type is GameEventType.PLAYER_ELIMINATED:
                eliminated.add(event.player_id)
            if event.event_type is not GameEventType.TURN_TAKEN:
                continue
            assert event.player_id not in eliminated
            assert 0 <= event.data["keys_after"] <= 3
            delta = event.data["keys_after"] - event.data["keys_before"]
            expected = {
                TurnResult.PAIR.value: 1,
                TurnResult.NO_MATCH.value: -1,
            }.get(event.data["result"], 0)
            assert delta == expected

        if result.outcome is GameOutcome.PLAYER_WON:
            assert result.winner.id not in eliminated
