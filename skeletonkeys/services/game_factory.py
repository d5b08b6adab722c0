"""Game setup: players, seed and the deal."""

import logging
import random
import uuid
from collections.abc import Sequence

from skeletonkeys.bots.base_bot import BaseBot
from skeletonkeys.bots.random_bot import RandomBot
from skeletonkeys.config import Settings
from skeletonkeys.config import settings as default_settings
from skeletonkeys.engine.game_loop import GameLoop, GameResult
from skeletonkeys.engine.turn_engine import TurnEngine
from skeletonkeys.models.game import Game
from skeletonkeys.models.hand import Hand
from skeletonkeys.models.player import Player
from skeletonkeys.models.word_pool import WordPool
from skeletonkeys.services.event_recorder import EventRecorder
from skeletonkeys.services.notifier import Notifier, NullNotifier
from skeletonkeys.services.word_source import WordSource

logger = logging.getLogger(__name__)


def make_rng(settings: Settings, rng: random.Random | None = None) -> random.Random:
    """Random source for a game, seeded from settings when not given."""
    if rng is not None:
        return rng
    return random.Random(settings.rng_seed)


def create_game(
    source: WordSource,
    player_names: Sequence[str],
    settings: Settings | None = None,
    rng: random.Random | None = None,
    game_id: str | None = None,
) -> Game:
    """Create a game and deal every player a full hand.

    Args:
        source: Supplies the candidate words and the seed
        player_names: Display names in turn order
        settings: Game settings (module defaults when omitted)
        rng: Random source for shuffling (seeded from settings when omitted)
        game_id: Identifier for the game (random when omitted)

    Returns:
        A game ready for its first turn

    Raises:
        ValueError: If the player list is invalid
        WordSourceError: If the word source is missing or malformed
        InsufficientWordsError: If the words cannot fill every hand

    """
    settings = settings or default_settings
    rng = make_rng(settings, rng)

    if not (settings.min_players <= len(player_names) <= settings.max_players):
        msg = f"Must have {settings.min_players}-{settings.max_players} players"
        raise ValueError(msg)
    if len(set(player_names)) != len(player_names):
        msg = "Player names must be unique"
        raise ValueError(msg)

    words = source.load_words()
    seed = source.choose_seed()

    pool = WordPool(words)
    hands = pool.deal(len(player_names), settings.hand_size, rng)

    game = Game(id=game_id or uuid.uuid4().hex[:8], seed=seed, pool=pool)
    for i, (name, hand) in enumerate(zip(player_names, hands, strict=True)):
        game.add_player(
            Player(
                id=f"player_{i}",
                name=name,
                hand=Hand(hand),
                skeleton_keys=settings.starting_keys,
                winning_keys=settings.winning_keys,
            )
        )

    logger.info(
        "Created game %s: %d players, %d words, %d left to draw",
        game.id,
        len(game.players),
        len(pool),
        pool.remaining,
    )
    return game


def play_game(
    source: WordSource,
    player_names: Sequence[str],
    settings: Settings | None = None,
    rng: random.Random | None = None,
    notifier: Notifier | None = None,
    recorder: EventRecorder | None = None,
    bot: BaseBot | None = None,
) -> GameResult:
    """Create a game and play it to the end with one shared random source."""
    settings = settings or default_settings
    rng = make_rng(settings, rng)
    notifier = notifier or NullNotifier()

    game = create_game(source, player_names, settings=settings, rng=rng)
    engine = TurnEngine(game.seed, bot or RandomBot(rng), notifier=notifier, settings=settings)
    loop = GameLoop(game, engine, notifier=notifier, recorder=recorder, settings=settings)
    return loop.run()
