"""Turn engine resolving a single player's turn."""

import logging
from collections.abc import Sequence

from skeletonkeys.bots.base_bot import BaseBot
from skeletonkeys.config import Settings
from skeletonkeys.config import settings as default_settings
from skeletonkeys.models.challenge import challenge_digest, find_match
from skeletonkeys.models.enums import TurnResult
from skeletonkeys.models.player import Player
from skeletonkeys.models.turn import TurnOutcome
from skeletonkeys.models.word_pool import WordPool
from skeletonkeys.services.notifier import Notifier, NullNotifier

logger = logging.getLogger(__name__)


class TurnEngine:
    """Resolves turns: ask an opponent for a hashed word, then settle the result.

    A turn goes through these steps:
    1. Preconditions: an eliminated player, an empty hand or a missing
       opponent turns the turn into a skip. Nothing is drawn or lost.
    2. The bot picks a word from the active hand and an opponent.
    3. The word is hashed with the game seed and the opponent's hand is
       searched for a word with the same digest.
    4. On a match the word moves over; a resulting pair is cashed in for a key.
       On a miss the player draws one word, if any, and loses a key.
    """

    def __init__(
        self,
        seed: str,
        bot: BaseBot,
        notifier: Notifier | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            seed: Game seed shared by every challenge
            bot: Strategy choosing the wanted word and the opponent
            notifier: Receives narration for each turn
            settings: Game settings (module defaults when omitted)

        """
        self.seed = seed
        self.bot = bot
        self.notifier = notifier or NullNotifier()
        self.settings = settings or default_settings

    def digest(self, word: str) -> str:
        """Challenge digest of a word under this game's seed."""
        return challenge_digest(word, self.seed, self.settings.challenge_algorithm)

    def take_turn(
        self, active: Player, players: Sequence[Player], pool: WordPool
    ) -> TurnOutcome:
        """Play one turn for the active player.

        Args:
            active: Player taking the turn
            players: Everyone in the game; eliminated players are never asked
            pool: Word pool to draw from on a miss

        Returns:
            The resolved turn

        """
        keys_before = active.skeleton_keys

        if active.is_eliminated():
            return self._skip(active, TurnResult.SKIPPED_ELIMINATED)
        if active.hand.is_empty():
            self.notifier.notify(f"{active.name} has no words left and passes.")
            return self._skip(active, TurnResult.SKIPPED_EMPTY_HAND)

        opponents = [p for p in players if p.id != active.id and not p.is_eliminated()]
        if not opponents:
            return self._skip(active, TurnResult.SKIPPED_NO_OPPONENT)

        wanted = self.bot.choose_word(active)
        opponent = self.bot.choose_opponent(active, opponents)
        digest = self.digest(wanted)

        self.notifier.notify(
            f"{active.name} asks {opponent.name} for {self._short(digest)}."
        )

        matched = find_match(
            opponent.hand, self.seed, digest, self.settings.challenge_algorithm
        )
        if matched is not None:
            return self._resolve_match(active, opponent, matched, digest, keys_before)
        return self._resolve_miss(active, opponent, pool, digest, keys_before)

    def _resolve_match(
        self, active: Player, opponent: Player, word: str, digest: str, keys_before: int
    ) -> TurnOutcome:
        opponent.hand.remove(word)
        active.hand.add(word)

        result = TurnResult.MATCH
        if active.hand.has_pair(word):
            removed = active.hand.cash_in(word)
            active.gain_key()
            result = TurnResult.PAIR
            logger.debug("%s cashed in %d copies", active.id, removed)
            self.notifier.notify(
                f"{opponent.name} hands it over. {active.name} completes a pair "
                f"and now holds {active.skeleton_keys} skeleton keys."
            )
        else:
            self.notifier.notify(f"{opponent.name} hands it over.")

        return TurnOutcome(
            player_id=active.id,
            result=result,
            opponent_id=opponent.id,
            digest=digest,
            received_word=word,
            keys_before=keys_before,
            keys_after=active.skeleton_keys,
        )

    def _resolve_miss(
        self, active: Player, opponent: Player, pool: WordPool, digest: str, keys_before: int
    ) -> TurnOutcome:
        drawn = pool.draw()
        if drawn is not None:
            active.hand.add(drawn)
        # The penalty applies even when the pile is empty
        active.lose_key()

        drew_text = "draws a word" if drawn is not None else "finds the pile empty"
        self.notifier.notify(
            f"{opponent.name} does not have it. {active.name} {drew_text} "
            f"and drops to {active.skeleton_keys} skeleton keys."
        )

        return TurnOutcome(
            player_id=active.id,
            result=TurnResult.NO_MATCH,
            opponent_id=opponent.id,
            digest=digest,
            drawn_word=drawn,
            keys_before=keys_before,
            keys_after=active.skeleton_keys,
        )

    def _skip(self, active: Player, result: TurnResult) -> TurnOutcome:
        logger.debug("Skipping turn for %s: %s", active.id, result.value)
        return TurnOutcome(
            player_id=active.id,
            result=result,
            keys_before=active.skeleton_keys,
            keys_after=active.skeleton_keys,
        )

    def _short(self, digest: str) -> str:
        return digest[: self.settings.digest_display_length]
