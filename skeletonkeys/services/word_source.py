"""Word sources supplying the candidate words and the game seed."""

import logging
import random
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from skeletonkeys.models.errors import WordSourceError

logger = logging.getLogger(__name__)


@runtime_checkable
class WordSource(Protocol):
    """Provides the words dealt in a game and the seed used to hash them."""

    def load_words(self) -> list[str]:
        """Return the ordered candidate words."""

    def choose_seed(self) -> str:
        """Return one seed for a new game."""


class StaticWordSource:
    """Word source backed by in-memory lists.

    Words and seeds are validated when loaded rather than when constructed,
    so a broken source surfaces when a game is set up.
    """

    def __init__(
        self,
        words: Sequence[str] | None,
        seeds: Sequence[str] | None,
        rng: random.Random | None = None,
    ) -> None:
        self._words = words
        self._seeds = seeds
        self.rng = rng or random.Random()

    def load_words(self) -> list[str]:
        """Return a copy of the words, stripped of surrounding whitespace.

        Raises:
            WordSourceError: If the list is missing, empty or holds non-words

        """
        if not self._words:
            msg = "Word source has no words"
            raise WordSourceError(msg)

        words = []
        for position, word in enumerate(self._words):
            if not isinstance(word, str) or not word.strip():
                msg = f"Invalid word at position {position}: {word!r}"
                raise WordSourceError(msg)
            words.append(word.strip())

        logger.debug("Loaded %d words", len(words))
        return words

    def choose_seed(self) -> str:
        """Pick one seed at random.

        Raises:
            WordSourceError: If no usable seed exists

        """
        seeds = [s for s in self._seeds or () if isinstance(s, str) and s]
        if not seeds:
            msg = "Word source has no seeds"
            raise WordSourceError(msg)
        return self.rng.choice(seeds)
