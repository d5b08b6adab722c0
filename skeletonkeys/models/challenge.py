"""Hash challenges used to ask for a word without naming it.

The digest only hides the word from turn announcements. The seed is shared
by every player, so anyone holding the word list can recover the plaintext.
"""

import hashlib
from collections.abc import Iterable

DEFAULT_ALGORITHM = "sha256"


def challenge_digest(word: str, seed: str, algorithm: str = DEFAULT_ALGORITHM) -> str:
    """Hex digest of a word combined with the game seed."""
    return hashlib.new(algorithm, f"{word}:{seed}".encode()).hexdigest()


def matches(word: str, seed: str, digest: str, algorithm: str = DEFAULT_ALGORITHM) -> bool:
    """Check whether a word answers a challenge digest."""
    return challenge_digest(word, seed, algorithm) == digest


def find_match(
    words: Iterable[str], seed: str, digest: str, algorithm: str = DEFAULT_ALGORITHM
) -> str | None:
    """Return the first word answering the digest, or None."""
    for word in words:
        if matches(word, seed, digest, algorithm):
            return word
    return None
