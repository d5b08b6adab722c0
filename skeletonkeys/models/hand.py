"""Hand model: the words a player holds."""

from collections import Counter
from collections.abc import Iterable, Iterator


class Hand:
    """A mutable multiset of words.

    Duplicates are allowed so that two copies of the same word form a pair.
    Insertion order is kept so that random choices over the hand are
    reproducible for a seeded random source.
    """

    def __init__(self, words: Iterable[str] | None = None) -> None:
        """Initialize the hand, optionally with dealt words."""
        self._words: list[str] = list(words) if words is not None else []

    def deal(self, words: Iterable[str]) -> None:
        """Replace the hand with freshly dealt words."""
        self._words = list(words)

    def add(self, word: str) -> None:
        """Add a word to the hand."""
        self._words.append(word)

    def remove(self, word: str) -> bool:
        """Remove one copy of a word.

        Returns:
            False if the word was not in the hand (nothing changes)

        """
        if word not in self._words:
            return False
        self._words.remove(word)
        return True

    def count(self, word: str) -> int:
        """Number of copies of a word held."""
        return self._words.count(word)

    def has_pair(self, word: str) -> bool:
        """Check if the hand holds at least two copies of a word."""
        return self.count(word) >= 2

    def pairs(self) -> list[str]:
        """All words held at least twice, in first-seen order."""
        counts = Counter(self._words)
        return [word for word in counts if counts[word] >= 2]

    def cash_in(self, word: str) -> int:
        """Remove every copy of a word and return how many were removed."""
        removed = self.count(word)
        if removed:
            self._words = [w for w in self._words if w != word]
        return removed

    @property
    def words(self) -> list[str]:
        """Copy of the held words."""
        return list(self._words)

    def is_empty(self) -> bool:
        """Check if the hand holds no words."""
        return not self._words

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._words))

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"Hand({self._words!r})"
