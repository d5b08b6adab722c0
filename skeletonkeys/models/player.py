"""Player model."""

from dataclasses import dataclass, field

from skeletonkeys.models.hand import Hand

STARTING_KEYS = 2
WINNING_KEYS = 3


@dataclass
class Player:
    """Represents a player in the game.

    Attributes:
        id: Unique player identifier
        name: Player's display name
        index: Seat position in the original turn order
        hand: Words currently held
        skeleton_keys: Win/loss counter, bounded by 0 and winning_keys
        winning_keys: Counter value at which the player wins
        is_bot: Whether a bot strategy controls this player

    """

    id: str
    name: str
    index: int = 0
    hand: Hand = field(default_factory=Hand)
    skeleton_keys: int = STARTING_KEYS
    winning_keys: int = WINNING_KEYS
    is_bot: bool = True

    def gain_key(self) -> int:
        """Add one key, capped at winning_keys."""
        self.skeleton_keys = min(self.skeleton_keys + 1, self.winning_keys)
        return self.skeleton_keys

    def lose_key(self) -> int:
        """Remove one key, never below zero."""
        self.skeleton_keys = max(self.skeleton_keys - 1, 0)
        return self.skeleton_keys

    def is_eliminated(self) -> bool:
        """Check if the player has run out of keys."""
        return self.skeleton_keys <= 0

    def has_won(self) -> bool:
        """Check if the player reached the winning key count."""
        return self.skeleton_keys >= self.winning_keys

    def __str__(self) -> str:
        """Return string representation."""
        return f"{self.name} - Keys: {self.skeleton_keys}, Words: {len(self.hand)}"
