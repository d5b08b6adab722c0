"""Exceptions raised while setting up a game."""


class SkeletonKeysError(Exception):
    """Base class for game setup errors."""


class InsufficientWordsError(SkeletonKeysError, ValueError):
    """The word pool cannot deal a full hand to every player."""

    def __init__(self, available: int, num_players: int, hand_size: int) -> None:
        self.available = available
        self.num_players = num_players
        self.hand_size = hand_size
        super().__init__(
            f"Need {num_players * hand_size} words to deal {num_players} hands of "
            f"{hand_size}, only {available} available"
        )


class WordSourceError(SkeletonKeysError, ValueError):
    """The word source is missing or malformed."""
