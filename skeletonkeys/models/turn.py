"""Turn outcome model."""

from dataclasses import dataclass
from typing import Any

from skeletonkeys.models.enums import TurnResult


@dataclass(frozen=True)
class TurnOutcome:
    """Result of one resolved turn.

    Attributes:
        player_id: Player who took the turn
        result: How the turn was resolved
        opponent_id: Player who was asked (None for skipped turns)
        digest: Challenge digest of the wanted word
        received_word: Word taken from the opponent on a match
        drawn_word: Word drawn from the pile on a miss (None if the pile was empty)
        keys_before: Skeleton keys before the turn
        keys_after: Skeleton keys after the turn

    """

    player_id: str
    result: TurnResult
    opponent_id: str | None = None
    digest: str | None = None
    received_word: str | None = None
    drawn_word: str | None = None
    keys_before: int = 0
    keys_after: int = 0

    @property
    def pair_cashed(self) -> bool:
        """Whether the turn completed a pair."""
        return self.result is TurnResult.PAIR

    @property
    def skipped(self) -> bool:
        """Whether the turn was a no-op."""
        return self.result.is_skip

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for event data.

        Plaintext words stay out so recorded timelines match the narration.
        """
        return {
            "result": self.result.value,
            "opponent_id": self.opponent_id,
            "digest": self.digest,
            "drew": self.drawn_word is not None,
            "keys_before": self.keys_before,
            "keys_after": self.keys_after,
        }
