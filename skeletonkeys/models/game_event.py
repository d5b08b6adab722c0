"""Game event model for game timelines.

Captures every resolved turn so a finished game can be inspected or replayed.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any


def _utc_now() -> datetime:
    """Return current UTC time (timezone-aware)."""
    return datetime.now(UTC)


class GameEventType(str, Enum):
    """Types of game events that can be recorded."""

    # Game lifecycle
    GAME_STARTED = "GAME_STARTED"
    GAME_ENDED = "GAME_ENDED"

    # Turns
    TURN_TAKEN = "TURN_TAKEN"
    PLAYER_ELIMINATED = "PLAYER_ELIMINATED"


@dataclass
class GameEvent:
    """Represents a single game event."""

    game_id: str
    event_type: GameEventType
    timestamp: datetime = field(default_factory=_utc_now)
    turn_number: int = 0
    player_id: str | None = None
    data: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for storage/transmission."""
        return {
            "game_id": self.game_id,
            "event_type": self.event_type.value,
            "timestamp": self.timestamp.isoformat(),
            "turn_number": self.turn_number,
            "player_id": self.player_id,
            "data": self.data,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GameEvent":
        """Create from dictionary."""
        return cls(
            game_id=data["game_id"],
            event_type=GameEventType(data["event_type"]),
            timestamp=datetime.fromisoformat(data["timestamp"]),
            turn_number=data.get("turn_number", 0),
            player_id=data.get("player_id"),
            data=data.get("data", {}),
        )


@dataclass
class GameHistory:
    """Complete game history."""

    game_id: str
    started_at: datetime
    ended_at: datetime
    players: list[dict[str, Any]]  # Player info with final keys
    outcome: str
    winner_id: str | None
    total_turns: int
    events: list[GameEvent] = field(default_factory=list)

    @property
    def duration_seconds(self) -> float:
        """Wall-clock length of the game."""
        return (self.ended_at - self.started_at).total_seconds()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for storage."""
        return {
            "game_id": self.game_id,
            "started_at": self.started_at.isoformat(),
            "ended_at": self.ended_at.isoformat(),
            "players": self.players,
            "outcome": self.outcome,
            "winner_id": self.winner_id,
            "total_turns": self.total_turns,
            "events": [e.to_dict() for e in self.events],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GameHistory":
        """Create from dictionary."""
        return cls(
            game_id=data["game_id"],
            started_at=datetime.fromisoformat(data["started_at"]),
            ended_at=datetime.fromisoformat(data["ended_at"]),
            players=data["players"],
            outcome=data["outcome"],
            winner_id=data.get("winner_id"),
            total_turns=data["total_turns"],
            events=[GameEvent.from_dict(e) for e in data.get("events", [])],
        )

    def get_summary(self) -> dict[str, Any]:
        """Get summary without full events (for listing)."""
        return {
            "game_id": self.game_id,
            "started_at": self.started_at.isoformat(),
            "duration_seconds": self.duration_seconds,
            "players": self.players,
            "outcome": self.outcome,
            "winner_id": self.winner_id,
            "total_turns": self.total_turns,
            "event_count": len(self.events),
        }
