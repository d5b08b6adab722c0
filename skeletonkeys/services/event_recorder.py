"""Event recorder service for capturing game events during play.

Used for game history and for inspecting finished simulations.
"""

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from skeletonkeys.models.game_event import GameEvent, GameEventType, GameHistory

if TYPE_CHECKING:
    from skeletonkeys.models.game import Game
    from skeletonkeys.models.player import Player
    from skeletonkeys.models.turn import TurnOutcome


class EventRecorder:
    """Records game events for later inspection."""

    def __init__(self) -> None:
        """Initialize the event recorder.

        Sets up in-memory storage for events of running games and completed game histories.
        """
        # Key: game_id, Value: list of events
        self._events: dict[str, list[GameEvent]] = {}
        self._game_start_times: dict[str, datetime] = {}
        self._histories: dict[str, GameHistory] = {}

    def start_game(self, game: "Game") -> None:
        """Initialize event recording for a new game."""
        self._events[game.id] = []
        self._game_start_times[game.id] = datetime.now(UTC)

        self.record_event(
            game_id=game.id,
            event_type=GameEventType.GAME_STARTED,
            data={
                "players": [
                    {"id": p.id, "name": p.name, "index": p.index, "hand_size": len(p.hand)}
                    for p in game.players
                ],
                "draw_pile": game.pool.remaining,
            },
        )

    def record_event(
        self,
        game_id: str,
        event_type: GameEventType,
        turn_number: int = 0,
        player_id: str | None = None,
        data: dict[str, Any] | None = None,
    ) -> None:
        """Record a single game event."""
        if game_id not in self._events:
            self._events[game_id] = []

        event = GameEvent(
            game_id=game_id,
            event_type=event_type,
            turn_number=turn_number,
            player_id=player_id,
            data=data or {},
        )
        self._events[game_id].append(event)

    def record_turn(self, game: "Game", outcome: "TurnOutcome") -> None:
        """Record a resolved turn."""
        self.record_event(
            game_id=game.id,
            event_type=GameEventType.TURN_TAKEN,
            turn_number=game.turns_played,
            player_id=outcome.player_id,
            data=outcome.to_dict(),
        )

    def record_elimination(self, game: "Game", player: "Player") -> None:
        """Record a player running out of keys."""
        self.record_event(
            game_id=game.id,
            event_type=GameEventType.PLAYER_ELIMINATED,
            turn_number=game.turns_played,
            player_id=player.id,
            data={"remaining_players": len(game.active_players)},
        )

    def end_game(self, game: "Game") -> GameHistory:
        """Record the end of a game and build its history."""
        winner_id = game.winner.id if game.winner else None
        self.record_event(
            game_id=game.id,
            event_type=GameEventType.GAME_ENDED,
            turn_number=game.turns_played,
            player_id=winner_id,
            data={
                "outcome": game.outcome.value,
                "draw_reason": game.draw_reason.value if game.draw_reason else None,
                "leaderboard": game.get_leaderboard(),
            },
        )

        history = GameHistory(
            game_id=game.id,
            started_at=self._game_start_times.pop(game.id, datetime.now(UTC)),
            ended_at=datetime.now(UTC),
            players=[
                {"id": p.id, "name": p.name, "skeleton_keys": p.skeleton_keys}
                for p in game.players
            ],
            outcome=game.outcome.value,
            winner_id=winner_id,
            total_turns=game.turns_played,
            events=self._events.pop(game.id, []),
        )
        self._histories[game.id] = history
        return history

    def get_events(self, game_id: str) -> list[GameEvent]:
        """Events recorded so far for a running or finished game."""
        if game_id in self._events:
            return list(self._events[game_id])
        history = self._histories.get(game_id)
        return list(history.events) if history else []

    def get_history(self, game_id: str) -> GameHistory | None:
        """History of a finished game."""
        return self._histories.get(game_id)

    def clear(self) -> None:
        """Drop all recorded state."""
        self._events.clear()
        self._game_start_times.clear()
        self._histories.clear()
