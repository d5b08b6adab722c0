"""Game model holding all state owned by one game."""

from dataclasses import dataclass, field
from typing import Any

from skeletonkeys.models.enums import DrawReason, GameOutcome
from skeletonkeys.models.player import Player
from skeletonkeys.models.word_pool import WordPool


@dataclass
class Game:
    """Represents a complete Skeleton Keys game.

    The seed is fixed when the game is created: every challenge digest
    depends on it, so it must not change while turns are played.

    Attributes:
        id: Unique game identifier
        seed: Shared string mixed into every challenge digest
        pool: Word pool with the draw pile
        players: All players in seat order
        active_players: Players still taking turns, in turn order
        turn_index: Position in active_players of the next player to act
        turns_played: Number of turns resolved so far
        outcome: Current loop state
        winner: Winning player once outcome is PLAYER_WON
        draw_reason: Why the game ended in a draw

    """

    id: str
    seed: str
    pool: WordPool
    players: list[Player] = field(default_factory=list)
    active_players: list[Player] = field(default_factory=list)
    turn_index: int = 0
    turns_played: int = 0
    outcome: GameOutcome = GameOutcome.ONGOING
    winner: Player | None = None
    draw_reason: DrawReason | None = None

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "seed" and "seed" in self.__dict__:
            msg = "The game seed cannot change once the game exists"
            raise AttributeError(msg)
        super().__setattr__(name, value)

    def add_player(self, player: Player) -> bool:
        """Add a player to the game before it starts."""
        if any(p.id == player.id for p in self.players):
            return False

        player.index = len(self.players)
        self.players.append(player)
        self.active_players.append(player)
        return True

    def get_player(self, player_id: str) -> Player | None:
        """Get a player by ID."""
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def current_player(self) -> Player | None:
        """The active player whose turn is next."""
        if not self.active_players:
            return None
        return self.active_players[self.turn_index % len(self.active_players)]

    def eliminate(self, player: Player) -> None:
        """Remove a player from the turn order.

        The player at the next position slides into the current index, so
        turn_index is only wrapped, never advanced.
        """
        if player not in self.active_players:
            return
        position = self.active_players.index(player)
        self.active_players.pop(position)
        if position < self.turn_index:
            self.turn_index -= 1
        if self.active_players:
            self.turn_index %= len(self.active_players)
        else:
            self.turn_index = 0

    def advance_turn(self) -> None:
        """Move to the next active player."""
        if self.active_players:
            self.turn_index = (self.turn_index + 1) % len(self.active_players)

    def is_over(self) -> bool:
        """Check if a terminal state has been reached."""
        return self.outcome.is_terminal

    def get_leaderboard(self) -> list[dict[str, Any]]:
        """Get players sorted by keys, then by words held."""
        sorted_players = sorted(
            self.players, key=lambda p: (p.skeleton_keys, -len(p.hand)), reverse=True
        )
        return [
            {
                "player_id": p.id,
                "name": p.name,
                "skeleton_keys": p.skeleton_keys,
                "words_held": len(p.hand),
                "active": p in self.active_players,
            }
            for p in sorted_players
        ]

    def __str__(self) -> str:
        """Return string representation."""
        return (
            f"Game {self.id}: {len(self.active_players)}/{len(self.players)} players active, "
            f"Turn {self.turns_played}, State: {self.outcome.value}"
        )
