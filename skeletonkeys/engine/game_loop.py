"""Game loop driving turns until a winner or a draw."""

import logging
from dataclasses import dataclass

from skeletonkeys.config import Settings
from skeletonkeys.config import settings as default_settings
from skeletonkeys.engine.turn_engine import TurnEngine
from skeletonkeys.models.enums import DrawReason, GameOutcome
from skeletonkeys.models.game import Game
from skeletonkeys.models.game_event import GameHistory
from skeletonkeys.models.player import Player
from skeletonkeys.models.turn import TurnOutcome
from skeletonkeys.services.event_recorder import EventRecorder
from skeletonkeys.services.log_service import LogService
from skeletonkeys.services.notifier import Notifier, NullNotifier

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """Final state of a finished game."""

    outcome: GameOutcome
    winner: Player | None
    turns_played: int
    draw_reason: DrawReason | None = None
    history: GameHistory | None = None


class GameLoop:
    """Round-robin state machine over the active players.

    Turn order is a circular index into ``game.active_players``. After a
    normal turn the index moves on by one. When the acting player is
    eliminated they are removed and the index stays put, so the next player
    takes the freed position and nobody is skipped or visited twice.

    The loop ends when:
    - the acting player reaches the winning key count (remaining turns are dropped)
    - a single player is left standing, who wins without another turn
    - no player is left, max_turns is reached, or a full pass of turns was
      skipped, all of which are draws
    """

    def __init__(
        self,
        game: Game,
        turn_engine: TurnEngine,
        notifier: Notifier | None = None,
        recorder: EventRecorder | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.game = game
        self.turn_engine = turn_engine
        self.notifier = notifier or NullNotifier()
        self.recorder = recorder
        self.settings = settings or default_settings
        self.log_service = LogService(__name__)
        self._skip_streak = 0
        self._history: GameHistory | None = None

    def start(self) -> None:
        """Announce the game and start recording it."""
        names = ", ".join(p.name for p in self.game.players)
        self.notifier.notify(f"A new game begins with {names}.")
        self.log_service.info(
            {
                "event": "game_started",
                "game_id": self.game.id,
                "players": len(self.game.players),
                "draw_pile": self.game.pool.remaining,
            }
        )
        if self.recorder:
            self.recorder.start_game(self.game)

    def step(self) -> GameOutcome:
        """Play at most one turn and return the resulting state."""
        game = self.game
        if game.is_over():
            return game.outcome

        if self._check_terminal_before_turn():
            return game.outcome

        player = game.current_player()
        outcome = self.turn_engine.take_turn(player, game.active_players, game.pool)
        game.turns_played += 1
        self._after_turn(player, outcome)
        return game.outcome

    def run(self) -> GameResult:
        """Play turns until the game ends."""
        if self.game.turns_played == 0 and not self.game.is_over():
            self.start()
        while self.step() is GameOutcome.ONGOING:
            pass
        return self.result()

    def result(self) -> GameResult:
        """Summarize the game as it stands."""
        return GameResult(
            outcome=self.game.outcome,
            winner=self.game.winner,
            turns_played=self.game.turns_played,
            draw_reason=self.game.draw_reason,
            history=self._history,
        )

    def _check_terminal_before_turn(self) -> bool:
        game = self.game
        if not game.active_players:
            self._finish_draw(DrawReason.ALL_ELIMINATED)
            return True
        if len(game.active_players) == 1:
            self._finish_last_standing(game.active_players[0])
            return True
        if game.turns_played >= self.settings.max_turns:
            self._finish_draw(DrawReason.MAX_TURNS)
            return True
        return False

    def _after_turn(self, player: Player, outcome: TurnOutcome) -> None:
        game = self.game
        if self.recorder:
            self.recorder.record_turn(game, outcome)
        self.log_service.debug(
            {
                "event": "turn",
                "turn": game.turns_played,
                "player": player.id,
                "result": outcome.result.value,
                "keys": player.skeleton_keys,
            }
        )

        self._skip_streak = self._skip_streak + 1 if outcome.skipped else 0

        if player.has_won():
            self._finish_win(player)
            return

        if player.is_eliminated():
            self._eliminate(player)
            return

        game.advance_turn()
        if self._skip_streak >= len(game.active_players):
            self._finish_draw(DrawReason.STALEMATE)

    def _eliminate(self, player: Player) -> None:
        game = self.game
        game.eliminate(player)
        self._skip_streak = 0
        self.notifier.notify(f"{player.name} has run out of skeleton keys and is out.")
        logger.info("Player %s eliminated on turn %d", player.id, game.turns_played)
        if self.recorder:
            self.recorder.record_elimination(game, player)

        if not game.active_players:
            self._finish_draw(DrawReason.ALL_ELIMINATED)
        elif len(game.active_players) == 1:
            self._finish_last_standing(game.active_players[0])

    def _finish_win(self, player: Player) -> None:
        self.notifier.notify(
            f"{player.name} collects {player.skeleton_keys} skeleton keys and wins!"
        )
        self._finish(GameOutcome.PLAYER_WON, winner=player)

    def _finish_last_standing(self, player: Player) -> None:
        self.notifier.notify(f"{player.name} is the last player standing and wins!")
        self._finish(GameOutcome.PLAYER_WON, winner=player)

    def _finish_draw(self, reason: DrawReason) -> None:
        self.notifier.notify(f"The game ends in a draw ({reason.value.lower().replace('_', ' ')}).")
        self._finish(GameOutcome.DRAW, draw_reason=reason)

    def _finish(
        self,
        outcome: GameOutcome,
        winner: Player | None = None,
        draw_reason: DrawReason | None = None,
    ) -> None:
        game = self.game
        game.outcome = outcome
        game.winner = winner
        game.draw_reason = draw_reason
        self.log_service.info(
            {
                "event": "game_ended",
                "game_id": game.id,
                "outcome": outcome.value,
                "winner": winner.id if winner else None,
                "turns": game.turns_played,
            }
        )
        if self.recorder:
            self._history = self.recorder.end_game(game)
