"""Skeleton Keys: a hashed-word Go Fish simulation."""

from skeletonkeys.engine.game_loop import GameLoop, GameResult
from skeletonkeys.engine.turn_engine import TurnEngine
from skeletonkeys.models.enums import GameOutcome, TurnResult
from skeletonkeys.models.errors import InsufficientWordsError, SkeletonKeysError, WordSourceError
from skeletonkeys.services.game_factory import create_game, play_game

__all__ = [
    "GameLoop",
    "GameOutcome",
    "GameResult",
    "InsufficientWordsError",
    "SkeletonKeysError",
    "TurnEngine",
    "TurnResult",
    "WordSourceError",
    "create_game",
    "play_game",
]
