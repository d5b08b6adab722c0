"""Game domain models."""

from skeletonkeys.models.challenge import challenge_digest, find_match
from skeletonkeys.models.enums import DrawReason, GameOutcome, TurnResult
from skeletonkeys.models.errors import InsufficientWordsError, SkeletonKeysError, WordSourceError
from skeletonkeys.models.game import Game
from skeletonkeys.models.game_event import GameEvent, GameEventType, GameHistory
from skeletonkeys.models.hand import Hand
from skeletonkeys.models.player import Player
from skeletonkeys.models.turn import TurnOutcome
from skeletonkeys.models.word_pool import WordPool

__all__ = [
    "DrawReason",
    "Game",
    "GameEvent",
    "GameEventType",
    "GameHistory",
    "GameOutcome",
    "Hand",
    "InsufficientWordsError",
    "Player",
    "SkeletonKeysError",
    "TurnOutcome",
    "TurnResult",
    "WordPool",
    "WordSourceError",
    "challenge_digest",
    "find_match",
]
