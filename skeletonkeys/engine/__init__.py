"""Turn resolution and the game loop."""

from skeletonkeys.engine.game_loop import GameLoop, GameResult
from skeletonkeys.engine.turn_engine import TurnEngine

__all__ = ["GameLoop", "GameResult", "TurnEngine"]
