"""Bot strategies that decide what to ask for and whom to ask.

Available bots:
- RandomBot: Picks the wanted word and the opponent uniformly at random
"""

from skeletonkeys.bots.base_bot import BaseBot
from skeletonkeys.bots.random_bot import RandomBot

__all__ = ["BaseBot", "RandomBot"]
