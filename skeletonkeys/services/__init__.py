"""Services around the game core: word sources, narration, recording, logging.

Game setup lives in skeletonkeys.services.game_factory.
"""

from skeletonkeys.services.event_recorder import EventRecorder
from skeletonkeys.services.log_service import LogService, configure_logging
from skeletonkeys.services.notifier import (
    CollectingNotifier,
    LoggingNotifier,
    Notifier,
    NullNotifier,
)
from skeletonkeys.services.word_source import StaticWordSource, WordSource

__all__ = [
    "CollectingNotifier",
    "EventRecorder",
    "LogService",
    "LoggingNotifier",
    "Notifier",
    "NullNotifier",
    "StaticWordSource",
    "WordSource",
    "configure_logging",
]
