"""Output sinks for human-readable narration."""

import logging
from typing import Protocol, runtime_checkable

narration_logger = logging.getLogger("skeletonkeys.narration")


@runtime_checkable
class Notifier(Protocol):
    """Anything that can receive narration messages."""

    def notify(self, message: str) -> None:
        """Receive one narration message."""


class LoggingNotifier:
    """Forwards narration to the narration logger."""

    def __init__(self, level: int = logging.INFO) -> None:
        self.level = level

    def notify(self, message: str) -> None:
        narration_logger.log(self.level, "%s", message)


class CollectingNotifier:
    """Keeps narration in memory."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)

    def clear(self) -> None:
        self.messages.clear()


class NullNotifier:
    """Discards narration."""

    def notify(self, message: str) -> None:
        pass
