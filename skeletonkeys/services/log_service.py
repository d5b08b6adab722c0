"""Logging service."""

import logging
import sys

from skeletonkeys.config import settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """Configure root logging, at the configured log level by default."""
    level = level if level is not None else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )
    logging.getLogger("skeletonkeys").setLevel(level)


class LogService:
    """Service for structured logging.

    Provides consistent key=value log lines across the game.
    """

    def __init__(self, name: str | None = None) -> None:
        """Initialize with an optional logger name."""
        self._logger = logging.getLogger(name) if name else logger

    @staticmethod
    def format(data: dict[str, object]) -> str:
        """Render log data as key=value pairs."""
        return " | ".join(f"{k}={v}" for k, v in data.items())

    def info(self, data: dict[str, object]) -> None:
        """Log info message.

        Args:
            data: Log data as key-value pairs

        """
        self._logger.info(self.format(data))

    def error(self, data: dict[str, object]) -> None:
        """Log error message."""
        self._logger.error(self.format(data))

    def warning(self, data: dict[str, object]) -> None:
        """Log warning message."""
        self._logger.warning(self.format(data))

    def debug(self, data: dict[str, object]) -> None:
        """Log debug message."""
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug(self.format(data))
