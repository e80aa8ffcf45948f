from __future__ import annotations
import logging

from PySide6.QtCore import QObject, Signal

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    "info": logging.INFO,
    "success": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


class NotificationCenter(QObject):
    """Meldungen für den Benutzer: werden geloggt und an die View weitergereicht."""

    notification_requested = Signal(str, str, int)  # level, text, ms

    def _publish(self, level: str, text: str, ms: int) -> None:
        logger.log(_LOG_LEVELS[level], text)
        self.notification_requested.emit(level, text, ms)

    def info(self, text: str, ms: int = 3000) -> None:
        self._publish("info", text, ms)

    def success(self, text: str, ms: int = 3000) -> None:
        self._publish("success", text, ms)

    def warn(self, text: str, ms: int = 3500) -> None:
        self._publish("warn", text, ms)

    def error(self, text: str, ms: int = 5000) -> None:
        self._publish("error", text, ms)


notification_center = NotificationCenter()
