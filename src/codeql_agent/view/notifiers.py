from __future__ import annotations
from PySide6.QtWidgets import QMessageBox, QWidget

from codeql_agent.i18n import t


class DialogNotifier:
    """Zeigt Meldungen der NotificationCenter als QMessageBox über dem Fenster."""

    _BOXES = {"error": "critical", "warn": "warning"}

    def __init__(self, window: QWidget):
        self.window = window

    def notify(self, level: str, text: str, ms: int) -> None:  # noqa: D401
        box = getattr(QMessageBox, self._BOXES.get(level, "information"))
        box(self.window, self.window.windowTitle() or t("app.title"), text, QMessageBox.Ok)
