"""Unit tests for DialogNotifier (QMessageBox is faked)."""

import pytest

from codeql_agent.view import notifiers
from codeql_agent.view.notifiers import DialogNotifier


class FakeWindow:
    def __init__(self, title=""):
        self._title = title

    def windowTitle(self):
        return self._title


@pytest.fixture
def boxes(monkeypatch):
    shown = []

    class FakeMessageBox:
        Ok = object()

        @staticmethod
        def critical(parent, title, text, buttons):
            shown.append(("critical", title, text))

        @staticmethod
        def warning(parent, title, text, buttons):
            shown.append(("warning", title, text))

        @staticmethod
        def information(parent, title, text, buttons):
            shown.append(("information", title, text))

    monkeypatch.setattr(notifiers, "QMessageBox", FakeMessageBox)
    return shown


@pytest.mark.parametrize("level, kind", [
    ("error", "critical"),
    ("warn", "warning"),
    ("info", "information"),
    ("success", "information"),
])
def test_level_selects_box(boxes, level, kind):
    DialogNotifier(FakeWindow("Project settings")).notify(level, "text", 1000)
    assert boxes == [(kind, "Project settings", "text")]


def test_untitled_window_uses_app_title(boxes):
    DialogNotifier(FakeWindow()).notify("error", "boom", 1000)
    assert boxes == [("critical", "CodeQL Agent", "boom")]
