"""Shared fixtures: file-backed settings, project folder, recording notifier, Qt app."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from codeql_agent import i18n
from codeql_agent.service.path_service import PathService
from codeql_agent.service.project_configuration import ProjectConfiguration
from codeql_agent.settings import file_settings


class RecordingNotifier:
    """Collects (level, text) instead of showing anything."""

    def __init__(self):
        self.messages = []

    def info(self, text, ms=3000):
        self.messages.append(("info", text))

    def success(self, text, ms=3000):
        self.messages.append(("success", text))

    def warn(self, text, ms=3500):
        self.messages.append(("warn", text))

    def error(self, text, ms=5000):
        self.messages.append(("error", text))

    @property
    def errors(self):
        return [text for level, text in self.messages if level == "error"]


@pytest.fixture(autouse=True)
def english_ui(monkeypatch):
    monkeypatch.setattr(i18n, "_current_lang", "en")


@pytest.fixture
def settings(tmp_path):
    return file_settings(tmp_path / "settings.ini")


@pytest.fixture
def project_dir(tmp_path):
    folder = tmp_path / "proj"
    folder.mkdir()
    return folder.resolve()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def config(settings, project_dir, notifier):
    return ProjectConfiguration(settings=settings, paths=PathService(project_dir), notifier=notifier)


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
