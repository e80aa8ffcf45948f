"""Unit tests for the database folder/archive chooser (QFileDialog is faked)."""

from pathlib import Path

import pytest
from PySide6.QtWidgets import QFileDialog

from codeql_agent.view import database_chooser
from codeql_agent.view.database_chooser import choose_project_folder


@pytest.fixture
def fake_dialog(monkeypatch):
    class FakeDialog:
        FileMode = QFileDialog.FileMode
        DialogLabel = QFileDialog.DialogLabel
        Option = QFileDialog.Option

        accepted = True
        selected = []
        instances = []

        def __init__(self, parent=None, caption=""):
            self.caption = caption
            self.labels = {}
            self.options = {}
            self.mode = None
            self.name_filter = None
            FakeDialog.instances.append(self)

        def setLabelText(self, which, text):
            self.labels[which] = text

        def setFileMode(self, mode):
            self.mode = mode

        def setOption(self, option, on=True):
            self.options[option] = on

        def setNameFilter(self, name_filter):
            self.name_filter = name_filter

        def exec(self):
            return 1 if self.accepted else 0

        def selectedFiles(self):
            return list(self.selected)

    monkeypatch.setattr(database_chooser, "QFileDialog", FakeDialog)
    return FakeDialog


def test_folder_mode(fake_dialog):
    fake_dialog.selected = ["/data/project-db"]

    assert choose_project_folder(True) == Path("/data/project-db")

    dlg = fake_dialog.instances[-1]
    assert dlg.labels[QFileDialog.DialogLabel.Accept] == "Choose Database folder"
    assert dlg.mode == QFileDialog.FileMode.Directory
    assert dlg.options[QFileDialog.Option.ShowDirsOnly] is True
    assert dlg.name_filter is None


def test_archive_mode(fake_dialog):
    fake_dialog.selected = ["/data/db.zip"]

    assert choose_project_folder(False) == Path("/data/db.zip")

    dlg = fake_dialog.instances[-1]
    assert dlg.labels[QFileDialog.DialogLabel.Accept] == "Choose Database archive"
    assert dlg.mode == QFileDialog.FileMode.ExistingFile
    assert dlg.name_filter == "Archives (*.zip)"


def test_first_of_many_is_returned(fake_dialog):
    fake_dialog.selected = ["/a", "/b"]
    assert choose_project_folder() == Path("/a")


def test_cancel_returns_none(fake_dialog):
    fake_dialog.accepted = False
    fake_dialog.selected = ["/ignored"]
    assert choose_project_folder() is None


def test_empty_selection_returns_none(fake_dialog):
    fake_dialog.selected = []
    assert choose_project_folder() is None


def test_choice_is_not_validated(fake_dialog, tmp_path):
    # kein db-<language> Unterordner, trotzdem zurückgegeben
    fake_dialog.selected = [str(tmp_path)]
    assert choose_project_folder() == tmp_path
