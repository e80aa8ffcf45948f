from __future__ import annotations
from pathlib import Path
from typing import List, Optional

from PySide6.QtWidgets import QFileDialog, QWidget

from codeql_agent.i18n import t


def choose_project_folder(by_folder: bool = True, parent: QWidget | None = None) -> Optional[Path]:
    """
    Zeigt den Auswahl-Dialog für eine CodeQL-Datenbank.

    Erwartet wird der Elternordner eines Verzeichnisses der Form ``db-<language>``
    (z. B. ``db-cpp``) bzw. ein ``.zip``-Archiv davon.
    Die Auswahl wird NICHT geprüft; das muss der Aufrufer selbst tun.
    """
    label = t("chooser.folder") if by_folder else t("chooser.archive")
    dlg = QFileDialog(parent, label)
    dlg.setLabelText(QFileDialog.DialogLabel.Accept, label)
    if by_folder:
        dlg.setFileMode(QFileDialog.FileMode.Directory)
        dlg.setOption(QFileDialog.Option.ShowDirsOnly, True)
    else:
        dlg.setFileMode(QFileDialog.FileMode.ExistingFile)
        dlg.setNameFilter(t("chooser.archive.filter"))

    if not dlg.exec():
        return None
    first = _first(dlg.selectedFiles())
    return Path(first) if first else None


def _first(items: Optional[List[str]]) -> Optional[str]:
    if not items:
        return None
    return items[0]
