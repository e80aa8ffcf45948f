# src/codeql_agent/main.py
from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path

from PySide6.QtWidgets import QApplication, QMessageBox

from codeql_agent.i18n import t
from codeql_agent.service.notification_center import notification_center
from codeql_agent.service.path_service import PathService
from codeql_agent.service.project_configuration import ProjectConfiguration
from codeql_agent.view.notifiers import DialogNotifier
from codeql_agent.view.settings_dialog import SettingsDialog

logger = logging.getLogger(__name__)


# -------- Exceptions sichtbar --------
def excepthook(exc_type, exc_value, exc_tb):
    print("\n=== UNCAUGHT EXCEPTION ===", file=sys.stderr)
    print(f"{exc_type.__name__}: {exc_value}", file=sys.stderr)
    traceback.print_tb(exc_tb)
    if QApplication.instance() is not None:
        QMessageBox.critical(None, f"{t('app.title')} – Error", f"{exc_type.__name__}: {exc_value}")


# -------- Main --------
def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv if argv is None else argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    sys.excepthook = excepthook

    app = QApplication(argv)
    app.setApplicationName(t("app.title"))

    # Projektordner: erstes Argument, sonst aktuelles Verzeichnis
    folder = Path(argv[1]) if len(argv) > 1 else Path.cwd()
    logger.info("Project folder: %s", folder)
    config = ProjectConfiguration(paths=PathService(folder))

    dlg = SettingsDialog(config)
    notifier = DialogNotifier(dlg)
    notification_center.notification_requested.connect(notifier.notify)
    dlg.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
