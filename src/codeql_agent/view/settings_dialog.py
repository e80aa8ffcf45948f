# src/codeql_agent/view/settings_dialog.py
from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QFormLayout, QLabel, QLineEdit, QPushButton,
    QFileDialog, QCheckBox, QComboBox, QDialogButtonBox, QWidget, QSizePolicy
)

from codeql_agent.i18n import t
from codeql_agent.model.languages import AUTO_DETECT_LANGUAGE, AUTO_JAVA_VERSION, SUPPORTED_LANGUAGES
from codeql_agent.service.project_configuration import InvalidPathError, ProjectConfiguration
from codeql_agent.settings import (
    KEY_COMMAND, KEY_DOCKER_PATH, KEY_JAVA_VERSION, KEY_LANGUAGE, KEY_OUTPUT_PATH,
    KEY_OVERWRITE_FLAG, KEY_SAVE_CACHE, KEY_THREADS,
    settings_get_bool, settings_get_str, settings_set,
)
from codeql_agent.view.database_chooser import choose_project_folder

JAVA_VERSIONS = (AUTO_JAVA_VERSION, "8", "11", "17", "21")


class SettingsDialog(QDialog):
    """Bearbeitet die Projekt-Settings und zeigt die aufgelösten Pfade."""

    def __init__(self, config: ProjectConfiguration, parent: QWidget | None = None):
        super().__init__(parent)
        self.setModal(True)
        self.config = config
        self.s = config.settings

        # --- Widgets --------------------------------------------------------
        self.le_source = QLineEdit(self)
        self.le_source.setReadOnly(True)
        self.btn_source_folder = QPushButton(t("sd.source.folder"), self)
        self.btn_source_folder.clicked.connect(lambda: self._pick_database(True))
        self.btn_source_archive = QPushButton(t("sd.source.archive"), self)
        self.btn_source_archive.clicked.connect(lambda: self._pick_database(False))

        self.cmb_language = QComboBox(self)
        self.cmb_language.addItem(AUTO_DETECT_LANGUAGE, AUTO_DETECT_LANGUAGE)
        for lang in SUPPORTED_LANGUAGES:
            self.cmb_language.addItem(lang, lang)

        self.cmb_java = QComboBox(self)
        self.cmb_java.setEditable(True)
        self.cmb_java.addItems(list(JAVA_VERSIONS))

        self.le_command = QLineEdit(self)

        self.le_output = QLineEdit(self)
        self.btn_output = QPushButton("…", self)
        self.btn_output.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Fixed)
        self.btn_output.clicked.connect(self._pick_output)

        self.chk_overwrite = QCheckBox(t("sd.overwrite"), self)
        self.chk_save_cache = QCheckBox(t("sd.save.cache"), self)
        self.le_threads = QLineEdit(self)

        self.le_docker = QLineEdit(self)
        self.btn_docker = QPushButton("…", self)
        self.btn_docker.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Fixed)
        self.btn_docker.clicked.connect(self._pick_docker)

        self.lbl_sarif = QLabel(t("sd.sarif.invalid"), self)
        self.lbl_sarif.setTextInteractionFlags(Qt.TextSelectableByMouse)
        self.btn_check = QPushButton(t("sd.check"), self)
        self.btn_check.clicked.connect(self.refresh_paths)

        self.btns = QDialogButtonBox(QDialogButtonBox.Save | QDialogButtonBox.Cancel, self)
        self.btns.accepted.connect(self._save)
        self.btns.rejected.connect(self.reject)
        self.btns.button(QDialogButtonBox.Save).setText(t("common.save"))
        self.btns.button(QDialogButtonBox.Cancel).setText(t("common.cancel"))

        # --- Layout ---------------------------------------------------------
        form = QFormLayout()
        form.addRow(t("sd.source"), self._row(self.le_source, self.btn_source_folder, self.btn_source_archive))
        form.addRow(t("sd.language"), self.cmb_language)
        form.addRow(t("sd.java"), self.cmb_java)
        form.addRow(t("sd.command"), self.le_command)
        form.addRow(t("sd.output"), self._row(self.le_output, self.btn_output))
        form.addRow(t("sd.threads"), self.le_threads)
        form.addRow(t("sd.docker"), self._row(self.le_docker, self.btn_docker))

        lay = QVBoxLayout(self)
        lay.addLayout(form)
        lay.addWidget(self.chk_overwrite)
        lay.addWidget(self.chk_save_cache)
        lay.addLayout(self._row(self.lbl_sarif, self.btn_check))
        lay.addWidget(self.btns)

        self.setWindowTitle(t("sd.title"))
        self._load_from_settings()

    @staticmethod
    def _row(main: QWidget, *extra: QWidget) -> QHBoxLayout:
        row = QHBoxLayout()
        row.addWidget(main, 1)
        for w in extra:
            row.addWidget(w)
        return row

    # ---------------------- Laden / Speichern -------------------------------
    def _load_from_settings(self):
        lang = settings_get_str(self.s, KEY_LANGUAGE) or AUTO_DETECT_LANGUAGE
        idx = self.cmb_language.findData(lang)
        self.cmb_language.setCurrentIndex(idx if idx >= 0 else 0)

        self.cmb_java.setCurrentText(settings_get_str(self.s, KEY_JAVA_VERSION) or AUTO_JAVA_VERSION)
        self.le_command.setText(settings_get_str(self.s, KEY_COMMAND) or "")
        self.le_output.setText(settings_get_str(self.s, KEY_OUTPUT_PATH) or "")
        self.le_threads.setText(settings_get_str(self.s, KEY_THREADS) or "")
        self.le_docker.setText(settings_get_str(self.s, KEY_DOCKER_PATH) or "")
        self.chk_overwrite.setChecked(bool(settings_get_bool(self.s, KEY_OVERWRITE_FLAG)))
        self.chk_save_cache.setChecked(bool(settings_get_bool(self.s, KEY_SAVE_CACHE)))
        self.le_source.setText(self.config.source_path or "")

    def _save(self):
        settings_set(self.s, KEY_LANGUAGE, self.cmb_language.currentData())
        settings_set(self.s, KEY_JAVA_VERSION, self.cmb_java.currentText().strip() or AUTO_JAVA_VERSION)
        # leere Felder entfernen, damit die Defaults der Getter greifen
        for key, le in (
            (KEY_COMMAND, self.le_command),
            (KEY_OUTPUT_PATH, self.le_output),
            (KEY_THREADS, self.le_threads),
            (KEY_DOCKER_PATH, self.le_docker),
        ):
            settings_set(self.s, key, le.text().strip() or None)
        settings_set(self.s, KEY_OVERWRITE_FLAG, self.chk_overwrite.isChecked())
        settings_set(self.s, KEY_SAVE_CACHE, self.chk_save_cache.isChecked())
        self.accept()

    # ---------------------- Aktionen ----------------------------------------
    def _pick_database(self, by_folder: bool):
        path = choose_project_folder(by_folder, self)
        if path is None:
            return
        if self.config.set_source_path(path):
            self.le_source.setText(str(path))

    def _pick_output(self):
        folder = QFileDialog.getExistingDirectory(self, t("sd.pick.folder"))
        if folder:
            self.le_output.setText(folder)

    def _pick_docker(self):
        fn, _ = QFileDialog.getOpenFileName(self, t("sd.pick.file"))
        if fn:
            self.le_docker.setText(fn)

    def refresh_paths(self) -> None:
        """Löst Ausgabe-/SARIF-Pfad auf; Fehler meldet die Konfiguration selbst."""
        try:
            sarif = self.config.get_sarif_result_path()
        except InvalidPathError:
            self.lbl_sarif.setText(t("sd.sarif.invalid"))
            return
        self.lbl_sarif.setText(t("sd.sarif", path=sarif))
