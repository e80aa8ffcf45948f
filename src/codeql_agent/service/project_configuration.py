from __future__ import annotations
import os
from pathlib import Path
from typing import Optional

from codeql_agent.model.languages import AUTO_DETECT_LANGUAGE, AUTO_JAVA_VERSION
from codeql_agent.model.project_options import DEFAULT_DOCKER_PATH, ProjectOptions
from codeql_agent.service.notification_center import NotificationCenter, notification_center
from codeql_agent.service.path_service import PathService
from codeql_agent.service.resolution import (
    default_output_path,
    resolve_docker_path,
    resolve_flag,
    resolve_optional_text,
    resolve_sentinel,
    resolve_source_candidate,
    resolve_threads,
    sarif_result_path,
)
from codeql_agent.settings import (
    KEY_COMMAND,
    KEY_DOCKER_PATH,
    KEY_JAVA_VERSION,
    KEY_LANGUAGE,
    KEY_OUTPUT_PATH,
    KEY_OVERWRITE_FLAG,
    KEY_SAVE_CACHE,
    KEY_THREADS,
    SettingsStore,
    get_settings,
    settings_get_bool,
    settings_get_str,
)


class InvalidPathError(FileNotFoundError):
    """Quell- oder Ausgabepfad fehlt bzw. existiert nicht."""


class ProjectConfiguration:
    """
    Projekt-Einstellungen für einen Analyse-Lauf.

    Jeder Getter liest die Settings bei jedem Aufruf neu, damit externe Änderungen
    sofort greifen. Ungültige Quell-/Ausgabepfade werden gemeldet und als
    InvalidPathError geworfen; ein ungültiger Docker-Pfad wird nur gemeldet.
    """

    def __init__(
        self,
        settings: SettingsStore | None = None,
        paths: PathService | None = None,
        notifier: NotificationCenter | None = None,
    ) -> None:
        self.settings = settings if settings is not None else get_settings()
        self.paths = paths if paths is not None else PathService()
        self.notifier = notifier if notifier is not None else notification_center

        self.source_path: Optional[str] = None
        self.output_path: Optional[str] = None
        self.overwrite: bool = False
        self.language: Optional[str] = None
        self.docker_path: str = DEFAULT_DOCKER_PATH

    def _invalid_path(self, what: str, path: Optional[str]) -> InvalidPathError:
        err = InvalidPathError(f"Invalid {what} path or {what} path does not exist: {path or ''}")
        self.notifier.error(f"{type(err).__name__}: {err}")
        return err

    # --------- Quellpfad ---------

    def set_source_path(self, source_path: Path | str | None) -> bool:
        if source_path is None:
            self.source_path = None
            return True
        if not os.path.exists(source_path):
            self.notifier.error("Invalid source path or source path does not exist.")
            return False
        self.source_path = str(source_path)
        return True

    def get_source_path(self) -> str:
        self.source_path = resolve_source_candidate(self.source_path, self.paths.current_folder())
        if not self.source_path or not os.path.exists(self.source_path):
            raise self._invalid_path("source", self.source_path)
        return self.source_path

    # --------- Analyse-Optionen ---------

    def get_language(self) -> Optional[str]:
        self.language = resolve_sentinel(settings_get_str(self.settings, KEY_LANGUAGE), AUTO_DETECT_LANGUAGE)
        return self.language

    def get_java_version(self) -> Optional[str]:
        return resolve_sentinel(settings_get_str(self.settings, KEY_JAVA_VERSION), AUTO_JAVA_VERSION)

    def get_command(self) -> Optional[str]:
        return resolve_optional_text(settings_get_str(self.settings, KEY_COMMAND))

    def get_overwrite_flag(self) -> bool:
        self.overwrite = resolve_flag(settings_get_bool(self.settings, KEY_OVERWRITE_FLAG))
        return self.overwrite

    def get_save_cache(self) -> bool:
        return resolve_flag(settings_get_bool(self.settings, KEY_SAVE_CACHE))

    def get_threads(self) -> str:
        return resolve_threads(settings_get_str(self.settings, KEY_THREADS))

    # --------- Ausgabe ---------

    def get_output_path(self) -> str:
        self.output_path = settings_get_str(self.settings, KEY_OUTPUT_PATH)
        if not self.output_path:
            folder = self.paths.current_folder()
            if not folder:
                # ohne offenen Ordner nichts anlegen
                raise self._invalid_path("output", default_output_path(folder))
            self.output_path = default_output_path(folder)
            try:
                Path(self.output_path).mkdir(exist_ok=True)
            except OSError as e:
                raise self._invalid_path("output", self.output_path) from e
        if not os.path.exists(self.output_path):
            raise self._invalid_path("output", self.output_path)
        return self.output_path

    def get_sarif_result_path(self) -> str:
        return sarif_result_path(self.get_output_path())

    # --------- Docker ---------

    def get_docker_path(self) -> str:
        configured = settings_get_str(self.settings, KEY_DOCKER_PATH)
        self.docker_path, rejected = resolve_docker_path(self.docker_path, configured)
        if rejected:
            self.notifier.error(f"Can not find Docker executable path: {configured}")
        return self.docker_path

    # --------- Snapshot ---------

    def snapshot(self) -> ProjectOptions:
        """Alle Werte einmal auflösen (wirft wie die einzelnen Getter)."""
        output_path = self.get_output_path()
        return ProjectOptions(
            source_path=self.get_source_path(),
            output_path=output_path,
            sarif_path=sarif_result_path(output_path),
            language=self.get_language(),
            java_version=self.get_java_version(),
            command=self.get_command(),
            overwrite=self.get_overwrite_flag(),
            save_cache=self.get_save_cache(),
            threads=self.get_threads(),
            docker_path=self.get_docker_path(),
        )
