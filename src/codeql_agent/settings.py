# src/codeql_agent/settings.py
from __future__ import annotations
from typing import Any, Optional, Protocol

from PySide6.QtCore import QSettings

ORG = "CodeQLAgent"
APP = "CodeQLAgent"

# --- Setting-Schlüssel (extern sichtbar, daher unverändert lassen) ---
KEY_LANGUAGE = "project.language"
KEY_JAVA_VERSION = "project.javaVersion"
KEY_COMMAND = "project.command"
KEY_OUTPUT_PATH = "project.outputPath"
KEY_OVERWRITE_FLAG = "project.overwriteFlag"
KEY_SAVE_CACHE = "project.saveCache"
KEY_THREADS = "project.threads"
KEY_DOCKER_PATH = "cli.dockerExecutablePath"

_TRUE = {"1", "true", "yes", "on", "y", "t"}
_FALSE = {"0", "false", "no", "off", "n", "f"}


class SettingsStore(Protocol):
    """Alles, was .value(key, default) und .setValue(key, val) kann (QSettings)."""

    def value(self, key: str, defaultValue: Any = ...) -> Any:  # noqa: N803 (Qt-Signatur)
        ...

    def setValue(self, key: str, value: Any) -> None:  # noqa: N802 (Qt-Signatur)
        ...


def get_settings() -> QSettings:
    """
    Liefert den Settings-Store der Anwendung.
    QSettings schreibt unter Windows in die Registry, unter Linux nach ~/.config.
    """
    return QSettings(ORG, APP)


def file_settings(path) -> QSettings:
    """INI-Datei als Store, z. B. für portable Setups oder Tests."""
    return QSettings(str(path), QSettings.IniFormat)


# ---------------------- Typ-Helper ----------------------

def parse_bool_like(v, default: bool = False) -> bool:
    """Robuste Interpretation von bools aus QSettings (bool, int, str)."""
    if isinstance(v, bool):
        return v
    if isinstance(v, int):
        return v != 0
    if isinstance(v, str):
        val = v.strip().lower()
        if val in _TRUE:
            return True
        if val in _FALSE:
            return False
    return default


def settings_get_str(settings: SettingsStore, key: str) -> Optional[str]:
    """
    Liefert den Wert als str oder None, wenn der Schlüssel fehlt.
    Leere Strings bleiben leer, damit Aufrufer "leer" und "nicht gesetzt" unterscheiden können.
    """
    raw = settings.value(key, None)
    if raw is None:
        return None
    if isinstance(raw, (list, tuple)):
        # INI-Backend liefert "a,b" als Liste zurück (Leerzeichen um Kommas verwirft Qt)
        return ",".join(str(x) for x in raw)
    return str(raw)


def settings_get_bool(settings: SettingsStore, key: str) -> Optional[bool]:
    """None, wenn nicht gesetzt; sonst der interpretierte bool."""
    raw = settings.value(key, None)  # bewusst ohne type=bool, damit Strings sichtbar bleiben
    if raw is None:
        return None
    return parse_bool_like(raw, False)


def settings_set(settings: SettingsStore, key: str, value: Any) -> None:
    """Setzt einen Wert; None entfernt den Schlüssel (wenn der Store das kann)."""
    if value is None:
        if hasattr(settings, "remove"):
            settings.remove(key)
        return
    settings.setValue(key, value)
