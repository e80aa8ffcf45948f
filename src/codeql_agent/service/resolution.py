from __future__ import annotations
import os
from typing import Any, Callable, Optional, Tuple

from codeql_agent.model.project_options import OUTPUT_FOLDER, SARIF_FILE_NAME
from codeql_agent.settings import parse_bool_like

# Reine Entscheidungsfunktionen je Feld – ohne Qt, ohne Settings-Zugriff.


def resolve_sentinel(value: Optional[str], sentinel: str) -> Optional[str]:
    """Settings-Wert oder None, wenn der Platzhalter (z. B. "Auto detect") gesetzt ist."""
    if value == sentinel:
        return None
    return value


def resolve_optional_text(value: Optional[str]) -> Optional[str]:
    if value is None or value == "":
        return None
    return value


def resolve_flag(value: Any) -> bool:
    """Nicht gesetzt → False."""
    if value is None:
        return False
    return parse_bool_like(value, False)


def resolve_threads(value: Optional[str]) -> str:
    """Nicht gesetzt → "0" (alle verfügbaren Kerne)."""
    if value is None:
        return "0"
    return str(value)


def resolve_source_candidate(cached: Optional[str], current_folder: str) -> str:
    return cached if cached else current_folder


def default_output_path(current_folder: str) -> str:
    return f"{current_folder}/{OUTPUT_FOLDER}"


def sarif_result_path(output_path: str) -> str:
    return f"{output_path}/{SARIF_FILE_NAME}"


def resolve_docker_path(
    current: str,
    configured: Optional[str],
    exists: Callable[[str], bool] = os.path.exists,
) -> Tuple[str, bool]:
    """
    Liefert (pfad, abgelehnt).
    Ein konfigurierter Pfad wird nur übernommen, wenn er existiert; sonst bleibt
    der bisherige Wert und abgelehnt=True.
    """
    if not configured:
        return current, False
    if exists(configured):
        return configured, False
    return current, True
