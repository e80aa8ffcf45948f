from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

OUTPUT_FOLDER = "codeql-agent-results"
SARIF_FILE_NAME = "issues.sarif"
DOCKER_CONTAINER_NAME = "codeql-agent-docker"
DEFAULT_DOCKER_PATH = "docker"


@dataclass(frozen=True)
class ProjectOptions:
    """Aufgelöste Werte für genau einen Analyse-Lauf."""
    source_path: str
    output_path: str
    sarif_path: str
    language: Optional[str]
    java_version: Optional[str]
    command: Optional[str]
    overwrite: bool
    save_cache: bool
    threads: str
    docker_path: str
