from __future__ import annotations
from pathlib import Path
from typing import Optional


class PathService:
    """Resolve and store the currently opened project folder."""

    def __init__(self, folder: Path | str | None = None) -> None:
        self._current: Optional[Path] = None
        if folder:
            self.set_current_folder(folder)

    def set_current_folder(self, folder: Path | str | None) -> None:
        """Set the current project folder (resolved); None clears it."""
        self._current = Path(folder).resolve() if folder else None

    def current_folder(self) -> str:
        """Return the current folder, or an empty string if none is open."""
        if self._current:
            return str(self._current)
        return ""
