from __future__ import annotations
from typing import Dict, Optional
import locale

# ---------- Strings ----------
_STRINGS: Dict[str, Dict[str, str]] = {
    "de": {
        "app.title": "CodeQL Agent",
        "common.save": "Speichern",
        "common.cancel": "Abbrechen",

        # Auswahl-Dialog
        "chooser.folder": "Datenbank-Ordner wählen",
        "chooser.archive": "Datenbank-Archiv wählen",
        "chooser.archive.filter": "Archive (*.zip)",

        # Einstellungen
        "sd.title": "Projekt-Einstellungen",
        "sd.source": "Datenbank / Quelle:",
        "sd.source.folder": "Ordner …",
        "sd.source.archive": "Archiv …",
        "sd.language": "Sprache:",
        "sd.java": "Java-Version:",
        "sd.command": "Build-Befehl:",
        "sd.output": "Ausgabeordner:",
        "sd.overwrite": "Vorherige Ergebnisse überschreiben",
        "sd.save.cache": "Cache behalten",
        "sd.threads": "Threads (0 = alle):",
        "sd.docker": "Docker-Programm:",
        "sd.pick.file": "Datei wählen",
        "sd.pick.folder": "Ordner wählen",
        "sd.check": "Pfade prüfen",
        "sd.sarif": "SARIF-Ergebnis: {path}",
        "sd.sarif.invalid": "SARIF-Ergebnis: –",
    },
    "en": {
        "app.title": "CodeQL Agent",
        "common.save": "Save",
        "common.cancel": "Cancel",

        "chooser.folder": "Choose Database folder",
        "chooser.archive": "Choose Database archive",
        "chooser.archive.filter": "Archives (*.zip)",

        "sd.title": "Project settings",
        "sd.source": "Database / source:",
        "sd.source.folder": "Folder …",
        "sd.source.archive": "Archive …",
        "sd.language": "Language:",
        "sd.java": "Java version:",
        "sd.command": "Build command:",
        "sd.output": "Output folder:",
        "sd.overwrite": "Overwrite previous results",
        "sd.save.cache": "Keep cache",
        "sd.threads": "Threads (0 = all):",
        "sd.docker": "Docker executable:",
        "sd.pick.file": "Choose file",
        "sd.pick.folder": "Choose folder",
        "sd.check": "Check paths",
        "sd.sarif": "SARIF result: {path}",
        "sd.sarif.invalid": "SARIF result: –",
    },
}


# ---------- Sprache wählen & Fallback ----------
def _lang_from_system() -> str:
    """Systemsprache: 'de' bei deutscher Locale, sonst 'en'."""
    try:
        loc = locale.getlocale()[0] or ""
    except ValueError:
        loc = ""
    return "de" if loc.lower().startswith("de") else "en"


_current_lang = _lang_from_system()


# ---------- API ----------
def t(key: str, **kwargs) -> str:
    """
    Hole Übersetzung für 'key' in aktueller Sprache, fällt auf Englisch zurück,
    dann auf den Schlüssel selbst. Optionales .format(**kwargs).
    """
    bundle = _STRINGS.get(_current_lang, {})
    txt: Optional[str] = bundle.get(key)
    if txt is None:
        txt = _STRINGS["en"].get(key, key)
    if kwargs:
        return txt.format(**kwargs)
    return txt

