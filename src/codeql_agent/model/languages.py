from __future__ import annotations

SUPPORTED_LANGUAGES = ("cpp", "csharp", "go", "java", "javascript", "python", "ruby")

# Platzhalter in den Settings für "nichts gewählt"
AUTO_DETECT_LANGUAGE = "Auto detect"
AUTO_JAVA_VERSION = "Auto"


def is_supported_language(name: str | None) -> bool:
    return bool(name) and name.strip().lower() in SUPPORTED_LANGUAGES
