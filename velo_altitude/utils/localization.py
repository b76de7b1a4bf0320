"""Helpers for per-language display strings."""

from typing import Any

from velo_altitude.config import settings

SUPPORTED_LANGUAGES = ("fr", "en")
# Content is authored in French; other translations may be partial
BASE_LANGUAGE = "fr"


def localize(value: Any, language: str = BASE_LANGUAGE) -> str:
    """Resolve a string or a {language: text} mapping to a plain string.

    Falls back to French, then to the first available translation.
    """
    if value is None:
        return ""
    if isinstance(value, dict):
        if language in value and value[language] is not None:
            return str(value[language])
        if BASE_LANGUAGE in value and value[BASE_LANGUAGE] is not None:
            return str(value[BASE_LANGUAGE])
        for text in value.values():
            if text is not None:
                return str(text)
        return ""
    return str(value)


def default_language() -> str:
    """The configured display language, if supported."""
    configured = (settings.default_language or "").lower()
    return configured if configured in SUPPORTED_LANGUAGES else BASE_LANGUAGE


def normalize_language(language: str | None) -> str:
    """Return a supported language code, defaulting to the configured one."""
    if language and language.lower() in SUPPORTED_LANGUAGES:
        return language.lower()
    return default_language()
