"""Internationalization System"""

import json
import os
from pathlib import Path
from typing import Any

SUPPORTED_LANGUAGES = {
    "pt": "Português",
    "en": "English",
}

# Fallback for missing languages and keys
DEFAULT_LANGUAGE = "en"

# Language the storefront displays messages in
DISPLAY_LANGUAGE = os.environ.get("DISPLAY_LANGUAGE", "pt")

_translations: dict[str, dict[str, Any]] = {}


def _get_locales_path() -> Path:
    """Get path to bundled locales directory"""
    return Path(__file__).parent.parent / "locales"


def _load_translations(lang: str) -> dict[str, Any]:
    """Load translations for a language"""
    if lang in _translations:
        return _translations[lang]

    file_path = _get_locales_path() / f"{lang}.json"

    if not file_path.exists():
        if lang != DEFAULT_LANGUAGE:
            return _load_translations(DEFAULT_LANGUAGE)
        return {}

    with open(file_path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        return {}
    _translations[lang] = data
    return data


def _lookup(translations: dict[str, Any], key: str) -> Any:
    current: Any = translations
    for part in key.split("."):
        if not isinstance(current, dict) or part not in current:
            return None
        current = current[part]
    return current


def get_text(key: str, lang: str | None = None, default: str | None = None) -> str:
    """
    Get translated text by key.

    Args:
        key: Translation key, dot notation for nesting (e.g., "cart.add_failed")
        lang: Language code (e.g., "pt", "en"); DISPLAY_LANGUAGE when omitted
        default: Default value if key not found (instead of returning key)

    Returns:
        Translated string or key/default if not found
    """
    lang = detect_language(lang or DISPLAY_LANGUAGE)

    text = _lookup(_load_translations(lang), key)

    if text is None and lang != DEFAULT_LANGUAGE:
        text = _lookup(_load_translations(DEFAULT_LANGUAGE), key)

    # Missing or partial key
    if not isinstance(text, str):
        return default if default is not None else key

    return text


def detect_language(language_code: str | None) -> str:
    """
    Normalize a language code to a supported one.

    Args:
        language_code: Language code, e.g. "pt-BR"

    Returns:
        Normalized supported language code
    """
    if not language_code:
        return DEFAULT_LANGUAGE

    lang = language_code.split("-")[0].lower()
    return lang if lang in SUPPORTED_LANGUAGES else DEFAULT_LANGUAGE
