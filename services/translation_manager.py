# -*- coding: utf-8 -*-
"""
Translation Manager for the intake UI.

Strings live in services/translations/<lang>.py. Lookups fall back to
English, then to the key itself, so a half-translated catalogue never
blanks a label.
"""

from typing import Dict, Set

from PyQt5.QtCore import Qt

from services.translations.ar import AR_TRANSLATIONS
from services.translations.en import EN_TRANSLATIONS
from utils.logger import get_logger

logger = get_logger(__name__)

FALLBACK_LANGUAGE = "en"
RTL_LANGUAGES = ("ar", "he", "fa")

CATALOGUES: Dict[str, Dict[str, str]] = {
    "en": EN_TRANSLATIONS,
    "ar": AR_TRANSLATIONS,
}


class TranslationManager:
    """Singleton holding the active language."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._current_language = FALLBACK_LANGUAGE
        return cls._instance

    def set_language(self, lang_code: str):
        if lang_code not in CATALOGUES:
            logger.warning(f"Unsupported language '{lang_code}', using {FALLBACK_LANGUAGE}")
            lang_code = FALLBACK_LANGUAGE
        if self._current_language != lang_code:
            self._current_language = lang_code
            logger.info(f"Language changed to: {lang_code}")

    def get_language(self) -> str:
        return self._current_language

    def tr(self, key: str, **kwargs) -> str:
        translation = CATALOGUES[self._current_language].get(key)
        if translation is None:
            translation = CATALOGUES[FALLBACK_LANGUAGE].get(key)
        if translation is None:
            logger.debug(f"Missing translation key: {key}")
            return key
        if kwargs:
            try:
                translation = translation.format(**kwargs)
            except (KeyError, ValueError):
                logger.debug(f"Could not format translation '{key}' with {kwargs}")
        return translation

    def is_rtl(self) -> bool:
        return self._current_language in RTL_LANGUAGES

    def get_layout_direction(self):
        return Qt.RightToLeft if self.is_rtl() else Qt.LeftToRight


def missing_keys(lang_code: str) -> Set[str]:
    """Keys present in the English catalogue but not in lang_code."""
    return set(CATALOGUES[FALLBACK_LANGUAGE]) - set(CATALOGUES.get(lang_code, {}))


_translator = TranslationManager()


def tr(key: str, **kwargs) -> str:
    return _translator.tr(key, **kwargs)


def set_language(lang_code: str):
    _translator.set_language(lang_code)


def get_language() -> str:
    return _translator.get_language()


def is_rtl() -> bool:
    return _translator.is_rtl()


def get_layout_direction():
    return _translator.get_layout_direction()
