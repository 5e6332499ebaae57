"""
Language selection and string lookup.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from common.decorators import handle_errors
from utils.atomic_write import atomic_write_json

from .translations import TRANSLATIONS

logger = logging.getLogger(__name__)

PREFERENCE_KEY = "preferred-language"


class Language(Enum):
    """Supported interface languages."""
    EN = "en"
    AR = "ar"

    @classmethod
    def parse(cls, value: Optional[str], default: Optional["Language"] = None) -> "Language":
        """Parse a language code, falling back to ``default`` (English if unset)."""
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return default or cls.EN

    @property
    def is_rtl(self) -> bool:
        return self is Language.AR


class Translator:
    """Looks up interface strings for one language."""

    def __init__(self, language: Union[Language, str] = Language.EN):
        self.language = language if isinstance(language, Language) else Language.parse(language)

    def t(self, key: str) -> str:
        """Translate a key; unknown keys come back unchanged."""
        return TRANSLATIONS[self.language.value].get(key, key)

    @property
    def direction(self) -> str:
        """Text direction for the document (``rtl`` or ``ltr``)."""
        return "rtl" if self.language.is_rtl else "ltr"

    @property
    def code(self) -> str:
        return self.language.value

    @property
    def switch_label(self) -> str:
        """Label of the control that switches to the other language."""
        return self.t("lang.switch")


class LanguagePreference:
    """Persists the preferred interface language."""

    def __init__(self, path: Union[str, Path], default: Language = Language.EN):
        self.path = Path(path)
        self.default = default

    def load(self) -> Language:
        """Saved language, or the default when nothing usable is stored."""
        saved = self._read()
        if saved is None:
            return self.default
        return Language.parse(saved, self.default)

    @handle_errors(OSError, ValueError, AttributeError, default=None,
                   log_level=logging.WARNING, message="Ignoring unreadable language preference")
    def _read(self) -> Optional[str]:
        if not self.path.exists():
            return None
        data = json.loads(self.path.read_text(encoding="utf-8"))
        return data.get(PREFERENCE_KEY)

    def save(self, language: Language) -> None:
        """Store the preference."""
        atomic_write_json(self.path, {PREFERENCE_KEY: language.value})
        logger.info(f"Preferred language set to {language.value}")
