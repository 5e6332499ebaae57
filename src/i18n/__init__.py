"""
AppReferenceHub Localization

English/Arabic string tables and language preference.
"""

from .language import Language, Translator, LanguagePreference
from .translations import TRANSLATIONS

__all__ = [
    "Language",
    "Translator",
    "LanguagePreference",
    "TRANSLATIONS",
]
