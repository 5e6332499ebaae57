"""
Tests for localization.
"""

import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from i18n import Language, LanguagePreference, Translator, TRANSLATIONS


class TestTranslations:

    def test_tables_have_same_keys(self):
        assert set(TRANSLATIONS["en"]) == set(TRANSLATIONS["ar"])

    def test_english_lookup(self):
        assert Translator(Language.EN).t("admin.title") == "Admin Dashboard"

    def test_arabic_lookup(self):
        assert Translator("ar").t("admin.delete") == "حذف"

    def test_unknown_key_falls_back_to_key(self):
        assert Translator(Language.AR).t("no.such.key") == "no.such.key"

    def test_direction(self):
        assert Translator(Language.EN).direction == "ltr"
        assert Translator(Language.AR).direction == "rtl"

    def test_switch_label_names_other_language(self):
        assert Translator(Language.EN).switch_label == "العربية"
        assert Translator(Language.AR).switch_label == "English"


class TestLanguage:

    @pytest.mark.parametrize("value,expected", [
        ("ar", Language.AR),
        (" EN ", Language.EN),
        ("fr", Language.EN),
        (None, Language.EN),
    ])
    def test_parse(self, value, expected):
        assert Language.parse(value) is expected

    def test_parse_with_default(self):
        assert Language.parse("xx", Language.AR) is Language.AR


class TestLanguagePreference:

    def test_default_when_missing(self, tmp_path):
        assert LanguagePreference(tmp_path / "prefs.json").load() is Language.EN

    def test_save_and_load(self, tmp_path):
        pref = LanguagePreference(tmp_path / "prefs.json")
        pref.save(Language.AR)

        assert LanguagePreference(tmp_path / "prefs.json").load() is Language.AR

    def test_unreadable_file_falls_back(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text("not json")

        assert LanguagePreference(path, default=Language.AR).load() is Language.AR

    def test_unknown_saved_value_falls_back(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text('{"preferred-language": "de"}')

        assert LanguagePreference(path).load() is Language.EN
