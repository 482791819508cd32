"""
Тесты для локализации интерфейса.
"""
import pytest
from hypothesis import given, strategies as st

from expense_tracker.utils.localization import Localizer, TRANSLATIONS, LANGUAGE_NAMES


def test_default_language_is_english():
    localizer = Localizer()
    assert localizer.language == "en"
    assert localizer.t("expenseList") == "Expense List"


def test_set_language_changes_subsequent_lookups():
    localizer = Localizer()
    localizer.set_language("bn")

    assert localizer.language == "bn"
    assert localizer.t("delete") == "মুছে ফেলুন"
    assert localizer.t("totalExpense") == "মোট ব্যয়"


def test_explicit_language_overrides_current():
    localizer = Localizer("en")

    assert localizer.translate("addIncome", language="bn") == "আয় যোগ করুন"
    assert localizer.language == "en"
    assert localizer.translate("addIncome") == "Add Income"


def test_instances_are_independent():
    english = Localizer("en")
    bengali = Localizer("bn")

    assert english.t("delete") == "Delete"
    assert bengali.t("delete") == "মুছে ফেলুন"


def test_unknown_language_uses_fallback():
    localizer = Localizer()
    localizer.set_language("fr")

    assert localizer.language == "fr"
    assert localizer.t("delete") == "Delete"


def test_fallback_language_is_configurable():
    localizer = Localizer("fr", fallback_language="bn")
    assert localizer.t("delete") == "মুছে ফেলুন"


def test_unknown_key_returns_key():
    assert Localizer("bn").t("noSuchKey") == "noSuchKey"


def test_every_language_has_the_same_keys():
    keys = set(TRANSLATIONS["en"])
    for code, table in TRANSLATIONS.items():
        assert set(table) == keys, code


def test_available_languages():
    languages = Localizer.available_languages()
    assert languages == {"en": "English", "bn": "বাংলা"}
    assert set(languages) == set(TRANSLATIONS)

    languages["xx"] = "changed"
    assert "xx" not in LANGUAGE_NAMES


@pytest.mark.parametrize("code", ["en", "bn"])
def test_original_keys_present(code):
    for key in ("expenseList", "addExpense", "expenseName", "expenseAmount",
                "delete", "totalExpense", "expenseAdded", "addIncome"):
        assert TRANSLATIONS[code][key]


@given(key=st.sampled_from(sorted(TRANSLATIONS["en"])), code=st.sampled_from(["en", "bn", "de"]))
def test_translate_never_returns_empty(key, code):
    assert Localizer().translate(key, language=code)
