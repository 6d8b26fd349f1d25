"""
Unit tests for user preferences and display formatting.

These tests verify:
1. Defaults and validation of UserPreferences
2. PreferencesStore load/save/reset against a JSON file
3. Amount and date formatting driven by explicit preferences
4. Detail maps built from form rows
"""

import json
from datetime import date, datetime, timezone
from decimal import Decimal

import pytest
from pydantic import ValidationError

from gestio.core.preferences import (
    DEFAULT_PREFERENCES,
    PreferencesStore,
    UserPreferences,
)
from gestio.domain.entities import Currency, details_from_pairs, validate_details
from gestio.service.formatting import format_amount, format_date


# =============================================================================
# UserPreferences
# =============================================================================

class TestUserPreferences:

    def test_defaults(self):
        prefs = UserPreferences()
        assert prefs.language == "es"
        assert prefs.default_currency == "USD"
        assert prefs.date_format == "DD/MM/YYYY"
        assert prefs.budget_alerts is True
        assert prefs.budget_threshold == 80

    def test_updated_returns_new_value(self):
        prefs = UserPreferences()
        changed = prefs.updated(language="en", budget_threshold=90)
        assert changed.language == "en"
        assert changed.budget_threshold == 90
        assert prefs.language == "es"

    @pytest.mark.parametrize(
        "field,value",
        [("language", "fr"), ("default_currency", "JPY"), ("budget_threshold", 75)],
    )
    def test_rejects_unknown_values(self, field, value):
        with pytest.raises(ValidationError):
            UserPreferences().updated(**{field: value})


class TestPreferencesStore:

    def test_missing_file_gives_defaults(self, tmp_path):
        store = PreferencesStore(tmp_path / "prefs.json")
        assert store.load() == DEFAULT_PREFERENCES

    def test_save_then_load(self, tmp_path):
        store = PreferencesStore(tmp_path / "nested" / "prefs.json")
        prefs = UserPreferences(language="pt", date_format="MM/DD/YYYY")

        store.save(prefs)

        assert store.load() == prefs
        assert json.loads(store.path.read_text())["language"] == "pt"

    def test_invalid_file_gives_defaults(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text("{not json")
        assert PreferencesStore(path).load() == DEFAULT_PREFERENCES

    def test_invalid_values_give_defaults(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text(json.dumps({"budget_threshold": 55}))
        assert PreferencesStore(path).load() == DEFAULT_PREFERENCES

    def test_unknown_keys_are_ignored(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text(json.dumps({"language": "en", "theme": "dark"}))
        assert PreferencesStore(path).load().language == "en"

    def test_reset_removes_file(self, tmp_path):
        store = PreferencesStore(tmp_path / "prefs.json")
        store.save(UserPreferences(language="en"))

        assert store.reset() == DEFAULT_PREFERENCES
        assert not store.path.exists()


# =============================================================================
# Formatting
# =============================================================================

def currency(code: str, symbol: str | None) -> Currency:
    return Currency(
        code=code,
        name=code,
        symbol=symbol,
        rate_to_usd=Decimal("1"),
        updated_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


class TestFormatting:

    def test_amount_with_symbol(self):
        currencies = {"USD": currency("USD", "$")}
        assert format_amount(Decimal("1234.5"), DEFAULT_PREFERENCES, "USD", currencies) == "$1,234.50"

    def test_negative_amount_with_symbol(self):
        currencies = {"USD": currency("USD", "$")}
        assert format_amount(Decimal("-15"), DEFAULT_PREFERENCES, "USD", currencies) == "-$15.00"

    def test_amount_without_symbol_uses_code(self):
        assert format_amount(Decimal("10"), DEFAULT_PREFERENCES, "EUR") == "10.00 EUR"

    def test_amount_defaults_to_preferred_currency(self):
        prefs = UserPreferences(default_currency="BRL")
        assert format_amount(3, prefs) == "3.00 BRL"

    def test_date_day_first(self):
        assert format_date(date(2024, 3, 5), DEFAULT_PREFERENCES) == "05/03/2024"

    def test_date_month_first(self):
        prefs = UserPreferences(date_format="MM/DD/YYYY")
        instant = datetime(2024, 3, 5, 23, 0, tzinfo=timezone.utc)
        assert format_date(instant, prefs) == "03/05/2024"


# =============================================================================
# Detail maps
# =============================================================================

class TestDetails:

    def test_pairs_are_stripped_and_blank_keys_dropped(self):
        details = details_from_pairs([(" carrier ", "ACME"), ("", "x"), ("  ", "y"), ("eta", "Fri")])
        assert list(details.items()) == [("carrier", "ACME"), ("eta", "Fri")]

    def test_no_pairs_gives_none(self):
        assert details_from_pairs([("", "orphan")]) is None

    def test_later_pair_overrides_earlier(self):
        assert details_from_pairs([("k", "1"), ("k", "2")]) == {"k": "2"}

    def test_validate_rejects_blank_key(self):
        assert validate_details({"ok": "1", " ": "2"})
        assert validate_details({"ok": "1"}) == []
        assert validate_details(None) == []
