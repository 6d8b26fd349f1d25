"""Display formatting driven by explicit user preferences."""

from datetime import date, datetime
from decimal import Decimal
from typing import Mapping, Optional

from gestio.core.preferences import UserPreferences
from gestio.domain.entities import Currency

_DATE_PATTERNS = {
    "DD/MM/YYYY": "{d:02d}/{m:02d}/{y:04d}",
    "MM/DD/YYYY": "{m:02d}/{d:02d}/{y:04d}",
}


def format_amount(
    amount: Decimal | float | int,
    preferences: UserPreferences,
    currency_code: Optional[str] = None,
    currencies: Optional[Mapping[str, Currency]] = None,
) -> str:
    """
    Format an amount with two decimals and thousands separators.

    The currency symbol is used when known, otherwise the code is
    appended. Falls back to the preferred currency when no code is given.
    """
    code = currency_code or preferences.default_currency
    text = f"{Decimal(str(amount)):,.2f}"

    currency = (currencies or {}).get(code)
    if currency is not None and currency.symbol:
        if text.startswith("-"):
            return f"-{currency.symbol}{text[1:]}"
        return f"{currency.symbol}{text}"
    return f"{text} {code}"


def format_date(value: date | datetime, preferences: UserPreferences) -> str:
    """Render a date or instant using the preferred day/month order."""
    pattern = _DATE_PATTERNS[preferences.date_format]
    return pattern.format(d=value.day, m=value.month, y=value.year)
