"""Coercion helpers between store rows and Python values."""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, List, Optional


def parse_instant(value: Any) -> datetime:
    """Parse an ISO-8601 timestamp as returned by the store."""
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


def parse_date(value: Any) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value))


def parse_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def coerce_amount(
    fields: dict,
    name: str,
    errors: List[str],
    allow_zero: bool = False,
) -> None:
    """
    Replace fields[name] with a Decimal in place, collecting errors.

    Amounts must be positive (or non-negative when allow_zero is set)
    and fit the store's two-decimal columns.
    """
    if name not in fields:
        return
    try:
        value = parse_decimal(fields[name])
    except (InvalidOperation, ValueError, TypeError):
        errors.append(f"{name} must be a number")
        return
    if not value.is_finite():
        errors.append(f"{name} must be a number")
    elif allow_zero and value < 0:
        errors.append(f"{name} must not be negative")
    elif not allow_zero and value <= 0:
        errors.append(f"{name} must be positive")
    elif value.normalize().as_tuple().exponent < -2:
        errors.append(f"{name} must have at most 2 decimal places")
    else:
        fields[name] = value


def coerce_date(fields: dict, name: str, errors: List[str]) -> None:
    """Replace fields[name] with a date (or None) in place, collecting errors."""
    if name not in fields:
        return
    try:
        fields[name] = parse_date(fields[name])
    except (ValueError, TypeError):
        errors.append(f"{name} must be an ISO date")


def require_text(fields: dict, name: str, errors: List[str], partial: bool) -> None:
    """Check a required text field, stripping surrounding whitespace."""
    if name not in fields:
        if not partial:
            errors.append(f"{name} is required")
        return
    value = fields[name]
    if not isinstance(value, str) or not value.strip():
        errors.append(f"{name} is required")
    else:
        fields[name] = value.strip()
