"""
Liquidity calculation for the Gestio dashboard.

Liquidity is the running balance implied by all recorded transactions.
"""

from decimal import Decimal
from typing import Iterable

from gestio.domain.entities import Transaction


def total_liquidity(transactions: Iterable[Transaction]) -> Decimal:
    """
    Sum income minus expenses over all transactions.

    Algorithm:
        Add `amount` for income rows, subtract it for expense rows.
        Amounts are stored positive, so the sign comes from the type.

    Currency:
        Amounts in different currencies are summed as-is, without
        conversion. Dashboards mixing currencies will show a number
        that is not meaningful in any single currency.

    Args:
        transactions: Transactions already fetched from the store

    Returns:
        The net amount (can be negative). 0 for an empty input.
    """
    return sum((t.signed_amount for t in transactions), Decimal("0"))


def total_by_type(transactions: Iterable[Transaction]) -> tuple[Decimal, Decimal]:
    """Return (income, expense) totals, both non-negative."""
    income = Decimal("0")
    expense = Decimal("0")
    for t in transactions:
        if t.is_income:
            income += t.amount
        else:
            expense += t.amount
    return income, expense
