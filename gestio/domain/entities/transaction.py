"""Transaction entity representing money moving in or out."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class TransactionType(str, Enum):
    """Direction of a transaction."""

    INCOME = "income"  # Money in
    EXPENSE = "expense"  # Money out


@dataclass(frozen=True)
class Transaction:
    """
    Immutable representation of a stored transaction.

    Attributes:
        id: Store-assigned identifier
        amount: Always positive; direction is carried by `type`
        currency_code: Code of the referenced Currency
        type: Whether this is income or an expense
        created_at: Store-assigned creation instant
        description: Optional free text
        budget_id: Optional reference to a Budget
        created_by: Identifier of the creating user
    """

    id: str
    amount: Decimal
    currency_code: str
    type: TransactionType
    created_at: datetime
    description: Optional[str] = None
    budget_id: Optional[str] = None
    created_by: Optional[str] = None

    @property
    def is_income(self) -> bool:
        return self.type == TransactionType.INCOME

    @property
    def is_expense(self) -> bool:
        return self.type == TransactionType.EXPENSE

    @property
    def signed_amount(self) -> Decimal:
        """Amount with the sign implied by the transaction type."""
        return self.amount if self.is_income else -self.amount

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "amount": str(self.amount),
            "currency_code": self.currency_code,
            "type": self.type.value,
            "description": self.description,
            "budget_id": self.budget_id,
            "created_by": self.created_by,
            "created_at": self.created_at.isoformat(),
        }
