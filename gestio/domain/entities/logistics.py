"""Logistics process entity and its detail map."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, Iterable, List, Mapping, Optional, Tuple


class ProcessStatus(str, Enum):
    """Kanban column of a logistics process."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


ACTIVE_STATUSES = frozenset({ProcessStatus.PENDING, ProcessStatus.IN_PROGRESS})


def validate_details(details: Mapping[str, object] | None) -> List[str]:
    """Return validation errors for a detail map (empty list when valid)."""
    if details is None:
        return []

    errors = []
    for key in details:
        if not isinstance(key, str) or not key.strip():
            errors.append("details keys must be non-empty strings")
            break
    return errors


def details_from_pairs(pairs: Iterable[Tuple[str, str]]) -> Optional[Dict[str, str]]:
    """
    Build an ordered detail map from form rows.

    Keys are stripped and rows with a blank key are dropped; a later
    row overrides an earlier one with the same key. Returns None when
    no rows remain.
    """
    details: Dict[str, str] = {}
    for key, value in pairs:
        key = (key or "").strip()
        if key:
            details[key] = "" if value is None else str(value)
    return details or None


@dataclass(frozen=True)
class LogisticsProcess:
    """A tracked logistics process with an open key/value detail map."""

    id: str
    name: str
    status: ProcessStatus
    created_at: datetime
    updated_at: datetime
    assigned_to: Optional[str] = None
    created_by: Optional[str] = None
    details: Dict[str, str] = field(default_factory=dict)

    @property
    def is_active(self) -> bool:
        return self.status in ACTIVE_STATUSES

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "status": self.status.value,
            "assigned_to": self.assigned_to,
            "created_by": self.created_by,
            "details": dict(self.details) or None,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
