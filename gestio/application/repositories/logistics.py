"""Logistics process repository."""

from typing import Dict, List, Tuple

from gestio.domain.entities import LogisticsProcess, ProcessStatus, validate_details
from gestio.domain.interfaces import EntityTable, Row

from .base import EntityRepository
from .rows import parse_instant, require_text


def process_from_row(row: Row) -> LogisticsProcess:
    details = row.get("details") or {}
    return LogisticsProcess(
        id=str(row["id"]),
        name=row["name"],
        status=ProcessStatus(row["status"]),
        assigned_to=row.get("assigned_to"),
        created_by=row.get("created_by"),
        details={str(k): "" if v is None else str(v) for k, v in details.items()},
        created_at=parse_instant(row["created_at"]),
        updated_at=parse_instant(row.get("updated_at") or row["created_at"]),
    )


class LogisticsRepository(EntityRepository[LogisticsProcess]):
    """Logistics processes, newest first."""

    table = EntityTable.LOGISTICS_PROCESSES
    entity_name = "logistics_process"

    def _to_entity(self, row: Row) -> LogisticsProcess:
        return process_from_row(row)

    def _defaults(self) -> dict:
        return {"status": ProcessStatus.PENDING.value}

    def _normalize(self, fields: dict, partial: bool) -> Tuple[dict, List[str]]:
        errors: List[str] = []
        require_text(fields, "name", errors, partial)

        if "status" in fields:
            try:
                fields["status"] = ProcessStatus(fields["status"]).value
            except ValueError:
                errors.append(
                    "status must be one of: "
                    + ", ".join(s.value for s in ProcessStatus)
                )

        if "details" in fields:
            details = fields["details"]
            if details is not None and not hasattr(details, "items"):
                errors.append("details must be a mapping")
            else:
                detail_errors = validate_details(details)
                errors.extend(detail_errors)
                if not detail_errors:
                    fields["details"] = _clean_details(details)

        return fields, errors


def _clean_details(details) -> Dict[str, str] | None:
    if not details:
        return None
    return {key.strip(): "" if value is None else str(value) for key, value in details.items()}
