"""
User preferences with an explicit load/save boundary.

Preferences are a plain value passed to the functions that need them
(formatting, budget alerts). They are read once at process start and
written back only when the caller saves a change.
"""

import json
from pathlib import Path
from typing import Any, Literal

import structlog
from pydantic import BaseModel, ConfigDict, ValidationError

logger = structlog.get_logger(__name__)


class UserPreferences(BaseModel):
    """Display and alerting preferences for a dashboard user."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    language: Literal["es", "en", "pt"] = "es"
    default_currency: Literal["USD", "EUR", "BRL", "ARS"] = "USD"
    date_format: Literal["DD/MM/YYYY", "MM/DD/YYYY"] = "DD/MM/YYYY"
    budget_alerts: bool = True
    budget_threshold: Literal[70, 80, 90] = 80

    def updated(self, **changes: Any) -> "UserPreferences":
        """Return a validated copy with the given fields replaced."""
        return UserPreferences.model_validate({**self.model_dump(), **changes})


DEFAULT_PREFERENCES = UserPreferences()


class PreferencesStore:
    """Reads and writes UserPreferences as a JSON file."""

    def __init__(self, path: str | Path):
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> UserPreferences:
        """
        Load saved preferences.

        A missing, unreadable or invalid file yields the defaults.
        """
        if not self._path.exists():
            return DEFAULT_PREFERENCES

        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
            return UserPreferences.model_validate(data)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            logger.warning(
                "preferences_load_failed",
                path=str(self._path),
                error=str(e),
            )
            return DEFAULT_PREFERENCES

    def save(self, preferences: UserPreferences) -> None:
        """Persist preferences, creating the parent directory if needed."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(preferences.model_dump_json(indent=2), encoding="utf-8")
        logger.info("preferences_saved", path=str(self._path))

    def reset(self) -> UserPreferences:
        """Forget saved preferences and return the defaults."""
        self._path.unlink(missing_ok=True)
        logger.info("preferences_reset", path=str(self._path))
        return DEFAULT_PREFERENCES
