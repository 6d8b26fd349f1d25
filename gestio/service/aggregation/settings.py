"""
Aggregation Settings for the Gestio dashboard.

Tunable sizes and thresholds used by the aggregation functions and the
repositories that feed them.

Environment variables use the AGGREGATION_ prefix:
    AGGREGATION_SERIES_WINDOW=7
    AGGREGATION_EXPORT_TRANSACTION_LIMIT=1000

Usage:
    from gestio.service.aggregation.settings import aggregation_settings

    window = aggregation_settings.series_window

    # Or create custom settings for testing
    custom = AggregationSettings(series_window=14)
"""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AggregationSettings(BaseSettings):
    """
    Configurable parameters for dashboard aggregation.

    All settings can be overridden via environment variables with the
    AGGREGATION_ prefix. Percentages are on a 0-100 scale.
    """

    model_config = SettingsConfigDict(
        env_prefix="AGGREGATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Chart Sizes ===
    series_window: int = Field(
        default=7,
        ge=1,
        description="Number of most recent day buckets kept in the income/expense series",
    )
    distribution_size: int = Field(
        default=5,
        ge=1,
        description="Number of budgets shown in the distribution chart",
    )

    # === Fetch Limits ===
    default_transaction_limit: int = Field(
        default=10,
        ge=1,
        description="Rows fetched by a transaction list without an explicit limit",
    )
    analytics_transaction_limit: int = Field(
        default=100,
        ge=1,
        description="Rows fetched for the analytics charts",
    )
    export_transaction_limit: int = Field(
        default=1000,
        ge=1,
        description="Rows fetched for report exports",
    )

    # === Refresh ===
    refresh_interval_seconds: float = Field(
        default=30.0,
        gt=0.0,
        description="Interval between scheduled list refreshes",
    )

    # === Budget Progress ===
    progress_warning_threshold: float = Field(
        default=75.0,
        ge=0.0,
        description="Execution percentage at which a budget is shown as a warning",
    )
    progress_danger_threshold: float = Field(
        default=90.0,
        ge=0.0,
        description="Execution percentage at which a budget is shown as critical",
    )

    @model_validator(mode="after")
    def validate_thresholds(self) -> "AggregationSettings":
        """Ensure the warning level sits below the danger level."""
        if self.progress_warning_threshold > self.progress_danger_threshold:
            raise ValueError(
                f"progress_warning_threshold ({self.progress_warning_threshold}) "
                f"> progress_danger_threshold ({self.progress_danger_threshold})"
            )
        return self


@lru_cache
def get_aggregation_settings() -> AggregationSettings:
    """Get cached aggregation settings instance."""
    return AggregationSettings()


aggregation_settings = get_aggregation_settings()
