"""Pydantic configuration models for Campus Events."""

from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator

from campus_events.data import RangeFilter

DEFAULT_ENDPOINT = "https://ed46cd907c564a10a26de530462262a3.api.mockbin.io/"

# ============================================================
# Feed Config
# ============================================================


class FeedConfig(BaseModel):
    """Configuration for the remote event feed."""

    endpoint: str = DEFAULT_ENDPOINT
    timeout_seconds: float = Field(default=30.0, gt=0)
    default_range: RangeFilter = RangeFilter.WEEK
    timezone: str = "Asia/Dubai"
    preview_limit: int = Field(default=3, ge=0)

    model_config = {"frozen": True}

    @field_validator("timezone")
    @classmethod
    def timezone_must_exist(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {v}") from e
        return v


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for application logging."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class CampusEventsConfig(BaseModel):
    """Root configuration for Campus Events."""

    feed: FeedConfig = Field(default_factory=FeedConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
