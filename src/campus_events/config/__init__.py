"""Configuration module for Campus Events."""

from campus_events.config.factory import create_feed, create_fetcher, create_from_config
from campus_events.config.loader import get_default_config_path, load_config
from campus_events.config.models import (
    DEFAULT_ENDPOINT,
    CampusEventsConfig,
    FeedConfig,
    LoggingConfig,
)

__all__ = [
    "CampusEventsConfig",
    "DEFAULT_ENDPOINT",
    "FeedConfig",
    "LoggingConfig",
    "create_feed",
    "create_fetcher",
    "create_from_config",
    "get_default_config_path",
    "load_config",
]
