"""Tests for configuration loading and factory functions."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from campus_events.config import (
    DEFAULT_ENDPOINT,
    CampusEventsConfig,
    FeedConfig,
    LoggingConfig,
    create_feed,
    create_fetcher,
    create_from_config,
    get_default_config_path,
    load_config,
)
from campus_events.data import RangeFilter
from campus_events.feed import EventFeed
from campus_events.fetch import RemoteEventFetcher


class TestConfigModels:
    """Tests for Pydantic config models."""

    def test_feed_config_defaults(self) -> None:
        config = FeedConfig()
        assert config.endpoint == DEFAULT_ENDPOINT
        assert config.timeout_seconds == 30.0
        assert config.default_range is RangeFilter.WEEK
        assert config.timezone == "Asia/Dubai"
        assert config.preview_limit == 3

    def test_logging_config_defaults(self) -> None:
        assert LoggingConfig().level == "INFO"

    def test_root_config_defaults(self) -> None:
        config = CampusEventsConfig()
        assert isinstance(config.feed, FeedConfig)
        assert isinstance(config.logging, LoggingConfig)

    def test_range_from_string(self) -> None:
        config = FeedConfig.model_validate({"default_range": "month"})
        assert config.default_range is RangeFilter.MONTH

    def test_rejects_unknown_range(self) -> None:
        with pytest.raises(ValidationError):
            FeedConfig.model_validate({"default_range": "decade"})

    def test_rejects_unknown_timezone(self) -> None:
        with pytest.raises(ValidationError, match="Unknown timezone"):
            FeedConfig(timezone="Mars/Olympus_Mons")

    def test_rejects_non_positive_timeout(self) -> None:
        with pytest.raises(ValidationError):
            FeedConfig(timeout_seconds=0)

    def test_rejects_unknown_log_level(self) -> None:
        with pytest.raises(ValidationError):
            LoggingConfig.model_validate({"level": "LOUD"})

    def test_config_is_frozen(self) -> None:
        config = FeedConfig()
        with pytest.raises(ValidationError):
            config.endpoint = "https://other.example.com"  # type: ignore[misc]


class TestLoader:
    """Tests for YAML loading."""

    def test_load_config(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text(
            "feed:\n"
            "  endpoint: https://events.example.com/uae\n"
            "  default_range: year\n"
            "  timezone: UTC\n"
            "logging:\n"
            "  level: DEBUG\n"
        )
        config = load_config(path)
        assert config.feed.endpoint == "https://events.example.com/uae"
        assert config.feed.default_range is RangeFilter.YEAR
        assert config.feed.timezone == "UTC"
        assert config.logging.level == "DEBUG"

    def test_load_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == CampusEventsConfig()

    def test_load_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_default_config_loads(self) -> None:
        path = get_default_config_path()
        assert path.exists()
        config = load_config(path)
        assert config.feed.endpoint == DEFAULT_ENDPOINT


class TestFactory:
    """Tests for factory functions."""

    def test_create_fetcher(self) -> None:
        fetcher = create_fetcher(FeedConfig(timeout_seconds=5.0))
        assert isinstance(fetcher, RemoteEventFetcher)
        assert fetcher._timeout == 5.0

    def test_create_feed(self) -> None:
        feed = create_feed(FeedConfig(default_range=RangeFilter.MONTH, preview_limit=5))
        assert isinstance(feed, EventFeed)
        assert feed.range_filter is RangeFilter.MONTH
        assert feed.endpoint == DEFAULT_ENDPOINT
        assert feed._preview_limit == 5

    def test_create_from_config_endpoint_override(self) -> None:
        feed = create_from_config(
            CampusEventsConfig(),
            endpoint_override="https://events.example.com/other",
        )
        assert feed.endpoint == "https://events.example.com/other"

    def test_create_from_config_keeps_endpoint(self) -> None:
        feed = create_from_config(CampusEventsConfig())
        assert feed.endpoint == DEFAULT_ENDPOINT
