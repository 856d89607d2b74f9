"""Factory functions to create components from configuration."""

from zoneinfo import ZoneInfo

import httpx

from campus_events.config.models import CampusEventsConfig, FeedConfig
from campus_events.feed import EventFeed
from campus_events.fetch.remote import RemoteEventFetcher


def create_fetcher(
    config: FeedConfig,
    *,
    client: httpx.AsyncClient | None = None,
) -> RemoteEventFetcher:
    """Create a remote event fetcher from config."""
    return RemoteEventFetcher(client=client, timeout=config.timeout_seconds)


def create_feed(
    config: FeedConfig,
    *,
    client: httpx.AsyncClient | None = None,
) -> EventFeed:
    """Create an event feed, with its fetcher, from config."""
    return EventFeed(
        create_fetcher(config, client=client),
        config.endpoint,
        timezone=ZoneInfo(config.timezone),
        range_filter=config.default_range,
        preview_limit=config.preview_limit,
    )


def create_from_config(
    config: CampusEventsConfig,
    *,
    endpoint_override: str | None = None,
) -> EventFeed:
    """Create the event feed from root config.

    Args:
        config: Root configuration.
        endpoint_override: Use this endpoint instead of ``feed.endpoint``.

    Returns:
        A configured EventFeed.
    """
    feed_config = config.feed
    if endpoint_override is not None:
        feed_config = feed_config.model_copy(update={"endpoint": endpoint_override})
    return create_feed(feed_config)
