"""Campus Events: fetch, filter and browse campus and UAE event listings."""

from campus_events.collaborators import (
    AuthError,
    AuthProvider,
    BlobStorage,
    CampusEvent,
    DocumentStore,
    StorageError,
    StoreError,
    UserIdentity,
)
from campus_events.config import CampusEventsConfig, create_from_config, load_config
from campus_events.data import RangeFilter, RemoteEvent
from campus_events.dates import parse_iso8601
from campus_events.feed import EventFeed
from campus_events.fetch import (
    EventFetcher,
    Failed,
    FetchErrorKind,
    FetchState,
    Idle,
    Loading,
    Ready,
    RemoteEventFetcher,
)
from campus_events.filter import filter_by_range, filter_by_text, filter_events

__all__ = [
    # Models
    "CampusEvent",
    "RangeFilter",
    "RemoteEvent",
    "UserIdentity",
    # Fetch states
    "Failed",
    "FetchErrorKind",
    "FetchState",
    "Idle",
    "Loading",
    "Ready",
    # Protocols
    "AuthProvider",
    "BlobStorage",
    "DocumentStore",
    "EventFetcher",
    # Errors
    "AuthError",
    "StorageError",
    "StoreError",
    # Fetching
    "RemoteEventFetcher",
    # Filtering
    "filter_by_range",
    "filter_by_text",
    "filter_events",
    "parse_iso8601",
    # Feed
    "EventFeed",
    # Config
    "CampusEventsConfig",
    "create_from_config",
    "load_config",
]
