from campus_events.fetch.base import EventFetcher
from campus_events.fetch.remote import RemoteEventFetcher
from campus_events.fetch.state import (
    Failed,
    FetchErrorKind,
    FetchState,
    Idle,
    Loading,
    Ready,
)

__all__ = [
    "EventFetcher",
    "Failed",
    "FetchErrorKind",
    "FetchState",
    "Idle",
    "Loading",
    "Ready",
    "RemoteEventFetcher",
]
