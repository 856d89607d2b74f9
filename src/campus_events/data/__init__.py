"""Data models for Campus Events."""

from campus_events.data.models import RangeFilter, RemoteEvent

__all__ = [
    "RangeFilter",
    "RemoteEvent",
]
