"""Time-window and text filtering over the fetched event list.

All functions are pure: the reference instant is passed in by the caller and
the output keeps the input order.
"""

from collections.abc import Sequence
from datetime import datetime, timedelta

from campus_events.data import RangeFilter, RemoteEvent
from campus_events.dates import ensure_aware

WEEK_WINDOW = timedelta(days=7)


def filter_by_range(
    events: Sequence[RemoteEvent],
    range_filter: RangeFilter,
    now: datetime,
) -> list[RemoteEvent]:
    """Keep events that fall inside the selected time window.

    ``WEEK`` is forward-looking: ``now <= date <= now + 7 days``. ``MONTH``
    and ``YEAR`` compare calendar fields in ``now``'s timezone and include
    dates earlier than ``now``. Events whose date cannot be parsed are
    treated as happening at ``now``.

    Args:
        events: Events to filter.
        range_filter: Window to apply.
        now: Reference instant. Naive values are treated as UTC.

    Returns:
        Matching events in input order.
    """
    now = ensure_aware(now)
    range_filter = RangeFilter(range_filter)
    return [e for e in events if _in_window(_event_date(e, now), range_filter, now)]


def filter_by_text(events: Sequence[RemoteEvent], search_text: str) -> list[RemoteEvent]:
    """Keep events whose title or description contains ``search_text``.

    Matching is a case-insensitive substring test on the trimmed text. Blank
    search text keeps every event.
    """
    needle = search_text.strip().lower()
    if not needle:
        return list(events)
    return [
        e for e in events if needle in e.title.lower() or needle in e.description.lower()
    ]


def filter_events(
    events: Sequence[RemoteEvent],
    range_filter: RangeFilter,
    search_text: str,
    now: datetime,
) -> list[RemoteEvent]:
    """Apply the time window, then the text filter."""
    return filter_by_text(filter_by_range(events, range_filter, now), search_text)


def _event_date(event: RemoteEvent, now: datetime) -> datetime:
    parsed = event.parsed_date
    return parsed if parsed is not None else now


def _in_window(date: datetime, range_filter: RangeFilter, now: datetime) -> bool:
    if range_filter == RangeFilter.WEEK:
        return now <= date <= now + WEEK_WINDOW

    local = date.astimezone(now.tzinfo)
    if range_filter == RangeFilter.MONTH:
        return (local.year, local.month) == (now.year, now.month)
    return local.year == now.year
