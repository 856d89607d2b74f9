from campus_events.filter.engine import (
    WEEK_WINDOW,
    filter_by_range,
    filter_by_text,
    filter_events,
)

__all__ = [
    "WEEK_WINDOW",
    "filter_by_range",
    "filter_by_text",
    "filter_events",
]
