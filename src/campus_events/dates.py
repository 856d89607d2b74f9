"""Strict ISO-8601 date-time parsing for event feeds."""

import re
from datetime import UTC, datetime

# Full date, full time and an explicit zone designator are all required.
_ISO8601_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d{1,6})?(Z|[+-]\d{2}:?\d{2})$"
)


def parse_iso8601(value: str) -> datetime | None:
    """Parse an extended ISO-8601 date-time such as ``2025-11-16T20:00:00Z``.

    Date-only strings, strings without a zone designator and out-of-range
    components are rejected.

    Args:
        value: Wire representation of the date-time.

    Returns:
        A timezone-aware datetime, or None if ``value`` is not a valid
        ISO-8601 date-time.
    """
    if not _ISO8601_PATTERN.match(value):
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None


def ensure_aware(value: datetime) -> datetime:
    """Interpret naive datetimes as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
