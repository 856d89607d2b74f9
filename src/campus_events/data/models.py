"""Core data models for Campus Events."""

from datetime import UTC, datetime
from enum import StrEnum
from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, PrivateAttr

from campus_events.dates import parse_iso8601


class RangeFilter(StrEnum):
    """Relative time windows offered by the event feed."""

    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @property
    def label(self) -> str:
        """Display label for range selectors."""
        return _RANGE_LABELS[self]


_RANGE_LABELS = {
    RangeFilter.WEEK: "This Week",
    RangeFilter.MONTH: "This Month",
    RangeFilter.YEAR: "This Year",
}


class RemoteEvent(BaseModel):
    """An event record decoded from the remote JSON feed.

    Field names follow Python conventions; the wire keys (``dateISO``,
    ``imageURL``) are kept as aliases. Unknown keys in the payload are
    ignored, including any ``id`` key: the identifier is generated locally
    when the record is decoded and is never part of the wire format.
    """

    title: str
    city: str
    venue: str
    date_iso: str = Field(alias="dateISO")
    description: str
    source: str
    image_url: str | None = Field(default=None, alias="imageURL")
    link: str | None = None

    _id: UUID = PrivateAttr(default_factory=uuid4)

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def id(self) -> UUID:
        """Local identifier, used only for list identity."""
        return self._id

    @property
    def parsed_date(self) -> datetime | None:
        """Start time parsed from ``date_iso``, or None if it is malformed."""
        return parse_iso8601(self.date_iso)

    @property
    def event_date(self) -> datetime:
        """Start time, falling back to the current time on a malformed date."""
        parsed = self.parsed_date
        if parsed is None:
            return datetime.now(tz=UTC)
        return parsed

    @property
    def venue_line(self) -> str:
        return f"{self.venue}, {self.city}"

    def to_wire(self) -> dict[str, Any]:
        """Serialize back to the feed's JSON shape (without the local id)."""
        return self.model_dump(by_alias=True)
