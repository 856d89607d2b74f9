"""Records exchanged with the auth and document-store backends."""

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Any

EVENTS_COLLECTION = "Events"
USERS_COLLECTION = "Users"
POSTERS_FOLDER = "eventPosters"


@dataclass(frozen=True)
class UserIdentity:
    """A signed-in user."""

    uid: str
    email: str
    is_admin: bool = False


@dataclass(frozen=True)
class CampusEvent:
    """A campus event document in the ``Events`` collection.

    ``id`` is the store's document id and is None until the document has
    been created.
    """

    title: str
    description: str
    date: datetime
    city: str
    venue: str
    source: str = "Campus"
    poster: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    id: str | None = None

    def to_fields(self) -> dict[str, Any]:
        """Document fields as stored in the ``Events`` collection."""
        fields: dict[str, Any] = {
            "Title": self.title,
            "Description": self.description,
            "Date": self.date,
            "City": self.city,
            "Venue": self.venue,
            "Source": self.source,
        }
        if self.poster is not None:
            fields["Poster"] = self.poster
        # Coordinates are only meaningful as a pair
        if self.latitude is not None and self.longitude is not None:
            fields["latitude"] = self.latitude
            fields["longitude"] = self.longitude
        return fields

    @staticmethod
    def from_fields(doc_id: str, fields: dict[str, Any]) -> "CampusEvent":
        return CampusEvent(
            id=doc_id,
            title=fields["Title"],
            description=fields["Description"],
            date=fields["Date"],
            city=fields["City"],
            venue=fields["Venue"],
            source=fields["Source"],
            poster=fields.get("Poster"),
            latitude=fields.get("latitude"),
            longitude=fields.get("longitude"),
        )


def new_poster_path() -> str:
    """Storage path for a newly uploaded poster image."""
    return f"{POSTERS_FOLDER}/poster-{str(uuid.uuid4()).upper()}.jpg"
