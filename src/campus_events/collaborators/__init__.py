"""Boundary interfaces for auth, document store and blob storage."""

from campus_events.collaborators.base import (
    AuthError,
    AuthProvider,
    BlobStorage,
    DocumentStore,
    Record,
    StorageError,
    StoreError,
)
from campus_events.collaborators.models import (
    EVENTS_COLLECTION,
    POSTERS_FOLDER,
    USERS_COLLECTION,
    CampusEvent,
    UserIdentity,
    new_poster_path,
)

__all__ = [
    "AuthError",
    "AuthProvider",
    "BlobStorage",
    "CampusEvent",
    "DocumentStore",
    "EVENTS_COLLECTION",
    "POSTERS_FOLDER",
    "Record",
    "StorageError",
    "StoreError",
    "USERS_COLLECTION",
    "UserIdentity",
    "new_poster_path",
]
