"""Interfaces of the backend services the app delegates to.

Only the boundary is defined here; implementations wrap a hosted
backend-as-a-service. Failures are raised as the error types below.
"""

from collections.abc import AsyncIterator
from typing import Any, Protocol

from campus_events.collaborators.models import UserIdentity


class AuthError(Exception):
    """Sign-in, sign-up or sign-out failed."""


class StoreError(Exception):
    """A document-store read or write failed."""


class StorageError(Exception):
    """A blob upload or URL lookup failed."""


class Record(Protocol):
    """A document snapshot delivered by ``DocumentStore.subscribe``."""

    @property
    def id(self) -> str: ...

    def to_dict(self) -> dict[str, Any]: ...


class AuthProvider(Protocol):
    """Interface for email/password authentication."""

    async def sign_in(self, email: str, password: str) -> UserIdentity: ...

    async def sign_up(self, email: str, password: str) -> UserIdentity: ...

    async def sign_out(self) -> None: ...

    def current_user(self) -> UserIdentity | None: ...


class DocumentStore(Protocol):
    """Interface for a real-time document store."""

    def subscribe(self, collection: str) -> AsyncIterator[list[Record]]:
        """Stream the full ordered contents of ``collection`` on every change."""
        ...

    async def add_document(self, collection: str, fields: dict[str, Any]) -> str:
        """Create a document and return its generated id."""
        ...

    async def set_document(
        self,
        collection: str,
        doc_id: str,
        fields: dict[str, Any],
        *,
        merge: bool = False,
    ) -> None:
        """Write a document, merging into existing fields when ``merge`` is set."""
        ...

    async def delete_document(self, collection: str, doc_id: str) -> None: ...


class BlobStorage(Protocol):
    """Interface for binary file storage."""

    async def upload(self, path: str, data: bytes) -> None: ...

    async def get_download_url(self, path: str) -> str: ...
