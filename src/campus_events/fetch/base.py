from collections.abc import Callable
from typing import Protocol

from campus_events.data import RemoteEvent
from campus_events.fetch.state import FetchState


class EventFetcher(Protocol):
    """Interface for loading the remote event list."""

    @property
    def state(self) -> FetchState:
        """Current lifecycle state."""
        ...

    @property
    def events(self) -> tuple[RemoteEvent, ...]:
        """Working set of the last successful fetch, empty otherwise."""
        ...

    def add_listener(self, listener: Callable[[FetchState], None]) -> None:
        """Register a callback invoked on every state transition."""
        ...

    async def fetch(self, endpoint: str) -> FetchState:
        """Run one fetch cycle against ``endpoint``.

        Args:
            endpoint: Absolute http(s) URL of the JSON event list.

        Returns:
            The state the fetcher ended in. Errors are reported as a
            ``Failed`` state, never raised.
        """
        ...
