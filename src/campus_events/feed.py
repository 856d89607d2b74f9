"""Event feed: the fetch cycle combined with the user's current filter selection."""

import logging
from datetime import datetime, tzinfo

from campus_events.data import RangeFilter, RemoteEvent
from campus_events.fetch.base import EventFetcher
from campus_events.fetch.state import FetchState, Loading
from campus_events.filter import filter_events

logger = logging.getLogger(__name__)

DEFAULT_PREVIEW_LIMIT = 3


class EventFeed:
    """Owns a fetcher plus the range selector and search text of one list view.

    Args:
        fetcher: Fetcher that loads the working set.
        endpoint: URL of the remote event list.
        timezone: Timezone used for "now" when filtering by calendar month/year.
        range_filter: Initially selected time window.
        preview_limit: Number of events shown by ``preview``.
    """

    def __init__(
        self,
        fetcher: EventFetcher,
        endpoint: str,
        *,
        timezone: tzinfo,
        range_filter: RangeFilter = RangeFilter.WEEK,
        preview_limit: int = DEFAULT_PREVIEW_LIMIT,
    ) -> None:
        self._fetcher = fetcher
        self._endpoint = endpoint
        self._timezone = timezone
        self._preview_limit = preview_limit
        self.range_filter = range_filter
        self.search_text = ""

    @property
    def state(self) -> FetchState:
        return self._fetcher.state

    @property
    def endpoint(self) -> str:
        return self._endpoint

    async def ensure_loaded(self) -> FetchState:
        """Fetch only if nothing has been loaded and no request is in flight."""
        if self._fetcher.events or isinstance(self._fetcher.state, Loading):
            return self._fetcher.state
        return await self.refresh()

    async def refresh(self) -> FetchState:
        """Replace the working set with a fresh fetch cycle."""
        logger.debug("Refreshing events from %s", self._endpoint)
        return await self._fetcher.fetch(self._endpoint)

    def now(self) -> datetime:
        return datetime.now(tz=self._timezone)

    def visible_events(self, now: datetime | None = None) -> list[RemoteEvent]:
        """Working set filtered by the current range selector and search text.

        Args:
            now: Reference instant; defaults to the current time in the
                feed's timezone.
        """
        return filter_events(
            self._fetcher.events,
            self.range_filter,
            self.search_text,
            now if now is not None else self.now(),
        )

    def preview(self, limit: int | None = None) -> list[RemoteEvent]:
        """First few events of the unfiltered working set."""
        n = self._preview_limit if limit is None else limit
        return list(self._fetcher.events[:n])
