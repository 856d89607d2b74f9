"""Remote event list fetching over HTTP using httpx."""

import asyncio
import logging
from collections.abc import Callable

import httpx
from pydantic import TypeAdapter, ValidationError

from campus_events.data import RemoteEvent
from campus_events.fetch.state import (
    Failed,
    FetchErrorKind,
    FetchState,
    Idle,
    Loading,
    Ready,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0

_EVENT_LIST_ADAPTER = TypeAdapter(list[RemoteEvent])


class RemoteEventFetcher:
    """Fetch and decode the remote JSON event list.

    Every state transition is published from the coroutine running
    ``fetch``, so listeners run on the event loop and always observe
    complete batches. Concurrent calls are not coalesced, but each call takes
    a generation number and a response that arrives after a newer fetch has
    started is discarded instead of overwriting the newer state.

    Args:
        client: Shared ``httpx.AsyncClient``. If omitted, a client is created
            for each fetch cycle and closed afterwards.
        timeout: Request timeout in seconds for clients created here.
    """

    def __init__(
        self,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._client = client
        self._timeout = timeout
        self._state: FetchState = Idle()
        self._listeners: list[Callable[[FetchState], None]] = []
        self._generation = 0

    @property
    def state(self) -> FetchState:
        """Current lifecycle state."""
        return self._state

    @property
    def events(self) -> tuple[RemoteEvent, ...]:
        """Working set of the last successful fetch, empty otherwise."""
        if isinstance(self._state, Ready):
            return self._state.events
        return ()

    @property
    def is_loading(self) -> bool:
        return isinstance(self._state, Loading)

    def add_listener(self, listener: Callable[[FetchState], None]) -> None:
        """Register a callback invoked with each new state, in order."""
        self._listeners.append(listener)

    async def fetch(self, endpoint: str) -> FetchState:
        """Run one fetch cycle against ``endpoint``.

        Args:
            endpoint: Absolute http(s) URL of the JSON event list.

        Returns:
            The resulting state. Failures are reported as ``Failed`` and
            never raised.
        """
        self._generation += 1
        generation = self._generation

        url = _parse_endpoint(endpoint)
        if url is None:
            logger.warning("Invalid events endpoint: %r", endpoint)
            self._set_state(Failed("Invalid URL", FetchErrorKind.INVALID_ENDPOINT))
            return self._state

        self._set_state(Loading())
        try:
            outcome = await self._run_cycle(url)
        except asyncio.CancelledError:
            # A cancelled request must not leave the fetcher stuck in Loading
            if generation == self._generation:
                logger.info("Fetch of %s cancelled", url)
                self._set_state(Idle())
            raise

        if generation != self._generation:
            logger.info("Discarding response from superseded fetch of %s", url)
            return self._state

        self._set_state(outcome)
        return outcome

    async def _run_cycle(self, url: httpx.URL) -> Ready | Failed:
        """Execute the request and decode the response body."""
        try:
            response = await self._get(url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("Error fetching events from %s. Error: %s", url, e)
            return Failed(f"Network error: {_describe(e)}", FetchErrorKind.TRANSPORT_FAILURE)

        body = response.content
        if not body or not body.strip():
            logger.warning("Empty response body from %s", url)
            return Failed("No data received", FetchErrorKind.EMPTY_BODY)

        try:
            events = _EVENT_LIST_ADAPTER.validate_json(body)
        except ValidationError as e:
            logger.warning("Error decoding events from %s. Error: %s", url, e)
            return Failed(
                f"Decode error: {_describe_validation_error(e)}",
                FetchErrorKind.DECODE_FAILURE,
            )

        logger.info("Fetched %d events from %s", len(events), url)
        return Ready(events=tuple(events))

    async def _get(self, url: httpx.URL) -> httpx.Response:
        if self._client is not None:
            return await self._client.get(url)
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            return await client.get(url)

    def _set_state(self, state: FetchState) -> None:
        self._state = state
        for listener in self._listeners:
            listener(state)


def _parse_endpoint(endpoint: str) -> httpx.URL | None:
    """Return the endpoint as an absolute http(s) URL, or None if it is not one."""
    try:
        url = httpx.URL(endpoint)
        # Reading the host decodes IDNA labels, which can fail on its own
        if url.scheme not in ("http", "https") or not url.host:
            return None
    except (httpx.InvalidURL, ValueError):
        return None
    return url


def _describe(error: Exception) -> str:
    # Some httpx timeouts carry no message
    return str(error) or type(error).__name__


def _describe_validation_error(error: ValidationError) -> str:
    """Condense a pydantic error into a single display line."""
    errors = error.errors()
    if not errors:
        return str(error)
    first = errors[0]
    location = ".".join(str(part) for part in first["loc"])
    message = f"{location}: {first['msg']}" if location else first["msg"]
    if len(errors) > 1:
        message += f" (and {len(errors) - 1} more)"
    return message
