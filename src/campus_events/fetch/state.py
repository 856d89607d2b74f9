"""Lifecycle states of a fetch cycle."""

from dataclasses import dataclass
from enum import StrEnum

from campus_events.data import RemoteEvent


class FetchErrorKind(StrEnum):
    """Why a fetch cycle ended in the ``Failed`` state."""

    INVALID_ENDPOINT = "invalid_endpoint"
    TRANSPORT_FAILURE = "transport_failure"
    EMPTY_BODY = "empty_body"
    DECODE_FAILURE = "decode_failure"


@dataclass(frozen=True)
class Idle:
    """No fetch has been requested yet."""


@dataclass(frozen=True)
class Loading:
    """A request is in flight."""


@dataclass(frozen=True)
class Ready:
    """The last fetch cycle decoded a complete batch of events."""

    events: tuple[RemoteEvent, ...] = ()


@dataclass(frozen=True)
class Failed:
    """The last fetch cycle failed.

    ``message`` is human-readable and suitable for direct display.
    """

    message: str
    kind: FetchErrorKind


FetchState = Idle | Loading | Ready | Failed
