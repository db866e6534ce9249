"""Failures raised by the search client and turned into the Failed phase."""
from __future__ import annotations

GENERIC_FAILURE_MESSAGE = "Search failed"
FALLBACK_FAILURE_MESSAGE = "Unknown error"


class SearchError(RuntimeError):
    """Base class for failures of a single search attempt."""


class RequestRejected(SearchError):
    """The service answered with a non-success status.

    The status code is not kept; users only ever see the fixed
    generic message.
    """

    def __init__(self) -> None:
        super().__init__(GENERIC_FAILURE_MESSAGE)


class TransportFailure(SearchError):
    """The request never completed or its body could not be decoded."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or FALLBACK_FAILURE_MESSAGE)


def failure_message(exc: BaseException) -> str:
    """Text shown to the user for ``exc``."""
    if isinstance(exc, RequestRejected):
        return GENERIC_FAILURE_MESSAGE
    return str(exc) or FALLBACK_FAILURE_MESSAGE
