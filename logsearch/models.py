"""Pydantic models for the search wire format."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class SearchResult(BaseModel):
    """One matched record exactly as the service returned it."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    event_id: str | int | None = Field(default=None, alias="EventId")
    message: str | None = Field(default=None, alias="Message")
    nano_timestamp: int | str | None = Field(default=None, alias="NanoTimeStamp")


class SearchOutcome(BaseModel):
    """Matches, total count and service-reported latency of one search."""

    model_config = ConfigDict(frozen=True)

    results: tuple[SearchResult, ...] | None = None
    count: int | None = None
    time_ms: float | None = None

    @classmethod
    def from_payload(cls, payload: Any) -> "SearchOutcome":
        """Decode a response body; raises ``ValueError`` on a wrong shape."""
        if not isinstance(payload, dict):
            raise ValueError(f"Expected a JSON object, got {type(payload).__name__}")
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            raise ValueError(f"Malformed search response: {exc.error_count()} invalid field(s)") from exc


class SearchResponse(BaseModel):
    """Body of ``GET /search`` served by the reference service."""

    model_config = ConfigDict(populate_by_name=True)

    results: list[SearchResult]
    count: int
    time_ms: float
