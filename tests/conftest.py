"""Shared fixtures: a scripted search client and sample payloads."""
from __future__ import annotations

import asyncio
from typing import List

import pytest

from logsearch.models import SearchOutcome

SAMPLE_PAYLOAD = {
    "results": [{"EventId": "e1", "Message": "hello", "NanoTimeStamp": 123456789}],
    "count": 1,
    "time_ms": 4.2,
}


class ScriptedClient:
    """Stands in for ``SearchServiceClient``; every call waits on its own future."""

    def __init__(self) -> None:
        self.queries: List[str] = []
        self.pending: List[asyncio.Future] = []

    async def search(self, query: str) -> SearchOutcome:
        future = asyncio.get_running_loop().create_future()
        self.queries.append(query)
        self.pending.append(future)
        return await future


@pytest.fixture
def scripted_client() -> ScriptedClient:
    return ScriptedClient()


@pytest.fixture
def sample_outcome() -> SearchOutcome:
    return SearchOutcome.from_payload(SAMPLE_PAYLOAD)


@pytest.fixture
def sample_payload() -> dict:
    return {
        "results": [dict(item) for item in SAMPLE_PAYLOAD["results"]],
        "count": SAMPLE_PAYLOAD["count"],
        "time_ms": SAMPLE_PAYLOAD["time_ms"],
    }
