"""Asynchronous client for the remote search service."""
from __future__ import annotations

import json
import logging
from typing import Optional

import httpx

from .config import settings
from .errors import RequestRejected, TransportFailure
from .models import SearchOutcome
from .utils import build_search_url

logger = logging.getLogger(__name__)


class SearchServiceClient:
    """Issues ``GET <base_url>?q=<query>`` and decodes the JSON body."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float | None = None,
        query_param: str | None = None,
    ) -> None:
        self.base_url = base_url or settings.search_url
        self.query_param = query_param or settings.query_param
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=timeout if timeout is not None else settings.request_timeout_seconds,
            headers={"Accept": "application/json"},
        )

    async def search(self, query: str) -> SearchOutcome:
        url = build_search_url(self.base_url, query, self.query_param)
        logger.debug("GET %s", url)
        try:
            response = await self._client.get(url)
        except httpx.HTTPError as exc:
            logger.warning("Search request for %r failed: %s", query, exc)
            raise TransportFailure(str(exc)) from exc

        if not response.is_success:
            logger.warning("Search request for %r was rejected", query)
            raise RequestRejected()

        try:
            outcome = SearchOutcome.from_payload(response.json())
        except (json.JSONDecodeError, UnicodeDecodeError, ValueError) as exc:
            logger.warning("Search response for %r could not be decoded: %s", query, exc)
            raise TransportFailure(str(exc)) from exc

        logger.info(
            "search q=%r results=%s count=%s time=%sms",
            query,
            len(outcome.results or ()),
            outcome.count,
            outcome.time_ms,
        )
        return outcome

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "SearchServiceClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
