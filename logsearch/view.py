"""Derive what the user sees from the session state."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .models import SearchResult
from .state import Failed, Pending, SessionState, Success

TITLE = "Search Engine"
GREEN = "\033[92m"
RED = "\033[91m"
RESET = "\033[0m"


class ViewBlock(str, Enum):
    NONE = "none"
    LOADING = "loading"
    ERROR = "error"
    RESULTS = "results"


@dataclass(frozen=True)
class SearchView:
    query: str
    block: ViewBlock = ViewBlock.NONE
    error: Optional[str] = None
    results: tuple[SearchResult, ...] = ()
    count: Optional[int] = None
    time_ms: Optional[float] = None


def render(state: SessionState, query: str) -> SearchView:
    """Pick the single result block for ``state``.

    A success without results shows nothing, the same as before the first
    search.
    """
    if isinstance(state, Pending):
        return SearchView(query=query, block=ViewBlock.LOADING)
    if isinstance(state, Failed):
        return SearchView(query=query, block=ViewBlock.ERROR, error=state.message)
    if isinstance(state, Success) and state.outcome.results:
        outcome = state.outcome
        return SearchView(
            query=query,
            block=ViewBlock.RESULTS,
            results=outcome.results,
            count=outcome.count,
            time_ms=outcome.time_ms,
        )
    return SearchView(query=query)


def _format_time(time_ms: Optional[float]) -> str:
    if isinstance(time_ms, float) and time_ms.is_integer():
        return str(int(time_ms))
    return str(time_ms)


def format_view(view: SearchView, *, color: bool = True) -> str:
    """Terminal rendering of ``view``."""
    red, green, reset = (RED, GREEN, RESET) if color else ("", "", "")
    lines = [TITLE, f"> {view.query}"]
    if view.block is ViewBlock.LOADING:
        lines.append("Loading...")
    elif view.block is ViewBlock.ERROR:
        lines.append(f"{red}Error: {view.error}{reset}")
    elif view.block is ViewBlock.RESULTS:
        lines.append(f"{green}Found {view.count} results in {_format_time(view.time_ms)}ms{reset}")
        for result in view.results:
            lines.append("")
            lines.append(f"  Event ID: {result.event_id}")
            lines.append(f"  Message: {result.message}")
            lines.append(f"  Timestamp: {result.nano_timestamp}")
    return "\n".join(lines)
