"""Search session controller: query text, lifecycle state and the remote call."""
from __future__ import annotations

import asyncio
import logging
from typing import Callable, List, Optional, Set

from .client import SearchServiceClient
from .config import settings
from .errors import failure_message
from .models import SearchOutcome
from .state import (
    Idle,
    Rejected,
    Resolved,
    SessionEvent,
    SessionState,
    Submitted,
    transition,
)
from .view import SearchView, render

logger = logging.getLogger(__name__)

ViewListener = Callable[[SearchView], None]


class SearchSessionController:
    """Owns the query and the state of the most recent search attempt.

    ``submit_search`` switches to Pending synchronously and performs the
    request in a background task. Overlapping submissions are not serialised:
    by default whichever resolution arrives last decides the final state.
    With ``discard_stale`` only the latest submission may resolve it.
    """

    def __init__(
        self,
        client: SearchServiceClient,
        *,
        discard_stale: Optional[bool] = None,
    ) -> None:
        self._client = client
        self._discard_stale = (
            settings.discard_stale_responses if discard_stale is None else discard_stale
        )
        self._query = ""
        self._state: SessionState = Idle()
        self._generation = 0
        self._listeners: List[ViewListener] = []
        self._tasks: Set[asyncio.Task] = set()

    @property
    def query(self) -> str:
        return self._query

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def generation(self) -> int:
        return self._generation

    def subscribe(self, listener: ViewListener) -> Callable[[], None]:
        """Call ``listener`` with a fresh view after every change."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_query(self, text: str) -> None:
        self._query = text
        self._notify()

    def submit_search(self) -> asyncio.Task:
        loop = asyncio.get_running_loop()
        self._generation += 1
        generation = self._generation
        self._transition(Submitted(generation=generation))
        # The task first runs on the next loop iteration, after Pending is visible.
        task = loop.create_task(self._run(self._query, generation))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        self._notify()
        return task

    async def _run(self, query: str, generation: int) -> None:
        try:
            outcome: SearchOutcome = await self._client.search(query)
        except Exception as exc:
            self._apply(Rejected(message=failure_message(exc), generation=generation))
            return
        self._apply(Resolved(outcome=outcome, generation=generation))

    def _apply(self, event: SessionEvent) -> None:
        if self._transition(event):
            self._notify()

    def _transition(self, event: SessionEvent) -> bool:
        latest = self._generation if self._discard_stale else None
        new_state = transition(self._state, event, latest_generation=latest)
        if new_state is self._state:
            logger.debug("Discarded stale %s for generation %s", type(event).__name__, event.generation)
            return False
        logger.debug(
            "state %s -> %s (generation %s)",
            self._state.phase.value,
            new_state.phase.value,
            event.generation,
        )
        self._state = new_state
        return True

    def render(self) -> SearchView:
        return render(self._state, self._query)

    def _notify(self) -> None:
        if not self._listeners:
            return
        view = self.render()
        for listener in list(self._listeners):
            listener(view)

    async def wait_idle(self) -> None:
        """Wait until every request issued so far has resolved."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))
