"""Search lifecycle as immutable snapshots and a pure transition function.

A session starts in :class:`Idle`. Submitting always moves it to
:class:`Pending`; a response or failure then replaces the state wholesale with
:class:`Success` or :class:`Failed`. Every phase past ``Idle`` carries the
generation of the submission that produced it so stale resolutions can be
recognised when the caller asks for that.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .models import SearchOutcome


class Phase(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class Idle:
    phase: Phase = Phase.IDLE
    generation: int = 0


@dataclass(frozen=True)
class Pending:
    generation: int
    phase: Phase = Phase.PENDING


@dataclass(frozen=True)
class Success:
    outcome: SearchOutcome
    generation: int
    phase: Phase = Phase.SUCCESS


@dataclass(frozen=True)
class Failed:
    message: str
    generation: int
    phase: Phase = Phase.FAILED


SessionState = Union[Idle, Pending, Success, Failed]


@dataclass(frozen=True)
class Submitted:
    generation: int


@dataclass(frozen=True)
class Resolved:
    outcome: SearchOutcome
    generation: int


@dataclass(frozen=True)
class Rejected:
    message: str
    generation: int


SessionEvent = Union[Submitted, Resolved, Rejected]


def transition(
    state: SessionState,
    event: SessionEvent,
    *,
    latest_generation: Optional[int] = None,
) -> SessionState:
    """Return the state that follows ``state`` once ``event`` is applied.

    With ``latest_generation`` unset the last arriving resolution wins, even if
    it belongs to an older submission. When it is set, resolutions from any
    other generation leave ``state`` untouched.
    """
    if isinstance(event, Submitted):
        return Pending(generation=event.generation)
    if latest_generation is not None and event.generation != latest_generation:
        return state
    if isinstance(event, Resolved):
        return Success(outcome=event.outcome, generation=event.generation)
    if isinstance(event, Rejected):
        return Failed(message=event.message, generation=event.generation)
    raise TypeError(f"Unsupported session event: {event!r}")
