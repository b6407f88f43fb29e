"""Event types for the event bus system.

These events let renderers and callers follow the suggestion controller
without holding a reference to its internals.
"""

import time
from dataclasses import dataclass, field

from typeahead.domain.types import Candidate, SuggestionSnapshot
from typeahead.errors import LookupFailure


@dataclass
class Event:
    """Base class for all events.

    The timestamp field is automatically set when the event is created.
    """

    timestamp: float = field(default_factory=time.time, init=False)
    """Timestamp when the event was created (Unix timestamp)."""


@dataclass
class SuggestionStateChanged(Event):
    """Published after every transition that changed the controller state.

    Renderers redraw from ``snapshot``.
    """

    snapshot: SuggestionSnapshot


@dataclass
class CandidateSelected(Event):
    """Published when a candidate is committed via Enter or a click."""

    candidate: Candidate
    query: str


@dataclass
class LookupFailed(Event):
    """Published when the lookup function raised or its awaitable failed."""

    query: str
    error: LookupFailure


@dataclass
class LookupDiscarded(Event):
    """Published when a superseded lookup completed and its result was dropped."""

    query: str
    generation: int
