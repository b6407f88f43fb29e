"""Event system for decoupled communication between controller and renderers."""

from .bus import EventBus, EventHandler
from .types import (
    CandidateSelected,
    Event,
    LookupDiscarded,
    LookupFailed,
    SuggestionStateChanged,
)

__all__ = [
    "EventBus",
    "EventHandler",
    "Event",
    "SuggestionStateChanged",
    "CandidateSelected",
    "LookupFailed",
    "LookupDiscarded",
]
