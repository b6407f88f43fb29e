"""Domain types and events for the suggestion controller."""

from .types import (
    Candidate,
    Key,
    LookupFunction,
    LookupResult,
    LookupToken,
    Suggestion,
    SuggestionPhase,
    SuggestionSnapshot,
)

__all__ = [
    "Candidate",
    "Key",
    "LookupFunction",
    "LookupResult",
    "LookupToken",
    "Suggestion",
    "SuggestionPhase",
    "SuggestionSnapshot",
]
