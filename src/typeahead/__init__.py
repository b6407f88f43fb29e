"""Debounced, stale-safe typeahead suggestions for text fields."""

from typeahead.config import TypeaheadConfig, load_config
from typeahead.core import Debouncer, LookupGate, OutsideClickDetector, SuggestionStateMachine
from typeahead.domain import Candidate, Key, Suggestion, SuggestionPhase, SuggestionSnapshot
from typeahead.errors import ConfigError, InvalidHighlightIndex, LookupFailure, TypeaheadError

__version__ = "0.1.0"

__all__ = [
    "TypeaheadConfig",
    "load_config",
    "Debouncer",
    "LookupGate",
    "OutsideClickDetector",
    "SuggestionStateMachine",
    "Candidate",
    "Key",
    "Suggestion",
    "SuggestionPhase",
    "SuggestionSnapshot",
    "TypeaheadError",
    "ConfigError",
    "LookupFailure",
    "InvalidHighlightIndex",
]
