"""
Suggestion controller core: debouncing, stale-safe lookups and the state
machine that ties them to keyboard and pointer events.
"""

from .debounce import Debouncer
from .lookup_gate import LookupGate
from .outside_click import OutsideClickDetector
from .state_machine import SuggestionStateMachine

__all__ = [
    "Debouncer",
    "LookupGate",
    "OutsideClickDetector",
    "SuggestionStateMachine",
]
