"""Value types shared by the suggestion controller and its renderers."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol, Union, runtime_checkable


@runtime_checkable
class Candidate(Protocol):
    """Anything a lookup returns: it only has to expose a display value."""

    @property
    def value(self) -> str: ...


@dataclass(frozen=True, slots=True)
class Suggestion:
    """Ready-made immutable candidate carrying optional caller data."""

    value: str
    data: Mapping[str, Any] = field(default_factory=dict)


LookupResult = Sequence[Candidate]
LookupFunction = Callable[[str], Union[LookupResult, Awaitable[LookupResult]]]


class Key(Enum):
    """Keys the controller reacts to. Anything else is a no-op."""

    ENTER = "enter"
    UP = "up"
    DOWN = "down"
    ESCAPE = "escape"

    @classmethod
    def parse(cls, name: str) -> Key | None:
        """Map a key identifier (``"down"``, ``"ArrowDown"``...) to a ``Key``.

        Returns ``None`` for keys the controller does not handle.
        """
        return _KEY_ALIASES.get(name.strip().lower())


_KEY_ALIASES: dict[str, Key] = {
    "enter": Key.ENTER,
    "return": Key.ENTER,
    "up": Key.UP,
    "arrowup": Key.UP,
    "down": Key.DOWN,
    "arrowdown": Key.DOWN,
    "escape": Key.ESCAPE,
    "esc": Key.ESCAPE,
}


class SuggestionPhase(Enum):
    """Lifecycle phase of the suggestion state machine."""

    IDLE = "idle"
    DEBOUNCING = "debouncing"
    SEARCHING = "searching"
    SHOWING = "showing"
    EMPTY = "empty"


@dataclass(frozen=True, slots=True)
class LookupToken:
    """Handle returned for each issued lookup.

    Its generation is compared against the gate's latest issued generation
    when the lookup completes.
    """

    generation: int
    query: str


@dataclass(frozen=True)
class SuggestionSnapshot:
    """Immutable view of controller state handed to renderers."""

    query: str = ""
    candidates: tuple[Candidate, ...] = ()
    highlight_index: int = -1
    dropdown_visible: bool = False
    loading: bool = False
    phase: SuggestionPhase = SuggestionPhase.IDLE
    suppress_next_stable: bool = False

    @property
    def search_armed(self) -> bool:
        """True when the next stable value may start a lookup."""
        return not self.suppress_next_stable

    @property
    def highlighted(self) -> Candidate | None:
        if 0 <= self.highlight_index < len(self.candidates):
            return self.candidates[self.highlight_index]
        return None

    @property
    def show_dropdown(self) -> bool:
        """Whether a renderer should paint the candidate list."""
        return (self.dropdown_visible or self.loading) and bool(self.candidates)
