"""
Suggestion state machine.

Owns the query, candidate list, highlight, dropdown visibility and loading
flag. Text changes go through the debouncer, stable values through the
lookup gate; keyboard, selection and outside-click events act directly on the
current snapshot.

All transitions run on the asyncio loop thread, one at a time. Each one
builds a new immutable ``SuggestionSnapshot``, checks its invariants and
publishes ``SuggestionStateChanged`` when anything changed.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace

from typeahead.config import TypeaheadConfig
from typeahead.core.debounce import Debouncer
from typeahead.core.lookup_gate import LookupGate
from typeahead.domain.events import (
    CandidateSelected,
    EventBus,
    LookupDiscarded,
    LookupFailed,
    SuggestionStateChanged,
)
from typeahead.domain.types import (
    Candidate,
    Key,
    LookupFunction,
    LookupToken,
    SuggestionPhase,
    SuggestionSnapshot,
)
from typeahead.errors import InvalidHighlightIndex, LookupFailure
from typeahead.logger import get_logger
from typeahead.utils import clamp

logger = get_logger("core.state_machine")


class SuggestionStateMachine:
    """Debounced, stale-safe suggestion controller for one text field."""

    def __init__(
        self,
        lookup: LookupFunction,
        on_select: Callable[[Candidate], None] | None = None,
        on_error: Callable[[LookupFailure], None] | None = None,
        config: TypeaheadConfig | None = None,
        event_bus: EventBus | None = None,
        initial_query: str = "",
    ) -> None:
        """
        Args:
            lookup: Returns candidates for a query, directly or as an awaitable
            on_select: Called with the committed candidate
            on_error: Reporting hook for lookup failures (default: log them)
            config: Controller configuration
            event_bus: Bus to publish state changes on (a private one by default)
            initial_query: Starting field text; does not trigger a lookup
        """
        self.config = config or TypeaheadConfig()
        self.event_bus = event_bus or EventBus()
        self._on_select = on_select
        self._on_error = on_error

        self._debouncer = Debouncer(self.config.debounce_delay)
        self._debouncer.on_stable(self._on_stable)
        self._gate = LookupGate(
            lookup,
            on_result=self._on_result,
            on_error=self._on_lookup_error,
            on_stale=self._on_stale,
        )
        self._state = SuggestionSnapshot(query=initial_query)

    # ------------------------------------------------------------------ views

    @property
    def snapshot(self) -> SuggestionSnapshot:
        return self._state

    @property
    def query(self) -> str:
        return self._state.query

    @property
    def candidates(self) -> tuple[Candidate, ...]:
        return self._state.candidates

    @property
    def highlight_index(self) -> int:
        return self._state.highlight_index

    @property
    def phase(self) -> SuggestionPhase:
        return self._state.phase

    @property
    def debouncer(self) -> Debouncer:
        return self._debouncer

    @property
    def gate(self) -> LookupGate:
        return self._gate

    # ------------------------------------------------------------ transitions

    def on_text_change(self, value: str) -> None:
        """The user edited the field."""
        query = value.strip() if self.config.trim_input else value
        self._commit(
            replace(
                self._state,
                query=query,
                phase=SuggestionPhase.DEBOUNCING,
                suppress_next_stable=False,
            )
        )
        self._debouncer.observe(query)

    def _on_stable(self, value: str) -> None:
        if self._state.suppress_next_stable:
            logger.debug(f"Ignoring stable value {value!r} set by selection")
            self._reset_to_idle(suppress_next_stable=False)
            return

        if len(value) < self.config.min_query_length:
            self._reset_to_idle()
            return

        self._commit(replace(self._state, highlight_index=-1, phase=SuggestionPhase.SEARCHING))
        self._gate.issue(value)
        # A synchronous lookup has already been applied by now.
        if self._gate.loading:
            self._commit(replace(self._state, loading=True))

    def _on_result(self, token: LookupToken, candidates: tuple[Candidate, ...]) -> None:
        if not self._gate.is_current(token):
            return
        found = bool(candidates)
        self._commit(
            replace(
                self._state,
                candidates=candidates,
                highlight_index=-1,
                dropdown_visible=found,
                loading=False,
                phase=SuggestionPhase.SHOWING if found else SuggestionPhase.EMPTY,
            )
        )

    def handle_key(self, key: Key | str | None) -> bool:
        """Apply a key press; returns True when the key was consumed.

        Unrecognised keys (``None`` or any name ``Key.parse`` rejects) fall
        through to the final branch, which never changes state.
        """
        if isinstance(key, str):
            key = Key.parse(key)

        if key is Key.DOWN:
            return self.move_highlight(1)
        elif key is Key.UP:
            return self.move_highlight(-1)
        elif key is Key.ENTER:
            highlighted = self._state.highlighted
            if highlighted is None:
                return False
            self.select(highlighted)
            return True
        elif key is Key.ESCAPE:
            return self.dismiss()
        else:
            return False

    def move_highlight(self, step: int) -> bool:
        """Move the highlight by ``step``, saturating at both ends."""
        size = len(self._state.candidates)
        if size == 0:
            return False
        index = clamp(self._state.highlight_index + step, 0, size - 1)
        self._commit(replace(self._state, highlight_index=index))
        return True

    def dismiss(self) -> bool:
        """Hide the dropdown, keeping query and candidates (Escape)."""
        if not self._state.dropdown_visible:
            return False
        self._commit(replace(self._state, dropdown_visible=False))
        return True

    def select(self, candidate: Candidate) -> None:
        """Commit ``candidate`` (Enter on the highlight or a pointer click)."""
        logger.info(f"Selected candidate {candidate.value!r}")
        self._gate.invalidate()
        self._commit(
            SuggestionSnapshot(
                query=candidate.value,
                phase=SuggestionPhase.IDLE,
                suppress_next_stable=True,
            )
        )
        # The filled-in value settles through the debouncer like typed text
        # and is swallowed there by ``suppress_next_stable``.
        self._debouncer.observe(candidate.value)
        self.event_bus.publish(CandidateSelected(candidate=candidate, query=candidate.value))
        if self._on_select:
            self._on_select(candidate)

    def select_index(self, index: int) -> bool:
        """Commit the candidate at ``index`` if it exists."""
        if 0 <= index < len(self._state.candidates):
            self.select(self._state.candidates[index])
            return True
        return False

    def on_outside_interaction(self) -> None:
        """A click landed outside the field and dropdown."""
        self._reset_to_idle(suppress_next_stable=self._state.suppress_next_stable)

    def close(self) -> None:
        """Release timers and make in-flight lookups inert."""
        self._debouncer.cancel()
        self._gate.invalidate()

    # ---------------------------------------------------------------- helpers

    def _reset_to_idle(self, suppress_next_stable: bool = False) -> None:
        self._gate.invalidate()
        self._commit(
            replace(
                self._state,
                candidates=(),
                highlight_index=-1,
                dropdown_visible=False,
                loading=False,
                phase=SuggestionPhase.IDLE,
                suppress_next_stable=suppress_next_stable,
            )
        )

    def _on_lookup_error(self, failure: LookupFailure) -> None:
        self.event_bus.publish(LookupFailed(query=failure.query, error=failure))
        if self._on_error:
            self._on_error(failure)
        else:
            logger.opt(exception=failure.cause).error(str(failure))

    def _on_stale(self, token: LookupToken) -> None:
        self.event_bus.publish(LookupDiscarded(query=token.query, generation=token.generation))

    def _commit(self, state: SuggestionSnapshot) -> None:
        size = len(state.candidates)
        upper = size - 1 if size else -1
        if not -1 <= state.highlight_index <= upper:
            raise InvalidHighlightIndex(state.highlight_index, size)
        if state == self._state:
            return
        if state.phase is not self._state.phase:
            logger.debug(f"{self._state.phase.value} -> {state.phase.value} (query={state.query!r})")
        self._state = state
        self.event_bus.publish(SuggestionStateChanged(snapshot=state))
