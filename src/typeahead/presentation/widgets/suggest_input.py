"""
SuggestInput - text field with a debounced suggestion dropdown.

Layout:
    ┌──────────────────────────────┐
    │ SuggestField (Input)         │
    ├──────────────────────────────┤
    │ LoadingIndicator (lookup)    │
    ├──────────────────────────────┤
    │ SuggestionList (OptionList)  │
    └──────────────────────────────┘

The widget is only a renderer: all decisions are made by
``SuggestionStateMachine``, which this widget feeds with text changes, key
presses, option clicks and outside clicks, and redraws from on every
``SuggestionStateChanged`` event.
"""

from collections.abc import Callable

from textual import events
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.widgets import Input, LoadingIndicator, OptionList

from typeahead.config import TypeaheadConfig
from typeahead.core.outside_click import OutsideClickDetector
from typeahead.core.state_machine import SuggestionStateMachine
from typeahead.domain.events import CandidateSelected, EventBus, SuggestionStateChanged
from typeahead.domain.types import Candidate, LookupFunction
from typeahead.errors import LookupFailure
from typeahead.logger import get_logger
from typeahead.presentation.widgets.suggest_field import SuggestField
from typeahead.presentation.widgets.suggestion_list import RenderOption, SuggestionList

logger = get_logger("suggest_input")


class SuggestInput(Vertical):
    """Text input with debounced, keyboard-navigable suggestions."""

    DEFAULT_CSS = """
    SuggestInput {
        height: auto;
    }

    SuggestInput > LoadingIndicator {
        height: 1;
    }
    """

    class Selected(Message):
        """Posted when the user commits a suggestion."""

        def __init__(self, suggest_input: "SuggestInput", candidate: Candidate) -> None:
            super().__init__()
            self.suggest_input = suggest_input
            self.candidate = candidate

        @property
        def control(self) -> "SuggestInput":
            return self.suggest_input

    def __init__(
        self,
        lookup: LookupFunction,
        on_select: Callable[[Candidate], None] | None = None,
        on_error: Callable[[LookupFailure], None] | None = None,
        render_option: RenderOption | None = None,
        config: TypeaheadConfig | None = None,
        event_bus: EventBus | None = None,
        value: str = "",
        placeholder: str = "",
        **kwargs,
    ):
        """
        Args:
            lookup: Returns candidates for a query, directly or as an awaitable
            on_select: Called with the committed candidate
            on_error: Reporting hook for lookup failures
            render_option: Turns a candidate into a renderable (default: its value)
            config: Controller configuration
            event_bus: Bus the controller publishes on
            value: Initial field text
            placeholder: Field placeholder
        """
        super().__init__(**kwargs)
        self._user_on_select = on_select
        self.controller = SuggestionStateMachine(
            lookup,
            on_select=self._handle_select,
            on_error=on_error,
            config=config,
            event_bus=event_bus,
            initial_query=value,
        )
        self.detector = OutsideClickDetector(
            bounds=lambda: self.region,
            on_outside=self.controller.on_outside_interaction,
        )
        self._field = SuggestField(self.controller, placeholder=placeholder)
        self._last_text = value
        self._loading = LoadingIndicator()
        self._list = SuggestionList(render_option)

    def compose(self) -> ComposeResult:
        yield self._field
        yield self._loading
        yield self._list

    @property
    def field(self) -> SuggestField:
        return self._field

    @property
    def suggestion_list(self) -> SuggestionList:
        return self._list

    def on_mount(self) -> None:
        bus = self.controller.event_bus
        bus.subscribe(SuggestionStateChanged, self._on_state_changed)
        bus.subscribe(CandidateSelected, self._on_candidate_selected)
        self._redraw()

    def on_unmount(self) -> None:
        bus = self.controller.event_bus
        bus.unsubscribe(SuggestionStateChanged, self._on_state_changed)
        bus.unsubscribe(CandidateSelected, self._on_candidate_selected)
        self.controller.close()

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input is not self._field:
            return
        event.stop()
        # Input also reports its initial value on mount.
        if event.value == self._last_text:
            return
        self._last_text = event.value
        self.controller.on_text_change(event.value)

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        if event.option_list is not self._list:
            return
        event.stop()
        self.controller.select_index(event.option_index)

    def observe_click(self, event: events.Click) -> bool:
        """Feed an app-level click; dismisses suggestions if it landed outside."""
        return self.detector.observe(event.screen_offset)

    def _on_state_changed(self, event: SuggestionStateChanged) -> None:
        self._redraw()

    def _on_candidate_selected(self, event: CandidateSelected) -> None:
        self._last_text = event.query
        self._field.fill(event.query)

    def _handle_select(self, candidate: Candidate) -> None:
        self.post_message(self.Selected(self, candidate))
        if self._user_on_select:
            self._user_on_select(candidate)

    def _redraw(self) -> None:
        snapshot = self.controller.snapshot
        self._loading.display = snapshot.loading
        self._list.show_snapshot(snapshot)
