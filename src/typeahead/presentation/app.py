"""
TypeaheadApp - demo Textual application hosting a SuggestInput.
"""

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header, Static

from typeahead.config import TypeaheadConfig
from typeahead.domain.types import LookupFunction
from typeahead.errors import LookupFailure
from typeahead.logger import get_logger
from typeahead.presentation.widgets import SuggestInput
from typeahead.presentation.widgets.suggestion_list import RenderOption

logger = get_logger("typeahead_app")


class TypeaheadApp(App):
    """
    Demo application.

    Layout:
    ┌──────────────────────────────┐
    │            Header            │
    ├──────────────────────────────┤
    │  SuggestInput                │
    │  Status line                 │
    ├──────────────────────────────┤
    │            Footer            │
    └──────────────────────────────┘
    """

    TITLE = "Typeahead"
    SUB_TITLE = "Debounced suggestions"

    CSS = """
    #body {
        padding: 1 2;
    }

    #status {
        margin-top: 1;
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
        Binding("ctrl+c", "quit", "Quit", priority=True, show=False),
    ]

    def __init__(
        self,
        lookup: LookupFunction,
        config: TypeaheadConfig | None = None,
        render_option: RenderOption | None = None,
    ):
        """
        Args:
            lookup: Candidate lookup for the suggestion field
            config: Controller configuration
            render_option: Candidate render template
        """
        super().__init__()
        self._lookup = lookup
        self._config = config or TypeaheadConfig()
        self._render_option = render_option

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="body"):
            yield SuggestInput(
                self._lookup,
                on_error=self._report_lookup_error,
                render_option=self._render_option,
                config=self._config,
                placeholder="Start typing a name...",
                id="suggest",
            )
            yield Static("Nothing selected yet", id="status")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one(SuggestInput).field.focus()

    def on_click(self, event: events.Click) -> None:
        self.query_one(SuggestInput).observe_click(event)

    def on_suggest_input_selected(self, event: SuggestInput.Selected) -> None:
        logger.info(f"Demo selection: {event.candidate.value!r}")
        self.query_one("#status", Static).update(f"Selected: {event.candidate.value}")

    def _report_lookup_error(self, failure: LookupFailure) -> None:
        logger.opt(exception=failure.cause).warning(str(failure))
        self.query_one("#status", Static).update(f"Lookup failed: {failure.cause}")
        self.notify(str(failure), severity="error")
