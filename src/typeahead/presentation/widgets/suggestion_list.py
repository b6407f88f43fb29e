"""SuggestionList - dropdown painting candidates with the current highlight."""

from collections.abc import Callable

from rich.console import RenderableType
from textual.widgets import OptionList
from textual.widgets.option_list import Option

from typeahead.domain.types import Candidate, SuggestionSnapshot

RenderOption = Callable[[Candidate], RenderableType]


def default_render_option(candidate: Candidate) -> RenderableType:
    return candidate.value


class SuggestionList(OptionList):
    """Option list mirroring the controller's candidates and highlight.

    It never takes focus, so the field keeps receiving keystrokes while the
    user clicks a suggestion.
    """

    can_focus = False

    DEFAULT_CSS = """
    SuggestionList {
        height: auto;
        max-height: 10;
        border: round $accent;
    }
    """

    def __init__(self, render_option: RenderOption | None = None, **kwargs):
        super().__init__(**kwargs)
        self._render_option = render_option or default_render_option
        self._shown: tuple[Candidate, ...] = ()

    def show_snapshot(self, snapshot: SuggestionSnapshot) -> None:
        """Repaint from ``snapshot``; options are rebuilt only when candidates change."""
        if snapshot.candidates != self._shown:
            self.clear_options()
            self.add_options([Option(self._render_option(c)) for c in snapshot.candidates])
            self._shown = snapshot.candidates
        self.highlighted = snapshot.highlight_index if snapshot.highlight_index >= 0 else None
        self.display = snapshot.show_dropdown
