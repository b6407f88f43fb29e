"""
SuggestField - text input that forwards navigation keys to the controller.
"""

from textual.binding import Binding
from textual.widgets import Input

from typeahead.core.state_machine import SuggestionStateMachine
from typeahead.domain.types import Key
from typeahead.logger import get_logger

logger = get_logger("suggest_field")


class SuggestField(Input):
    """
    Input whose Up/Down/Escape/Enter keys drive the suggestion controller.

    Enter commits the highlighted suggestion when there is one and otherwise
    submits the field as usual.
    """

    BINDINGS = [
        Binding("down", "highlight_next", "Next suggestion", show=False),
        Binding("up", "highlight_previous", "Previous suggestion", show=False),
        Binding("escape", "hide_suggestions", "Hide suggestions", show=False),
    ]

    def __init__(self, controller: SuggestionStateMachine, **kwargs):
        super().__init__(value=controller.query, **kwargs)
        self.controller = controller

    def action_highlight_next(self) -> None:
        self.controller.handle_key(Key.DOWN)

    def action_highlight_previous(self) -> None:
        self.controller.handle_key(Key.UP)

    def action_hide_suggestions(self) -> None:
        self.controller.handle_key(Key.ESCAPE)

    async def action_submit(self) -> None:
        if self.controller.handle_key(Key.ENTER):
            logger.debug("Enter consumed by suggestion commit")
            return
        await super().action_submit()

    def fill(self, value: str) -> None:
        """Set the text without reporting it as a user edit."""
        with self.prevent(Input.Changed):
            self.value = value
        self.cursor_position = len(value)
