import pytest
from textual.app import App, ComposeResult
from textual.geometry import Offset

from tests.conftest import FAST_DELAY, StubLookup
from typeahead.config import TypeaheadConfig
from typeahead.domain.types import Candidate
from typeahead.presentation.widgets import SuggestInput

FRUITS = ["apple", "apricot", "banana", "cherry"]


class _SuggestApp(App):
    def __init__(self, lookup: StubLookup, value: str = "") -> None:
        super().__init__()
        self.lookup = lookup
        self.value = value
        self.selected: list[Candidate] = []
        self.messages: list[str] = []

    def compose(self) -> ComposeResult:
        yield SuggestInput(
            self.lookup,
            on_select=self.selected.append,
            config=TypeaheadConfig(debounce_delay=FAST_DELAY),
            value=self.value,
        )

    def on_mount(self) -> None:
        self.query_one(SuggestInput).field.focus()

    def on_suggest_input_selected(self, event: SuggestInput.Selected) -> None:
        self.messages.append(event.candidate.value)


@pytest.mark.asyncio
async def test_typing_shows_matching_suggestions():
    lookup = StubLookup(FRUITS)
    app = _SuggestApp(lookup)

    async with app.run_test() as pilot:
        widget = app.query_one(SuggestInput)
        assert widget.suggestion_list.display is False

        await pilot.press("a", "p")
        await pilot.pause(FAST_DELAY * 5)

        assert lookup.calls == ["ap"]
        assert widget.suggestion_list.display is True
        assert widget.suggestion_list.option_count == 2


@pytest.mark.asyncio
async def test_keyboard_navigation_and_enter_commit():
    lookup = StubLookup(FRUITS)
    app = _SuggestApp(lookup)

    async with app.run_test() as pilot:
        widget = app.query_one(SuggestInput)
        await pilot.press("a", "p")
        await pilot.pause(FAST_DELAY * 5)

        await pilot.press("down", "down", "down")
        assert widget.controller.highlight_index == 1
        assert widget.suggestion_list.highlighted == 1

        await pilot.press("enter")
        await pilot.pause(FAST_DELAY * 5)

        assert widget.field.value == "apricot"
        assert [c.value for c in app.selected] == ["apricot"]
        assert app.messages == ["apricot"]
        assert widget.suggestion_list.display is False
        assert lookup.calls == ["ap"]


@pytest.mark.asyncio
async def test_escape_hides_dropdown_but_keeps_text():
    app = _SuggestApp(StubLookup(FRUITS))

    async with app.run_test() as pilot:
        widget = app.query_one(SuggestInput)
        await pilot.press("c", "h")
        await pilot.pause(FAST_DELAY * 5)
        assert widget.suggestion_list.display is True

        await pilot.press("escape")
        await pilot.pause()

        assert widget.suggestion_list.display is False
        assert widget.field.value == "ch"
        assert [c.value for c in widget.controller.candidates] == ["cherry"]


@pytest.mark.asyncio
async def test_outside_click_clears_suggestions():
    app = _SuggestApp(StubLookup(FRUITS))

    async with app.run_test() as pilot:
        widget = app.query_one(SuggestInput)
        await pilot.press("b")
        await pilot.pause(FAST_DELAY * 5)
        assert widget.controller.candidates

        outside = Offset(widget.region.right + 5, widget.region.bottom + 5)
        assert widget.detector.observe(outside) is True
        await pilot.pause()

        assert widget.controller.candidates == ()
        assert widget.suggestion_list.display is False
        assert widget.field.value == "b"


@pytest.mark.asyncio
async def test_initial_value_does_not_search():
    lookup = StubLookup(FRUITS)
    app = _SuggestApp(lookup, value="apple")

    async with app.run_test() as pilot:
        await pilot.pause(FAST_DELAY * 5)

        widget = app.query_one(SuggestInput)
        assert widget.field.value == "apple"
        assert lookup.calls == []
