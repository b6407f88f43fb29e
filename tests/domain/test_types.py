import pytest

from typeahead.domain.types import Candidate, Key, Suggestion, SuggestionSnapshot


@pytest.mark.parametrize(
    "name, expected",
    [
        ("enter", Key.ENTER),
        ("Enter", Key.ENTER),
        ("ArrowUp", Key.UP),
        ("up", Key.UP),
        ("ArrowDown", Key.DOWN),
        ("Escape", Key.ESCAPE),
        ("esc", Key.ESCAPE),
        ("tab", None),
        ("a", None),
    ],
)
def test_key_parse(name, expected):
    assert Key.parse(name) is expected


def test_suggestion_is_a_candidate_and_immutable():
    suggestion = Suggestion("Klee", data={"element": "pyro"})

    assert isinstance(suggestion, Candidate)
    with pytest.raises(AttributeError):
        suggestion.value = "Diluc"  # type: ignore[misc]


def test_snapshot_highlighted_and_dropdown():
    items = (Suggestion("a"), Suggestion("b"))

    assert SuggestionSnapshot().highlighted is None
    assert SuggestionSnapshot().show_dropdown is False

    snapshot = SuggestionSnapshot(candidates=items, highlight_index=1, dropdown_visible=True)
    assert snapshot.highlighted == items[1]
    assert snapshot.show_dropdown is True

    hidden = SuggestionSnapshot(candidates=items, dropdown_visible=False)
    assert hidden.show_dropdown is False
    assert SuggestionSnapshot(candidates=items, loading=True).show_dropdown is True


def test_search_armed_mirrors_suppression_bit():
    assert SuggestionSnapshot().search_armed is True
    assert SuggestionSnapshot(suppress_next_stable=True).search_armed is False
