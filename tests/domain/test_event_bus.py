"""Tests for the event bus."""

import pytest

from typeahead.domain.events import CandidateSelected, EventBus, SuggestionStateChanged
from typeahead.domain.types import Suggestion, SuggestionSnapshot


class TestEventBus:
    def test_publish_reaches_subscribers_in_order(self):
        bus = EventBus()
        seen: list[str] = []
        bus.subscribe(SuggestionStateChanged, lambda e: seen.append("first"))
        bus.subscribe(SuggestionStateChanged, lambda e: seen.append("second"))

        bus.publish(SuggestionStateChanged(snapshot=SuggestionSnapshot()))

        assert seen == ["first", "second"]

    def test_publish_only_reaches_matching_type(self):
        bus = EventBus()
        seen: list[object] = []
        bus.subscribe(CandidateSelected, seen.append)

        bus.publish(SuggestionStateChanged(snapshot=SuggestionSnapshot()))
        assert seen == []

        event = CandidateSelected(candidate=Suggestion("x"), query="x")
        bus.publish(event)
        assert seen == [event]

    def test_async_handler_rejected(self):
        bus = EventBus()

        async def handler(event):
            pass

        with pytest.raises(TypeError):
            bus.subscribe(SuggestionStateChanged, handler)

    def test_failing_handler_does_not_stop_others(self):
        bus = EventBus()
        seen: list[str] = []

        def broken(event):
            raise RuntimeError("handler bug")

        bus.subscribe(SuggestionStateChanged, broken)
        bus.subscribe(SuggestionStateChanged, lambda e: seen.append("ok"))

        bus.publish(SuggestionStateChanged(snapshot=SuggestionSnapshot()))

        assert seen == ["ok"]

    def test_duplicate_subscription_and_unsubscribe(self):
        bus = EventBus()
        seen: list[object] = []

        bus.subscribe(SuggestionStateChanged, seen.append)
        bus.subscribe(SuggestionStateChanged, seen.append)
        bus.publish(SuggestionStateChanged(snapshot=SuggestionSnapshot()))
        assert len(seen) == 1

        bus.unsubscribe(SuggestionStateChanged, seen.append)
        bus.unsubscribe(SuggestionStateChanged, seen.append)
        assert bus.has_subscribers(SuggestionStateChanged) is False

    def test_clear(self):
        bus = EventBus()
        bus.subscribe(SuggestionStateChanged, lambda e: None)

        bus.clear()

        assert bus.has_subscribers(SuggestionStateChanged) is False
