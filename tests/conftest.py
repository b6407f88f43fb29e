"""Shared fixtures and stubs for typeahead tests."""

import asyncio
from typing import Optional

import pytest

from typeahead.config import TypeaheadConfig
from typeahead.domain.events import Event, EventBus
from typeahead.domain.types import Suggestion


FAST_DELAY = 0.02


class StubLookup:
    """Synchronous lookup over a fixed vocabulary that records its calls."""

    def __init__(self, words: Optional[list[str]] = None, fail_on: Optional[str] = None):
        self.words = words or []
        self.fail_on = fail_on
        self.calls: list[str] = []

    def __call__(self, query: str) -> list[Suggestion]:
        self.calls.append(query)
        if query == self.fail_on:
            raise RuntimeError(f"backend down for {query!r}")
        return [Suggestion(value=w) for w in self.words if query.lower() in w.lower()]


class GatedLookup:
    """Asynchronous lookup whose responses are released explicitly per query.

    Lets tests decide the order in which overlapping lookups complete.
    """

    def __init__(self, responses: dict[str, list[str]]):
        self.responses = responses
        self.calls: list[str] = []
        self._gates: dict[str, asyncio.Event] = {}
        self._errors: dict[str, Exception] = {}

    def release(self, query: str) -> None:
        self._gate(query).set()

    def fail(self, query: str, error: Exception) -> None:
        self._errors[query] = error
        self._gate(query).set()

    def _gate(self, query: str) -> asyncio.Event:
        return self._gates.setdefault(query, asyncio.Event())

    async def __call__(self, query: str) -> list[Suggestion]:
        self.calls.append(query)
        await self._gate(query).wait()
        if query in self._errors:
            raise self._errors[query]
        return [Suggestion(value=v) for v in self.responses.get(query, [])]


class EventRecorder:
    """Collects every event published for the subscribed types."""

    def __init__(self, bus: EventBus, *event_types: type[Event]):
        self.events: list[Event] = []
        for event_type in event_types:
            bus.subscribe(event_type, self.events.append)

    def of_type(self, event_type: type[Event]) -> list[Event]:
        return [e for e in self.events if isinstance(e, event_type)]


@pytest.fixture
def fast_config() -> TypeaheadConfig:
    return TypeaheadConfig(debounce_delay=FAST_DELAY)


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus()
