"""Quiet-period debouncer driven by the running asyncio loop."""

from __future__ import annotations

import asyncio
from collections.abc import Callable

from typeahead.logger import get_logger

logger = get_logger("core.debounce")

StableCallback = Callable[[str], None]


class Debouncer:
    """Coalesce rapid value changes into one notification per quiet period.

    Every ``observe`` cancels the pending timer and starts a new one, so only
    the last value of a burst is delivered. Empty strings are delivered like
    any other value.
    """

    def __init__(self, delay: float = 0.5) -> None:
        self._delay = delay
        self._handle: asyncio.TimerHandle | None = None
        self._value: str | None = None
        self._listeners: list[StableCallback] = []

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def pending(self) -> bool:
        """True while a value is waiting for its quiet period to elapse."""
        return self._handle is not None

    def on_stable(self, callback: StableCallback) -> None:
        """Register a listener fired with each stable value."""
        self._listeners.append(callback)

    def observe(self, value: str) -> None:
        """Record ``value`` and restart the quiet-period timer."""
        if self._handle is not None:
            self._handle.cancel()
        self._value = value
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self._delay, self._fire)

    def flush(self) -> None:
        """Deliver the pending value now instead of waiting."""
        if self._handle is not None:
            self._handle.cancel()
            self._fire()

    def cancel(self) -> None:
        """Drop the pending value without delivering it."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
            self._value = None

    def _fire(self) -> None:
        value = self._value or ""
        self._handle = None
        self._value = None
        logger.debug(f"Stable value {value!r} after {self._delay:.3f}s")
        for listener in list(self._listeners):
            try:
                listener(value)
            except Exception:
                logger.exception(f"Stable-value listener failed for {value!r}")
