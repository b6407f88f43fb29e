"""Detect pointer interactions outside the controller's visual bounds."""

from __future__ import annotations

from collections.abc import Callable

from textual.geometry import Offset, Region

from typeahead.logger import get_logger

logger = get_logger("core.outside_click")


class OutsideClickDetector:
    """Signal dismissal when a pointer interaction lands outside ``bounds``.

    ``bounds`` is queried on every interaction so it follows layout changes
    (for example the dropdown opening below the field).
    """

    def __init__(self, bounds: Callable[[], Region], on_outside: Callable[[], None]) -> None:
        self._bounds = bounds
        self._on_outside = on_outside
        self.enabled = True

    def observe(self, position: Offset) -> bool:
        """Check a screen-space pointer position; returns True if it was outside."""
        inside = self._bounds().contains_point(position)
        return self.signal(outside=not inside)

    def signal(self, outside: bool) -> bool:
        """Feed a precomputed inside/outside verdict."""
        if not (self.enabled and outside):
            return False
        logger.debug("Interaction outside suggestion bounds")
        self._on_outside()
        return True
