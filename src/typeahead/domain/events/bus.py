"""Event bus for decoupled controller-to-renderer communication.

The suggestion controller publishes events; renderers and callers subscribe
to the types they care about.

Event Handler Contract:
    Handlers MUST be synchronous functions, enforced at subscription time.
    Every transition runs on the event loop thread and a handler that needs
    async work should schedule it with ``asyncio.create_task()``.
"""

import inspect
from typing import Callable, Type, TypeVar

from typeahead.logger import get_logger

from .types import Event

logger = get_logger("events.bus")

T = TypeVar("T", bound=Event)

EventHandler = Callable[[Event], None]


class EventBus:
    """Publish/subscribe registry keyed by event type.

    Example:
        ```python
        bus = EventBus()
        bus.subscribe(SuggestionStateChanged, lambda e: redraw(e.snapshot))
        bus.publish(SuggestionStateChanged(snapshot))
        ```

    Thread safety:
        Not thread-safe. All operations are expected on one asyncio loop.
    """

    def __init__(self):
        self._handlers: dict[Type[Event], list[Callable[[Event], None]]] = {}

    def subscribe(self, event_type: Type[T], handler: Callable[[T], None]) -> None:
        """
        Subscribe to events of a specific type.

        Args:
            event_type: The type of event to subscribe to
            handler: Synchronous callback receiving the event instance

        Raises:
            TypeError: If handler is a coroutine function
        """
        if inspect.iscoroutinefunction(handler):
            raise TypeError(
                f"Event handlers must be synchronous functions. "
                f"Handler {handler.__name__} is an async function (coroutine function). "
                f"To perform async work, schedule it using asyncio.create_task() instead."
            )

        handlers = self._handlers.setdefault(event_type, [])
        if handler not in handlers:
            handlers.append(handler)
            logger.debug(f"Subscribed handler for {event_type.__name__}")
        else:
            logger.debug(f"Handler already subscribed for {event_type.__name__}, skipping")

    def unsubscribe(self, event_type: Type[T], handler: Callable[[T], None]) -> None:
        """Remove a handler. Unknown handlers are ignored."""
        if event_type in self._handlers:
            try:
                self._handlers[event_type].remove(handler)
                logger.debug(f"Unsubscribed handler for {event_type.__name__}")
            except ValueError:
                logger.debug(f"Handler not found in subscriptions for {event_type.__name__}")

    def publish(self, event: Event) -> None:
        """
        Publish an event to all subscribed handlers.

        Handlers run synchronously in subscription order. A handler that
        raises is logged and does not stop the remaining handlers.
        """
        event_type = type(event)
        handlers = self._handlers.get(event_type, [])

        if not handlers:
            return

        for handler in list(handlers):
            try:
                handler(event)
            except Exception:
                logger.exception(f"Error in event handler for {event_type.__name__}")

    def clear(self) -> None:
        """Clear all event subscriptions."""
        self._handlers.clear()
        logger.debug("Event bus cleared")

    def has_subscribers(self, event_type: Type[Event]) -> bool:
        return bool(self._handlers.get(event_type))
