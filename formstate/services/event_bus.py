"""Event bus — per-form pub/sub for notifying renderers of state changes."""

from typing import Callable, Generic, Set, TypeVar

import structlog

logger = structlog.get_logger()

T = TypeVar("T")

# Type alias for change listeners
Listener = Callable[[T], None]


class FormEventBus(Generic[T]):
    """In-memory pub/sub owned by a single form instance.

    Listeners are called synchronously in the publishing handler, so they see
    fully-applied state. If a listener raises, it's logged and removed.
    """

    def __init__(self, source: str = "form"):
        self._listeners: Set[Listener] = set()
        self._source = source

    def subscribe(self, listener: Listener) -> None:
        """Subscribe a listener to every published event."""
        self._listeners.add(listener)
        logger.debug("event_bus_subscribe", source=self._source, total_listeners=len(self._listeners))

    def unsubscribe(self, listener: Listener) -> None:
        """Unsubscribe a listener. Unknown listeners are ignored."""
        self._listeners.discard(listener)

    def publish(self, event: T) -> None:
        """Deliver an event to all listeners."""
        dead_listeners = set()
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception as e:
                logger.warning("event_listener_failed", source=self._source, error=str(e))
                dead_listeners.add(listener)

        for dead in dead_listeners:
            self._listeners.discard(dead)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def clear(self) -> None:
        """Drop all listeners."""
        self._listeners.clear()
