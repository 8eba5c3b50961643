"""
Event Bus Implementation (Infrastructure Layer).

Dispatches domain events to in-process subscribers.
"""
from collections.abc import Awaitable, Callable
from typing import Dict, List, Optional
import logging

from agrimarket.domain.event_bus import EventBus
from agrimarket.domain.events.base import DomainEvent

EventHandler = Callable[[DomainEvent], Awaitable[None]]

ALL_EVENTS = "*"


class InMemoryEventBus(EventBus):
    """
    In-memory event bus.

    Handlers subscribe by event type (class name) or to every event with
    "*". A failing handler is logged and does not stop the others; the
    transition that produced the event is already committed.
    """

    def __init__(self) -> None:
        """Initialize in-memory event bus."""
        self._handlers: Dict[str, List[EventHandler]] = {}
        self._logger = logging.getLogger(__name__)

    def subscribe(self, event_type: str, handler: EventHandler) -> None:
        """Subscribe a handler to an event type.

        Args:
            event_type: Event class name, or "*" for every event
            handler: Async handler function
        """
        self._handlers.setdefault(event_type, []).append(handler)

    async def publish(self, event: DomainEvent) -> None:
        """Publish an event to all subscribed handlers.

        Args:
            event: Event to publish
        """
        handlers = self._handlers.get(event.event_type, []) + self._handlers.get(ALL_EVENTS, [])
        if not handlers:
            return

        self._logger.info(
            f"Publishing {event.event_type} (aggregate: {event.aggregate_id}, "
            f"handlers: {len(handlers)})"
        )

        for handler in handlers:
            try:
                await handler(event)
            except Exception as exc:
                self._logger.error(
                    f"Handler {handler!r} failed for {event.event_type}: {exc}",
                    exc_info=True,
                )

    async def publish_all(self, events: List[DomainEvent]) -> None:
        for event in events:
            await self.publish(event)


_event_bus: Optional[InMemoryEventBus] = None


def get_event_bus() -> InMemoryEventBus:
    """Process-wide event bus instance."""
    global _event_bus
    if _event_bus is None:
        _event_bus = InMemoryEventBus()
    return _event_bus
