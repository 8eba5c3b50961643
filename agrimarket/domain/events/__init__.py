"""Domain events for the order lifecycle."""
from .base import DomainEvent
from .order_events import OrderRemovedEvent, OrderStatusChangedEvent

__all__ = [
    "DomainEvent",
    "OrderRemovedEvent",
    "OrderStatusChangedEvent",
]
