"""
Port through which the lifecycle engine announces order changes.

Subscribers (badge refreshers, buyer notifiers) live outside the domain.
"""
from abc import ABC, abstractmethod
from typing import Sequence

from .events.base import DomainEvent


class EventBus(ABC):
    """
    Receives OrderStatusChangedEvent / OrderRemovedEvent once the
    transition that produced them is committed. Publishing never undoes
    that transition.
    """

    @abstractmethod
    async def publish(self, event: DomainEvent) -> None:
        """Deliver one order event to its subscribers."""

    @abstractmethod
    async def publish_all(self, events: Sequence[DomainEvent]) -> None:
        """Deliver the events of one transition, in the order recorded."""
