"""
Order Domain Events.

Events recorded by the Order aggregate while it moves through its lifecycle.
"""
from dataclasses import dataclass
from typing import Optional

from .base import DomainEvent


@dataclass
class OrderStatusChangedEvent(DomainEvent):
    """
    Order status changed.

    Recorded for every accepted lifecycle transition
    (pending -> confirmed -> shipped -> delivered, or pending -> cancelled).
    """

    order_id: str = ""
    seller_id: str = ""
    previous_status: str = ""
    new_status: str = ""
    reason: Optional[str] = None

    def __post_init__(self):
        """Set aggregate_id to order_id."""
        if not self.aggregate_id and self.order_id:
            object.__setattr__(self, 'aggregate_id', self.order_id)
        super().__post_init__()


@dataclass
class OrderRemovedEvent(DomainEvent):
    """Delivered order was deleted under the delete retention policy."""

    order_id: str = ""
    seller_id: str = ""
    final_status: str = ""

    def __post_init__(self):
        """Set aggregate_id to order_id."""
        if not self.aggregate_id and self.order_id:
            object.__setattr__(self, 'aggregate_id', self.order_id)
        super().__post_init__()
