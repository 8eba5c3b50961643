"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from .. import lifecycle
from ..enums import OrderStatus, PaymentStatus
from ..events.base import DomainEvent
from ..exceptions import ValidationError
from ..value_objects import Money


# Fields fixed once the order exists; `status` moves only along lifecycle edges.
_IMMUTABLE_FIELDS = frozenset({"id", "seller_id", "total_amount", "created_at"})


@dataclass
class Order:
    """
    A buyer's request for a quantity of a seller's produce listing.

    The status field is authoritative in the Order Store and changes only
    through `transition_to`, which defers to the lifecycle table.
    """
    id: str
    buyer_id: str
    seller_id: str
    listing_id: str
    quantity: Decimal
    unit: str
    total_amount: Money
    created_at: datetime
    status: OrderStatus = OrderStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.PENDING
    delivery_address: Optional[str] = None

    _domain_events: List[DomainEvent] = field(default_factory=list, init=False, repr=False, compare=False)

    def __post_init__(self):
        if not self.id:
            raise ValidationError("Order id must not be empty")
        if not self.seller_id:
            raise ValidationError(f"Order {self.id} has no seller")

        object.__setattr__(self, "status", OrderStatus.parse(self.status))
        object.__setattr__(self, "payment_status", PaymentStatus.parse(self.payment_status))

        if not isinstance(self.quantity, Decimal):
            try:
                self.quantity = Decimal(str(self.quantity))
            except InvalidOperation:
                raise ValidationError(f"Invalid quantity: {self.quantity!r}") from None
        if self.quantity <= 0:
            raise ValidationError(f"Quantity must be positive, got {self.quantity}")

        if not isinstance(self.total_amount, Money):
            object.__setattr__(self, "total_amount", Money(amount=self.total_amount))
        if self.total_amount.is_negative():
            raise ValidationError(f"Total amount must not be negative, got {self.total_amount}")

        # Naive timestamps are treated as UTC
        if self.created_at.tzinfo is None:
            object.__setattr__(self, "created_at", self.created_at.replace(tzinfo=timezone.utc))

    def __setattr__(self, name, value):
        if name in self.__dict__:
            if name in _IMMUTABLE_FIELDS:
                raise AttributeError(f"Order.{name} is immutable")
            if name == "status":
                value = OrderStatus.parse(value)
                lifecycle.ensure_transition(self.id, self.status, value)
            elif name == "payment_status":
                value = PaymentStatus.parse(value)
        super().__setattr__(name, value)

    @property
    def is_terminal(self) -> bool:
        return lifecycle.is_terminal(self.status)

    def transition_to(self, target: OrderStatus, reason: Optional[str] = None) -> OrderStatus:
        """
        Business rule: move to `target` if the lifecycle table allows it.

        Args:
            target: Requested status
            reason: Optional human readable reason stored on the event

        Returns:
            The previous status

        Raises:
            ValidationError: Unknown status literal
            InvalidTransitionError: Edge not in the lifecycle table
        """
        target = OrderStatus.parse(target)
        lifecycle.ensure_transition(self.id, self.status, target)

        previous_status = self.status
        self.status = target
        self._record_status_change(previous_status, target, reason)
        return previous_status

    def copy(self) -> "Order":
        """Detached copy without collected events."""
        return replace(self)

    def with_status(self, status: OrderStatus) -> "Order":
        """
        Detached copy carrying a status read from or written to the store.

        The store is authoritative, so no lifecycle check is made here.
        """
        return replace(self, status=OrderStatus.parse(status))

    # =========================================================================
    # EVENT COLLECTION
    # =========================================================================

    def get_domain_events(self) -> List[DomainEvent]:
        """
        Get all domain events collected by this aggregate.

        Returns:
            List of domain events (will be published to Event Bus)
        """
        return list(self._domain_events)

    def clear_domain_events(self) -> None:
        """Clear all collected domain events (after publishing)."""
        self._domain_events.clear()

    def record_removed(self) -> None:
        """Record that the store deleted this order."""
        from ..events.order_events import OrderRemovedEvent

        self._domain_events.append(
            OrderRemovedEvent(
                order_id=self.id,
                seller_id=self.seller_id,
                final_status=self.status.value,
            )
        )

    def _record_status_change(
        self,
        previous_status: OrderStatus,
        new_status: OrderStatus,
        reason: Optional[str] = None,
    ) -> None:
        """Record OrderStatusChangedEvent when status changes."""
        from ..events.order_events import OrderStatusChangedEvent

        self._domain_events.append(
            OrderStatusChangedEvent(
                order_id=self.id,
                seller_id=self.seller_id,
                previous_status=previous_status.value,
                new_status=new_status.value,
                reason=reason,
            )
        )

    @classmethod
    def place(
        cls,
        order_id: str,
        buyer_id: str,
        seller_id: str,
        listing_id: str,
        quantity: Decimal,
        unit: str,
        total_amount: Money,
        delivery_address: Optional[str] = None,
        created_at: Optional[datetime] = None,
    ) -> "Order":
        """
        Factory method for a freshly placed order.

        New orders always start in the initial lifecycle state.
        """
        return cls(
            id=order_id,
            buyer_id=buyer_id,
            seller_id=seller_id,
            listing_id=listing_id,
            quantity=quantity,
            unit=unit,
            total_amount=total_amount,
            created_at=created_at or datetime.now(timezone.utc),
            status=lifecycle.INITIAL_STATUS,
            payment_status=PaymentStatus.PENDING,
            delivery_address=delivery_address,
        )
