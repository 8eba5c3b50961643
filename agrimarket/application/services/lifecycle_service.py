"""
Order Lifecycle Engine.

The only component that writes order status. Validates each requested
change against the lifecycle table, performs a conditional write keyed on
the status it validated against, applies the deployment's delivered-order
retention policy and publishes the resulting domain events after commit.
"""
from dataclasses import dataclass
from typing import Callable, Optional
import logging

from agrimarket.application.interfaces import IUnitOfWork
from agrimarket.domain import lifecycle
from agrimarket.domain.entities.order import Order
from agrimarket.domain.enums import OrderAction, OrderStatus, RetentionPolicy
from agrimarket.domain.event_bus import EventBus
from agrimarket.domain.exceptions import OrderNotFoundError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransitionResult:
    """
    Outcome of one accepted transition.

    `order` is None when the order was deleted; callers holding a local
    copy of the seller's orders must drop it in that case.
    """
    order_id: str
    seller_id: str
    previous_status: OrderStatus
    new_status: OrderStatus
    order: Optional[Order]

    @property
    def removed(self) -> bool:
        return self.order is None


class OrderLifecycleService:
    """
    Application service for seller-initiated status changes.

    Usage:
        engine = OrderLifecycleService(uow_factory, RetentionPolicy.RETAIN)
        result = await engine.confirm(seller_id, "o1")
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        retention_policy: RetentionPolicy = RetentionPolicy.RETAIN,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        """Initialize lifecycle engine.

        Args:
            uow_factory: Produces a fresh Unit of Work per transition
            retention_policy: What happens to delivered orders, for every view
            event_bus: Optional bus receiving the domain events of each transition
        """
        self._uow_factory = uow_factory
        self._retention_policy = RetentionPolicy(retention_policy)
        self._event_bus = event_bus

    @property
    def retention_policy(self) -> RetentionPolicy:
        return self._retention_policy

    async def confirm(self, seller_id: str, order_id: str) -> TransitionResult:
        return await self.transition(seller_id, order_id, OrderStatus.CONFIRMED)

    async def cancel(self, seller_id: str, order_id: str) -> TransitionResult:
        return await self.transition(seller_id, order_id, OrderStatus.CANCELLED)

    async def ship(self, seller_id: str, order_id: str) -> TransitionResult:
        return await self.transition(seller_id, order_id, OrderStatus.SHIPPED)

    async def deliver(self, seller_id: str, order_id: str) -> TransitionResult:
        return await self.transition(seller_id, order_id, OrderStatus.DELIVERED)

    async def apply_action(
        self, seller_id: str, order_id: str, action: OrderAction
    ) -> TransitionResult:
        """Run the transition behind a seller action (confirm/cancel/ship/deliver)."""
        return await self.transition(seller_id, order_id, lifecycle.target_for(action))

    async def transition(
        self, seller_id: str, order_id: str, target: OrderStatus
    ) -> TransitionResult:
        """
        Move one order to `target`.

        Args:
            seller_id: Seller issuing the request (must own the order)
            order_id: Order to move
            target: Requested status

        Returns:
            TransitionResult with the stored order, or order=None if deleted

        Raises:
            ValidationError: Unknown status literal
            OrderNotFoundError: Order missing or owned by another seller
            InvalidTransitionError: Edge not allowed; nothing written
            OrderConflictError: Status changed between read and write; nothing written
        """
        target = OrderStatus.parse(target)

        async with self._uow_factory() as uow:
            order = await uow.orders.find_by_id(seller_id, order_id)
            if order is None:
                raise OrderNotFoundError(order_id, seller_id)

            previous_status = order.transition_to(target)

            if target is OrderStatus.DELIVERED and self._retention_policy is RetentionPolicy.DELETE:
                await uow.orders.delete(seller_id, order_id, expected_status=previous_status)
                order.record_removed()
                stored = None
            else:
                stored = await uow.orders.update_status(
                    seller_id, order_id, target, expected_status=previous_status
                )

            await uow.commit()
            execution_id = str(uow.execution_id)

        logger.info(
            f"✅ Order {order_id}: {previous_status.value} -> {target.value}"
            f"{' (removed)' if stored is None else ''} [execution_id: {execution_id}]"
        )

        await self._publish(order, execution_id)

        return TransitionResult(
            order_id=order_id,
            seller_id=seller_id,
            previous_status=previous_status,
            new_status=target,
            order=stored,
        )

    async def _publish(self, order: Order, execution_id: str) -> None:
        events = order.get_domain_events()
        order.clear_domain_events()
        if self._event_bus is None or not events:
            return
        for event in events:
            event.execution_id = execution_id
        await self._event_bus.publish_all(events)
