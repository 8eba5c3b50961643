"""Application service for order ingestion and plain order reads."""

from typing import Callable, List
import logging

from agrimarket.application.dtos.order_dto import CreateOrderRequest, OrderDTO
from agrimarket.application.interfaces import IUnitOfWork
from agrimarket.domain.entities.order import Order
from agrimarket.domain.value_objects import Money


logger = logging.getLogger(__name__)


class OrderApplicationService:
    """
    Application service for orders entering the store.

    Responsibilities:
    - Transform request DTOs into Order aggregates
    - Persist through the Unit of Work
    - Transform aggregates back into DTOs
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        """Initialize order application service.

        Args:
            uow_factory: Produces a fresh Unit of Work per call
        """
        self._uow_factory = uow_factory

    async def create_order(self, request: CreateOrderRequest) -> OrderDTO:
        """Store a newly placed order in its initial status.

        Args:
            request: CreateOrderRequest DTO

        Returns:
            OrderDTO with created order details

        Raises:
            ValidationError: Duplicate id or invalid values
        """
        order = self._dto_to_order(request)

        async with self._uow_factory() as uow:
            await uow.orders.add(order)
            await uow.commit()
            logger.info(f"Order {order.id} placed [execution_id: {uow.execution_id}]")

        return OrderDTO.from_order(order)

    async def list_for_seller(self, seller_id: str) -> List[OrderDTO]:
        """Raw (not enriched) orders of a seller, newest first."""
        async with self._uow_factory() as uow:
            orders = await uow.orders.list_for_seller(seller_id)
        return [OrderDTO.from_order(order) for order in orders]

    def _dto_to_order(self, request: CreateOrderRequest) -> Order:
        return Order.place(
            order_id=request.order_id,
            buyer_id=request.buyer_id,
            seller_id=request.seller_id,
            listing_id=request.listing_id,
            quantity=request.quantity,
            unit=request.unit,
            total_amount=Money(amount=request.total_amount, currency=request.currency.upper()),
            delivery_address=request.delivery_address,
            created_at=request.created_at,
        )
