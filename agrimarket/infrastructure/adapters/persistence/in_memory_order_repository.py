"""
In-Memory Order Repository Implementation.

Dictionary-backed Order Store for tests and demos.
"""
from typing import Dict, List, Optional
import logging

from agrimarket.domain.entities.order import Order
from agrimarket.domain.enums import OrderStatus
from agrimarket.domain.exceptions import (
    OrderConflictError,
    OrderNotFoundError,
    ValidationError,
)
from agrimarket.domain.repositories.order_repository import OrderRepository


logger = logging.getLogger(__name__)


class InMemoryOrderRepository(OrderRepository):
    """
    In-memory implementation of OrderRepository.

    Stored orders are copies; callers never hold a reference into the store,
    so an entity mutated by the lifecycle engine only reaches the store
    through `update_status`.
    """

    def __init__(self):
        """Initialize empty storage."""
        # dict keeps insertion order, which breaks created_at ties
        self._storage: Dict[str, Order] = {}

    async def add(self, order: Order) -> None:
        if order.id in self._storage:
            raise ValidationError(f"Order already exists: {order.id}")
        self._storage[order.id] = order.copy()
        logger.info(f"Order stored: {order.id} (seller: {order.seller_id})")

    async def list_for_seller(self, seller_id: str) -> List[Order]:
        orders = [o for o in self._storage.values() if o.seller_id == seller_id]
        # sorted() is stable with reverse=True, so equal timestamps keep insertion order
        orders = sorted(orders, key=lambda o: o.created_at, reverse=True)
        logger.debug(f"Found {len(orders)} order(s) for seller {seller_id}")
        return [o.copy() for o in orders]

    async def find_by_id(self, seller_id: str, order_id: str) -> Optional[Order]:
        order = self._get(seller_id, order_id)
        return order.copy() if order else None

    async def update_status(
        self,
        seller_id: str,
        order_id: str,
        new_status: OrderStatus,
        expected_status: Optional[OrderStatus] = None,
    ) -> Order:
        order = self._require(seller_id, order_id, expected_status).with_status(new_status)
        # same key, so the insertion position used for tie-breaking is kept
        self._storage[order_id] = order
        logger.info(f"Order {order_id} status -> {order.status.value}")
        return order.copy()

    async def delete(
        self,
        seller_id: str,
        order_id: str,
        expected_status: Optional[OrderStatus] = None,
    ) -> None:
        self._require(seller_id, order_id, expected_status)
        del self._storage[order_id]
        logger.info(f"Order deleted: {order_id}")

    async def exists(self, order_id: str) -> bool:
        return order_id in self._storage

    def _get(self, seller_id: str, order_id: str) -> Optional[Order]:
        order = self._storage.get(order_id)
        if order is None or order.seller_id != seller_id:
            return None
        return order

    def _require(
        self,
        seller_id: str,
        order_id: str,
        expected_status: Optional[OrderStatus],
    ) -> Order:
        order = self._get(seller_id, order_id)
        if order is None:
            raise OrderNotFoundError(order_id, seller_id)
        if expected_status is not None and order.status != OrderStatus.parse(expected_status):
            raise OrderConflictError(order_id, OrderStatus.parse(expected_status).value, order.status.value)
        return order
