"""Repository interfaces for Order aggregate."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.order import Order
from ..enums import OrderStatus


class OrderRepository(ABC):
    """
    Abstract Order Store.

    Every read and write is scoped to one seller; an order owned by another
    seller is indistinguishable from a missing one.
    """

    @abstractmethod
    async def add(self, order: Order) -> None:
        """Persist a newly placed order.

        Raises:
            ValidationError: If an order with the same id already exists
        """
        pass

    @abstractmethod
    async def list_for_seller(self, seller_id: str) -> List[Order]:
        """All orders of a seller, newest first (ties in insertion order).

        Args:
            seller_id: Owning seller

        Returns:
            List of Order aggregates
        """
        pass

    @abstractmethod
    async def find_by_id(self, seller_id: str, order_id: str) -> Optional[Order]:
        """Retrieve one order of a seller.

        Returns:
            Order if found, None otherwise
        """
        pass

    @abstractmethod
    async def update_status(
        self,
        seller_id: str,
        order_id: str,
        new_status: OrderStatus,
        expected_status: Optional[OrderStatus] = None,
    ) -> Order:
        """Point update of the status field.

        Args:
            seller_id: Owning seller
            order_id: Order to update
            new_status: Status to write
            expected_status: When given, the write only happens if the stored
                status still equals it

        Returns:
            The updated order

        Raises:
            OrderNotFoundError: No such order for this seller
            OrderConflictError: Stored status differs from expected_status
        """
        pass

    @abstractmethod
    async def delete(
        self,
        seller_id: str,
        order_id: str,
        expected_status: Optional[OrderStatus] = None,
    ) -> None:
        """Point delete.

        Raises:
            OrderNotFoundError: No such order for this seller
            OrderConflictError: Stored status differs from expected_status
        """
        pass

    @abstractmethod
    async def exists(self, order_id: str) -> bool:
        """Check if an order id is taken (duplicate prevention)."""
        pass
