"""SQLAlchemy implementation of OrderRepository."""

import logging
from typing import List, Optional

from sqlalchemy import and_, delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from agrimarket.domain.entities.order import Order
from agrimarket.domain.enums import OrderStatus
from agrimarket.domain.exceptions import (
    OrderConflictError,
    OrderNotFoundError,
    ValidationError,
)
from agrimarket.domain.repositories.order_repository import OrderRepository

from ..mappers import OrderMapper
from ..models.order_model import OrderModel


logger = logging.getLogger(__name__)


class SqlAlchemyOrderRepository(OrderRepository):
    """
    Concrete implementation of OrderRepository using SQLAlchemy.

    Status writes and deletes are single conditional statements: the WHERE
    clause carries the seller and, when given, the expected status, so a
    concurrent change is detected instead of overwritten.
    Commit is handled by the Unit of Work.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session
        """
        self._session = session

    async def add(self, order: Order) -> None:
        if await self.exists(order.id):
            raise ValidationError(f"Order already exists: {order.id}")
        self._session.add(OrderMapper.to_persistence(order))
        await self._session.flush()
        logger.info(f"Created order: {order.id} (seller: {order.seller_id})")

    async def list_for_seller(self, seller_id: str) -> List[Order]:
        result = await self._session.execute(
            select(OrderModel)
            .where(OrderModel.seller_id == seller_id)
            .order_by(OrderModel.created_at.desc(), OrderModel.seq.asc())
        )
        models = result.scalars().all()
        logger.debug(f"Found {len(models)} orders for seller {seller_id}")
        return [OrderMapper.to_domain(model) for model in models]

    async def find_by_id(self, seller_id: str, order_id: str) -> Optional[Order]:
        model = await self._find_model(seller_id, order_id)
        if model is None:
            return None
        return OrderMapper.to_domain(model)

    async def update_status(
        self,
        seller_id: str,
        order_id: str,
        new_status: OrderStatus,
        expected_status: Optional[OrderStatus] = None,
    ) -> Order:
        new_status = OrderStatus.parse(new_status)
        criteria = self._criteria(seller_id, order_id, expected_status)

        result = await self._session.execute(
            update(OrderModel)
            .where(criteria)
            .values(status=new_status.value)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            await self._raise_missing_or_conflict(seller_id, order_id, expected_status)

        model = await self._find_model(seller_id, order_id)
        await self._session.refresh(model)
        logger.info(f"Order {order_id} status -> {new_status.value}")
        return OrderMapper.to_domain(model)

    async def delete(
        self,
        seller_id: str,
        order_id: str,
        expected_status: Optional[OrderStatus] = None,
    ) -> None:
        criteria = self._criteria(seller_id, order_id, expected_status)

        result = await self._session.execute(
            delete(OrderModel)
            .where(criteria)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            await self._raise_missing_or_conflict(seller_id, order_id, expected_status)

        logger.info(f"Deleted order: {order_id}")

    async def exists(self, order_id: str) -> bool:
        result = await self._session.execute(
            select(OrderModel.seq).where(OrderModel.id == order_id)
        )
        return result.scalar_one_or_none() is not None

    async def _find_model(self, seller_id: str, order_id: str) -> Optional[OrderModel]:
        result = await self._session.execute(
            select(OrderModel).where(
                and_(OrderModel.id == order_id, OrderModel.seller_id == seller_id)
            )
        )
        return result.scalar_one_or_none()

    @staticmethod
    def _criteria(seller_id: str, order_id: str, expected_status: Optional[OrderStatus]):
        clauses = [OrderModel.id == order_id, OrderModel.seller_id == seller_id]
        if expected_status is not None:
            clauses.append(OrderModel.status == OrderStatus.parse(expected_status).value)
        return and_(*clauses)

    async def _raise_missing_or_conflict(
        self,
        seller_id: str,
        order_id: str,
        expected_status: Optional[OrderStatus],
    ) -> None:
        result = await self._session.execute(
            select(OrderModel.status).where(
                and_(OrderModel.id == order_id, OrderModel.seller_id == seller_id)
            )
        )
        actual = result.scalar_one_or_none()
        if actual is None:
            raise OrderNotFoundError(order_id, seller_id)
        expected = OrderStatus.parse(expected_status).value if expected_status else ""
        logger.warning(f"Conflicting write on order {order_id}: expected {expected}, found {actual}")
        raise OrderConflictError(order_id, expected, actual)
