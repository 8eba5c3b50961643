"""Unit of Work over the SQLAlchemy Order Store."""

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from agrimarket.application.interfaces import IUnitOfWork
from agrimarket.domain.value_objects import ExecutionID

from .repositories.order_repository_impl import SqlAlchemyOrderRepository


logger = logging.getLogger(__name__)


class UnitOfWork(IUnitOfWork):
    """
    One session, one transaction, one ExecutionID.

    Writes made through `orders` become visible only after `commit()`.
    Leaving the block without a commit (normally or by exception) discards
    them, so a refused transition never leaves a partial write behind.
    """

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """Initialize Unit of Work.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None
        self._execution_id: Optional[ExecutionID] = None
        self._orders: Optional[SqlAlchemyOrderRepository] = None
        self._committed = False

    async def __aenter__(self) -> "UnitOfWork":
        self._session = self._session_factory()
        self._execution_id = ExecutionID.generate()
        self._orders = None
        self._committed = False
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        try:
            if exc_type is not None or not self._committed:
                await self._session.rollback()
                if exc_type is not None:
                    logger.debug(
                        f"Rolled back [execution_id: {self._execution_id}] "
                        f"after {exc_type.__name__}"
                    )
        finally:
            await self._session.close()
            self._session = None

    @property
    def execution_id(self) -> ExecutionID:
        if self._execution_id is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        return self._execution_id

    @property
    def orders(self) -> SqlAlchemyOrderRepository:
        """Order repository bound to this unit's session (created on first use)."""
        session = self._require_session()
        if self._orders is None:
            self._orders = SqlAlchemyOrderRepository(session)
        return self._orders

    async def commit(self) -> None:
        await self._require_session().commit()
        self._committed = True

    async def rollback(self) -> None:
        await self._require_session().rollback()
        self._committed = False

    def _require_session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        return self._session


def create_uow(session_factory: async_sessionmaker) -> UnitOfWork:
    """Create a new Unit of Work bound to `session_factory`."""
    return UnitOfWork(session_factory)
