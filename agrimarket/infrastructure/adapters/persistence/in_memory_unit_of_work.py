"""Unit of Work over the in-memory Order Store."""

from typing import Optional

from agrimarket.application.interfaces import IUnitOfWork
from agrimarket.domain.value_objects import ExecutionID

from .in_memory_order_repository import InMemoryOrderRepository


class InMemoryUnitOfWork(IUnitOfWork):
    """
    Unit of Work sharing one in-memory repository.

    Each repository write is a single point mutation, so there is nothing
    to undo on rollback; `committed` lets tests assert the commit happened.
    """

    def __init__(self, repository: InMemoryOrderRepository) -> None:
        self._repository = repository
        self._execution_id: Optional[ExecutionID] = None
        self.committed = False

    async def __aenter__(self) -> "InMemoryUnitOfWork":
        self._execution_id = ExecutionID.generate()
        self.committed = False
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        if exc_type is not None:
            await self.rollback()

    @property
    def orders(self) -> InMemoryOrderRepository:
        return self._repository

    @property
    def execution_id(self) -> ExecutionID:
        if self._execution_id is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        return self._execution_id

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.committed = False


class InMemoryUnitOfWorkFactory:
    """Callable producing units of work over the same store."""

    def __init__(self, repository: Optional[InMemoryOrderRepository] = None) -> None:
        self.repository = repository or InMemoryOrderRepository()

    def __call__(self) -> InMemoryUnitOfWork:
        return InMemoryUnitOfWork(self.repository)
