"""Order Store adapters that need no database."""
from .in_memory_order_repository import InMemoryOrderRepository
from .in_memory_unit_of_work import InMemoryUnitOfWork, InMemoryUnitOfWorkFactory

__all__ = ["InMemoryOrderRepository", "InMemoryUnitOfWork", "InMemoryUnitOfWorkFactory"]
