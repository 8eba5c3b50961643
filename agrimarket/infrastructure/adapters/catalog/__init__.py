"""Catalog adapters."""
from .in_memory_catalog import InMemoryCatalog
from .sqlalchemy_catalog import SqlAlchemyCatalog

__all__ = ["InMemoryCatalog", "SqlAlchemyCatalog"]
