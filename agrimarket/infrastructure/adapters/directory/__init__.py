"""Directory adapters."""
from .in_memory_directory import InMemoryDirectory
from .sqlalchemy_directory import SqlAlchemyDirectory

__all__ = ["InMemoryDirectory", "SqlAlchemyDirectory"]
