"""Data layer - infrastructure persistence and mapping."""

from .mappers import ListingMapper, OrderMapper, ProfileMapper
from .models import Base, ListingModel, OrderModel, ProfileModel
from .repositories import SqlAlchemyOrderRepository
from .uow import UnitOfWork, create_uow

__all__ = [
    "Base",
    "create_uow",
    "ListingMapper",
    "ListingModel",
    "OrderMapper",
    "OrderModel",
    "ProfileMapper",
    "ProfileModel",
    "SqlAlchemyOrderRepository",
    "UnitOfWork",
]
