"""Domain layer - pure domain models and interfaces."""

from .entities import Order, OrderView
from .enums import OrderAction, OrderStatus, PaymentStatus, RetentionPolicy
from .exceptions import (
    DomainError,
    InvalidTransitionError,
    NotFoundError,
    OrderConflictError,
    OrderNotFoundError,
    ValidationError,
)
from .repositories import OrderRepository
from .value_objects import BuyerProfile, ExecutionID, ListingInfo, Money

__all__ = [
    "BuyerProfile",
    "DomainError",
    "ExecutionID",
    "InvalidTransitionError",
    "ListingInfo",
    "Money",
    "NotFoundError",
    "Order",
    "OrderAction",
    "OrderConflictError",
    "OrderNotFoundError",
    "OrderRepository",
    "OrderStatus",
    "OrderView",
    "PaymentStatus",
    "RetentionPolicy",
    "ValidationError",
]
