"""Domain entities."""

from .order import Order
from .order_view import NO_ADDRESS, UNKNOWN_BUYER, UNKNOWN_PRODUCT, OrderView

__all__ = ["NO_ADDRESS", "Order", "OrderView", "UNKNOWN_BUYER", "UNKNOWN_PRODUCT"]
