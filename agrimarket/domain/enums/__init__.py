"""Domain enums."""

from .order_status import OrderAction, OrderStatus, PaymentStatus, RetentionPolicy

__all__ = ["OrderAction", "OrderStatus", "PaymentStatus", "RetentionPolicy"]
