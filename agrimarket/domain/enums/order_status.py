"""
Order Status Enums.

Closed sets of values for order state, payment state, seller actions
and the delivered-order retention policy.
"""
from enum import Enum

from ..exceptions import ValidationError


class OrderStatus(str, Enum):
    """Lifecycle status of an order."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @classmethod
    def parse(cls, value: "OrderStatus | str") -> "OrderStatus":
        """
        Parse a status literal.

        Args:
            value: OrderStatus or its string value

        Returns:
            OrderStatus member

        Raises:
            ValidationError: If the literal is not one of the five states
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValidationError(f"Unknown order status: {value!r}") from None


class PaymentStatus(str, Enum):
    """Payment status (never mutated by the lifecycle engine)."""

    PENDING = "pending"
    PAID = "paid"
    REFUNDED = "refunded"
    FAILED = "failed"

    @classmethod
    def parse(cls, value: "PaymentStatus | str") -> "PaymentStatus":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValidationError(f"Unknown payment status: {value!r}") from None


class OrderAction(str, Enum):
    """Seller actions offered on an order."""

    CONFIRM = "confirm"
    CANCEL = "cancel"
    SHIP = "ship"
    DELIVER = "deliver"

    @classmethod
    def parse(cls, value: "OrderAction | str") -> "OrderAction":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValidationError(f"Unknown order action: {value!r}") from None


class RetentionPolicy(str, Enum):
    """What happens to an order record once it is delivered."""

    RETAIN = "retain"
    DELETE = "delete"
