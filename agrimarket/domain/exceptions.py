"""
Domain exceptions.

Every error the order core surfaces to its callers derives from DomainError.
"""
from typing import Optional


class DomainError(Exception):
    """Base class for order domain errors."""


class ValidationError(DomainError, ValueError):
    """Malformed input, e.g. an unknown status literal or a negative total."""


class NotFoundError(DomainError):
    """A referenced order, buyer or listing does not exist."""


class OrderNotFoundError(NotFoundError):
    """Order does not exist or belongs to another seller."""

    def __init__(self, order_id: str, seller_id: Optional[str] = None):
        self.order_id = order_id
        self.seller_id = seller_id
        super().__init__(f"Order not found: {order_id}")


class InvalidTransitionError(DomainError):
    """Requested status change is not an edge of the lifecycle table."""

    def __init__(self, order_id: str, current_status: str, requested_status: str):
        self.order_id = order_id
        self.current_status = current_status
        self.requested_status = requested_status
        super().__init__(
            f"Cannot move order {order_id} from '{current_status}' "
            f"to '{requested_status}'"
        )


class OrderConflictError(DomainError):
    """Stored status no longer matches the status a write was validated against."""

    def __init__(self, order_id: str, expected_status: str, actual_status: str):
        self.order_id = order_id
        self.expected_status = expected_status
        self.actual_status = actual_status
        super().__init__(
            f"Order {order_id} changed concurrently: expected '{expected_status}', "
            f"found '{actual_status}'"
        )
