"""Badge counts derived from a seller's current order set."""
from collections import Counter
from typing import Dict, Iterable, Protocol

from agrimarket.domain.enums import OrderStatus


class _HasStatus(Protocol):
    status: OrderStatus


def count_pending(orders: Iterable[_HasStatus]) -> int:
    """Number of orders waiting for the seller to confirm or cancel."""
    return sum(1 for order in orders if order.status == OrderStatus.PENDING)


def count_by_status(orders: Iterable[_HasStatus]) -> Dict[OrderStatus, int]:
    """Count per status; every status is present, zero when absent."""
    counts = Counter(order.status for order in orders)
    return {status: counts.get(status, 0) for status in OrderStatus}
