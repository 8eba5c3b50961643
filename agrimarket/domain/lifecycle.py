"""
Order lifecycle state machine.

Single authority for which status changes an order may go through.
Pure functions over OrderStatus / OrderAction - no persistence here.

    pending ──confirm──> confirmed ──ship──> shipped ──deliver──> delivered
       │
       └──cancel──> cancelled
"""
from typing import Dict, FrozenSet, Tuple

from .enums import OrderAction, OrderStatus
from .exceptions import InvalidTransitionError


TRANSITIONS: Dict[OrderStatus, FrozenSet[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.CONFIRMED, OrderStatus.CANCELLED}),
    OrderStatus.CONFIRMED: frozenset({OrderStatus.SHIPPED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}

ACTION_TARGETS: Dict[OrderAction, OrderStatus] = {
    OrderAction.CONFIRM: OrderStatus.CONFIRMED,
    OrderAction.CANCEL: OrderStatus.CANCELLED,
    OrderAction.SHIP: OrderStatus.SHIPPED,
    OrderAction.DELIVER: OrderStatus.DELIVERED,
}

# Display order of the actions offered for each status (confirm before cancel).
_ACTIONS_BY_STATUS: Dict[OrderStatus, Tuple[OrderAction, ...]] = {
    OrderStatus.PENDING: (OrderAction.CONFIRM, OrderAction.CANCEL),
    OrderStatus.CONFIRMED: (OrderAction.SHIP,),
    OrderStatus.SHIPPED: (OrderAction.DELIVER,),
    OrderStatus.DELIVERED: (),
    OrderStatus.CANCELLED: (),
}

INITIAL_STATUS = OrderStatus.PENDING
TERMINAL_STATUSES: FrozenSet[OrderStatus] = frozenset(
    status for status, targets in TRANSITIONS.items() if not targets
)
ACTIVE_STATUSES: Tuple[OrderStatus, ...] = (
    OrderStatus.PENDING,
    OrderStatus.CONFIRMED,
    OrderStatus.SHIPPED,
)


def allowed_targets(status: OrderStatus) -> FrozenSet[OrderStatus]:
    """Statuses reachable from `status` in one step."""
    return TRANSITIONS[OrderStatus.parse(status)]


def can_transition(current: OrderStatus, target: OrderStatus) -> bool:
    return OrderStatus.parse(target) in allowed_targets(current)


def is_terminal(status: OrderStatus) -> bool:
    return OrderStatus.parse(status) in TERMINAL_STATUSES


def next_actions(status: OrderStatus) -> Tuple[OrderAction, ...]:
    """Actions a seller may take on an order in `status`."""
    return _ACTIONS_BY_STATUS[OrderStatus.parse(status)]


def target_for(action: OrderAction) -> OrderStatus:
    return ACTION_TARGETS[OrderAction.parse(action)]


def ensure_transition(order_id: str, current: OrderStatus, target: OrderStatus) -> None:
    """
    Validate one status change.

    Raises:
        InvalidTransitionError: If `current -> target` is not an allowed edge
            (re-entering a state, skipping a state, leaving a terminal state)
    """
    current = OrderStatus.parse(current)
    target = OrderStatus.parse(target)
    if target not in TRANSITIONS[current]:
        raise InvalidTransitionError(order_id, current.value, target.value)
