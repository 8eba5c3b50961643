"""Tests for the Order aggregate."""

from datetime import datetime
from decimal import Decimal

import pytest

from agrimarket.domain.entities import Order
from agrimarket.domain.enums import OrderStatus, PaymentStatus
from agrimarket.domain.events import OrderRemovedEvent, OrderStatusChangedEvent
from agrimarket.domain.exceptions import InvalidTransitionError, ValidationError
from agrimarket.domain.value_objects import Money


def test_place_starts_pending():
    order = Order.place(
        order_id="o1",
        buyer_id="b1",
        seller_id="s1",
        listing_id="l1",
        quantity=Decimal("2.5"),
        unit="quintal",
        total_amount=Money(Decimal("9000")),
    )

    assert order.status is OrderStatus.PENDING
    assert order.payment_status is PaymentStatus.PENDING
    assert order.created_at.tzinfo is not None
    assert order.get_domain_events() == []


def test_status_literals_are_parsed(make_order):
    order = make_order("o1", status="Confirmed")

    assert order.status is OrderStatus.CONFIRMED


def test_unknown_status_rejected(make_order):
    with pytest.raises(ValidationError):
        make_order("o1", status="refunded")


@pytest.mark.parametrize("quantity", ["0", "-1"])
def test_quantity_must_be_positive(quantity):
    with pytest.raises(ValidationError):
        Order(
            id="o1",
            buyer_id="b1",
            seller_id="s1",
            listing_id="l1",
            quantity=Decimal(quantity),
            unit="kg",
            total_amount=Money(Decimal("10")),
            created_at=datetime(2025, 1, 1),
        )


def test_negative_total_rejected():
    with pytest.raises(ValidationError):
        Order(
            id="o1",
            buyer_id="b1",
            seller_id="s1",
            listing_id="l1",
            quantity=Decimal("1"),
            unit="kg",
            total_amount=Money(Decimal("-5")),
            created_at=datetime(2025, 1, 1),
        )


def test_naive_created_at_treated_as_utc():
    order = Order(
        id="o1",
        buyer_id="b1",
        seller_id="s1",
        listing_id="l1",
        quantity=1,
        unit="kg",
        total_amount=Decimal("10"),
        created_at=datetime(2025, 1, 1, 8, 30),
    )

    assert order.created_at.utcoffset().total_seconds() == 0
    assert isinstance(order.total_amount, Money)
    assert order.quantity == Decimal("1")


@pytest.mark.parametrize("field_name", ["id", "seller_id", "total_amount", "created_at"])
def test_identity_fields_are_immutable(make_order, field_name):
    order = make_order("o1")

    with pytest.raises(AttributeError):
        setattr(order, field_name, getattr(order, field_name))


def test_transition_records_event(make_order):
    order = make_order("o1")

    previous = order.transition_to(OrderStatus.CONFIRMED)

    assert previous is OrderStatus.PENDING
    assert order.status is OrderStatus.CONFIRMED
    events = order.get_domain_events()
    assert len(events) == 1
    assert isinstance(events[0], OrderStatusChangedEvent)
    assert events[0].aggregate_id == "o1"
    assert events[0].aggregate_type == "Order"
    assert events[0].previous_status == "pending"
    assert events[0].new_status == "confirmed"


def test_refused_transition_leaves_order_untouched(make_order):
    order = make_order("o1", status=OrderStatus.SHIPPED)

    with pytest.raises(InvalidTransitionError):
        order.transition_to(OrderStatus.CONFIRMED)

    assert order.status is OrderStatus.SHIPPED
    assert order.get_domain_events() == []


def test_terminal_orders_cannot_move(make_order):
    order = make_order("o1", status=OrderStatus.CANCELLED)

    assert order.is_terminal
    for target in OrderStatus:
        with pytest.raises(InvalidTransitionError):
            order.transition_to(target)


def test_copy_is_detached(make_order):
    order = make_order("o1")
    order.transition_to(OrderStatus.CONFIRMED)

    copy = order.copy()
    copy.transition_to(OrderStatus.SHIPPED)

    assert order.status is OrderStatus.CONFIRMED
    assert len(order.get_domain_events()) == 1
    assert len(copy.get_domain_events()) == 1


def test_record_removed_and_event_payload(make_order):
    order = make_order("o1", status=OrderStatus.SHIPPED)
    order.transition_to(OrderStatus.DELIVERED)
    order.record_removed()

    events = order.get_domain_events()
    assert isinstance(events[-1], OrderRemovedEvent)
    payload = events[-1].to_dict()
    assert payload["event_type"] == "OrderRemovedEvent"
    assert payload["data"] == {"order_id": "o1", "seller_id": "seller-1", "final_status": "delivered"}

    order.clear_domain_events()
    assert order.get_domain_events() == []


def test_status_assignment_rejects_unknown_literal(make_order):
    order = make_order("o1")

    with pytest.raises(ValidationError):
        order.status = "bogus"

    assert order.status is OrderStatus.PENDING


def test_status_assignment_follows_lifecycle(make_order):
    order = make_order("o1")

    with pytest.raises(InvalidTransitionError):
        order.status = OrderStatus.DELIVERED

    order.status = "confirmed"
    assert order.status is OrderStatus.CONFIRMED


def test_payment_status_assignment_is_parsed(make_order):
    order = make_order("o1")

    order.payment_status = "Paid"
    assert order.payment_status is PaymentStatus.PAID

    with pytest.raises(ValidationError):
        order.payment_status = "chargeback"


def test_with_status_returns_detached_copy(make_order):
    order = make_order("o1")

    stored = order.with_status("delivered")

    assert stored.status is OrderStatus.DELIVERED
    assert order.status is OrderStatus.PENDING
    assert stored.created_at == order.created_at
