"""Tests for InMemoryEventBus."""

import logging

import pytest

from agrimarket.domain.events import OrderRemovedEvent, OrderStatusChangedEvent
from agrimarket.infrastructure.event_bus import ALL_EVENTS, InMemoryEventBus


def status_changed(order_id="o1"):
    return OrderStatusChangedEvent(
        order_id=order_id,
        seller_id="seller-1",
        previous_status="pending",
        new_status="confirmed",
    )


@pytest.mark.asyncio
async def test_handlers_receive_their_event_type():
    bus = InMemoryEventBus()
    changed, removed = [], []

    async def on_changed(event):
        changed.append(event)

    async def on_removed(event):
        removed.append(event)

    bus.subscribe("OrderStatusChangedEvent", on_changed)
    bus.subscribe("OrderRemovedEvent", on_removed)

    await bus.publish(status_changed())

    assert len(changed) == 1
    assert changed[0].aggregate_id == "o1"
    assert removed == []


@pytest.mark.asyncio
async def test_wildcard_subscriber_sees_everything():
    bus = InMemoryEventBus()
    seen = []

    async def handler(event):
        seen.append(event.event_type)

    bus.subscribe(ALL_EVENTS, handler)

    await bus.publish_all(
        [status_changed(), OrderRemovedEvent(order_id="o1", seller_id="seller-1", final_status="delivered")]
    )

    assert seen == ["OrderStatusChangedEvent", "OrderRemovedEvent"]


@pytest.mark.asyncio
async def test_failing_handler_does_not_block_others():
    bus = InMemoryEventBus()
    seen = []

    async def broken(event):
        raise RuntimeError("boom")

    async def healthy(event):
        seen.append(event)

    bus.subscribe("OrderStatusChangedEvent", broken)
    bus.subscribe("OrderStatusChangedEvent", healthy)

    await bus.publish(status_changed())

    assert len(seen) == 1


@pytest.mark.asyncio
async def test_publish_without_subscribers():
    bus = InMemoryEventBus()

    await bus.publish(status_changed())


@pytest.mark.asyncio
async def test_handler_failure_is_logged_once_through_root(caplog):
    bus = InMemoryEventBus()

    async def broken(event):
        raise RuntimeError("boom")

    bus.subscribe("OrderStatusChangedEvent", broken)
    bus_logger = logging.getLogger("agrimarket.infrastructure.event_bus")

    with caplog.at_level(logging.ERROR):
        await bus.publish(status_changed())

    assert bus_logger.handlers == []
    assert bus_logger.propagate
    errors = [r for r in caplog.records if r.name == bus_logger.name and r.levelno == logging.ERROR]
    assert len(errors) == 1
