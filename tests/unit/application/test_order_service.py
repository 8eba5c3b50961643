"""Tests for OrderApplicationService."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from agrimarket.application.dtos import CreateOrderRequest
from agrimarket.application.services import OrderApplicationService
from agrimarket.domain.enums import OrderStatus
from agrimarket.domain.exceptions import ValidationError


def create_request(order_id: str, minute: int = 0, **overrides) -> CreateOrderRequest:
    data = dict(
        order_id=order_id,
        buyer_id="buyer-1",
        seller_id="seller-1",
        listing_id="listing-1",
        quantity=Decimal("3"),
        unit="crate",
        total_amount=Decimal("600"),
        currency="inr",
        created_at=datetime(2025, 3, 1, 9, minute, tzinfo=timezone.utc),
    )
    data.update(overrides)
    return CreateOrderRequest(**data)


@pytest.mark.asyncio
async def test_create_order_starts_pending(uow_factory):
    service = OrderApplicationService(uow_factory)

    dto = await service.create_order(create_request("o1"))

    assert dto.id == "o1"
    assert dto.status is OrderStatus.PENDING
    assert dto.currency == "INR"
    assert await uow_factory.repository.exists("o1")


@pytest.mark.asyncio
async def test_create_duplicate_rejected(uow_factory):
    service = OrderApplicationService(uow_factory)
    await service.create_order(create_request("o1"))

    with pytest.raises(ValidationError):
        await service.create_order(create_request("o1"))


@pytest.mark.asyncio
async def test_list_for_seller(uow_factory):
    service = OrderApplicationService(uow_factory)
    await service.create_order(create_request("o1", minute=1))
    await service.create_order(create_request("o2", minute=2))
    await service.create_order(create_request("o3", minute=3, seller_id="seller-2"))

    orders = await service.list_for_seller("seller-1")

    assert [o.id for o in orders] == ["o2", "o1"]
