"""Shared fixtures: in-memory Order Store, Directory and Catalog."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Callable

import pytest

from agrimarket.domain.entities import Order
from agrimarket.domain.enums import OrderStatus
from agrimarket.domain.value_objects import BuyerProfile, ListingInfo, Money
from agrimarket.infrastructure.adapters.catalog import InMemoryCatalog
from agrimarket.infrastructure.adapters.directory import InMemoryDirectory
from agrimarket.infrastructure.adapters.persistence import (
    InMemoryOrderRepository,
    InMemoryUnitOfWorkFactory,
)


SELLER_ID = "seller-1"
OTHER_SELLER_ID = "seller-2"

BASE_TIME = datetime(2025, 3, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_order() -> Callable[..., Order]:
    """Build orders; `minutes` offsets created_at from a fixed base time."""

    def _make(
        order_id: str,
        status: OrderStatus = OrderStatus.PENDING,
        minutes: int = 0,
        seller_id: str = SELLER_ID,
        buyer_id: str = "buyer-1",
        listing_id: str = "listing-1",
        delivery_address=None,
    ) -> Order:
        return Order(
            id=order_id,
            buyer_id=buyer_id,
            seller_id=seller_id,
            listing_id=listing_id,
            quantity=Decimal("10"),
            unit="kg",
            total_amount=Money(Decimal("450.00")),
            created_at=BASE_TIME + timedelta(minutes=minutes),
            status=status,
            delivery_address=delivery_address,
        )

    return _make


@pytest.fixture
def repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def uow_factory(repository) -> InMemoryUnitOfWorkFactory:
    return InMemoryUnitOfWorkFactory(repository)


@pytest.fixture
def directory() -> InMemoryDirectory:
    return InMemoryDirectory(
        {
            "buyer-1": BuyerProfile(
                full_name="Asha Patil",
                phone="+91-98200-00001",
                email="asha@example.com",
                address="12 Market Road, Nashik",
            ),
            "buyer-2": BuyerProfile(full_name="Ravi Kumar"),
        }
    )


@pytest.fixture
def catalog() -> InMemoryCatalog:
    return InMemoryCatalog(
        {
            "listing-1": ListingInfo(name="Alphonso Mango"),
            "listing-2": ListingInfo(name="Basmati Rice"),
        }
    )
