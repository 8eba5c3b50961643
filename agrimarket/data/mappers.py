"""Static mappers for domain entities ↔ database models."""

from datetime import datetime, timezone
from decimal import Decimal

from agrimarket.domain.entities.order import Order
from agrimarket.domain.enums import OrderStatus, PaymentStatus
from agrimarket.domain.value_objects import BuyerProfile, ListingInfo, Money

from .models import ListingModel, OrderModel, ProfileModel


def to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class OrderMapper:
    """Static mapper for Order ↔ OrderModel transformation."""

    @staticmethod
    def to_domain(model: OrderModel) -> Order:
        """Convert ORM model to domain aggregate.

        Args:
            model: OrderModel instance

        Returns:
            Order domain aggregate
        """
        return Order(
            id=model.id,
            buyer_id=model.buyer_id,
            seller_id=model.seller_id,
            listing_id=model.listing_id,
            quantity=Decimal(str(model.quantity)),
            unit=model.unit,
            total_amount=Money(
                amount=Decimal(str(model.total_amount)),
                currency=model.currency,
            ),
            created_at=model.created_at.replace(tzinfo=timezone.utc),
            status=OrderStatus(model.status),
            payment_status=PaymentStatus(model.payment_status),
            delivery_address=model.delivery_address,
        )

    @staticmethod
    def to_persistence(entity: Order) -> OrderModel:
        """Convert domain aggregate to ORM model.

        Args:
            entity: Order domain aggregate

        Returns:
            OrderModel instance
        """
        return OrderModel(
            id=entity.id,
            buyer_id=entity.buyer_id,
            seller_id=entity.seller_id,
            listing_id=entity.listing_id,
            quantity=entity.quantity,
            unit=entity.unit,
            total_amount=entity.total_amount.amount,
            currency=entity.total_amount.currency,
            status=entity.status.value,
            payment_status=entity.payment_status.value,
            delivery_address=entity.delivery_address,
            created_at=to_naive_utc(entity.created_at),
        )


class ProfileMapper:
    """ProfileModel -> BuyerProfile."""

    @staticmethod
    def to_domain(model: ProfileModel) -> BuyerProfile:
        return BuyerProfile(
            full_name=model.full_name,
            phone=model.phone,
            email=model.email,
            address=model.address,
        )


class ListingMapper:
    """ListingModel -> ListingInfo."""

    @staticmethod
    def to_domain(model: ListingModel) -> ListingInfo:
        return ListingInfo(name=model.crop_name)
