"""Read model: an Order joined with buyer and listing display data."""
from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..enums import OrderStatus, PaymentStatus
from ..value_objects import BuyerProfile, ListingInfo, Money
from .order import Order


UNKNOWN_BUYER = "Unknown Buyer"
UNKNOWN_PRODUCT = "Unknown Product"
NO_ADDRESS = "No address provided"


@dataclass(frozen=True)
class OrderView:
    """Derived, never persisted. Built by the enrichment service."""

    id: str
    buyer_id: str
    seller_id: str
    listing_id: str
    quantity: Decimal
    unit: str
    total_amount: Money
    status: OrderStatus
    payment_status: PaymentStatus
    delivery_address: Optional[str]
    created_at: datetime
    buyer_name: str = UNKNOWN_BUYER
    buyer_phone: str = ""
    buyer_email: str = ""
    buyer_address: str = ""
    listing_name: str = UNKNOWN_PRODUCT

    @classmethod
    def build(
        cls,
        order: Order,
        buyer: Optional[BuyerProfile] = None,
        listing: Optional[ListingInfo] = None,
    ) -> "OrderView":
        """Join an order with whatever the collaborators returned (None -> placeholders)."""
        buyer = buyer or BuyerProfile()
        listing = listing or ListingInfo()
        return cls(
            id=order.id,
            buyer_id=order.buyer_id,
            seller_id=order.seller_id,
            listing_id=order.listing_id,
            quantity=order.quantity,
            unit=order.unit,
            total_amount=order.total_amount,
            status=order.status,
            payment_status=order.payment_status,
            delivery_address=order.delivery_address,
            created_at=order.created_at,
            buyer_name=buyer.full_name or UNKNOWN_BUYER,
            buyer_phone=buyer.phone or "",
            buyer_email=buyer.email or "",
            buyer_address=buyer.address or "",
            listing_name=listing.name or UNKNOWN_PRODUCT,
        )

    def with_order(self, order: Order) -> "OrderView":
        """Same enrichment, order fields taken from a fresher copy of the order."""
        return replace(
            self,
            status=order.status,
            payment_status=order.payment_status,
            delivery_address=order.delivery_address,
        )

    @property
    def display_address(self) -> str:
        return self.delivery_address or self.buyer_address or NO_ADDRESS
