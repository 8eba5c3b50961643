"""Application DTOs for Order operations."""

from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from agrimarket.domain.entities import Order, OrderView
from agrimarket.domain.enums import OrderAction, OrderStatus, PaymentStatus


class CreateOrderRequest(BaseModel):
    """Request DTO for ingesting a placed order."""

    order_id: str = Field(..., min_length=1, description="Order ID")
    buyer_id: str = Field(..., min_length=1, description="Buyer user ID")
    seller_id: str = Field(..., min_length=1, description="Seller user ID")
    listing_id: str = Field(..., min_length=1, description="Marketplace listing ID")
    quantity: Decimal = Field(..., gt=0, description="Quantity ordered")
    unit: str = Field(default="kg", description="Quantity unit")
    total_amount: Decimal = Field(..., ge=0, description="Total amount")
    currency: str = Field(default="INR", min_length=3, max_length=3, description="Currency code")
    delivery_address: Optional[str] = Field(None, description="Delivery address")
    created_at: Optional[datetime] = Field(None, description="Placement time (defaults to now)")

    model_config = {"frozen": True}


class OrderDTO(BaseModel):
    """Response DTO for a stored order."""

    id: str
    buyer_id: str
    seller_id: str
    listing_id: str
    quantity: Decimal
    unit: str
    total_amount: Decimal
    currency: str
    status: OrderStatus
    payment_status: PaymentStatus
    delivery_address: Optional[str] = None
    created_at: datetime

    model_config = {"frozen": True}

    @classmethod
    def from_order(cls, order: Order) -> "OrderDTO":
        return cls(
            id=order.id,
            buyer_id=order.buyer_id,
            seller_id=order.seller_id,
            listing_id=order.listing_id,
            quantity=order.quantity,
            unit=order.unit,
            total_amount=order.total_amount.amount,
            currency=order.total_amount.currency,
            status=order.status,
            payment_status=order.payment_status,
            delivery_address=order.delivery_address,
            created_at=order.created_at,
        )


class OrderViewDTO(OrderDTO):
    """Order enriched with buyer and listing display fields."""

    buyer_name: str
    buyer_phone: str
    buyer_email: str
    buyer_address: str
    listing_name: str

    @classmethod
    def from_view(cls, view: OrderView) -> "OrderViewDTO":
        return cls(
            id=view.id,
            buyer_id=view.buyer_id,
            seller_id=view.seller_id,
            listing_id=view.listing_id,
            quantity=view.quantity,
            unit=view.unit,
            total_amount=view.total_amount.amount,
            currency=view.total_amount.currency,
            status=view.status,
            payment_status=view.payment_status,
            delivery_address=view.delivery_address,
            created_at=view.created_at,
            buyer_name=view.buyer_name,
            buyer_phone=view.buyer_phone,
            buyer_email=view.buyer_email,
            buyer_address=view.buyer_address,
            listing_name=view.listing_name,
        )


class OrderDetailDTO(BaseModel):
    """Detail panel: one enriched order plus the actions the seller may take."""

    order: OrderViewDTO
    display_address: str
    actions: List[OrderAction] = Field(default_factory=list)

    model_config = {"frozen": True}


class SummaryViewDTO(BaseModel):
    """Dashboard widget: most recent orders and the pending badge."""

    seller_id: str
    pending_count: int = Field(..., ge=0)
    orders: List[OrderViewDTO] = Field(default_factory=list)

    model_config = {"frozen": True}


class ManagementViewDTO(BaseModel):
    """Management page: one tab of the active pipeline plus tab badges."""

    seller_id: str
    tab: str
    orders: List[OrderViewDTO] = Field(default_factory=list)
    tab_counts: Dict[str, int] = Field(default_factory=dict)
    total_orders: int = Field(..., ge=0)

    model_config = {"frozen": True}


class TransitionRequest(BaseModel):
    """Request DTO for a seller action."""

    action: OrderAction

    model_config = {"frozen": True}


class TransitionResponse(BaseModel):
    """Response DTO for an accepted transition."""

    order_id: str
    previous_status: OrderStatus
    new_status: OrderStatus
    removed: bool
    order: Optional[OrderDTO] = None

    model_config = {"frozen": True}


class PendingCountDTO(BaseModel):
    seller_id: str
    pending_count: int = Field(..., ge=0)
