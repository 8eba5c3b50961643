"""SQLAlchemy ORM model for the orders table."""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Index, Integer, Numeric, String, Text

from .base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class OrderModel(Base):
    """
    Order database model.

    `seq` is a surrogate key whose only job is to remember insertion order,
    used to break created_at ties when listing a seller's orders.
    Timestamps are stored as naive UTC.
    """

    __tablename__ = "orders"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(64), unique=True, nullable=False, index=True)

    buyer_id = Column(String(64), nullable=False)
    seller_id = Column(String(64), nullable=False, index=True)
    listing_id = Column(String(64), nullable=False)

    quantity = Column(Numeric(12, 3), nullable=False)
    unit = Column(String(16), nullable=False)
    total_amount = Column(Numeric(12, 2), nullable=False)
    currency = Column(String(3), nullable=False, default="INR")

    status = Column(String(16), nullable=False, default="pending", index=True)
    payment_status = Column(String(16), nullable=False, default="pending")
    delivery_address = Column(Text, nullable=True)

    created_at = Column(DateTime, nullable=False, default=_utcnow)
    updated_at = Column(DateTime, nullable=False, default=_utcnow, onupdate=_utcnow)

    __table_args__ = (
        Index("ix_orders_seller_created", "seller_id", "created_at"),
    )

    def __repr__(self):
        return f"<OrderModel(id={self.id}, seller_id={self.seller_id}, status={self.status})>"
