"""Application DTOs."""
from .order_dto import (
    CreateOrderRequest,
    ManagementViewDTO,
    OrderDetailDTO,
    OrderDTO,
    OrderViewDTO,
    PendingCountDTO,
    SummaryViewDTO,
    TransitionRequest,
    TransitionResponse,
)

__all__ = [
    "CreateOrderRequest",
    "ManagementViewDTO",
    "OrderDetailDTO",
    "OrderDTO",
    "OrderViewDTO",
    "PendingCountDTO",
    "SummaryViewDTO",
    "TransitionRequest",
    "TransitionResponse",
]
