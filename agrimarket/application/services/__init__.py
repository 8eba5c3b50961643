"""Application services."""
from .enrichment_service import EnrichmentService
from .lifecycle_service import OrderLifecycleService, TransitionResult
from .notification_counter import count_by_status, count_pending
from .order_service import OrderApplicationService
from .order_views import (
    ManagementTab,
    SellerOrderSet,
    SellerOrderViewService,
    build_management_view,
    build_order_detail,
    build_summary_view,
)

__all__ = [
    "EnrichmentService",
    "ManagementTab",
    "OrderApplicationService",
    "OrderLifecycleService",
    "SellerOrderSet",
    "SellerOrderViewService",
    "TransitionResult",
    "build_management_view",
    "build_order_detail",
    "build_summary_view",
    "count_by_status",
    "count_pending",
]
