"""
Seller order endpoints.

Order ingestion, the two seller read surfaces (summary widget and
management board), the detail panel and seller actions.
"""
from typing import List

from fastapi import APIRouter, Depends, Query, status
import logging

from agrimarket.application.dtos import (
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
from agrimarket.application.services import (
    ManagementTab,
    OrderApplicationService,
    OrderLifecycleService,
    SellerOrderViewService,
)
from api.dependencies import get_lifecycle_service, get_order_service, get_view_service


logger = logging.getLogger(__name__)
router = APIRouter()


# =============================================================================
# INGESTION
# =============================================================================

@router.post(
    "/orders",
    response_model=OrderDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Store a placed order",
)
async def create_order(
    request: CreateOrderRequest,
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderDTO:
    """
    Store an order placed by a buyer. New orders always start as `pending`.
    """
    return await service.create_order(request)


# =============================================================================
# READ SURFACES
# =============================================================================

@router.get(
    "/sellers/{seller_id}/orders",
    response_model=List[OrderViewDTO],
    summary="Enriched orders of a seller, newest first",
)
async def list_seller_orders(
    seller_id: str,
    views: SellerOrderViewService = Depends(get_view_service),
) -> List[OrderViewDTO]:
    order_set = await views.load(seller_id)
    return [OrderViewDTO.from_view(view) for view in order_set.orders]


@router.get(
    "/sellers/{seller_id}/orders/summary",
    response_model=SummaryViewDTO,
    summary="Dashboard widget",
)
async def get_summary(
    seller_id: str,
    views: SellerOrderViewService = Depends(get_view_service),
) -> SummaryViewDTO:
    return await views.summary(seller_id)


@router.get(
    "/sellers/{seller_id}/orders/board",
    response_model=ManagementViewDTO,
    summary="Management page tab",
)
async def get_board(
    seller_id: str,
    tab: ManagementTab = Query(default=ManagementTab.PENDING, description="pending | confirmed | shipped | all"),
    views: SellerOrderViewService = Depends(get_view_service),
) -> ManagementViewDTO:
    """
    **Query Parameters:**
    - `tab`: `all` lists the active pipeline only (cancelled and delivered
      orders are never listed)
    """
    return await views.management(seller_id, tab)


@router.get(
    "/sellers/{seller_id}/orders/pending-count",
    response_model=PendingCountDTO,
    summary="Pending badge count",
)
async def get_pending_count(
    seller_id: str,
    views: SellerOrderViewService = Depends(get_view_service),
) -> PendingCountDTO:
    return PendingCountDTO(seller_id=seller_id, pending_count=await views.pending_count(seller_id))


@router.get(
    "/sellers/{seller_id}/orders/{order_id}",
    response_model=OrderDetailDTO,
    summary="Order detail panel",
)
async def get_order_detail(
    seller_id: str,
    order_id: str,
    views: SellerOrderViewService = Depends(get_view_service),
) -> OrderDetailDTO:
    return await views.detail(seller_id, order_id)


# =============================================================================
# SELLER ACTIONS
# =============================================================================

@router.post(
    "/sellers/{seller_id}/orders/{order_id}/transitions",
    response_model=TransitionResponse,
    summary="Confirm, cancel, ship or deliver an order",
)
async def transition_order(
    seller_id: str,
    order_id: str,
    request: TransitionRequest,
    engine: OrderLifecycleService = Depends(get_lifecycle_service),
) -> TransitionResponse:
    result = await engine.apply_action(seller_id, order_id, request.action)
    return TransitionResponse(
        order_id=result.order_id,
        previous_status=result.previous_status,
        new_status=result.new_status,
        removed=result.removed,
        order=OrderDTO.from_order(result.order) if result.order else None,
    )
