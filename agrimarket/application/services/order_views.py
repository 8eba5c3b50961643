"""
Seller order views.

Two read surfaces over the same seller order set:

- summary: dashboard widget with the most recent orders and a pending badge
- management: tabbed page over the active pipeline with per-tab badges

Both are pure functions of an explicit SellerOrderSet. The set is either
reloaded from the Order Store or updated locally from a TransitionResult,
so neither surface can show a status the store no longer holds.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Tuple
import logging

from agrimarket.application.dtos.order_dto import (
    ManagementViewDTO,
    OrderDetailDTO,
    OrderViewDTO,
    SummaryViewDTO,
)
from agrimarket.application.interfaces import IUnitOfWork
from agrimarket.domain import lifecycle
from agrimarket.domain.entities import OrderView
from agrimarket.domain.enums import OrderAction, OrderStatus
from agrimarket.domain.exceptions import OrderNotFoundError, ValidationError

from .enrichment_service import EnrichmentService
from .lifecycle_service import OrderLifecycleService, TransitionResult
from .notification_counter import count_by_status, count_pending


logger = logging.getLogger(__name__)

DEFAULT_SUMMARY_LIMIT = 5


class ManagementTab(str, Enum):
    """Tabs of the management page. ALL means the active pipeline."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    SHIPPED = "shipped"
    ALL = "all"

    @classmethod
    def parse(cls, value: "ManagementTab | str") -> "ManagementTab":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValidationError(f"Unknown tab: {value!r}") from None

    @property
    def statuses(self) -> Tuple[OrderStatus, ...]:
        if self is ManagementTab.ALL:
            return lifecycle.ACTIVE_STATUSES
        return (OrderStatus(self.value),)


@dataclass(frozen=True)
class SellerOrderSet:
    """Enriched orders of one seller, newest first."""

    seller_id: str
    orders: Tuple[OrderView, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.orders)

    @property
    def pending_count(self) -> int:
        return count_pending(self.orders)

    def get(self, order_id: str) -> Optional[OrderView]:
        return next((view for view in self.orders if view.id == order_id), None)

    def apply(self, result: TransitionResult) -> "SellerOrderSet":
        """
        Local set after a transition: status replaced, or order dropped
        when the store deleted it.
        """
        if result.removed:
            orders = tuple(view for view in self.orders if view.id != result.order_id)
        else:
            orders = tuple(
                view.with_order(result.order) if view.id == result.order_id else view
                for view in self.orders
            )
        return SellerOrderSet(seller_id=self.seller_id, orders=orders)


# =============================================================================
# VIEW BUILDERS
# =============================================================================

def build_summary_view(order_set: SellerOrderSet, limit: int = DEFAULT_SUMMARY_LIMIT) -> SummaryViewDTO:
    return SummaryViewDTO(
        seller_id=order_set.seller_id,
        pending_count=order_set.pending_count,
        orders=[OrderViewDTO.from_view(view) for view in order_set.orders[:limit]],
    )


def build_management_view(
    order_set: SellerOrderSet, tab: ManagementTab = ManagementTab.PENDING
) -> ManagementViewDTO:
    tab = ManagementTab.parse(tab)
    counts = count_by_status(order_set.orders)
    tab_counts = {
        t.value: sum(counts[status] for status in t.statuses) for t in ManagementTab
    }
    return ManagementViewDTO(
        seller_id=order_set.seller_id,
        tab=tab.value,
        orders=[
            OrderViewDTO.from_view(view)
            for view in order_set.orders
            if view.status in tab.statuses
        ],
        tab_counts=tab_counts,
        total_orders=len(order_set),
    )


def build_order_detail(view: OrderView) -> OrderDetailDTO:
    return OrderDetailDTO(
        order=OrderViewDTO.from_view(view),
        display_address=view.display_address,
        actions=list(lifecycle.next_actions(view.status)),
    )


# =============================================================================
# SERVICE
# =============================================================================

class SellerOrderViewService:
    """
    Loads seller order sets and serves both surfaces from them.

    Holds no order state itself; every call starts from the Order Store or
    from a SellerOrderSet the caller passes in.
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        enrichment: EnrichmentService,
        lifecycle_service: OrderLifecycleService,
        summary_limit: int = DEFAULT_SUMMARY_LIMIT,
    ) -> None:
        self._uow_factory = uow_factory
        self._enrichment = enrichment
        self._lifecycle = lifecycle_service
        self._summary_limit = summary_limit

    async def load(self, seller_id: str) -> SellerOrderSet:
        """Read the seller's orders from the store and enrich them."""
        async with self._uow_factory() as uow:
            orders = await uow.orders.list_for_seller(seller_id)
        views = await self._enrichment.enrich(orders)
        return SellerOrderSet(seller_id=seller_id, orders=tuple(views))

    async def summary(self, seller_id: str) -> SummaryViewDTO:
        return build_summary_view(await self.load(seller_id), self._summary_limit)

    async def management(self, seller_id: str, tab: ManagementTab = ManagementTab.PENDING) -> ManagementViewDTO:
        tab = ManagementTab.parse(tab)
        return build_management_view(await self.load(seller_id), tab)

    async def pending_count(self, seller_id: str) -> int:
        async with self._uow_factory() as uow:
            orders = await uow.orders.list_for_seller(seller_id)
        return count_pending(orders)

    async def detail(self, seller_id: str, order_id: str) -> OrderDetailDTO:
        async with self._uow_factory() as uow:
            order = await uow.orders.find_by_id(seller_id, order_id)
        if order is None:
            raise OrderNotFoundError(order_id, seller_id)
        return build_order_detail(await self._enrichment.enrich_one(order))

    async def act(
        self, order_set: SellerOrderSet, order_id: str, action: OrderAction
    ) -> Tuple[TransitionResult, SellerOrderSet]:
        """
        Run a seller action and return the set to render next.

        On failure the exception propagates and the caller keeps rendering
        the set it passed in, unchanged.
        """
        result = await self._lifecycle.apply_action(order_set.seller_id, order_id, action)
        logger.debug(f"Applying transition of {order_id} to local set of {order_set.seller_id}")
        return result, order_set.apply(result)
