"""
Order enrichment.

Joins raw orders with buyer contact data (Directory) and listing names
(Catalog) to build OrderView read models.
"""
import asyncio
import logging
from typing import Dict, List, Sequence, TypeVar

from agrimarket.application.interfaces import ICatalog, IDirectory
from agrimarket.domain.entities import Order, OrderView


logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_LOOKUP_TIMEOUT = 5.0

# Extra time a whole batch gets over the per-id timeout before it is abandoned
BATCH_GRACE_SECONDS = 1.0


class EnrichmentService:
    """
    Builds OrderViews for a batch of orders.

    One Directory call covers every distinct buyer of the batch and one
    Catalog call every distinct listing; both run concurrently. Each id is
    bounded by `lookup_timeout`, so one failing or slow id only costs that
    order its placeholders. A batch that does not return at all within
    `lookup_timeout + BATCH_GRACE_SECONDS` costs the whole batch the fields
    of that collaborator.
    """

    def __init__(
        self,
        directory: IDirectory,
        catalog: ICatalog,
        lookup_timeout: float = DEFAULT_LOOKUP_TIMEOUT,
    ) -> None:
        self._directory = directory
        self._catalog = catalog
        self._lookup_timeout = lookup_timeout

    async def enrich(self, orders: Sequence[Order]) -> List[OrderView]:
        """Enrich a batch of orders, preserving their order.

        Args:
            orders: Orders as returned by the Order Store

        Returns:
            One OrderView per order. Never raises for collaborator failures.
        """
        if not orders:
            return []

        buyer_ids = list(dict.fromkeys(order.buyer_id for order in orders))
        listing_ids = list(dict.fromkeys(order.listing_id for order in orders))

        profiles, listings = await asyncio.gather(
            self._resolve(
                "directory",
                self._directory.lookup_many(buyer_ids, timeout=self._lookup_timeout),
            ),
            self._resolve(
                "catalog",
                self._catalog.lookup_many(listing_ids, timeout=self._lookup_timeout),
            ),
        )

        return [
            OrderView.build(
                order,
                buyer=profiles.get(order.buyer_id),
                listing=listings.get(order.listing_id),
            )
            for order in orders
        ]

    async def enrich_one(self, order: Order) -> OrderView:
        views = await self.enrich([order])
        return views[0]

    async def _resolve(self, source: str, lookup) -> Dict[str, T]:
        batch_timeout = self._lookup_timeout + BATCH_GRACE_SECONDS
        try:
            return await asyncio.wait_for(lookup, timeout=batch_timeout)
        except asyncio.TimeoutError:
            logger.warning(f"{source} batch timed out after {batch_timeout}s, using placeholders")
        except Exception as e:
            logger.warning(f"{source} lookup failed ({type(e).__name__}: {e}), using placeholders")
        return {}


__all__ = ["EnrichmentService"]
