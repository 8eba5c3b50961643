"""
SQLAlchemy Catalog Implementation.

Reads listing names from the `marketplace_listings` table.
"""
from typing import Dict, Iterable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import async_sessionmaker

from agrimarket.application.interfaces import ICatalog
from agrimarket.data.mappers import ListingMapper
from agrimarket.data.models import ListingModel
from agrimarket.domain.exceptions import NotFoundError
from agrimarket.domain.value_objects import ListingInfo


class SqlAlchemyCatalog(ICatalog):
    """Catalog over the marketplace_listings table."""

    def __init__(self, session_factory: async_sessionmaker):
        self._session_factory = session_factory

    async def lookup(self, listing_id: str) -> ListingInfo:
        async with self._session_factory() as session:
            model = await session.get(ListingModel, listing_id)
            if model is None:
                raise NotFoundError(f"Listing not found: {listing_id}")
            return ListingMapper.to_domain(model)

    async def lookup_many(
        self, listing_ids: Iterable[str], timeout: Optional[float] = None
    ) -> Dict[str, ListingInfo]:
        # one query per batch; the caller bounds it as a whole
        ids = list(dict.fromkeys(listing_ids))
        if not ids:
            return {}
        async with self._session_factory() as session:
            result = await session.execute(
                select(ListingModel).where(ListingModel.id.in_(ids))
            )
            return {m.id: ListingMapper.to_domain(m) for m in result.scalars().all()}
