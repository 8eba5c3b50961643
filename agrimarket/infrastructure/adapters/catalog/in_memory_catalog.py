"""
In-Memory Catalog Implementation.

Listing lookups served from a dictionary, for tests and demos.
"""
from typing import Dict, Optional

from agrimarket.application.interfaces import ICatalog
from agrimarket.domain.exceptions import NotFoundError
from agrimarket.domain.value_objects import ListingInfo


class InMemoryCatalog(ICatalog):
    """Catalog backed by a listing id -> ListingInfo mapping."""

    def __init__(self, listings: Optional[Dict[str, ListingInfo]] = None):
        self._listings: Dict[str, ListingInfo] = dict(listings or {})
        self.calls = 0

    def add(self, listing_id: str, listing: ListingInfo) -> None:
        self._listings[listing_id] = listing

    async def lookup(self, listing_id: str) -> ListingInfo:
        self.calls += 1
        listing = self._listings.get(listing_id)
        if listing is None:
            raise NotFoundError(f"Listing not found: {listing_id}")
        return listing
