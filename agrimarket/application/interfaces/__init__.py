"""Application layer interfaces."""
import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Dict, Iterable, Optional, TypeVar

from agrimarket.domain.exceptions import NotFoundError
from agrimarket.domain.repositories import OrderRepository
from agrimarket.domain.value_objects import BuyerProfile, ExecutionID, ListingInfo


logger = logging.getLogger(__name__)

T = TypeVar("T")


async def _lookup_each(
    source: str,
    lookup: Callable[[str], Awaitable[T]],
    ids: Iterable[str],
    timeout: Optional[float],
) -> Dict[str, T]:
    """
    Run point lookups concurrently, each bounded by `timeout`.

    An id that is not found, fails or times out is left out of the result;
    the other ids are unaffected.
    """
    ids = list(dict.fromkeys(ids))
    results = await asyncio.gather(
        *(asyncio.wait_for(lookup(key), timeout=timeout) for key in ids),
        return_exceptions=True,
    )
    resolved: Dict[str, T] = {}
    for key, result in zip(ids, results):
        if isinstance(result, NotFoundError):
            continue
        if isinstance(result, asyncio.TimeoutError):
            logger.warning(f"{source} lookup of {key} timed out after {timeout}s")
            continue
        if isinstance(result, Exception):
            logger.warning(f"{source} lookup of {key} failed ({type(result).__name__}: {result})")
            continue
        if isinstance(result, BaseException):
            raise result
        resolved[key] = result
    return resolved


class IDirectory(ABC):
    """
    Interface for the user Directory collaborator.

    Resolves a user id to the contact fields of its profile. Consumed
    read-only by enrichment; the lifecycle engine never calls it.
    """

    @abstractmethod
    async def lookup(self, user_id: str) -> BuyerProfile:
        """
        Get the profile of one user.

        Raises:
            NotFoundError: If the user does not exist
        """
        pass

    async def lookup_many(
        self, user_ids: Iterable[str], timeout: Optional[float] = None
    ) -> Dict[str, BuyerProfile]:
        """
        Resolve several users at once.

        Ids that are not found, fail or exceed `timeout` are left out of the
        result. The default implementation fans out to `lookup`; adapters
        with a batch query should override it.
        """
        return await _lookup_each("directory", self.lookup, user_ids, timeout)


class ICatalog(ABC):
    """Interface for the listing Catalog collaborator."""

    @abstractmethod
    async def lookup(self, listing_id: str) -> ListingInfo:
        """
        Get display data of one listing.

        Raises:
            NotFoundError: If the listing does not exist
        """
        pass

    async def lookup_many(
        self, listing_ids: Iterable[str], timeout: Optional[float] = None
    ) -> Dict[str, ListingInfo]:
        """Resolve several listings at once; missing or failing ids are left out."""
        return await _lookup_each("catalog", self.lookup, listing_ids, timeout)


class IUnitOfWork(ABC):
    """
    Transaction scope around the Order Store.

    Usage:
        async with uow_factory() as uow:
            order = await uow.orders.find_by_id(seller_id, order_id)
            ...
            await uow.commit()

    Leaving the block with an exception rolls back.
    """

    @property
    @abstractmethod
    def orders(self) -> OrderRepository:
        pass

    @property
    @abstractmethod
    def execution_id(self) -> ExecutionID:
        pass

    @abstractmethod
    async def __aenter__(self) -> "IUnitOfWork":
        pass

    @abstractmethod
    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        pass

    @abstractmethod
    async def commit(self) -> None:
        pass

    @abstractmethod
    async def rollback(self) -> None:
        pass


__all__ = ["ICatalog", "IDirectory", "IUnitOfWork"]
