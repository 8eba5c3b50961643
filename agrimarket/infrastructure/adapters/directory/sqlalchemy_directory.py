"""
SQLAlchemy Directory Implementation.

Reads buyer contact fields from the `profiles` table.
"""
from typing import Dict, Iterable, Optional
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import async_sessionmaker

from agrimarket.application.interfaces import IDirectory
from agrimarket.data.mappers import ProfileMapper
from agrimarket.data.models import ProfileModel
from agrimarket.domain.exceptions import NotFoundError
from agrimarket.domain.value_objects import BuyerProfile


logger = logging.getLogger(__name__)


class SqlAlchemyDirectory(IDirectory):
    """Directory over the profiles table. One session per call, read-only."""

    def __init__(self, session_factory: async_sessionmaker):
        self._session_factory = session_factory

    async def lookup(self, user_id: str) -> BuyerProfile:
        async with self._session_factory() as session:
            model = await session.get(ProfileModel, user_id)
            if model is None:
                raise NotFoundError(f"User not found: {user_id}")
            return ProfileMapper.to_domain(model)

    async def lookup_many(
        self, user_ids: Iterable[str], timeout: Optional[float] = None
    ) -> Dict[str, BuyerProfile]:
        # one query per batch; the caller bounds it as a whole
        ids = list(dict.fromkeys(user_ids))
        if not ids:
            return {}
        async with self._session_factory() as session:
            result = await session.execute(
                select(ProfileModel).where(ProfileModel.id.in_(ids))
            )
            profiles = {m.id: ProfileMapper.to_domain(m) for m in result.scalars().all()}
        logger.debug(f"Resolved {len(profiles)}/{len(ids)} profiles")
        return profiles
