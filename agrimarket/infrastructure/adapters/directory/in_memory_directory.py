"""
In-Memory Directory Implementation.

Profile lookups served from a dictionary, for tests and demos.
"""
from typing import Dict, Optional
import logging

from agrimarket.application.interfaces import IDirectory
from agrimarket.domain.exceptions import NotFoundError
from agrimarket.domain.value_objects import BuyerProfile


logger = logging.getLogger(__name__)


class InMemoryDirectory(IDirectory):
    """Directory backed by a user id -> BuyerProfile mapping."""

    def __init__(self, profiles: Optional[Dict[str, BuyerProfile]] = None):
        self._profiles: Dict[str, BuyerProfile] = dict(profiles or {})
        self.calls = 0

    def add(self, user_id: str, profile: BuyerProfile) -> None:
        self._profiles[user_id] = profile

    async def lookup(self, user_id: str) -> BuyerProfile:
        self.calls += 1
        profile = self._profiles.get(user_id)
        if profile is None:
            logger.debug(f"Profile not found: {user_id}")
            raise NotFoundError(f"User not found: {user_id}")
        return profile
