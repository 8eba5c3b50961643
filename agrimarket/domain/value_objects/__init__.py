"""Domain value objects."""

from .value_objects import BuyerProfile, ExecutionID, ListingInfo, Money

__all__ = [
    "BuyerProfile",
    "ExecutionID",
    "ListingInfo",
    "Money",
]
