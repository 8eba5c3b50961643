"""Database models."""

from .base import Base
from .directory_models import ListingModel, ProfileModel
from .order_model import OrderModel

__all__ = ["Base", "ListingModel", "OrderModel", "ProfileModel"]
