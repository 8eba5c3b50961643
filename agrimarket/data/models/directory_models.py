"""
Read-only ORM models for the Directory and Catalog tables.

Both tables are owned by other parts of the marketplace; the order core
only selects from them.
"""

from sqlalchemy import Column, String, Text

from .base import Base


class ProfileModel(Base):
    """User profile (Directory)."""

    __tablename__ = "profiles"

    id = Column(String(64), primary_key=True)
    full_name = Column(String(255), nullable=True)
    phone = Column(String(32), nullable=True)
    email = Column(String(255), nullable=True)
    address = Column(Text, nullable=True)


class ListingModel(Base):
    """Marketplace produce listing (Catalog)."""

    __tablename__ = "marketplace_listings"

    id = Column(String(64), primary_key=True)
    crop_name = Column(String(255), nullable=True)
