"""
FastAPI Dependencies.

Provides dependency injection for the order services.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from dotenv import load_dotenv
from fastapi import Depends

# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

from agrimarket.application.interfaces import ICatalog, IDirectory, IUnitOfWork
from agrimarket.application.services import (
    EnrichmentService,
    OrderApplicationService,
    OrderLifecycleService,
    SellerOrderViewService,
)
from agrimarket.data.uow import create_uow
from agrimarket.domain.event_bus import EventBus
from agrimarket.infrastructure.adapters.catalog import SqlAlchemyCatalog
from agrimarket.infrastructure.adapters.directory import SqlAlchemyDirectory
from agrimarket.infrastructure.database import get_session_factory
from agrimarket.infrastructure.event_bus import get_event_bus as _get_event_bus
from agrimarket.settings import AppSettings, get_app_settings

logger = logging.getLogger(__name__)

UnitOfWorkFactory = Callable[[], IUnitOfWork]


# =============================================================================
# SINGLETON INSTANCES
# =============================================================================

_directory = None
_catalog = None


# =============================================================================
# DEPENDENCIES
# =============================================================================

def get_settings() -> AppSettings:
    return get_app_settings()


def get_uow_factory() -> UnitOfWorkFactory:
    session_factory = get_session_factory()
    return lambda: create_uow(session_factory)


def get_directory() -> IDirectory:
    global _directory
    if _directory is None:
        _directory = SqlAlchemyDirectory(get_session_factory())
        logger.info("Created SqlAlchemyDirectory instance")
    return _directory


def get_catalog() -> ICatalog:
    global _catalog
    if _catalog is None:
        _catalog = SqlAlchemyCatalog(get_session_factory())
        logger.info("Created SqlAlchemyCatalog instance")
    return _catalog


def get_event_bus() -> EventBus:
    return _get_event_bus()


def get_enrichment_service(
    directory: IDirectory = Depends(get_directory),
    catalog: ICatalog = Depends(get_catalog),
    settings: AppSettings = Depends(get_settings),
) -> EnrichmentService:
    return EnrichmentService(
        directory=directory,
        catalog=catalog,
        lookup_timeout=settings.orders.lookup_timeout_seconds,
    )


def get_lifecycle_service(
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
    event_bus: EventBus = Depends(get_event_bus),
    settings: AppSettings = Depends(get_settings),
) -> OrderLifecycleService:
    return OrderLifecycleService(
        uow_factory=uow_factory,
        retention_policy=settings.orders.delivered_retention,
        event_bus=event_bus,
    )


def get_view_service(
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
    enrichment: EnrichmentService = Depends(get_enrichment_service),
    lifecycle_service: OrderLifecycleService = Depends(get_lifecycle_service),
    settings: AppSettings = Depends(get_settings),
) -> SellerOrderViewService:
    return SellerOrderViewService(
        uow_factory=uow_factory,
        enrichment=enrichment,
        lifecycle_service=lifecycle_service,
        summary_limit=settings.orders.summary_limit,
    )


def get_order_service(
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
) -> OrderApplicationService:
    return OrderApplicationService(uow_factory)


# =============================================================================
# RESET (for testing)
# =============================================================================

def reset_dependencies():
    global _directory, _catalog

    _directory = None
    _catalog = None

    logger.info("Dependencies reset")
