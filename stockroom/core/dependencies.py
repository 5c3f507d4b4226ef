"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency functions that hand the application's Catalog and
CatalogManager to route handlers.

Both objects are created once per application lifespan and stored on
``app.state``; nothing here keeps module-level state.

Usage:
------
    @router.get("/stats")
    async def stats(catalog: Catalog = Depends(get_catalog)):
        return catalog.get_stats()

==============================================================================
"""

from __future__ import annotations

from fastapi import Request

from stockroom.catalog import Catalog
from stockroom.core import exceptions
from stockroom.services import CatalogManager


def get_catalog_manager(request: Request) -> CatalogManager:
    """
    Get the CatalogManager bound to this application.

    Raises:
        AppException: INTERNAL_ERROR if the app has not started up
    """
    manager = getattr(request.app.state, "catalog_manager", None)
    if manager is None:
        raise exceptions.internal_error("Inventory catalog not initialized")
    return manager


def get_catalog(request: Request) -> Catalog:
    """Get the Catalog bound to this application."""
    return get_catalog_manager(request).catalog
