"""
==============================================================================
Inventory Endpoints
==============================================================================

Aggregate views over the catalog: statistics and low stock notices.

==============================================================================
"""

from fastapi import APIRouter, Depends

from stockroom.catalog import Catalog
from stockroom.core.dependencies import get_catalog


router = APIRouter(prefix="/inventory", tags=["Inventory"])


@router.get("/statistics")
async def get_statistics(catalog: Catalog = Depends(get_catalog)):
    """Statistics summary text and the numbers behind it."""
    return {
        "success": True,
        "summary": catalog.get_statistics(),
        "stats": catalog.get_stats(),
    }


@router.get("/low-stock")
async def get_low_stock(catalog: Catalog = Depends(get_catalog)):
    """Low stock notices raised so far."""
    notifications = catalog.low_stock_notifications
    return {
        "success": True,
        "threshold": catalog.low_stock_threshold,
        "total": len(notifications),
        "notifications": notifications,
    }
