"""
==============================================================================
Procurement Endpoints
==============================================================================

Placing procurement orders against catalog stock.

==============================================================================
"""

from fastapi import APIRouter, Depends

from stockroom.catalog import Catalog
from stockroom.core.dependencies import get_catalog
from stockroom.schemas import ProcurementCreate, ProcurementResponse


router = APIRouter(prefix="/procurements", tags=["Procurement"])


@router.post("", response_model=ProcurementResponse)
async def procure_product(data: ProcurementCreate, catalog: Catalog = Depends(get_catalog)):
    """
    Procure stock of a product.

    Returns the order confirmation and the current low stock notices.
    Stock errors come back as OUT_OF_STOCK / INSUFFICIENT_STOCK.
    """
    receipt = catalog.procure(data.product_id, data.quantity, data.mode)
    return ProcurementResponse(
        message=receipt.message,
        product_id=receipt.product_id,
        quantity=receipt.quantity,
        remaining=receipt.remaining,
        delivery_date=receipt.delivery_date.isoformat(),
        low_stock_notifications=catalog.low_stock_notifications,
    )
