"""
==============================================================================
Catalog Package - Inventory Storage
==============================================================================

In-memory product catalog with stock bookkeeping.

Classes:
--------
- Product: Pydantic model for inventory items
- ProductType / ShipmentMode: Variant tag and the mode it is derived from
- ProcurementReceipt: Result of a successful procurement
- Catalog: Product storage, procurement and aggregates

==============================================================================
"""

from .models import (
    ProcurementReceipt,
    Product,
    ProductResponse,
    ProductType,
    ShipmentMode,
)
from .catalog import Catalog

__all__ = [
    "Catalog",
    "ProcurementReceipt",
    "Product",
    "ProductResponse",
    "ProductType",
    "ShipmentMode",
]
