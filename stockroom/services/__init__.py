"""
==============================================================================
Services Package - Business Logic Layer
==============================================================================

Service classes implementing inventory workflows on top of the Catalog.

    ┌─────────────────┐
    │   API Router    │
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │ CatalogManager  │  ← Creation / update rules
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │     Catalog     │  ← Storage, procurement, aggregates
    └─────────────────┘

Usage:
------
    from stockroom.catalog import Catalog
    from stockroom.services import CatalogManager

    manager = CatalogManager(Catalog())
    product_id = manager.create_product("Laptop", 20, 1500.0, "good")

==============================================================================
"""

from .catalog_manager import CatalogManager, ProductUpdateResult

__all__ = [
    "CatalogManager",
    "ProductUpdateResult",
]
