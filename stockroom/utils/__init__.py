"""
==============================================================================
Utilities Package
==============================================================================

Utility classes for the application.

Modules:
--------
- validators: Parsing and validation of user-entered values

==============================================================================
"""

from .validators import (
    PriceValidator,
    ProductNameValidator,
    QuantityValidator,
    ShipmentModeValidator,
)

__all__ = [
    "PriceValidator",
    "ProductNameValidator",
    "QuantityValidator",
    "ShipmentModeValidator",
]
