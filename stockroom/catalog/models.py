"""
==============================================================================
Product Models Module
==============================================================================

Pydantic models for inventory items and procurement receipts.

A product is one flat record tagged with its variant (good or cargo); the
variant is derived from the shipment mode it was registered under.

==============================================================================
"""

from __future__ import annotations

import enum
from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProductType(str, enum.Enum):
    """Product variant tag."""

    GOOD = "good"
    CARGO = "cargo"

    @property
    def display_name(self) -> str:
        """Capitalised label used in the product list."""
        return self.value.capitalize()


class ShipmentMode(str, enum.Enum):
    """Shipment mode entered by the user; selects the product variant."""

    LAND = "land"
    SEA = "sea"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["ShipmentMode"]:
        """Case-insensitive lookup; None for empty or unknown input."""
        if not value:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None

    @property
    def product_type(self) -> ProductType:
        """Variant a product shipped this way belongs to."""
        return ProductType.CARGO if self is ShipmentMode.SEA else ProductType.GOOD


class Product(BaseModel):
    """
    Inventory item.

    Attributes:
        id: Sequential identifier assigned by the manager ("1", "2", ...)
        name: Product display name
        price: Unit price
        quantity: Units currently in stock
        type: Variant tag
    """

    model_config = ConfigDict(
        from_attributes=True,
        validate_assignment=True,
    )

    id: str = Field(..., min_length=1, frozen=True, description="Product ID")
    name: str = Field(..., description="Product name")
    price: float = Field(default=0.0, ge=0, description="Unit price")
    quantity: int = Field(default=0, ge=0, description="Units in stock")
    type: ProductType = Field(..., description="Product variant")

    def describe(self) -> str:
        """Single product list line."""
        return (
            f"ID: {self.id}, Name: {self.name}, Quantity: {self.quantity}, "
            f"Price: {self.price}, Type: {self.type.display_name}"
        )


class ProcurementReceipt(BaseModel):
    """Outcome of a successful procurement."""

    product_id: str
    product_name: str
    quantity: int = Field(..., gt=0)
    remaining: int = Field(..., ge=0)
    delivery_date: date

    @property
    def message(self) -> str:
        """Order confirmation text."""
        return (
            f"Procured {self.quantity} of {self.product_name}\n"
            f"Expected Delivery Date: {self.delivery_date.isoformat()}"
        )


class ProductResponse(BaseModel):
    """Product response schema for API endpoints."""

    id: str
    name: str
    price: float
    quantity: int
    type: ProductType

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_product(cls, product: Product) -> "ProductResponse":
        """Create response from Product model."""
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            quantity=product.quantity,
            type=product.type,
        )
