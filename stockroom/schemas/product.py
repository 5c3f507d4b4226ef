"""
==============================================================================
Product Schemas Module
==============================================================================

Request and response schemas for product and procurement endpoints.

==============================================================================
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from stockroom.catalog.models import ProductResponse, ProductType
from stockroom.utils.validators import ShipmentModeValidator


_mode_validator = ShipmentModeValidator()


# =============================================================================
# CREATE / UPDATE SCHEMAS
# =============================================================================

class ProductCreate(BaseModel):
    """New product entered through the add form."""
    name: str = Field(..., min_length=1, max_length=100)
    quantity: int = Field(..., ge=0)
    price: float = Field(..., ge=0)
    mode: str = Field(..., description="Shipment mode: land or sea")

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Product name is required")
        return v

    @field_validator("mode")
    @classmethod
    def validate_mode(cls, v: str) -> str:
        if not _mode_validator.is_valid(v):
            raise ValueError(ShipmentModeValidator.ERROR)
        return v.strip().lower()

    @property
    def product_type(self) -> ProductType:
        _, product_type, _ = _mode_validator.validate(self.mode)
        return product_type


class ProductUpdate(BaseModel):
    """Partial update; omitted or blank fields are left unchanged."""
    name: Optional[str] = Field(default=None, max_length=100)
    price: Optional[float] = Field(default=None, ge=0)
    quantity: Optional[int] = Field(default=None, ge=0)
    mode: Optional[str] = Field(default=None)


class RestockRequest(BaseModel):
    """Overwrite the stock of an existing product."""
    quantity: int = Field(..., ge=0)


class ProcurementCreate(BaseModel):
    """Procurement order."""
    product_id: str = Field(default="")
    quantity: int = Field(..., gt=0)
    mode: Optional[str] = Field(default=None, description="Accepted for compatibility; has no effect")

    @field_validator("product_id")
    @classmethod
    def strip_product_id(cls, v: str) -> str:
        return v.strip()


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class ProductListResponse(BaseModel):
    """Product list with the rendered listing text."""
    success: bool = Field(default=True)
    total: int = Field(ge=0)
    products: List[ProductResponse]
    listing: str


class ProductCreatedResponse(BaseModel):
    success: bool = Field(default=True)
    message: str
    product: ProductResponse


class ProductUpdatedResponse(BaseModel):
    success: bool = Field(default=True)
    message: str
    warnings: List[str] = Field(default_factory=list)
    product: ProductResponse


class ProcurementResponse(BaseModel):
    success: bool = Field(default=True)
    message: str
    product_id: str
    quantity: int
    remaining: int
    delivery_date: str
    low_stock_notifications: List[str]
