"""
==============================================================================
Schemas Package
==============================================================================

Pydantic request/response schemas for the HTTP layer.

==============================================================================
"""

from .common import MessageResponse
from .product import (
    ProcurementCreate,
    ProcurementResponse,
    ProductCreate,
    ProductCreatedResponse,
    ProductListResponse,
    ProductUpdate,
    ProductUpdatedResponse,
    RestockRequest,
)

__all__ = [
    "MessageResponse",
    "ProcurementCreate",
    "ProcurementResponse",
    "ProductCreate",
    "ProductCreatedResponse",
    "ProductListResponse",
    "ProductUpdate",
    "ProductUpdatedResponse",
    "RestockRequest",
]
