"""
==============================================================================
Product Endpoints
==============================================================================

Endpoints for listing, adding and updating inventory products.

==============================================================================
"""

from fastapi import APIRouter, Depends

from stockroom.catalog import ProductResponse
from stockroom.core import exceptions
from stockroom.core.dependencies import get_catalog_manager
from stockroom.schemas import (
    MessageResponse,
    ProductCreate,
    ProductCreatedResponse,
    ProductListResponse,
    ProductUpdate,
    ProductUpdatedResponse,
    RestockRequest,
)
from stockroom.services import CatalogManager


router = APIRouter(prefix="/products", tags=["Products"])


class ProductController:
    """Controller for product operations."""

    def __init__(self, manager: CatalogManager):
        self._manager = manager
        self._catalog = manager.catalog

    def list_products(self) -> ProductListResponse:
        """List all products in insertion order."""
        products = self._catalog.get_all()
        return ProductListResponse(
            total=len(products),
            products=[ProductResponse.from_product(p) for p in products],
            listing=self._catalog.render_product_list(),
        )

    def get_product(self, product_id: str) -> ProductResponse:
        """Get a single product."""
        product = self._catalog.get(product_id)
        if product is None:
            raise exceptions.product_not_found(product_id)
        return ProductResponse.from_product(product)

    def create_product(self, data: ProductCreate) -> ProductCreatedResponse:
        """Add a new product."""
        product_id = self._manager.create_product(
            data.name, data.quantity, data.price, data.product_type
        )
        product = self._catalog.get(product_id)
        return ProductCreatedResponse(
            message=self._manager.added_message(product),
            product=ProductResponse.from_product(product),
        )

    def update_product(self, product_id: str, data: ProductUpdate) -> ProductUpdatedResponse:
        """Apply a partial update."""
        result = self._manager.update_product(
            product_id,
            name=data.name,
            price=data.price,
            quantity=data.quantity,
            mode=data.mode,
        )
        return ProductUpdatedResponse(
            message=result.summary,
            warnings=result.warnings,
            product=ProductResponse.from_product(result.product),
        )

    def restock(self, product_id: str, data: RestockRequest) -> MessageResponse:
        """Overwrite the stock of a product."""
        product = self._manager.restock_existing(product_id, data.quantity)
        if product is None:
            raise exceptions.product_not_found(product_id)
        return MessageResponse(message=f"Stock for {product.name} set to {product.quantity}")


@router.get("", response_model=ProductListResponse)
async def list_products(manager: CatalogManager = Depends(get_catalog_manager)):
    """List all products."""
    return ProductController(manager).list_products()


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str, manager: CatalogManager = Depends(get_catalog_manager)):
    """Get product by ID."""
    return ProductController(manager).get_product(product_id)


@router.post("", response_model=ProductCreatedResponse, status_code=201)
async def create_product(data: ProductCreate, manager: CatalogManager = Depends(get_catalog_manager)):
    """Add a new product; the shipment mode selects its type."""
    return ProductController(manager).create_product(data)


@router.patch("/{product_id}", response_model=ProductUpdatedResponse)
async def update_product(
    product_id: str,
    data: ProductUpdate,
    manager: CatalogManager = Depends(get_catalog_manager)
):
    """Update name, price, quantity or shipment mode of a product."""
    return ProductController(manager).update_product(product_id, data)


@router.put("/{product_id}/quantity", response_model=MessageResponse)
async def restock_product(
    product_id: str,
    data: RestockRequest,
    manager: CatalogManager = Depends(get_catalog_manager)
):
    """Set the stock of an existing product."""
    return ProductController(manager).restock(product_id, data)
