"""
==============================================================================
Catalog Manager Service Module
==============================================================================

Service for registering and editing products in a Catalog.

This module implements:
- CatalogManager: Product creation, restocking and partial updates
- ProductUpdateResult: What an update changed, plus any warnings

Rules:
------
- Product names are unique, compared case-insensitively
- IDs are assigned sequentially from "1" and never reused; a rejected
  creation does not consume an ID
- Quantity changes overwrite the stored quantity on every path
- An unrecognized shipment mode on update leaves the type unchanged and
  produces a warning instead of an error

==============================================================================
"""

from __future__ import annotations

import logging
import threading
from typing import List, Optional, Union

from pydantic import BaseModel, Field

from stockroom.catalog import Catalog, Product, ProductType
from stockroom.core import exceptions
from stockroom.utils.validators import (
    PriceValidator,
    ProductNameValidator,
    QuantityValidator,
    ShipmentModeValidator,
)


# Module logger
logger = logging.getLogger(__name__)


UNRECOGNIZED_MODE_WARNING = "Warning: Unrecognized shipment mode. Type will not be set."

# Catalog loaded on startup when demo seeding is enabled
DEMO_PRODUCTS = [
    ("Laptop", 20, 1500.00, ProductType.GOOD),
    ("Container", 5, 5000.00, ProductType.CARGO),
    ("Tablet", 15, 300.00, ProductType.GOOD),
    ("Smartphone", 25, 800.00, ProductType.GOOD),
]


class ProductUpdateResult(BaseModel):
    """Changes applied by CatalogManager.update_product."""

    product: Product
    quantity: Optional[int] = None
    new_name: Optional[str] = None
    new_price: Optional[float] = None
    new_type: Optional[ProductType] = None
    warnings: List[str] = Field(default_factory=list)

    @property
    def summary(self) -> str:
        """One-line description of the update."""
        parts = [
            f"Updated Product ID: {self.product.id}",
            f"Quantity: {self.quantity if self.quantity is not None else -1}",
        ]
        if self.new_name is not None:
            parts.append(f"New Name: {self.new_name}")
        if self.new_price is not None:
            parts.append(f"New Price: {self.new_price}")
        if self.new_type is not None:
            parts.append(f"New Type: {self.new_type.value}")
        return ", ".join(parts) + "."


class CatalogManager:
    """
    Service for product creation and maintenance.

    Attributes:
        _catalog: Catalog products are stored in
        _next_id: Next ID to hand out

    Example:
        >>> catalog = Catalog()
        >>> manager = CatalogManager(catalog)
        >>> manager.create_product("Laptop", 20, 1500.0, "good")
        '1'
        >>> manager.create_product("LAPTOP", 5, 100.0, "good")
        Traceback (most recent call last):
        ...
        stockroom.core.exceptions.AppException: Item already exists: LAPTOP
    """

    def __init__(self, catalog: Catalog) -> None:
        """
        Initialize the manager.

        Args:
            catalog: Catalog to store products in
        """
        self._catalog = catalog
        self._next_id = 1
        self._lock = threading.Lock()
        self._name_validator = ProductNameValidator()
        self._quantity_validator = QuantityValidator()
        self._price_validator = PriceValidator()
        self._mode_validator = ShipmentModeValidator()

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def next_id(self) -> str:
        """ID the next successful creation will receive."""
        return str(self._next_id)

    # =========================================================================
    # CREATE
    # =========================================================================

    def create_product(
        self,
        name: str,
        quantity: Union[int, str],
        price: Union[float, str],
        product_type: Union[ProductType, str],
    ) -> str:
        """
        Register a new product.

        Args:
            name: Product name, unique ignoring case
            quantity: Initial stock
            price: Unit price
            product_type: Variant tag

        Returns:
            ID of the new product

        Raises:
            AppException: DUPLICATE_NAME if the name is taken
            AppException: VALIDATION_ERROR for malformed input
        """
        name = self._require(self._name_validator.validate(name), "name")
        quantity = self._require(self._quantity_validator.validate(quantity), "quantity")
        price = self._require(self._price_validator.validate(price), "price")

        try:
            product_type = ProductType(product_type)
        except ValueError:
            raise exceptions.validation_error(f"Unknown product type: {product_type}", "type")

        with self._lock:
            if self._catalog.find_by_name(name) is not None:
                logger.warning(f"Rejected duplicate product name: {name}")
                raise exceptions.duplicate_name(name)

            product_id = str(self._next_id)
            self._next_id += 1

            product = Product(
                id=product_id,
                name=name,
                quantity=quantity,
                price=price,
                type=product_type,
            )
            self._catalog.add_product(product)

        logger.info(f"✅ {self.added_message(product)}")
        return product_id

    @staticmethod
    def added_message(product: Product) -> str:
        """Confirmation text for a newly added product."""
        return (
            f"Added product {product.name}, Quantity: {product.quantity}, "
            f"Price: {product.price} to inventory"
        )

    def seed_demo_products(self) -> List[str]:
        """Load the demo catalog and return the new IDs."""
        ids = [
            self.create_product(name, quantity, price, product_type)
            for name, quantity, price, product_type in DEMO_PRODUCTS
        ]
        logger.info(f"Seeded {len(ids)} demo products")
        return ids

    # =========================================================================
    # UPDATE
    # =========================================================================

    def restock_existing(self, product_id: str, quantity: Union[int, str]) -> Optional[Product]:
        """
        Set the stock of an existing product.

        The new quantity replaces the old one.

        Returns:
            The updated product, or None when the ID is unknown

        Raises:
            AppException: VALIDATION_ERROR for a malformed quantity
        """
        quantity = self._require(self._quantity_validator.validate(quantity), "quantity")

        if self._catalog.get(product_id) is None:
            logger.warning(f"Restock skipped, unknown product ID: {product_id}")
            return None

        product = self._catalog.update_product(product_id, quantity=quantity)
        logger.info(f"Restocked {product.name} to {quantity}")
        return product

    def update_product(
        self,
        product_id: str,
        name: Optional[str] = None,
        price: Union[float, str, None] = None,
        quantity: Union[int, str, None] = None,
        mode: Optional[str] = None,
    ) -> ProductUpdateResult:
        """
        Partially update a product.

        None or blank values leave a field unchanged. The mode maps to the
        type ('sea' -> cargo, 'land' -> good).

        Raises:
            AppException: PRODUCT_NOT_FOUND for an unknown ID
            AppException: DUPLICATE_NAME if the new name belongs to another product
            AppException: VALIDATION_ERROR for a malformed name, quantity or price
        """
        product = self._catalog.get(product_id)
        if product is None:
            raise exceptions.product_not_found(product_id)

        new_name = None
        new_quantity = None
        new_price = None
        new_type = None
        warnings: List[str] = []

        if not self._is_blank(name):
            new_name = self._require(self._name_validator.validate(name), "name")

        if not self._is_blank(quantity):
            new_quantity = self._require(self._quantity_validator.validate(quantity), "quantity")

        if not self._is_blank(price):
            new_price = self._require(self._price_validator.validate(price), "price")

        if not self._is_blank(mode):
            is_valid, new_type, _ = self._mode_validator.validate(mode)
            if not is_valid:
                logger.warning(f"Unrecognized shipment mode for product {product_id}: {mode!r}")
                warnings.append(UNRECOGNIZED_MODE_WARNING)

        with self._lock:
            if new_name is not None:
                other = self._catalog.find_by_name(new_name)
                if other is not None and other.id != product_id:
                    raise exceptions.duplicate_name(new_name)

            product = self._catalog.update_product(
                product_id,
                name=new_name,
                price=new_price,
                quantity=new_quantity,
                product_type=new_type,
            )

        result = ProductUpdateResult(
            product=product,
            quantity=new_quantity,
            new_name=new_name,
            new_price=new_price,
            new_type=new_type,
            warnings=warnings,
        )
        logger.info(result.summary)
        return result

    # =========================================================================
    # HELPERS
    # =========================================================================

    @staticmethod
    def _is_blank(value: object) -> bool:
        return value is None or (isinstance(value, str) and not value.strip())

    @staticmethod
    def _require(outcome, field: str):
        """Unpack a validator tuple or raise VALIDATION_ERROR."""
        is_valid, value, error = outcome
        if not is_valid:
            raise exceptions.validation_error(error, field)
        return value
