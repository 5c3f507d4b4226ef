"""
==============================================================================
Inventory Catalog Module
==============================================================================

In-memory product catalog with stock bookkeeping.

Features:
---------
- Insertion-ordered product storage keyed by product ID
- Running total of units in stock, maintained on every mutation
- Procurement (stock deduction) with expected delivery date
- Persistent, de-duplicated low stock notifications
- Per-variant counts and a statistics summary

Thread Safety:
-------------
Every read-modify-write of a quantity happens together with the matching
total_stock update under one re-entrant lock owned by the catalog.

==============================================================================
"""

from __future__ import annotations

import logging
import threading
from datetime import date, timedelta
from typing import Any, Callable, Dict, List, Optional, Union

from stockroom.core import exceptions

from .models import ProcurementReceipt, Product, ProductType


# Module logger
logger = logging.getLogger(__name__)


DEFAULT_LOW_STOCK_THRESHOLD = 10
DEFAULT_DELIVERY_LEAD_DAYS = 7


class Catalog:
    """
    Product catalog with stock bookkeeping.

    Attributes:
        products: All products in insertion order
        total_stock: Sum of all product quantities
        low_stock_notifications: Notices raised so far, oldest first

    Example:
        >>> catalog = Catalog()
        >>> catalog.add_product(Product(id="1", name="Laptop", quantity=20, type="good"))
        >>> receipt = catalog.procure("1", 15, "land")
        >>> print(receipt.message.splitlines()[0])
        Procured 15 of Laptop
        >>> catalog.low_stock_notifications
        ['Low stock notification for Laptop']
    """

    def __init__(
        self,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
        delivery_lead_days: int = DEFAULT_DELIVERY_LEAD_DAYS,
        today: Callable[[], date] = date.today,
    ) -> None:
        """
        Initialize an empty catalog.

        Args:
            low_stock_threshold: Quantities strictly below this are flagged
            delivery_lead_days: Days added to today for the delivery date
            today: Clock used for delivery dates
        """
        self._products: Dict[str, Product] = {}
        self._total_stock = 0
        self._low_stock_notifications: List[str] = []
        self._low_stock_threshold = low_stock_threshold
        self._delivery_lead = timedelta(days=delivery_lead_days)
        self._today = today
        self._lock = threading.RLock()

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def products(self) -> List[Product]:
        """Get all products."""
        return self.get_all()

    @property
    def total_stock(self) -> int:
        """Sum of quantities across the catalog."""
        return self._total_stock

    @property
    def low_stock_notifications(self) -> List[str]:
        """Get a copy of the low stock notices."""
        with self._lock:
            return list(self._low_stock_notifications)

    @property
    def low_stock_threshold(self) -> int:
        return self._low_stock_threshold

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._products

    # =========================================================================
    # STORAGE
    # =========================================================================

    def add_product(self, product: Product) -> None:
        """
        Store a product and add its quantity to the running total.

        Duplicate IDs are not checked here; CatalogManager assigns them.
        """
        with self._lock:
            self._products[product.id] = product
            self._total_stock += product.quantity

        logger.debug(f"Stored product {product.id} ({product.name}), total stock {self._total_stock}")

    def get(self, product_id: str) -> Optional[Product]:
        """Find product by ID."""
        return self._products.get(product_id)

    def find_by_name(self, name: str) -> Optional[Product]:
        """Find product by exact name (case-insensitive)."""
        wanted = name.strip().lower()
        for product in self.get_all():
            if product.name.lower() == wanted:
                return product
        return None

    def get_all(self) -> List[Product]:
        """All products in insertion order."""
        with self._lock:
            return list(self._products.values())

    def update_product(
        self,
        product_id: str,
        *,
        name: Optional[str] = None,
        price: Optional[float] = None,
        quantity: Optional[int] = None,
        product_type: Optional[ProductType] = None,
    ) -> Product:
        """
        Overwrite the given fields of a stored product.

        Fields left as None are unchanged. A quantity overwrite moves
        total_stock by the difference. All changes are validated before any
        is applied.

        Raises:
            AppException: PRODUCT_NOT_FOUND for an unknown ID
            pydantic.ValidationError: if a value violates the Product model
        """
        changes: Dict[str, Any] = {}
        if name is not None:
            changes["name"] = name
        if price is not None:
            changes["price"] = price
        if quantity is not None:
            changes["quantity"] = quantity
        if product_type is not None:
            changes["type"] = product_type

        with self._lock:
            product = self._products.get(product_id)
            if product is None:
                raise exceptions.product_not_found(product_id)

            # Validate the full result first so a bad value changes nothing
            validated = Product.model_validate({**product.model_dump(), **changes})

            delta = validated.quantity - product.quantity
            for field in changes:
                setattr(product, field, getattr(validated, field))
            self._total_stock += delta

        return product

    # =========================================================================
    # PROCUREMENT
    # =========================================================================

    def procure(self, product_id: Optional[str], quantity: int, mode: Optional[str] = None) -> ProcurementReceipt:
        """
        Deduct stock for an order and schedule its delivery.

        Args:
            product_id: ID of the product to procure
            quantity: Units requested (positive)
            mode: Shipment mode as entered; accepted but does not affect the outcome

        Returns:
            ProcurementReceipt with the expected delivery date

        Raises:
            AppException: PRODUCT_NOT_FOUND, VALIDATION_ERROR,
                OUT_OF_STOCK or INSUFFICIENT_STOCK. Stock is untouched on failure.
        """
        if not product_id:
            raise exceptions.product_id_missing()

        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise exceptions.validation_error("Please enter a valid quantity.", "quantity")

        with self._lock:
            product = self._products.get(product_id)

            if product is None or not product.name:
                raise exceptions.product_not_found(product_id)

            available = product.quantity
            if available < quantity:
                logger.info(f"Procurement rejected for {product.name}: requested {quantity}, available {available}")
                if available == 0:
                    raise exceptions.out_of_stock(product.name)
                raise exceptions.insufficient_stock(product.name, quantity, available)

            product.quantity = available - quantity
            self._total_stock -= quantity
            self.check_low_stock(product)

            receipt = ProcurementReceipt(
                product_id=product.id,
                product_name=product.name,
                quantity=quantity,
                remaining=product.quantity,
                delivery_date=self._today() + self._delivery_lead,
            )

        logger.info(f"✅ Procured {quantity} of {product.name} (mode={mode!r}), {receipt.remaining} left")
        return receipt

    def check_low_stock(self, product: Product) -> None:
        """
        Record a low stock notice for the product if it is under the threshold.

        A notice with the same text is never recorded twice, and notices are
        never removed.
        """
        if product.quantity >= self._low_stock_threshold:
            return

        message = f"Low stock notification for {product.name}"
        with self._lock:
            if message not in self._low_stock_notifications:
                self._low_stock_notifications.append(message)
                logger.warning(f"⚠️ {message} ({product.quantity} left)")

    # =========================================================================
    # AGGREGATES
    # =========================================================================

    def count_by_type(self, product_type: Union[ProductType, str]) -> int:
        """Count products of one variant; unknown variants count zero."""
        try:
            wanted = ProductType(product_type)
        except ValueError:
            return 0
        return sum(1 for product in self.get_all() if product.type == wanted)

    def get_statistics(self) -> str:
        """Statistics summary text."""
        with self._lock:
            return (
                f"Total Products: {self._total_stock}\n"
                f"Goods: {self.count_by_type(ProductType.GOOD)}\n"
                f"Cargo: {self.count_by_type(ProductType.CARGO)}"
            )

    def get_stats(self) -> Dict[str, int]:
        """Get catalog statistics as numbers."""
        with self._lock:
            return {
                "total_stock": self._total_stock,
                "products": len(self._products),
                "goods": self.count_by_type(ProductType.GOOD),
                "cargo": self.count_by_type(ProductType.CARGO),
                "low_stock": len(self._low_stock_notifications),
            }

    def render_product_list(self) -> str:
        """Product list text, one line per product."""
        return "\n".join(product.describe() for product in self.get_all())
