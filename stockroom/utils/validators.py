"""
==============================================================================
Validation Utilities Module
==============================================================================

Validation classes for values typed in by the user.

This module implements:
- ProductNameValidator: Validates product names
- QuantityValidator: Parses stock quantities
- PriceValidator: Parses unit prices
- ShipmentModeValidator: Maps a shipment mode to a product variant

Every validator returns a tuple instead of raising, so callers decide
whether a bad value is an error or only a warning.

==============================================================================
"""

from __future__ import annotations

import math
from typing import Optional, Tuple, Union

from stockroom.catalog.models import ProductType, ShipmentMode


class ProductNameValidator:
    """
    Validator for product names.

    Example:
        >>> validator = ProductNameValidator()
        >>> validator.validate("  Laptop ")
        (True, 'Laptop', None)
    """

    MAX_LENGTH = 100

    def validate(self, name: Optional[str]) -> Tuple[bool, Optional[str], Optional[str]]:
        """
        Validate and normalize a product name.

        Returns:
            Tuple of (is_valid, stripped_name, error_message)
        """
        if name is None:
            return False, None, "Product name is required"

        name = name.strip()

        if not name:
            return False, None, "Product name is required"

        if len(name) > self.MAX_LENGTH:
            return False, None, f"Product name must be at most {self.MAX_LENGTH} characters"

        return True, name, None

    def is_valid(self, name: Optional[str]) -> bool:
        """Quick validation check."""
        is_valid, _, _ = self.validate(name)
        return is_valid


class QuantityValidator:
    """
    Validator for stock quantities.

    Accepts an int or the text of one, e.g. from a form field.
    """

    def validate(self, qty: Union[int, str, None]) -> Tuple[bool, Optional[int], Optional[str]]:
        """
        Parse and validate a quantity.

        Returns:
            Tuple of (is_valid, quantity, error_message)
        """
        if qty is None or isinstance(qty, bool):
            return False, None, "Invalid quantity. Please enter a numeric value."

        if isinstance(qty, str):
            try:
                qty = int(qty.strip())
            except ValueError:
                return False, None, "Invalid quantity. Please enter a numeric value."

        if not isinstance(qty, int):
            return False, None, "Invalid quantity. Please enter a numeric value."

        if qty < 0:
            return False, None, "Quantity cannot be negative"

        return True, qty, None


class PriceValidator:
    """
    Validator for unit prices.
    """

    def validate(self, price: Union[float, int, str, None]) -> Tuple[bool, Optional[float], Optional[str]]:
        """
        Parse and validate a price.

        Returns:
            Tuple of (is_valid, price, error_message)
        """
        if price is None or isinstance(price, bool):
            return False, None, "Invalid price. Please enter a numeric value."

        try:
            value = float(price.strip() if isinstance(price, str) else price)
        except (TypeError, ValueError):
            return False, None, "Invalid price. Please enter a numeric value."

        if not math.isfinite(value):
            return False, None, "Invalid price. Please enter a numeric value."

        if value < 0:
            return False, None, "Price cannot be negative"

        return True, value, None


class ShipmentModeValidator:
    """
    Validator for shipment modes.

    'land' selects a good, 'sea' selects cargo; case and surrounding
    whitespace are ignored.

    Example:
        >>> ShipmentModeValidator().validate("SEA")
        (True, <ProductType.CARGO: 'cargo'>, None)
    """

    ERROR = "Enter a valid shipment mode (land/sea)"

    def validate(self, mode: Optional[str]) -> Tuple[bool, Optional[ProductType], Optional[str]]:
        """
        Map a shipment mode to a product variant.

        Returns:
            Tuple of (is_valid, product_type, error_message)
        """
        shipment_mode = ShipmentMode.parse(mode)
        if shipment_mode is None:
            return False, None, self.ERROR
        return True, shipment_mode.product_type, None

    def is_valid(self, mode: Optional[str]) -> bool:
        """Quick validation check."""
        is_valid, _, _ = self.validate(mode)
        return is_valid
