"""
==============================================================================
Validator Tests
==============================================================================

Tests for parsing of user-entered values.

==============================================================================
"""

import pytest

from stockroom.catalog import ProductType, ShipmentMode
from stockroom.utils.validators import (
    PriceValidator,
    ProductNameValidator,
    QuantityValidator,
    ShipmentModeValidator,
)


class TestShipmentModeValidator:
    """Tests for shipment mode mapping."""

    @pytest.mark.parametrize(
        "mode, expected",
        [
            ("land", ProductType.GOOD),
            ("sea", ProductType.CARGO),
            ("SEA", ProductType.CARGO),
            ("  Land ", ProductType.GOOD),
        ],
    )
    def test_valid_modes(self, mode, expected):
        assert ShipmentModeValidator().validate(mode) == (True, expected, None)

    @pytest.mark.parametrize("mode", ["", None, "air", "landsea"])
    def test_invalid_modes(self, mode):
        is_valid, product_type, error = ShipmentModeValidator().validate(mode)

        assert not is_valid
        assert product_type is None
        assert error == "Enter a valid shipment mode (land/sea)"

    def test_shipment_mode_parse(self):
        assert ShipmentMode.parse("Sea") is ShipmentMode.SEA
        assert ShipmentMode.parse("rail") is None


class TestQuantityValidator:
    """Tests for quantity parsing."""

    def test_parses_text(self):
        assert QuantityValidator().validate(" 12 ") == (True, 12, None)

    def test_zero_is_allowed(self):
        assert QuantityValidator().validate(0) == (True, 0, None)

    def test_large_quantity_is_allowed(self):
        assert QuantityValidator().validate(2_000_000) == (True, 2_000_000, None)
        assert QuantityValidator().validate("1500000") == (True, 1_500_000, None)

    @pytest.mark.parametrize("qty", ["12.5", "abc", None, True, 3.0, -1])
    def test_rejects_invalid(self, qty):
        is_valid, value, error = QuantityValidator().validate(qty)
        assert not is_valid
        assert value is None
        assert error


class TestPriceValidator:
    """Tests for price parsing."""

    @pytest.mark.parametrize("price, expected", [("19.99", 19.99), (5, 5.0), (0.0, 0.0)])
    def test_parses(self, price, expected):
        assert PriceValidator().validate(price) == (True, expected, None)

    @pytest.mark.parametrize("price", ["free", "-1", float("nan"), None])
    def test_rejects_invalid(self, price):
        is_valid, _, _ = PriceValidator().validate(price)
        assert not is_valid


class TestProductNameValidator:
    """Tests for product names."""

    def test_strips_whitespace(self):
        assert ProductNameValidator().validate("  Tablet ") == (True, "Tablet", None)

    def test_rejects_blank(self):
        assert not ProductNameValidator().is_valid("   ")

    def test_rejects_too_long(self):
        assert not ProductNameValidator().is_valid("x" * 101)
