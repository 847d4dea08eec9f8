"""Unit tests for Product domain entity"""

import pytest
from datetime import timedelta
from decimal import Decimal
from src.domain.order import Order
from src.domain.product import Product


class TestProductCreation:

    def test_create_product_without_discount(self):
        product = Product(name="Widget", price=Decimal("9.99"))

        assert product.name == "Widget"
        assert product.price == Decimal("9.99")
        assert product.discount_percentage is None
        assert product.discount_quantity_threshold is None
        assert product.has_discount is False


class TestProductDiscount:

    def test_set_discount_sets_both_fields(self):
        product = Product(name="Widget", price=Decimal("100.00"))

        product.set_discount(Decimal("15"), 10)

        assert product.discount_percentage == Decimal("15")
        assert product.discount_quantity_threshold == 10
        assert product.has_discount is True

    def test_clear_discount_clears_both_fields(self):
        product = Product(
            name="Widget",
            price=Decimal("100.00"),
            discount_percentage=Decimal("15"),
            discount_quantity_threshold=10,
        )

        product.clear_discount()

        assert product.discount_percentage is None
        assert product.discount_quantity_threshold is None
        assert product.has_discount is False

    @pytest.mark.parametrize("percentage", [Decimal("-1"), Decimal("100.01")])
    def test_set_discount_rejects_percentage_out_of_range(self, percentage):
        product = Product(name="Widget", price=Decimal("100.00"))

        with pytest.raises(ValueError):
            product.set_discount(percentage, 10)

        assert product.discount_percentage is None

    def test_set_discount_rejects_non_positive_threshold(self):
        product = Product(name="Widget", price=Decimal("100.00"))

        with pytest.raises(ValueError):
            product.set_discount(Decimal("10"), 0)

    def test_zero_percentage_is_not_an_active_discount(self):
        product = Product(
            name="Widget",
            price=Decimal("100.00"),
            discount_percentage=Decimal("0"),
            discount_quantity_threshold=5,
        )

        assert product.has_discount is False

    def test_percentage_without_threshold_is_not_an_active_discount(self):
        product = Product(
            name="Widget",
            price=Decimal("100.00"),
            discount_percentage=Decimal("10"),
        )

        assert product.has_discount is False


class TestProductTimestamps:

    def test_timestamps_are_timezone_aware_utc(self):
        product = Product(name="Widget", price=Decimal("1.00"))

        assert product.created_at.tzinfo is not None
        assert product.created_at.utcoffset() == timedelta(0)
        assert product.updated_at.tzinfo is not None

    def test_discount_change_bumps_updated_at(self):
        product = Product(name="Widget", price=Decimal("1.00"))
        before = product.updated_at

        product.set_discount(Decimal("5"), 2)

        assert product.updated_at.tzinfo is not None
        assert product.updated_at >= before

    def test_order_timestamp_is_timezone_aware(self):
        order = Order()

        assert order.created_at.tzinfo is not None
