"""Tests for the discount strategy variants."""
from decimal import Decimal

import pytest

from discount_tool.engine import (
    InvalidDiscount,
    MoneyOffDiscountStrategy,
    PercentageDiscountStrategy,
    Product,
    UnknownDiscountStrategy,
    UnknownDiscountType,
)


class TestPercentageDiscountStrategy:

    @pytest.mark.parametrize("discount", ["0.5", "0.01", "1", "0.333"])
    def test_calculation_is_correct(self, percentage_product, discount):
        """Price is multiplied by any discount in (0, 1]."""
        sut = PercentageDiscountStrategy()
        actual = sut.apply(percentage_product, Decimal(discount))
        assert actual == percentage_product.price * Decimal(discount)

    def test_half_off_scenario(self, percentage_product):
        assert PercentageDiscountStrategy().apply(percentage_product, Decimal("0.5")) == Decimal("50")

    def test_exact_decimal_arithmetic(self):
        """No float drift: 0.1 * 3 cents stays exact."""
        product = Product(price="0.30", discount_type="percentage", product_category="X")
        assert PercentageDiscountStrategy().apply(product, Decimal("0.1")) == Decimal("0.030")

    @pytest.mark.parametrize("discount", ["1.01", "2", "150"])
    def test_throws_on_high_discount(self, percentage_product, discount):
        with pytest.raises(InvalidDiscount) as exc:
            PercentageDiscountStrategy().apply(percentage_product, Decimal(discount))
        assert exc.value.message == "discount exceeded one"

    @pytest.mark.parametrize("discount", ["0", "-0.5", "-3"])
    def test_throws_on_low_discount(self, percentage_product, discount):
        with pytest.raises(InvalidDiscount) as exc:
            PercentageDiscountStrategy().apply(percentage_product, Decimal(discount))
        assert exc.value.message == "discount was under zero"
        assert exc.value.code == "INVALID_DISCOUNT"

    @pytest.mark.parametrize("discount", ["NaN", "sNaN", "Infinity", "abc", None])
    def test_throws_on_non_numeric_discount(self, percentage_product, discount):
        with pytest.raises(InvalidDiscount) as exc:
            PercentageDiscountStrategy().apply(percentage_product, discount)
        assert exc.value.message == "discount is not a number"

    def test_should_run_is_correct(self, percentage_product):
        assert PercentageDiscountStrategy().applies_to(percentage_product) is True

    @pytest.mark.parametrize("discount_type", ["moneyoff", "percent", "PERCENTAGE", "bogus", ""])
    def test_should_not_run_is_correct(self, discount_type):
        product = Product(price="10", discount_type=discount_type, product_category="X")
        assert PercentageDiscountStrategy().applies_to(product) is False


class TestMoneyOffDiscountStrategy:

    @pytest.mark.parametrize("discount", ["0", "20", "99.99", "100"])
    def test_calculation_is_correct(self, moneyoff_product, discount):
        """Price is reduced by any discount in [0, price]."""
        actual = MoneyOffDiscountStrategy().apply(moneyoff_product, Decimal(discount))
        assert actual == moneyoff_product.price - Decimal(discount)

    def test_twenty_off_scenario(self, moneyoff_product):
        assert MoneyOffDiscountStrategy().apply(moneyoff_product, Decimal("20")) == Decimal("80")

    @pytest.mark.parametrize("discount", ["100.01", "150"])
    def test_throws_on_high_discount(self, moneyoff_product, discount):
        with pytest.raises(InvalidDiscount) as exc:
            MoneyOffDiscountStrategy().apply(moneyoff_product, Decimal(discount))
        assert exc.value.message == "cannot reduce more than price"
        assert exc.value.data["price"] == "100"

    @pytest.mark.parametrize("discount", ["-0.01", "-20"])
    def test_throws_on_low_discount(self, moneyoff_product, discount):
        with pytest.raises(InvalidDiscount) as exc:
            MoneyOffDiscountStrategy().apply(moneyoff_product, Decimal(discount))
        assert exc.value.message == "cannot reduce by negative discount"

    def test_free_product_accepts_zero_discount(self):
        product = Product(price="0", discount_type="moneyoff", product_category="X")
        assert MoneyOffDiscountStrategy().apply(product, Decimal("0")) == Decimal("0")

    @pytest.mark.parametrize("discount", ["NaN", "-Infinity"])
    def test_throws_on_non_numeric_discount(self, moneyoff_product, discount):
        with pytest.raises(InvalidDiscount):
            MoneyOffDiscountStrategy().apply(moneyoff_product, Decimal(discount))

    def test_should_run_is_correct(self, moneyoff_product):
        assert MoneyOffDiscountStrategy().applies_to(moneyoff_product) is True

    @pytest.mark.parametrize("discount_type", ["percentage", "money_off", "bogus"])
    def test_should_not_run_is_correct(self, discount_type):
        product = Product(price="10", discount_type=discount_type, product_category="X")
        assert MoneyOffDiscountStrategy().applies_to(product) is False


class TestUnknownDiscountStrategy:

    @pytest.mark.parametrize("discount_type", ["percentage", "moneyoff", "bogus", ""])
    def test_should_always_run(self, discount_type):
        product = Product(price="10", discount_type=discount_type, product_category="X")
        assert UnknownDiscountStrategy().applies_to(product) is True

    def test_throws_if_run(self, bogus_product):
        with pytest.raises(UnknownDiscountType) as exc:
            UnknownDiscountStrategy().apply(bogus_product, Decimal("0.5"))
        assert exc.value.code == "UNKNOWN_DISCOUNT_TYPE"
        assert exc.value.data["discount_type"] == "bogus"

    def test_is_marked_as_fallback(self):
        assert UnknownDiscountStrategy.is_fallback is True
        assert PercentageDiscountStrategy.is_fallback is False
        assert MoneyOffDiscountStrategy.is_fallback is False
