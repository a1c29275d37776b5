"""
Discount Strategies - One pricing rule per discount type.

Each strategy owns its applicability check, its bounds validation and its
arithmetic. Strategies are stateless and safe to share between callers.
"""
from decimal import Decimal, InvalidOperation

from .exceptions import InvalidDiscount, UnknownDiscountType
from .models import Product, to_decimal


def checked_discount(discount) -> Decimal:
    """Coerce a raw discount to a finite Decimal or raise InvalidDiscount."""
    try:
        value = to_decimal(discount)
    except InvalidOperation:
        value = None
    if value is None or not value.is_finite():
        raise InvalidDiscount("discount is not a number", discount=str(discount))
    return value


class PercentageDiscountStrategy:
    """
    Prices a product at a fraction of its list price.

    Valid discounts lie in (0, 1]; the final price is price * discount.
    """

    discount_type = 'percentage'
    is_fallback = False

    def applies_to(self, product: Product) -> bool:
        return product.discount_type == self.discount_type

    def apply(self, product: Product, discount: Decimal) -> Decimal:
        discount = checked_discount(discount)
        if discount > 1:
            raise InvalidDiscount("discount exceeded one", discount=str(discount))
        if discount <= 0:
            raise InvalidDiscount("discount was under zero", discount=str(discount))
        return product.price * discount


class MoneyOffDiscountStrategy:
    """
    Takes a fixed amount off the list price.

    Valid discounts lie in [0, price]; the final price is price - discount.
    """

    discount_type = 'moneyoff'
    is_fallback = False

    def applies_to(self, product: Product) -> bool:
        return product.discount_type == self.discount_type

    def apply(self, product: Product, discount: Decimal) -> Decimal:
        discount = checked_discount(discount)
        if discount > product.price:
            raise InvalidDiscount(
                "cannot reduce more than price",
                discount=str(discount),
                price=str(product.price),
            )
        if discount < 0:
            raise InvalidDiscount("cannot reduce by negative discount", discount=str(discount))
        return product.price - discount


class UnknownDiscountStrategy:
    """
    Catch-all for discount types no other strategy recognized.

    Always applies so that dispatch is total, and always fails when applied.
    Must be the last strategy in a dispatch order.
    """

    discount_type = None
    is_fallback = True

    def applies_to(self, product: Product) -> bool:
        return True

    def apply(self, product: Product, discount: Decimal) -> Decimal:
        raise UnknownDiscountType(
            f"Unexpected discount type {product.discount_type!r}",
            discount_type=product.discount_type,
        )


# Strategies selectable by name from settings.strategy_order
STRATEGIES = {
    PercentageDiscountStrategy.discount_type: PercentageDiscountStrategy,
    MoneyOffDiscountStrategy.discount_type: MoneyOffDiscountStrategy,
}
