"""
Discount Engine - Orchestrates discount lookup and strategy application.

The engine does no validation of its own. Range checks and arithmetic
belong to the strategy it is given, and any error raised by the repository
or the strategy reaches the caller unchanged.
"""
from decimal import Decimal

from .dispatcher import RunFirstCompositeStrategy
from .exceptions import InvalidConfiguration
from .models import DiscountResult, Product
from .protocols import DiscountRepository, DiscountStrategy


class DiscountEngine:
    """
    Resolves a product's discounted price.

    Resolution order:
    1. Look up the raw discount for (discount_type, product_category)
    2. Hand (product, discount) to the strategy (single or composite)
    3. Return the strategy's price
    """

    def __init__(self, repository: DiscountRepository, strategy: DiscountStrategy):
        if repository is None:
            raise InvalidConfiguration("DiscountEngine requires a discount repository")
        if strategy is None:
            raise InvalidConfiguration("DiscountEngine requires a discount strategy")

        self.repository = repository
        self.strategy = strategy

    def get_discount_price(self, product: Product) -> Decimal:
        """Return the discounted price for a product."""
        return self.calculate(product).price

    def calculate(self, product: Product) -> DiscountResult:
        """
        Calculate the discounted price with full traceability.

        Args:
            product: Product to price

        Returns:
            DiscountResult with price and trace
        """
        discount = self.repository.get_discount_for_type(
            product.discount_type,
            product.product_category,
        )
        if isinstance(self.strategy, RunFirstCompositeStrategy):
            selected, price = self.strategy.resolve(product, discount)
        else:
            selected, price = self.strategy, self.strategy.apply(product, discount)
        resolver = type(selected).__name__

        result = DiscountResult(
            product=product,
            discount=discount,
            price=price,
            resolver=resolver,
        )
        result.add_trace(
            "Discount Lookup",
            f"Discount for {product.discount_type}/{product.product_category}",
            str(discount),
        )
        result.add_trace("Strategy", "Selected discount strategy", resolver)
        result.add_trace("Discount Applied", f"List price {product.price}", str(price))
        return result
