"""
Strategy Dispatcher - Runs the first strategy that applies to a product.

Strategies are evaluated strictly in the order given. Once one applies,
no later strategy is consulted, even if it would also apply.
"""
from decimal import Decimal
from typing import Iterable

from .exceptions import InvalidConfiguration, UnknownDiscountType
from .models import Product
from .protocols import DiscountStrategy


class RunFirstCompositeStrategy:
    """
    Composite strategy: first match wins.

    Behaves as a strategy itself, so it can be handed to DiscountEngine
    wherever a single strategy is accepted.
    """

    is_fallback = True

    def __init__(self, strategies: Iterable[DiscountStrategy], require_fallback: bool = True):
        """
        Args:
            strategies: Ordered strategies; order is significant
            require_fallback: Insist the last strategy always applies

        Raises:
            InvalidConfiguration: If the list is empty, or lacks a trailing
                fallback while one is required
        """
        if strategies is None:
            raise InvalidConfiguration("Strategy list is required")

        self.strategies = tuple(strategies)
        self.require_fallback = require_fallback

        if not self.strategies:
            raise InvalidConfiguration("Strategy list cannot be empty")

        if require_fallback and not getattr(self.strategies[-1], 'is_fallback', False):
            raise InvalidConfiguration(
                "Last strategy must be a fallback that always applies",
                last_strategy=type(self.strategies[-1]).__name__,
            )

    def applies_to(self, product: Product) -> bool:
        return True

    def select(self, product: Product) -> DiscountStrategy:
        """Return the first strategy that applies to the product."""
        for strategy in self.strategies:
            if strategy.applies_to(product):
                return strategy

        # Only reachable with require_fallback=False
        raise UnknownDiscountType(
            f"No strategy applies to discount type {product.discount_type!r}",
            discount_type=product.discount_type,
        )

    def resolve(self, product: Product, discount: Decimal) -> tuple[DiscountStrategy, Decimal]:
        """Select and apply in one scan, returning (strategy, price)."""
        strategy = self.select(product)
        return strategy, strategy.apply(product, discount)

    def apply(self, product: Product, discount: Decimal) -> Decimal:
        return self.resolve(product, discount)[1]
