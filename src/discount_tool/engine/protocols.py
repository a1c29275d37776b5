"""
Collaborator protocols for the discount engine.

Components depend on these capabilities only, never on a concrete
implementation: a repository may be a CSV table, a stored procedure or a
remote service, an authorizer may be a feature flag or a session check.
"""
from decimal import Decimal
from typing import Protocol, runtime_checkable

from .models import Product


@runtime_checkable
class DiscountRepository(Protocol):
    """Interface for looking up raw discount values."""

    def get_discount_for_type(self, discount_type: str, product_category: str) -> Decimal:
        """
        Return the raw discount for a discount type and product category.

        The value is not range-checked; validation belongs to the strategy
        that applies it.
        """
        ...


@runtime_checkable
class Authorizer(Protocol):
    """Interface for a yes/no authorization check."""

    def is_authorized(self) -> bool:
        ...


@runtime_checkable
class DiscountStrategy(Protocol):
    """A pricing rule paired with the predicate that selects it."""

    def applies_to(self, product: Product) -> bool:
        ...

    def apply(self, product: Product, discount: Decimal) -> Decimal:
        ...


@runtime_checkable
class PriceResolver(Protocol):
    """Anything that can price a product: the engine or a gate around it."""

    def get_discount_price(self, product: Product) -> Decimal:
        ...
