"""
Authorization - Gates discounted pricing behind a yes/no check.
"""
from decimal import Decimal
from typing import Callable

from .exceptions import InvalidConfiguration, Unauthorized
from .models import Product
from .protocols import Authorizer, PriceResolver


class AuthorizableDiscountCalculator:
    """
    Wraps any price resolver with an authorization check.

    Unauthorized callers are rejected before the inner resolver runs, so no
    discount lookup happens on their behalf. Authorized calls are passed
    through untouched.
    """

    def __init__(self, authorizer: Authorizer, inner: PriceResolver):
        if authorizer is None:
            raise InvalidConfiguration("Authorization gate requires an authorizer")
        if inner is None:
            raise InvalidConfiguration("Authorization gate requires an inner price resolver")

        self.authorizer = authorizer
        self.inner = inner

    def get_discount_price(self, product: Product) -> Decimal:
        if not self.authorizer.is_authorized():
            raise Unauthorized()
        return self.inner.get_discount_price(product)


class StaticAuthorizer:
    """Authorizer with a fixed answer, e.g. from a settings flag."""

    def __init__(self, allowed: bool):
        self.allowed = bool(allowed)

    def is_authorized(self) -> bool:
        return self.allowed


class CallableAuthorizer:
    """Authorizer backed by a zero-argument check (feature flag, session lookup)."""

    def __init__(self, check: Callable[[], bool]):
        if not callable(check):
            raise InvalidConfiguration("Authorization check must be callable")
        self.check = check

    def is_authorized(self) -> bool:
        return bool(self.check())
