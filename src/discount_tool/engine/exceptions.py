"""
Discount resolution errors.

Every error carries a machine-readable code so callers can branch on the
failure kind without string matching.
"""
from typing import Any, Optional


ERROR_MESSAGES = {
    "UNAUTHORIZED": "user not authorized for discount",
    "INVALID_DISCOUNT": "Invalid discount",
    "UNKNOWN_DISCOUNT_TYPE": "Unexpected discount type",
    "INVALID_CONFIGURATION": "Invalid discount configuration",
    "DISCOUNT_NOT_FOUND": "Discount not found",
    "INVALID_PRODUCT": "Invalid product",
}


class DiscountError(Exception):
    """
    Structured exception for discount resolution.

    Usage:
        try:
            price = calculator.get_discount_price(product)
        except DiscountError as e:
            if e.code == "INVALID_DISCOUNT":
                print(f"Bad discount {e.data.get('discount')}")
    """

    code = "DISCOUNT_ERROR"

    def __init__(self, message: str = "", code: Optional[str] = None, **data: Any) -> None:
        self.code = code or self.code
        self.message = message or ERROR_MESSAGES.get(self.code, self.code)
        self.data = data
        super().__init__(f"[{self.code}] {self.message}")

    def as_dict(self) -> dict:
        return {
            "code": self.code,
            "message": self.message,
            "data": self.data,
        }


class Unauthorized(DiscountError):
    """The caller is not authorized to receive discounted pricing."""
    code = "UNAUTHORIZED"


class InvalidDiscount(DiscountError):
    """A discount value broke the selected strategy's bounds."""
    code = "INVALID_DISCOUNT"


class UnknownDiscountType(DiscountError):
    """No strategy recognized the product's discount type."""
    code = "UNKNOWN_DISCOUNT_TYPE"


class InvalidProduct(DiscountError, ValueError):
    """A product was built with a price that cannot be priced."""
    code = "INVALID_PRODUCT"


class InvalidConfiguration(DiscountError):
    """Raised while wiring components, never during a price computation."""
    code = "INVALID_CONFIGURATION"


class DiscountLookupError(DiscountError):
    """A repository could not produce a discount for the requested key."""
    code = "DISCOUNT_NOT_FOUND"
