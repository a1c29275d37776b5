"""
Data models for the discount engine.

Uses dataclasses for structured, type-safe data representation.
Monetary values are Decimal throughout to avoid float drift.
"""
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Optional

from .exceptions import InvalidProduct


def to_decimal(value) -> Decimal:
    """Coerce a number or numeric string to Decimal via its string form."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value).strip())


@dataclass(frozen=True)
class Product:
    """A product to be priced. Immutable for the whole computation."""
    price: Decimal
    discount_type: str
    product_category: str

    def __post_init__(self):
        try:
            price = to_decimal(self.price)
        except InvalidOperation:
            price = None
        if price is None or not price.is_finite():
            raise InvalidProduct(f"Price {self.price!r} is not a number", price=str(self.price))
        if price < 0:
            raise InvalidProduct("Price cannot be negative", price=str(price))
        object.__setattr__(self, 'price', price)


@dataclass
class TraceStep:
    """A single step in the discount resolution trace."""
    step: str
    description: str
    value: Optional[str] = None


@dataclass
class DiscountResult:
    """Complete result of a discount calculation."""
    product: Product
    discount: Decimal
    price: Decimal
    resolver: str
    trace: list[TraceStep] = field(default_factory=list)

    def add_trace(self, step: str, description: str, value: str = None):
        """Add a step to the trace."""
        self.trace.append(TraceStep(step=step, description=description, value=value))

    def get_trace_text(self) -> str:
        """Get human-readable trace as formatted text."""
        lines = []
        for t in self.trace:
            if t.value:
                lines.append(f"→ {t.step}: {t.description} = {t.value}")
            else:
                lines.append(f"→ {t.step}: {t.description}")
        return "\n".join(lines)

    def to_dict(self) -> dict:
        return {
            "Price": str(self.product.price),
            "Discount Type": self.product.discount_type,
            "Product Category": self.product.product_category,
            "Discount": str(self.discount),
            "Final Price": str(self.price),
            "Resolver": self.resolver,
        }
