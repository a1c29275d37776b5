"""
Discount Repositories - Reference lookups for raw discount values.

Values are returned exactly as stored. Range checks are the job of the
strategy that applies them.
"""
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Optional

import pandas as pd

from ..engine.exceptions import DiscountLookupError
from ..engine.models import to_decimal


# Value returned for a key with no row, like a scalar query over an empty result
MISSING_DISCOUNT = Decimal("0")


def _missing(missing_discount: Optional[Decimal], discount_type: str, product_category: str) -> Decimal:
    if missing_discount is None:
        raise DiscountLookupError(
            f"No discount for {discount_type}/{product_category}",
            discount_type=discount_type,
            product_category=product_category,
        )
    return missing_discount


class CsvDiscountRepository:
    """
    Discount table backed by a CSV file.

    Expected columns: Discount Type, Product Category, Discount.
    A key with no row returns missing_discount (0 by default); pass
    missing_discount=None to raise DiscountLookupError instead. A missing
    file yields an empty table.
    """

    COLUMNS = ['Discount Type', 'Product Category', 'Discount']

    def __init__(self, table_path: Path, missing_discount: Optional[Decimal] = MISSING_DISCOUNT):
        self.table_path = Path(table_path)
        self.missing_discount = missing_discount
        self.table = self._load_csv(self.table_path)

    def _load_csv(self, path: Path) -> pd.DataFrame:
        if path.exists():
            df = pd.read_csv(path, dtype=str).fillna('')
            # Strip all strings and headers
            df.columns = [c.strip() for c in df.columns]
            for col in df.columns:
                df[col] = df[col].astype(str).str.strip()
            return df
        return pd.DataFrame(columns=self.COLUMNS)

    def reload_data(self):
        """Reload the discount table from disk."""
        self.table = self._load_csv(self.table_path)

    def get_discount_for_type(self, discount_type: str, product_category: str) -> Decimal:
        match = self.table[
            (self.table['Discount Type'] == str(discount_type).strip()) &
            (self.table['Product Category'] == str(product_category).strip())
        ]
        if match.empty:
            return _missing(self.missing_discount, discount_type, product_category)

        raw = match.iloc[0]['Discount']
        try:
            discount = to_decimal(raw)
        except InvalidOperation:
            discount = None
        if discount is None or not discount.is_finite():
            raise DiscountLookupError(
                f"Discount {raw!r} for {discount_type}/{product_category} is not a number",
                discount_type=discount_type,
                product_category=product_category,
            )
        return discount


class InMemoryDiscountRepository:
    """Discount table held in a dict keyed by (discount_type, product_category)."""

    def __init__(
        self,
        discounts: Optional[dict[tuple[str, str], object]] = None,
        missing_discount: Optional[Decimal] = MISSING_DISCOUNT,
    ):
        self.missing_discount = missing_discount
        self.discounts = {
            key: to_decimal(value) for key, value in (discounts or {}).items()
        }

    def get_discount_for_type(self, discount_type: str, product_category: str) -> Decimal:
        try:
            return self.discounts[(discount_type, product_category)]
        except KeyError:
            return _missing(self.missing_discount, discount_type, product_category)
