import sys
from pathlib import Path

# Add src to path
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from discount_tool.composition import build_discount_calculator, build_discount_engine
from discount_tool.config.settings import get_settings
from discount_tool.engine import DiscountError, Product, StaticAuthorizer


SAMPLES = [
    Product(price="100", discount_type="percentage", product_category="APPAREL"),
    Product(price="100", discount_type="moneyoff", product_category="APPAREL"),
    Product(price="100", discount_type="moneyoff", product_category="EQUIPMENT"),
    Product(price="10", discount_type="moneyoff", product_category="EQUIPMENT"),
    Product(price="100", discount_type="bogus", product_category="APPAREL"),
]


def debug():
    settings = get_settings()
    print(f"Discount table: {settings.discount_table}")
    print(f"Strategy order: {', '.join(settings.strategy_order)} (+ unknown fallback)")

    engine = build_discount_engine(settings)
    print("\nLoaded Discounts:")
    print(engine.repository.table.head())

    for product in SAMPLES:
        print(f"\n--- {product.discount_type} / {product.product_category} @ {product.price} ---")
        try:
            result = engine.calculate(product)
            print(result.get_trace_text())
        except DiscountError as e:
            print(f"FAILED: {e}")

    print("\n--- Unauthorized caller ---")
    calculator = build_discount_calculator(settings, authorizer=StaticAuthorizer(False))
    try:
        calculator.get_discount_price(SAMPLES[0])
    except DiscountError as e:
        print(f"FAILED: {e}")


if __name__ == "__main__":
    debug()
