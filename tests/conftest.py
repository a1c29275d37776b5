import sys
import os
from decimal import Decimal
from unittest.mock import Mock

import pytest

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from discount_tool.config.settings import reset_settings
from discount_tool.engine import Product


@pytest.fixture(autouse=True)
def fresh_settings():
    """Never let one test's cached settings leak into another."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def percentage_product():
    return Product(price=Decimal("100"), discount_type="percentage", product_category="APPAREL")


@pytest.fixture
def moneyoff_product():
    return Product(price=Decimal("100"), discount_type="moneyoff", product_category="APPAREL")


@pytest.fixture
def bogus_product():
    return Product(price=Decimal("100"), discount_type="bogus", product_category="APPAREL")


@pytest.fixture
def repository():
    """Mock repository returning 0.5 for any lookup."""
    repo = Mock()
    repo.get_discount_for_type.return_value = Decimal("0.5")
    return repo


def make_strategy(applies: bool, price=Decimal("1")):
    """Mock strategy with a fixed applicability answer."""
    strategy = Mock()
    strategy.is_fallback = False
    strategy.applies_to.return_value = applies
    strategy.apply.return_value = price
    return strategy
