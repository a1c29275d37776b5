"""Engine subpackage - discount strategies, dispatch and authorization."""
from .authorization import AuthorizableDiscountCalculator, CallableAuthorizer, StaticAuthorizer
from .discount_engine import DiscountEngine
from .dispatcher import RunFirstCompositeStrategy
from .exceptions import (
    DiscountError,
    DiscountLookupError,
    InvalidConfiguration,
    InvalidDiscount,
    InvalidProduct,
    Unauthorized,
    UnknownDiscountType,
)
from .models import DiscountResult, Product, TraceStep
from .strategies import MoneyOffDiscountStrategy, PercentageDiscountStrategy, UnknownDiscountStrategy

__all__ = [
    'AuthorizableDiscountCalculator',
    'CallableAuthorizer',
    'StaticAuthorizer',
    'DiscountEngine',
    'RunFirstCompositeStrategy',
    'DiscountError',
    'DiscountLookupError',
    'InvalidConfiguration',
    'InvalidDiscount',
    'InvalidProduct',
    'Unauthorized',
    'UnknownDiscountType',
    'DiscountResult',
    'Product',
    'TraceStep',
    'MoneyOffDiscountStrategy',
    'PercentageDiscountStrategy',
    'UnknownDiscountStrategy',
]
