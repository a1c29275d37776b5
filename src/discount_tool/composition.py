"""
Composition root - wires repository, strategies and authorization.

All collaborators are resolved here, once, and passed down explicitly.
"""
from typing import Optional, Sequence

from .config.settings import Settings, get_settings
from .data.discount_repository import CsvDiscountRepository
from .engine.authorization import AuthorizableDiscountCalculator, StaticAuthorizer
from .engine.discount_engine import DiscountEngine
from .engine.dispatcher import RunFirstCompositeStrategy
from .engine.exceptions import InvalidConfiguration
from .engine.protocols import Authorizer, DiscountRepository, DiscountStrategy
from .engine.strategies import STRATEGIES, UnknownDiscountStrategy


def build_strategies(strategy_order: Sequence[str]) -> list[DiscountStrategy]:
    """
    Instantiate strategies by name, in order, ending with the unknown-type fallback.

    Raises:
        InvalidConfiguration: If a name has no registered strategy
    """
    strategies = []
    for name in strategy_order:
        name = str(name).strip()
        if name not in STRATEGIES:
            raise InvalidConfiguration(
                f"Unknown strategy {name!r} in strategy order",
                strategy=name,
                available=sorted(STRATEGIES),
            )
        strategies.append(STRATEGIES[name]())
    strategies.append(UnknownDiscountStrategy())
    return strategies


def build_discount_engine(
    settings: Optional[Settings] = None,
    repository: Optional[DiscountRepository] = None,
    strategies: Optional[Sequence[DiscountStrategy]] = None,
) -> DiscountEngine:
    """
    Build a bare engine for trusted callers that authorize upstream.

    Args:
        settings: Optional settings override
        repository: Optional repository; defaults to the configured CSV table
        strategies: Optional ordered strategies; defaults to settings.strategy_order
    """
    settings = settings or get_settings()

    if repository is None:
        repository = CsvDiscountRepository(settings.discount_table)
    if strategies is None:
        strategies = build_strategies(settings.strategy_order)

    return DiscountEngine(repository, RunFirstCompositeStrategy(strategies))


def build_discount_calculator(
    settings: Optional[Settings] = None,
    repository: Optional[DiscountRepository] = None,
    authorizer: Optional[Authorizer] = None,
) -> AuthorizableDiscountCalculator:
    """
    Build the authorized-only calculator.

    Without an explicit authorizer, settings.discounts_enabled decides.
    """
    settings = settings or get_settings()

    if authorizer is None:
        authorizer = StaticAuthorizer(settings.discounts_enabled)

    engine = build_discount_engine(settings=settings, repository=repository)
    return AuthorizableDiscountCalculator(authorizer, engine)
