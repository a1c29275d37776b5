"""
Centralized settings and path configuration for the discount tool.

Settings are read once, when components are wired together. No engine
component looks anything up from global state while pricing a product.
"""
from pathlib import Path
from dataclasses import dataclass
from typing import Optional


def get_project_root() -> Path:
    """Get the project root directory (where pyproject.toml lives)."""
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / 'pyproject.toml').exists():
            return parent
    # Fallback to 3 levels up from this file
    return Path(__file__).resolve().parent.parent.parent.parent


def get_package_root() -> Path:
    """Get the discount_tool package directory."""
    return Path(__file__).resolve().parent.parent


@dataclass
class Settings:
    """Application settings with sensible defaults."""

    # Project paths
    project_root: Path

    # Discount table consumed by CsvDiscountRepository
    discount_table: Path

    # Strategy names in dispatch order; the unknown-type fallback is always appended
    strategy_order: tuple = ('percentage', 'moneyoff')

    # Feature flag behind the default authorizer
    discounts_enabled: bool = True

    @classmethod
    def load(cls, project_root: Optional[Path] = None, **overrides) -> 'Settings':
        """Load settings from the project structure."""
        root = project_root or get_project_root()

        return cls(
            project_root=root,
            discount_table=overrides.pop(
                'discount_table', get_package_root() / 'data' / 'discounts.csv'
            ),
            **overrides,
        )


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reset_settings():
    """Drop the cached settings instance (for tests)."""
    global _settings
    _settings = None
