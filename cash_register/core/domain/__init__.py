"""
Domain models and value objects.

Contains fundamental domain entities: money amounts, Currency, Denomination, ChangeItem.
"""

from cash_register.core.domain.change import ChangeItem, StrategyContext, total_value
from cash_register.core.domain.currency import (
    DEFAULT_CURRENCY,
    Currency,
    Denomination,
    all_denominations,
    default,
    denominations,
    info,
    resolve_denominations,
    supported,
)
from cash_register.core.domain.money import (
    MAX_AMOUNT_MINOR_UNITS,
    MINOR_UNIT_DIGITS,
    MINOR_UNITS_PER_MAJOR,
    format_minor_units,
    is_minor_units,
    require_minor_units,
)

__all__ = [
    # Money
    "MAX_AMOUNT_MINOR_UNITS",
    "MINOR_UNIT_DIGITS",
    "MINOR_UNITS_PER_MAJOR",
    "format_minor_units",
    "is_minor_units",
    "require_minor_units",
    # Currency registry
    "DEFAULT_CURRENCY",
    "Currency",
    "Denomination",
    "all_denominations",
    "default",
    "denominations",
    "info",
    "resolve_denominations",
    "supported",
    # Change
    "ChangeItem",
    "StrategyContext",
    "total_value",
]
