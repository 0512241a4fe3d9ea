"""Rules — правила выбора стратегии расчёта сдачи."""

from .strategy_rules import (
    RULE_DEFAULT_FALLBACK,
    RULE_DIVISOR_MATCH,
    Rule,
    RuleMatch,
    StrategySelection,
    default_rules,
    divisor_match,
    select_strategy,
)

__all__ = [
    "RULE_DEFAULT_FALLBACK",
    "RULE_DIVISOR_MATCH",
    "Rule",
    "RuleMatch",
    "StrategySelection",
    "default_rules",
    "divisor_match",
    "select_strategy",
]
