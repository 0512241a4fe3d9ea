"""Strategy Rules — конвейер выбора стратегии расчёта сдачи

Правило — функция (context, options), возвращающая:
- RuleMatch(strategy, metadata) — использовать стратегию (стоп)
- ChangeStrategy — использовать стратегию без метаданных (стоп)
- None — правило не сработало (следующее правило)
Правило может выбросить CashRegisterError — конвейер прерывается.

Порядок:
1. Правила из options.strategy_rules (или default_rules())
2. Первое совпадение или ошибка — финальный результат
3. Ни одно правило не сработало → Greedy (rule="default_fallback")

Новые «особые случаи» добавляются новыми правилами без изменения ядра.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Union

from cash_register.core.domain.change import StrategyContext
from cash_register.errors import InvalidDivisor
from cash_register.options import DEFAULT_DIVISOR, ChangeOptions, coerce_options
from cash_register.strategies import GREEDY, RANDOMIZED, ChangeStrategy
from cash_register.telemetry import StrategySelected, TelemetrySink, notify


RULE_DIVISOR_MATCH = "divisor_match"
RULE_DEFAULT_FALLBACK = "default_fallback"
RULE_CUSTOM = "custom"


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class RuleMatch:
    """Срабатывание правила."""

    strategy: ChangeStrategy
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class StrategySelection:
    """Результат конвейера правил."""

    strategy: ChangeStrategy
    rule: str
    metadata: Dict[str, Any]


RuleOutcome = Optional[Union[RuleMatch, ChangeStrategy]]
Rule = Callable[[StrategyContext, ChangeOptions], RuleOutcome]


# =============================================================================
# ВСТРОЕННЫЕ ПРАВИЛА
# =============================================================================


def divisor_match(context: StrategyContext, options: ChangeOptions) -> Optional[RuleMatch]:
    """Правило делителя: Randomized, если сдача делится на divisor.

    Делитель берётся из options.divisor (default 3). Проверяется сумма
    сдачи (context.change), а не сумма долга.

    Args:
        context: контекст транзакции
        options: опции расчёта

    Returns:
        RuleMatch(RANDOMIZED, {"divisor", "rule"}) или None

    Raises:
        InvalidDivisor: если divisor не положительное целое
    """
    divisor = options.divisor
    if divisor is None:
        divisor = DEFAULT_DIVISOR

    # bool является подклассом int, но не делитель
    if isinstance(divisor, bool) or not isinstance(divisor, int) or divisor <= 0:
        raise InvalidDivisor(divisor)

    if context.change % divisor == 0:
        return RuleMatch(RANDOMIZED, {"divisor": divisor, "rule": RULE_DIVISOR_MATCH})

    return None


def default_rules() -> List[Rule]:
    """Правила по умолчанию: только правило делителя."""
    return [divisor_match]


# =============================================================================
# PIPELINE
# =============================================================================


def _normalize(outcome: RuleOutcome, rule: Rule) -> Optional[RuleMatch]:
    if outcome is None:
        return None
    if isinstance(outcome, RuleMatch):
        return outcome
    if isinstance(outcome, ChangeStrategy):
        return RuleMatch(outcome)
    raise TypeError(
        f"rule {getattr(rule, '__name__', rule)!r} returned {outcome!r}; "
        "expected RuleMatch, ChangeStrategy or None"
    )


def select_strategy(
    context: StrategyContext,
    options: Optional[ChangeOptions] = None,
    telemetry: Optional[TelemetrySink] = None,
) -> StrategySelection:
    """Выбор стратегии по правилам.

    Args:
        context: контекст транзакции (owed, paid, change)
        options: опции (divisor, strategy_rules, пользовательские ключи)
        telemetry: sink для события StrategySelected (default: глобальный)

    Returns:
        StrategySelection со стратегией, именем правила и метаданными

    Raises:
        CashRegisterError: ошибка валидации из правила (например, InvalidDivisor)
    """
    options = coerce_options(options)
    rules = options.strategy_rules if options.strategy_rules is not None else default_rules()

    selection = StrategySelection(GREEDY, RULE_DEFAULT_FALLBACK, {"rule": RULE_DEFAULT_FALLBACK})

    for rule in rules:
        match = _normalize(rule(context, options), rule)
        if match is not None:
            metadata = dict(match.metadata)
            selection = StrategySelection(
                strategy=match.strategy,
                rule=str(metadata.get("rule", RULE_CUSTOM)),
                metadata=metadata,
            )
            break

    notify(
        telemetry,
        "strategy_selected",
        StrategySelected(
            strategy=selection.strategy.name,
            rule=selection.rule,
            owed=context.owed,
            paid=context.paid,
            change=context.change,
            divisor=options.divisor,
            metadata=selection.metadata,
        ),
    )

    return selection
