"""
Calculator — Расчёт сдачи для транзакции

Порядок проверок (каждый шаг прерывает расчёт при ошибке):
1. owed < 0 или paid < 0 → NegativeAmount
2. paid < owed → InsufficientPayment
3. change == 0 → [] (правила и стратегии не вызываются)
4. Выбор стратегии конвейером правил
5. Расчёт выбранной стратегией
"""

from typing import Any, List, Optional

from cash_register.core.domain.change import ChangeItem, StrategyContext
from cash_register.core.domain.money import require_minor_units
from cash_register.errors import InsufficientPayment, NegativeAmount
from cash_register.options import coerce_options
from cash_register.rules.strategy_rules import select_strategy
from cash_register.telemetry import TelemetrySink


def calculate(
    owed: int,
    paid: int,
    options: Any = None,
    telemetry: Optional[TelemetrySink] = None,
) -> List[ChangeItem]:
    """
    Расчёт сдачи.

    Args:
        owed: Сумма к оплате (минимальные единицы)
        paid: Оплаченная сумма (минимальные единицы)
        options: ChangeOptions или словарь опций
        telemetry: Sink для события выбора стратегии

    Returns:
        Список ChangeItem ([] при точной оплате)

    Raises:
        TypeError: Если суммы не целые
        NegativeAmount: Если сумма отрицательна
        InsufficientPayment: Если оплачено меньше долга
        InvalidDivisor: Если делитель некорректен
        UnknownCurrency: Если валюта не зарегистрирована
        CannotMakeExactChange: Если номиналы не покрывают сдачу
    """
    require_minor_units(owed, label="owed")
    require_minor_units(paid, label="paid")

    # 1. Отрицательные суммы
    if owed < 0 or paid < 0:
        raise NegativeAmount(owed=owed, paid=paid)

    # 2. Недостаточная оплата
    if paid < owed:
        raise InsufficientPayment(owed=owed, paid=paid)

    # 3. Точная оплата
    context = StrategyContext.for_amounts(owed, paid)
    if context.change == 0:
        return []

    # 4-5. Выбор стратегии и расчёт
    change_options = coerce_options(options)
    selection = select_strategy(context, change_options, telemetry)
    return selection.strategy.calculate(context.change, change_options)
