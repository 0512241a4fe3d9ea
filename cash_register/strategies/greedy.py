"""
Greedy — Жадная стратегия расчёта сдачи

Номиналы перебираются в заданном порядке (для реестра — по убыванию):
count = remaining // value, remaining -= count * value.

Для канонических наборов (USD, EUR, GBP) жадный алгоритм даёт минимальное
число монет; для произвольных пользовательских наборов это не гарантируется.
"""

from typing import Iterable, List

from cash_register.core.domain.change import ChangeItem
from cash_register.core.domain.currency import Denomination, resolve_denominations
from cash_register.errors import CannotMakeExactChange
from cash_register.options import ChangeOptions
from cash_register.strategies.base import ChangeStrategy


class GreedyStrategy(ChangeStrategy):
    """Жадная стратегия: от большего номинала к меньшему."""

    name = "greedy"

    def _calculate(self, change_amount: int, options: ChangeOptions) -> List[ChangeItem]:
        return self.reduce(change_amount, resolve_denominations(options))

    def reduce(self, change_amount: int, denominations: Iterable[Denomination]) -> List[ChangeItem]:
        """
        Жадное разложение суммы по номиналам в заданном порядке.

        Args:
            change_amount: Сумма сдачи (минимальные единицы)
            denominations: Номиналы в порядке обхода

        Returns:
            Позиции с count > 0

        Raises:
            CannotMakeExactChange: Если после обхода остался ненулевой остаток
        """
        remaining = change_amount
        items: List[ChangeItem] = []

        for denomination in denominations:
            # Неположительные номиналы пользовательского набора пропускаются
            if denomination.value <= 0:
                continue
            count, remaining = divmod(remaining, denomination.value)
            if count > 0:
                items.append(ChangeItem.of(denomination, count))

        if remaining != 0:
            raise CannotMakeExactChange(remaining=remaining, change=change_amount)

        return items
