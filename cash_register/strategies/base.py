"""
ChangeStrategy — Интерфейс стратегии расчёта сдачи

Стратегия превращает сумму сдачи (минимальные единицы) в упорядоченный
список ChangeItem. Реализации: GreedyStrategy, RandomizedStrategy.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from cash_register.core.domain.change import ChangeItem
from cash_register.core.domain.money import require_minor_units
from cash_register.options import ChangeOptions


class ChangeStrategy(ABC):
    """Стратегия расчёта сдачи.

    Контракт calculate():
    - change_amount == 0 → [] без обращения к номиналам
    - change_amount < 0 → ValueError
    - иначе список ChangeItem, сумма которых равна change_amount,
      или CannotMakeExactChange
    """

    name: str = "strategy"

    def calculate(
        self,
        change_amount: int,
        options: Optional[ChangeOptions] = None,
    ) -> List[ChangeItem]:
        """
        Расчёт разбивки сдачи.

        Args:
            change_amount: Сумма сдачи (минимальные единицы)
            options: Опции (валюта, номиналы, seed)

        Returns:
            Список ChangeItem в порядке обхода номиналов

        Raises:
            ValueError: Если change_amount отрицательна
            UnknownCurrency: Если валюта из options не зарегистрирована
            CannotMakeExactChange: Если номиналы не покрывают остаток
        """
        require_minor_units(change_amount, label="change_amount")
        if change_amount < 0:
            raise ValueError(f"change_amount cannot be negative: {change_amount}")
        if change_amount == 0:
            return []
        return self._calculate(change_amount, options or ChangeOptions())

    @abstractmethod
    def _calculate(self, change_amount: int, options: ChangeOptions) -> List[ChangeItem]:
        """Расчёт для change_amount > 0."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
