"""
Change — Результат расчёта сдачи и контекст выбора стратегии

ChangeItem — единица результата: номинал + количество.
Список ChangeItem в порядке убывания стоимости — разбивка сдачи.
Пустой список — точная оплата (сдачи нет).
"""

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from pydantic import BaseModel, Field

from cash_register.core.domain.currency import Denomination, all_denominations


# =============================================================================
# CHANGE ITEM
# =============================================================================


class ChangeItem(BaseModel):
    """
    Позиция сдачи.

    Immutable модель (frozen=True); сравнение по значению,
    что нужно для инварианта parse(format(x)) == x.
    """

    denomination_id: str = Field(..., min_length=1, description="Идентификатор номинала")
    count: int = Field(..., ge=0, description="Сколько единиц номинала выдать")
    singular: str = Field(..., min_length=1)
    plural: str = Field(..., min_length=1)

    model_config = {"frozen": True}

    @classmethod
    def of(cls, denomination: Denomination, count: int) -> "ChangeItem":
        """Позиция сдачи для номинала"""
        return cls(
            denomination_id=denomination.id,
            count=count,
            singular=denomination.singular,
            plural=denomination.plural,
        )

    @property
    def display_name(self) -> str:
        """Единственное число при count == 1, иначе множественное"""
        return self.singular if self.count == 1 else self.plural


# =============================================================================
# CONTEXT
# =============================================================================


@dataclass(frozen=True)
class StrategyContext:
    """Контекст транзакции для правил выбора стратегии (read-only)."""

    owed: int
    paid: int
    change: int

    @classmethod
    def for_amounts(cls, owed: int, paid: int) -> "StrategyContext":
        return cls(owed=owed, paid=paid, change=paid - owed)


# =============================================================================
# ИТОГИ
# =============================================================================


def total_value(
    items: Iterable[ChangeItem],
    denominations: Optional[Iterable[Denomination]] = None,
) -> int:
    """
    Сумма value × count по позициям сдачи.

    Args:
        items: Позиции сдачи
        denominations: Номиналы для поиска стоимости (default: весь реестр)

    Returns:
        Сумма в минимальных единицах

    Raises:
        KeyError: Если номинал позиции не найден
    """
    source = all_denominations() if denominations is None else denominations
    values: Mapping[str, int] = {d.id: d.value for d in source}
    return sum(values[item.denomination_id] * item.count for item in items)
