"""Форматирование разбивки сдачи в текст: '3 quarters,1 dime,3 pennies'."""

from typing import Final, Iterable

from cash_register.core.domain.change import ChangeItem


NO_CHANGE: Final[str] = "no change"
ITEM_SEPARATOR: Final[str] = ","


def format_item(item: ChangeItem) -> str:
    return f"{item.count} {item.display_name}"


def format_change(items: Iterable[ChangeItem]) -> str:
    """
    Текстовое представление разбивки сдачи.

    Args:
        items: Позиции сдачи (порядок сохраняется)

    Returns:
        'no change' для пустого списка, иначе позиции через запятую
    """
    parts = [format_item(item) for item in items]
    if not parts:
        return NO_CHANGE
    return ITEM_SEPARATOR.join(parts)
