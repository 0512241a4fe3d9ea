"""
Money — Денежные суммы в минимальных единицах

Все суммы (owed, paid, change) — неотрицательные целые числа в минимальных
единицах валюты (центах). Float запрещён: никаких ошибок округления.

ЗАПРЕЩЕНО передавать в ядро суммы, не прошедшие проверки из этого модуля.
"""

from typing import Final


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Количество дробных разрядов во входных строках (центы)
MINOR_UNIT_DIGITS: Final[int] = 2

# Минимальных единиц в одной основной (100 центов = 1 доллар)
MINOR_UNITS_PER_MAJOR: Final[int] = 10**MINOR_UNIT_DIGITS

# Верхний предел суммы транзакции по умолчанию ($100 000.00)
MAX_AMOUNT_MINOR_UNITS: Final[int] = 10_000_000


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_minor_units(value: object) -> bool:
    """
    Является ли значение корректной суммой в минимальных единицах.

    bool исключён явно: True/False — подкласс int, но не сумма.
    """
    return isinstance(value, int) and not isinstance(value, bool)


def require_minor_units(value: object, *, label: str) -> int:
    """
    Проверка типа суммы.

    Args:
        value: Проверяемое значение
        label: Имя поля для сообщения об ошибке

    Returns:
        value без изменений

    Raises:
        TypeError: Если значение не целое число
    """
    if not is_minor_units(value):
        raise TypeError(f"{label} must be an integer number of minor units, got {value!r}")
    return value  # type: ignore[return-value]


def format_minor_units(amount: int) -> str:
    """
    Человекочитаемое представление суммы: 212 → '2.12'.

    Используется только для логов и сообщений, не для вычислений.
    """
    sign = "-" if amount < 0 else ""
    major, minor = divmod(abs(amount), MINOR_UNITS_PER_MAJOR)
    return f"{sign}{major}.{minor:0{MINOR_UNIT_DIGITS}d}"
