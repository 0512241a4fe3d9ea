"""
Разбор входных строк транзакций.

Форматы строки (различаются только числом полей через запятую):
- 2 поля: десятичная точка — '2.12,3.00'
- 4 поля: десятичная запятая — '2,12,3,00' (owed = '2.12', paid = '3.00')

Суммы переводятся в минимальные единицы точно, без float:
целая и дробная части разбираются как строки цифр.
"""

import re
from typing import List, Tuple

from cash_register.core.domain.money import (
    MAX_AMOUNT_MINOR_UNITS,
    MINOR_UNIT_DIGITS,
    MINOR_UNITS_PER_MAJOR,
)
from cash_register.errors import InvalidAmountFormat, InvalidLineFormat


Transaction = Tuple[int, int]

_DIGITS_RE = re.compile(r"^[0-9]+$")


# =============================================================================
# СУММЫ
# =============================================================================


def parse_amount(text: str, max_amount: int = MAX_AMOUNT_MINOR_UNITS) -> int:
    """
    Десятичная строка → минимальные единицы.

    '2.12' → 212, '1.5' → 150, '5' → 500.

    Args:
        text: Строка суммы
        max_amount: Верхний предел (минимальные единицы)

    Returns:
        Сумма в минимальных единицах

    Raises:
        InvalidAmountFormat: Пустая строка, отрицательная сумма, несколько
            десятичных точек, точка без дробной части, больше двух дробных
            разрядов, не число, превышение max_amount
    """
    amount = text.strip()

    if not amount:
        raise InvalidAmountFormat(text, "amount is empty")
    if amount.startswith("-"):
        raise InvalidAmountFormat(amount, f"amount must be non-negative, got {amount}")
    if amount.count(".") > 1:
        raise InvalidAmountFormat(amount, "multiple decimal points")

    whole, dot, fraction = amount.partition(".")

    if dot and not fraction:
        raise InvalidAmountFormat(amount, "missing cents after decimal point")
    if not _DIGITS_RE.match(whole) or (fraction and not _DIGITS_RE.match(fraction)):
        raise InvalidAmountFormat(amount, "not a number")
    if len(fraction) > MINOR_UNIT_DIGITS:
        raise InvalidAmountFormat(
            amount, f"too many decimal places (max {MINOR_UNIT_DIGITS})"
        )

    whole = whole.lstrip("0")
    if len(whole) > len(str(max_amount)):
        raise InvalidAmountFormat(
            amount, f"amount exceeds maximum of {max_amount} minor units"
        )

    minor_units = int(whole or "0") * MINOR_UNITS_PER_MAJOR + int(
        fraction.ljust(MINOR_UNIT_DIGITS, "0")
    )

    if minor_units > max_amount:
        raise InvalidAmountFormat(
            amount, f"amount exceeds maximum of {max_amount} minor units"
        )

    return minor_units


# =============================================================================
# СТРОКИ
# =============================================================================


def parse_line(line: str, max_amount: int = MAX_AMOUNT_MINOR_UNITS) -> Transaction:
    """
    Строка транзакции → (owed, paid).

    Raises:
        InvalidLineFormat: Если число полей не 2 и не 4
        InvalidAmountFormat: Если сумма некорректна
    """
    fields = line.strip().split(",")

    if len(fields) == 2:
        owed_str, paid_str = fields
    elif len(fields) == 4:
        owed_str = f"{fields[0].strip()}.{fields[1].strip()}"
        paid_str = f"{fields[2].strip()}.{fields[3].strip()}"
    else:
        raise InvalidLineFormat(line.strip())

    return parse_amount(owed_str, max_amount), parse_amount(paid_str, max_amount)


def parse_lines(content: str, max_amount: int = MAX_AMOUNT_MINOR_UNITS) -> List[Transaction]:
    """
    Разбор содержимого файла; пустые строки пропускаются.

    Форматы можно смешивать в одном файле. Первая ошибка выбрасывается.
    """
    return [
        parse_line(line, max_amount)
        for line in content.splitlines()
        if line.strip()
    ]
