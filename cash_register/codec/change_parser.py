"""
Разбор текстовой разбивки сдачи обратно в ChangeItem.

Обратная операция к format_change:
    parse_change(format_change(items)) == items
для любых позиций, номиналы которых есть в реестре.
"""

import re
from functools import lru_cache
from typing import Dict, List

from cash_register.codec.formatter import ITEM_SEPARATOR, NO_CHANGE
from cash_register.core.domain.change import ChangeItem
from cash_register.core.domain.currency import Denomination, all_denominations
from cash_register.core.domain.money import MAX_AMOUNT_MINOR_UNITS
from cash_register.errors import InvalidChangeFormat, UnknownDenomination


_COUNT_RE = re.compile(r"^[0-9]+$")

# Количество не больше предела суммы: номинал не меньше 1
_MAX_COUNT_DIGITS = len(str(MAX_AMOUNT_MINOR_UNITS))

# Неправильные формы множественного числа
_IRREGULAR_SINGULARS: Dict[str, str] = {
    "pennies": "penny",
}


# =============================================================================
# ПОИСК НОМИНАЛА
# =============================================================================


@lru_cache(maxsize=1)
def _denomination_index() -> Dict[str, Denomination]:
    """Индекс имя → номинал по id, singular и plural всех валют.

    При совпадении имён в разных валютах выигрывает первая в supported().
    """
    index: Dict[str, Denomination] = {}
    for denomination in all_denominations():
        for key in (denomination.id, denomination.singular, denomination.plural):
            index.setdefault(key.lower(), denomination)
    return index


def singularize(name: str) -> str:
    """
    Приведение отображаемого имени к единственному числу.

    'pennies' → 'penny', '2-euro coins' → '2-euro coin', 'dimes' → 'dime'.
    """
    for plural, singular in _IRREGULAR_SINGULARS.items():
        if name.endswith(plural):
            return name[: -len(plural)] + singular
    if name.endswith("s"):
        return name[:-1]
    return name


def lookup_denomination(name: str) -> Denomination:
    """
    Номинал по отображаемому имени или id.

    Raises:
        UnknownDenomination: Если имя не найдено ни в одной валюте
    """
    normalized = " ".join(name.lower().split())
    index = _denomination_index()
    for candidate in (normalized, singularize(normalized)):
        if candidate in index:
            return index[candidate]
    raise UnknownDenomination(name)


# =============================================================================
# РАЗБОР
# =============================================================================


def _parse_segment(segment: str, text: str) -> ChangeItem:
    parts = segment.strip().split(None, 1)
    if len(parts) != 2:
        raise InvalidChangeFormat(text, f"expected '<count> <name>', got {segment.strip()!r}")

    count_str, name = parts
    if not _COUNT_RE.match(count_str):
        raise InvalidChangeFormat(text, f"count must be a positive integer, got {count_str!r}")

    digits = count_str.lstrip("0")
    if len(digits) > _MAX_COUNT_DIGITS:
        raise InvalidChangeFormat(text, f"count is too large, got {len(digits)} digits")

    count = int(digits or "0")
    if count <= 0:
        raise InvalidChangeFormat(text, f"count must be a positive integer, got {count_str!r}")

    return ChangeItem.of(lookup_denomination(name), count)


def parse_change(text: str) -> List[ChangeItem]:
    """
    Разбор строки вида '3 quarters,1 dime,3 pennies'.

    Args:
        text: Строка от format_change

    Returns:
        Список ChangeItem ([] для '' и 'no change')

    Raises:
        InvalidChangeFormat: Если сегмент не '<count> <name>' или count <= 0
        UnknownDenomination: Если имя номинала не найдено
    """
    trimmed = text.strip()
    if trimmed == "" or trimmed == NO_CHANGE:
        return []
    return [_parse_segment(segment, trimmed) for segment in trimmed.split(ITEM_SEPARATOR)]
