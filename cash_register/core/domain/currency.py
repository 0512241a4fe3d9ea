"""
Currency — Реестр валют и номиналов

Статическая таблица: код валюты → упорядоченный список номиналов
(строго по убыванию стоимости). Реестр загружается при импорте и
никогда не изменяется, поэтому безопасен для любого числа читателей.

Порядок разрешения номиналов (resolve_denominations):
1. Явный список options.denominations
2. Код валюты options.currency
3. Валюта по умолчанию (USD)
"""

from types import MappingProxyType
from typing import TYPE_CHECKING, Final, Iterator, List, Mapping, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from cash_register.errors import UnknownCurrency

if TYPE_CHECKING:
    from cash_register.options import ChangeOptions


# =============================================================================
# МОДЕЛИ
# =============================================================================


class Denomination(BaseModel):
    """
    Номинал: монета или купюра.

    value — стоимость одной единицы в минимальных единицах валюты.
    singular/plural — отображаемые имена для count == 1 и count != 1.
    """

    id: str = Field(..., min_length=1, description="Идентификатор (например, 'quarter')")
    value: int = Field(..., gt=0, description="Стоимость в минимальных единицах")
    singular: str = Field(..., min_length=1, description="Имя для count == 1")
    plural: str = Field(..., min_length=1, description="Имя для count != 1")

    model_config = {"frozen": True}


class Currency(BaseModel):
    """Валюта с упорядоченным набором номиналов"""

    code: str = Field(..., min_length=3, max_length=3, description="Код ISO 4217")
    name: str = Field(..., min_length=1)
    symbol: str = Field(..., min_length=1)
    denominations: Tuple[Denomination, ...] = Field(..., min_length=1)

    model_config = {"frozen": True}

    @field_validator("denominations")
    @classmethod
    def validate_descending(cls, v: Tuple[Denomination, ...]) -> Tuple[Denomination, ...]:
        """Номиналы реестра строго убывают по стоимости"""
        for prev, curr in zip(v, v[1:]):
            if curr.value >= prev.value:
                raise ValueError(
                    f"denominations must be strictly descending: {prev.id}={prev.value} "
                    f"followed by {curr.id}={curr.value}"
                )
        return v


# =============================================================================
# РЕЕСТР
# =============================================================================

DEFAULT_CURRENCY: Final[str] = "USD"


def _denoms(*rows: Tuple[str, int, str, str]) -> Tuple[Denomination, ...]:
    return tuple(
        Denomination(id=id_, value=value, singular=singular, plural=plural)
        for id_, value, singular, plural in rows
    )


_CURRENCIES: Final[Mapping[str, Currency]] = MappingProxyType(
    {
        "USD": Currency(
            code="USD",
            name="US Dollar",
            symbol="$",
            denominations=_denoms(
                ("dollar", 100, "dollar", "dollars"),
                ("quarter", 25, "quarter", "quarters"),
                ("dime", 10, "dime", "dimes"),
                ("nickel", 5, "nickel", "nickels"),
                ("penny", 1, "penny", "pennies"),
            ),
        ),
        "EUR": Currency(
            code="EUR",
            name="Euro",
            symbol="€",
            denominations=_denoms(
                ("euro_2", 200, "2-euro coin", "2-euro coins"),
                ("euro", 100, "euro", "euros"),
                ("cent_50", 50, "50-cent coin", "50-cent coins"),
                ("cent_20", 20, "20-cent coin", "20-cent coins"),
                ("cent_10", 10, "10-cent coin", "10-cent coins"),
                ("cent_5", 5, "5-cent coin", "5-cent coins"),
                ("cent_2", 2, "2-cent coin", "2-cent coins"),
                ("cent", 1, "cent", "cents"),
            ),
        ),
        "GBP": Currency(
            code="GBP",
            name="British Pound",
            symbol="£",
            denominations=_denoms(
                ("pound_2", 200, "2-pound coin", "2-pound coins"),
                ("pound", 100, "pound", "pounds"),
                ("pence_50", 50, "50-pence coin", "50-pence coins"),
                ("pence_20", 20, "20-pence coin", "20-pence coins"),
                ("pence_10", 10, "10-pence coin", "10-pence coins"),
                ("pence_5", 5, "5-pence coin", "5-pence coins"),
                ("pence_2", 2, "2-pence coin", "2-pence coins"),
                ("penny", 1, "penny", "pennies"),
            ),
        ),
    }
)


# =============================================================================
# API
# =============================================================================


def denominations(currency_code: str = DEFAULT_CURRENCY) -> Tuple[Denomination, ...]:
    """
    Номиналы валюты в порядке убывания.

    Args:
        currency_code: Код валюты (например, 'EUR')

    Returns:
        Кортеж Denomination

    Raises:
        UnknownCurrency: Если валюта не зарегистрирована
    """
    currency = _CURRENCIES.get(currency_code)
    if currency is None:
        raise UnknownCurrency(currency_code, available=tuple(supported()))
    return currency.denominations


def info(currency_code: str) -> Optional[Currency]:
    """Информация о валюте или None"""
    return _CURRENCIES.get(currency_code)


def supported() -> List[str]:
    """Отсортированный список поддерживаемых кодов валют"""
    return sorted(_CURRENCIES)


def default() -> str:
    """Код валюты по умолчанию"""
    return DEFAULT_CURRENCY


def resolve_denominations(options: Optional["ChangeOptions"] = None) -> Tuple[Denomination, ...]:
    """
    Разрешение списка номиналов по приоритету.

    Args:
        options: Опции расчёта (None = валюта по умолчанию)

    Returns:
        Кортеж Denomination в заданном порядке (явный список не сортируется)

    Raises:
        UnknownCurrency: Если options.currency не зарегистрирована
    """
    if options is not None:
        if options.denominations is not None:
            return tuple(options.denominations)
        if options.currency is not None:
            return denominations(options.currency)
    return denominations(DEFAULT_CURRENCY)


def all_denominations() -> Iterator[Denomination]:
    """Все номиналы всех валют (в порядке supported())"""
    for code in supported():
        yield from _CURRENCIES[code].denominations
