"""
Тесты Calculator

Покрытие:
- Граничные случаи: точная оплата, недостаточная оплата, отрицательные суммы
- Сквозные примеры (USD, EUR)
- Сохранение суммы для обеих стратегий
- Распространение ошибок правил и стратегий
"""

import pytest

from cash_register import calculate, format_change
from cash_register.core.domain import denominations, total_value
from cash_register.errors import (
    CannotMakeExactChange,
    InsufficientPayment,
    InvalidDivisor,
    NegativeAmount,
    UnknownCurrency,
)
from cash_register.options import ChangeOptions


# =============================================================================
# ГРАНИЧНЫЕ СЛУЧАИ
# =============================================================================


def test_exact_payment_returns_empty(telemetry):
    """owed == paid → [] без обращения к правилам"""
    assert calculate(100, 100, telemetry=telemetry) == []
    assert telemetry.selected == []


def test_exact_payment_skips_divisor_validation():
    assert calculate(100, 100, ChangeOptions(divisor=0)) == []


def test_insufficient_payment():
    with pytest.raises(InsufficientPayment) as exc_info:
        calculate(300, 200)

    assert exc_info.value.owed == 300
    assert exc_info.value.paid == 200
    assert str(exc_info.value) == "insufficient payment: paid 200 cents < owed 300 cents"


@pytest.mark.parametrize("owed,paid", [(-1, 5), (5, -1), (-3, -2)])
def test_negative_amount(owed, paid):
    with pytest.raises(NegativeAmount) as exc_info:
        calculate(owed, paid)

    assert exc_info.value.details == {"owed": owed, "paid": paid}


def test_negative_checked_before_insufficient():
    """Порядок проверок: отрицательные суммы раньше недостаточной оплаты"""
    with pytest.raises(NegativeAmount):
        calculate(10, -1)


def test_float_amounts_rejected():
    with pytest.raises(TypeError):
        calculate(2.12, 3.00)


# =============================================================================
# СКВОЗНЫЕ ПРИМЕРЫ
# =============================================================================


def test_usd_greedy_example():
    """212 / 300 → 88 → Greedy → '3 quarters,1 dime,3 pennies'"""
    result = calculate(212, 300)

    assert [(i.denomination_id, i.count) for i in result] == [
        ("quarter", 3),
        ("dime", 1),
        ("penny", 3),
    ]
    assert format_change(result) == "3 quarters,1 dime,3 pennies"


def test_eur_example():
    """0 / 100 EUR → '1 euro'"""
    assert format_change(calculate(0, 100, ChangeOptions(currency="EUR"))) == "1 euro"


def test_options_as_mapping():
    assert format_change(calculate(0, 100, {"currency": "EUR"})) == "1 euro"


def test_cannot_make_exact_change(no_penny_denominations):
    with pytest.raises(CannotMakeExactChange) as exc_info:
        calculate(0, 1, ChangeOptions(denominations=no_penny_denominations))

    assert exc_info.value.remaining == 1
    assert exc_info.value.change == 1


def test_invalid_divisor_propagates():
    with pytest.raises(InvalidDivisor):
        calculate(100, 200, ChangeOptions(divisor=-1))


def test_unknown_currency_propagates():
    with pytest.raises(UnknownCurrency):
        calculate(100, 201, ChangeOptions(currency="XYZ"))


def test_randomized_selected_for_divisible_change(telemetry):
    """Сдача 99 делится на 3 → Randomized, сумма сохраняется"""
    result = calculate(101, 200, telemetry=telemetry)

    assert telemetry.selected[0].strategy == "randomized"
    assert total_value(result) == 99


def test_seeded_calculation_is_reproducible():
    options = ChangeOptions(random_seed=17)
    assert calculate(1, 100, options) == calculate(1, 100, options)


# =============================================================================
# ИНВАРИАНТ СОХРАНЕНИЯ СУММЫ
# =============================================================================


@pytest.mark.parametrize("currency", ["USD", "EUR", "GBP"])
def test_total_conservation(currency):
    """Σ value × count == paid - owed для любых корректных сумм"""
    for owed in range(0, 400, 7):
        for paid in (owed, owed + 1, owed + 3, owed + 88, owed + 250, owed + 999):
            options = ChangeOptions(currency=currency, random_seed=owed)
            result = calculate(owed, paid, options)
            assert total_value(result, denominations(currency)) == paid - owed
