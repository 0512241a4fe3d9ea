"""
Тесты transact (оркестрация транзакции)

Покрытие:
- Успех и ошибка в TransactionResult
- События TransactionStarted / TransactionFinished
- Категории ошибок в error_type
- Неисправный sink не влияет на результат
"""

import pytest

from cash_register.errors import (
    CannotMakeExactChange,
    InsufficientPayment,
    InvalidDivisor,
    UnknownCurrency,
)
from cash_register.options import ChangeOptions
from cash_register.telemetry import STATUS_ERROR, STATUS_SUCCESS
from cash_register.transactions import TransactionResult, generate_transaction_id, transact


# =============================================================================
# РЕЗУЛЬТАТ
# =============================================================================


def test_success_result(telemetry) -> None:
    result = transact(212, 300, telemetry=telemetry)

    assert isinstance(result, TransactionResult)
    assert result.ok
    assert result.formatted == "3 quarters,1 dime,3 pennies"
    assert result.error is None
    assert result.currency == "USD"
    assert result.duration_ns >= 0
    assert result.unwrap() == "3 quarters,1 dime,3 pennies"


def test_exact_payment(telemetry) -> None:
    result = transact(100, 100, telemetry=telemetry)
    assert result.formatted == "no change"


def test_error_result(telemetry) -> None:
    result = transact(300, 200, telemetry=telemetry)

    assert not result.ok
    assert result.formatted is None
    assert isinstance(result.error, InsufficientPayment)
    with pytest.raises(InsufficientPayment):
        result.unwrap()


def test_currency_from_options(telemetry) -> None:
    result = transact(0, 100, {"currency": "EUR"}, telemetry)

    assert result.currency == "EUR"
    assert result.formatted == "1 euro"


def test_transaction_ids_unique() -> None:
    ids = {generate_transaction_id() for _ in range(100)}

    assert len(ids) == 100
    assert all(len(i) == 16 for i in ids)


# =============================================================================
# СОБЫТИЯ
# =============================================================================


def test_events_on_success(telemetry) -> None:
    result = transact(212, 300, telemetry=telemetry)

    assert len(telemetry.started) == 1
    assert len(telemetry.finished) == 1
    assert len(telemetry.selected) == 1

    started = telemetry.started[0]
    finished = telemetry.finished[0]
    assert started.transaction_id == finished.transaction_id == result.transaction_id
    assert (started.owed, started.paid, started.currency) == (212, 300, "USD")
    assert finished.status == STATUS_SUCCESS
    assert finished.error_type is None
    assert finished.error_reason is None
    assert finished.duration_ns == result.duration_ns


@pytest.mark.parametrize(
    "owed,paid,options,error_type",
    [
        (300, 200, None, "validation_error"),
        (100, 200, {"divisor": 0}, "validation_error"),
        (100, 201, {"currency": "XYZ"}, "currency_error"),
        (0, 1, {"denominations": [{"id": "nickel", "value": 5, "singular": "nickel", "plural": "nickels"}]}, "system_error"),
    ],
)
def test_error_type_category(telemetry, owed, paid, options, error_type) -> None:
    result = transact(owed, paid, options, telemetry)

    finished = telemetry.finished[0]
    assert finished.status == STATUS_ERROR
    assert finished.error_type == error_type
    assert finished.error_reason == str(result.error)


def test_error_variants() -> None:
    assert isinstance(transact(100, 200, ChangeOptions(divisor=0)).error, InvalidDivisor)
    assert isinstance(transact(100, 201, ChangeOptions(currency="XYZ")).error, UnknownCurrency)


def test_no_strategy_event_on_validation_error(telemetry) -> None:
    transact(300, 200, telemetry=telemetry)
    assert telemetry.selected == []


def test_failing_sink_does_not_break_transaction() -> None:
    class BrokenSink:
        def transaction_started(self, event):
            raise RuntimeError("boom")

        def transaction_finished(self, event):
            raise RuntimeError("boom")

        def strategy_selected(self, event):
            raise RuntimeError("boom")

    result = transact(212, 300, telemetry=BrokenSink())

    assert result.ok
    assert result.formatted == "3 quarters,1 dime,3 pennies"


def test_cannot_make_exact_change_result(no_penny_denominations) -> None:
    result = transact(0, 1, ChangeOptions(denominations=no_penny_denominations))

    assert isinstance(result.error, CannotMakeExactChange)
    assert result.error.remaining == 1
