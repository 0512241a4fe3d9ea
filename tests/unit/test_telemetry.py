"""
Тесты телеметрии

Покрытие:
- LoguruTelemetry: уровни, sampling успешных транзакций, transaction_id в extra
- NullTelemetry
- Замена sink по умолчанию
"""

import random

import pytest
from loguru import logger

from cash_register.calculator import calculate
from cash_register.telemetry import (
    STATUS_ERROR,
    STATUS_SUCCESS,
    LoguruTelemetry,
    NullTelemetry,
    StrategySelected,
    TransactionFinished,
    TransactionStarted,
    get_default_sink,
    notify,
    set_default_sink,
)
from cash_register.transactions import transact


@pytest.fixture
def records():
    """Сообщения loguru, собранные в список."""
    captured = []
    handler_id = logger.add(lambda message: captured.append(message.record), level="TRACE")
    yield captured
    logger.remove(handler_id)


def finished(status: str, **kwargs) -> TransactionFinished:
    values = dict(
        transaction_id="abc",
        owed=212,
        paid=300,
        currency="USD",
        duration_ns=5_000,
        status=status,
    )
    values.update(kwargs)
    return TransactionFinished(**values)


class TestLoguruTelemetry:
    def test_started_logged_at_debug(self, records) -> None:
        LoguruTelemetry().transaction_started(TransactionStarted("abc", 212, 300, "USD"))

        assert len(records) == 1
        assert records[0]["level"].name == "DEBUG"
        assert records[0]["extra"]["transaction_id"] == "abc"

    def test_success_logged_at_info(self, records) -> None:
        LoguruTelemetry().transaction_finished(finished(STATUS_SUCCESS))

        assert [r["level"].name for r in records] == ["INFO"]

    def test_error_logged_at_warning(self, records) -> None:
        LoguruTelemetry().transaction_finished(
            finished(STATUS_ERROR, error_type="validation_error", error_reason="bad")
        )

        assert [r["level"].name for r in records] == ["WARNING"]
        assert "validation_error" in records[0]["message"]

    def test_zero_sample_rate_skips_success_only(self, records) -> None:
        sink = LoguruTelemetry(sample_rate=0.0)

        sink.transaction_finished(finished(STATUS_SUCCESS))
        sink.transaction_finished(finished(STATUS_ERROR, error_type="system_error"))

        assert [r["level"].name for r in records] == ["WARNING"]

    def test_partial_sample_rate(self, records) -> None:
        sink = LoguruTelemetry(sample_rate=0.5, rng=random.Random(0))

        for _ in range(200):
            sink.transaction_finished(finished(STATUS_SUCCESS))

        assert 0 < len(records) < 200

    @pytest.mark.parametrize("rate", [-0.1, 1.1])
    def test_invalid_sample_rate(self, rate: float) -> None:
        with pytest.raises(ValueError):
            LoguruTelemetry(sample_rate=rate)

    def test_strategy_selected(self, records) -> None:
        LoguruTelemetry().strategy_selected(
            StrategySelected("greedy", "default_fallback", 212, 300, 88, 3)
        )

        assert records[0]["level"].name == "DEBUG"
        assert "greedy" in records[0]["message"]


def test_null_telemetry_accepts_all_events() -> None:
    sink = NullTelemetry()

    sink.transaction_started(TransactionStarted("abc", 1, 2, "USD"))
    sink.transaction_finished(finished(STATUS_SUCCESS))
    sink.strategy_selected(StrategySelected("greedy", "default_fallback", 1, 2, 1, 3))


def test_notify_logs_sink_failure(records) -> None:
    class BrokenSink:
        def transaction_started(self, event):
            raise RuntimeError("boom")

    notify(BrokenSink(), "transaction_started", TransactionStarted("abc", 1, 2, "USD"))

    assert records[-1]["level"].name == "ERROR"
    assert records[-1]["exception"] is not None


def test_set_default_sink(telemetry) -> None:
    previous = set_default_sink(telemetry)
    try:
        assert get_default_sink() is telemetry
        transact(212, 300)
    finally:
        set_default_sink(previous)

    assert len(telemetry.started) == 1
    assert len(telemetry.finished) == 1
    assert get_default_sink() is previous


def test_default_sink_is_silent(records) -> None:
    """Вызов ядра без sink ничего не пишет в лог"""
    assert isinstance(get_default_sink(), NullTelemetry)

    calculate(101, 200)

    assert records == []
