"""
Telemetry — События наблюдаемости

Ядро уведомляет sink о трёх событиях:
- TransactionStarted: начало транзакции (owed, paid, currency, transaction_id)
- TransactionFinished: завершение (длительность, статус, категория ошибки)
- StrategySelected: выбор стратегии (стратегия, правило, метаданные правила)

Уведомления fire-and-forget: результат ядра не зависит от sink.
Sink по умолчанию — NullTelemetry; CLI передаёт LoguruTelemetry явно.
"""

import random
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol

from loguru import logger


STATUS_SUCCESS = "success"
STATUS_ERROR = "error"


# =============================================================================
# EVENTS
# =============================================================================


@dataclass(frozen=True)
class TransactionStarted:
    transaction_id: str
    owed: int
    paid: int
    currency: str


@dataclass(frozen=True)
class TransactionFinished:
    transaction_id: str
    owed: int
    paid: int
    currency: str
    duration_ns: int
    status: str
    error_type: Optional[str] = None
    error_reason: Optional[str] = None


@dataclass(frozen=True)
class StrategySelected:
    strategy: str
    rule: str
    owed: int
    paid: int
    change: int
    divisor: Any
    metadata: Dict[str, Any] = field(default_factory=dict)


# =============================================================================
# SINKS
# =============================================================================


class TelemetrySink(Protocol):
    """Получатель событий наблюдаемости"""

    def transaction_started(self, event: TransactionStarted) -> None: ...

    def transaction_finished(self, event: TransactionFinished) -> None: ...

    def strategy_selected(self, event: StrategySelected) -> None: ...


class NullTelemetry:
    """Sink, отбрасывающий все события."""

    def transaction_started(self, event: TransactionStarted) -> None:
        pass

    def transaction_finished(self, event: TransactionFinished) -> None:
        pass

    def strategy_selected(self, event: StrategySelected) -> None:
        pass


class LoguruTelemetry:
    """Sink, пишущий события в loguru.

    Успешные транзакции логируются с вероятностью sample_rate
    (1.0 = все, 0.0 = ни одной); ошибки логируются всегда.
    """

    def __init__(self, sample_rate: float = 1.0, rng: Optional[random.Random] = None):
        if not 0.0 <= sample_rate <= 1.0:
            raise ValueError(f"sample_rate {sample_rate} outside [0.0, 1.0]")
        self.sample_rate = sample_rate
        self._rng = rng or random.Random()

    def transaction_started(self, event: TransactionStarted) -> None:
        logger.bind(transaction_id=event.transaction_id).debug(
            "Transaction started: owed={} paid={} currency={}",
            event.owed,
            event.paid,
            event.currency,
        )

    def transaction_finished(self, event: TransactionFinished) -> None:
        log = logger.bind(transaction_id=event.transaction_id)
        duration_us = event.duration_ns // 1_000
        if event.status == STATUS_SUCCESS:
            if self._should_log_success():
                log.info(
                    "Transaction succeeded: owed={} paid={} currency={} duration_us={}",
                    event.owed,
                    event.paid,
                    event.currency,
                    duration_us,
                )
            return

        log.warning(
            "Transaction failed: owed={} paid={} currency={} error_type={} error={} duration_us={}",
            event.owed,
            event.paid,
            event.currency,
            event.error_type,
            event.error_reason,
            duration_us,
        )

    def strategy_selected(self, event: StrategySelected) -> None:
        logger.debug(
            "Strategy selected: strategy={} rule={} change={} divisor={} metadata={}",
            event.strategy,
            event.rule,
            event.change,
            event.divisor,
            event.metadata,
        )

    def _should_log_success(self) -> bool:
        if self.sample_rate >= 1.0:
            return True
        return self._rng.random() < self.sample_rate


# =============================================================================
# DISPATCH
# =============================================================================

_default_sink: TelemetrySink = NullTelemetry()


def get_default_sink() -> TelemetrySink:
    return _default_sink


def set_default_sink(sink: TelemetrySink) -> TelemetrySink:
    """Замена sink по умолчанию; возвращает предыдущий."""
    global _default_sink
    previous, _default_sink = _default_sink, sink
    return previous


def notify(sink: Optional[TelemetrySink], method: str, event: Any) -> None:
    """
    Доставка события в sink (fire-and-forget).

    Исключение sink логируется и не влияет на результат ядра.
    """
    target = sink if sink is not None else _default_sink
    try:
        getattr(target, method)(event)
    except Exception:
        logger.exception("Telemetry sink {} failed on {}", type(target).__name__, method)
