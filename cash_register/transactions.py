"""
Transactions — Оркестрация транзакции и наблюдаемость

Полный цикл транзакции: расчёт, форматирование, события телеметрии.
Ошибки ядра не выбрасываются наружу, а возвращаются в TransactionResult.

События:
- TransactionStarted перед расчётом
- TransactionFinished после расчёта (длительность, статус, категория ошибки)
"""

import secrets
import time
from dataclasses import dataclass
from typing import Any, Optional

from cash_register.calculator import calculate
from cash_register.codec.formatter import format_change
from cash_register.core.domain.currency import DEFAULT_CURRENCY
from cash_register.errors import CashRegisterError
from cash_register.options import coerce_options
from cash_register.telemetry import (
    STATUS_ERROR,
    STATUS_SUCCESS,
    TelemetrySink,
    TransactionFinished,
    TransactionStarted,
    notify,
)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class TransactionResult:
    """Результат транзакции."""

    transaction_id: str
    owed: int
    paid: int
    currency: str

    # Ровно одно из двух заполнено
    formatted: Optional[str]
    error: Optional[CashRegisterError]

    duration_ns: int

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        """Отформатированная сдача или исходная ошибка."""
        if self.error is not None:
            raise self.error
        return self.formatted  # type: ignore[return-value]


def generate_transaction_id() -> str:
    """Уникальный идентификатор транзакции (16 hex символов)."""
    return secrets.token_hex(8)


# =============================================================================
# TRANSACT
# =============================================================================


def transact(
    owed: int,
    paid: int,
    options: Any = None,
    telemetry: Optional[TelemetrySink] = None,
) -> TransactionResult:
    """
    Обработка транзакции: owed/paid → отформатированная сдача.

    Args:
        owed: Сумма к оплате (минимальные единицы)
        paid: Оплаченная сумма (минимальные единицы)
        options: ChangeOptions или словарь опций
        telemetry: Sink событий (default: глобальный)

    Returns:
        TransactionResult (ok=False при ошибке ядра)
    """
    change_options = coerce_options(options)
    transaction_id = generate_transaction_id()
    currency = change_options.currency or DEFAULT_CURRENCY

    notify(
        telemetry,
        "transaction_started",
        TransactionStarted(transaction_id=transaction_id, owed=owed, paid=paid, currency=currency),
    )

    start_ns = time.perf_counter_ns()
    formatted: Optional[str] = None
    error: Optional[CashRegisterError] = None
    try:
        formatted = format_change(calculate(owed, paid, change_options, telemetry))
    except CashRegisterError as e:
        error = e
    duration_ns = time.perf_counter_ns() - start_ns

    notify(
        telemetry,
        "transaction_finished",
        TransactionFinished(
            transaction_id=transaction_id,
            owed=owed,
            paid=paid,
            currency=currency,
            duration_ns=duration_ns,
            status=STATUS_SUCCESS if error is None else STATUS_ERROR,
            error_type=None if error is None else error.category.value,
            error_reason=None if error is None else str(error),
        ),
    )

    return TransactionResult(
        transaction_id=transaction_id,
        owed=owed,
        paid=paid,
        currency=currency,
        formatted=formatted,
        error=error,
        duration_ns=duration_ns,
    )
