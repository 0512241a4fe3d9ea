"""
Errors — Таксономия ошибок кассы

Все ошибки ядра — восстанавливаемые исключения с контекстом (details).
Ядро никогда не знает о кодах выхода: их назначает CLI.

Категории:
- VALIDATION: некорректный ввод (суммы, строки, делитель, формат сдачи)
- CURRENCY: неизвестная валюта
- SYSTEM: невозможность выдать точную сдачу, ошибки файлов
"""

from enum import Enum
from typing import Any, Dict


# =============================================================================
# КАТЕГОРИИ
# =============================================================================


class ErrorCategory(str, Enum):
    """Категория ошибки (для телеметрии и CLI)"""

    VALIDATION = "validation_error"
    CURRENCY = "currency_error"
    SYSTEM = "system_error"


# =============================================================================
# БАЗОВЫЙ КЛАСС
# =============================================================================


class CashRegisterError(Exception):
    """
    Базовая ошибка кассы.

    Attributes:
        code: Машинное имя варианта (например, 'insufficient_payment')
        category: Категория ошибки
        details: Структурированный контекст ошибки
    """

    code: str = "cash_register_error"
    category: ErrorCategory = ErrorCategory.SYSTEM

    def __init__(self, message: str, **details: Any):
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = details

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.details!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.details == other.details

    def __hash__(self) -> int:
        # Только ключи details: значения бывают нехешируемыми
        return hash((type(self).__name__, tuple(sorted(self.details))))


# =============================================================================
# VALIDATION
# =============================================================================


class NegativeAmount(CashRegisterError):
    code = "negative_amount"
    category = ErrorCategory.VALIDATION

    def __init__(self, owed: int, paid: int):
        super().__init__(
            f"amounts must be non-negative: owed={owed}, paid={paid}",
            owed=owed,
            paid=paid,
        )
        self.owed = owed
        self.paid = paid


class InsufficientPayment(CashRegisterError):
    code = "insufficient_payment"
    category = ErrorCategory.VALIDATION

    def __init__(self, owed: int, paid: int):
        super().__init__(
            f"insufficient payment: paid {paid} cents < owed {owed} cents",
            owed=owed,
            paid=paid,
        )
        self.owed = owed
        self.paid = paid


class InvalidLineFormat(CashRegisterError):
    code = "invalid_line_format"
    category = ErrorCategory.VALIDATION

    def __init__(self, line: str):
        super().__init__(f"invalid line format: {line}", line=line)
        self.line = line


class InvalidAmountFormat(CashRegisterError):
    code = "invalid_amount_format"
    category = ErrorCategory.VALIDATION

    def __init__(self, amount: str, reason: str):
        super().__init__(
            f"invalid amount format: {amount!r} ({reason})",
            amount=amount,
            reason=reason,
        )
        self.amount = amount
        self.reason = reason


class InvalidDivisor(CashRegisterError):
    code = "invalid_divisor"
    category = ErrorCategory.VALIDATION

    def __init__(self, divisor: Any):
        super().__init__(
            f"divisor must be a positive integer, got: {divisor!r}",
            divisor=divisor,
        )
        self.divisor = divisor


class InvalidChangeFormat(CashRegisterError):
    code = "invalid_change_format"
    category = ErrorCategory.VALIDATION

    def __init__(self, text: str, reason: str):
        super().__init__(
            f"invalid change format: {text} ({reason})",
            text=text,
            reason=reason,
        )
        self.text = text
        self.reason = reason


class UnknownDenomination(CashRegisterError):
    code = "unknown_denomination"
    category = ErrorCategory.VALIDATION

    def __init__(self, name: str):
        super().__init__(f"unknown denomination: {name!r}", name=name)
        self.name = name


# =============================================================================
# CURRENCY
# =============================================================================


class UnknownCurrency(CashRegisterError):
    code = "unknown_currency"
    category = ErrorCategory.CURRENCY

    def __init__(self, currency: str, available: tuple = ()):
        message = f"unknown currency code: {currency!r}"
        if available:
            message += f". Available currencies: {', '.join(available)}"
        super().__init__(message, currency=currency)
        self.currency = currency


# =============================================================================
# SYSTEM
# =============================================================================


class CannotMakeExactChange(CashRegisterError):
    code = "cannot_make_exact_change"
    category = ErrorCategory.SYSTEM

    def __init__(self, remaining: int, change: int):
        super().__init__(
            f"cannot make exact change for {change} cents: "
            f"{remaining} cents remaining with available denominations",
            remaining=remaining,
            change=change,
        )
        self.remaining = remaining
        self.change = change


class FileReadError(CashRegisterError):
    code = "file_read_error"
    category = ErrorCategory.SYSTEM

    def __init__(self, path: str, reason: str):
        super().__init__(f"cannot read file {path}: {reason}", path=path, reason=reason)
        self.path = path
        self.reason = reason


class FileWriteError(CashRegisterError):
    code = "file_write_error"
    category = ErrorCategory.SYSTEM

    def __init__(self, path: str, reason: str):
        super().__init__(f"cannot write file {path}: {reason}", path=path, reason=reason)
        self.path = path
        self.reason = reason
