"""
Cash Register — расчёт сдачи по номиналам валюты.

Основной API:
- calculate(owed, paid, options) → список ChangeItem
- format_change / parse_change — текстовое представление сдачи
- transact(owed, paid, options) → TransactionResult с телеметрией
- process_transaction / process_file — обработка строк и файлов
"""

__version__ = "0.1.0"

from cash_register.calculator import calculate
from cash_register.codec import format_change, parse_amount, parse_change, parse_line, parse_lines
from cash_register.core.domain import ChangeItem, Currency, Denomination, StrategyContext
from cash_register.errors import CashRegisterError, ErrorCategory
from cash_register.options import ChangeOptions
from cash_register.processing import process_file, process_transaction, write_output
from cash_register.rules import RuleMatch, StrategySelection, default_rules, select_strategy
from cash_register.strategies import GREEDY, RANDOMIZED, ChangeStrategy
from cash_register.transactions import TransactionResult, transact

__all__ = [
    "__version__",
    # Calculation
    "calculate",
    "ChangeOptions",
    "ChangeItem",
    "Currency",
    "Denomination",
    "StrategyContext",
    # Strategies and rules
    "ChangeStrategy",
    "GREEDY",
    "RANDOMIZED",
    "RuleMatch",
    "StrategySelection",
    "default_rules",
    "select_strategy",
    # Codec
    "format_change",
    "parse_change",
    "parse_amount",
    "parse_line",
    "parse_lines",
    # Transactions and files
    "TransactionResult",
    "transact",
    "process_transaction",
    "process_file",
    "write_output",
    # Errors
    "CashRegisterError",
    "ErrorCategory",
]
