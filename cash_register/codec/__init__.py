"""Codec — текстовые форматы: разбивка сдачи и строки транзакций."""

from .change_parser import lookup_denomination, parse_change, singularize
from .formatter import NO_CHANGE, format_change
from .transaction_parser import Transaction, parse_amount, parse_line, parse_lines

__all__ = [
    "NO_CHANGE",
    "format_change",
    "parse_change",
    "lookup_denomination",
    "singularize",
    "Transaction",
    "parse_amount",
    "parse_line",
    "parse_lines",
]
