"""
Command-line interface for Cash Register.

Usage:

    cash-register INPUT_FILE OUTPUT_FILE [OPTIONS]

INPUT_FILE содержит по строке 'owed,paid' на транзакцию; OUTPUT_FILE
получает по строке сдачи на транзакцию. Любая ошибка → код выхода 1.
"""

import json
import sys
from pathlib import Path
from typing import Callable, Dict, NoReturn, Optional, Type

import typer
from jsonschema import ValidationError
from loguru import logger

from cash_register import __version__
from cash_register.config import RegisterConfig
from cash_register.core.contracts import load_denomination_set
from cash_register.core.domain import currency as currency_registry
from cash_register.core.domain.money import format_minor_units
from cash_register.errors import (
    CannotMakeExactChange,
    CashRegisterError,
    FileReadError,
    FileWriteError,
    InsufficientPayment,
    InvalidAmountFormat,
    InvalidChangeFormat,
    InvalidDivisor,
    InvalidLineFormat,
    NegativeAmount,
    UnknownCurrency,
    UnknownDenomination,
)
from cash_register.processing import process_file_and_output
from cash_register.telemetry import LoguruTelemetry


EXIT_OK = 0
EXIT_FAILURE = 1

app = typer.Typer(add_completion=False, help="Calculate change for a file of transactions.")


# =============================================================================
# СООБЩЕНИЯ ОБ ОШИБКАХ
# =============================================================================

_ERROR_MESSAGES: Dict[Type[CashRegisterError], Callable[..., str]] = {
    FileReadError: lambda e: f"Cannot read file '{e.path}': {e.reason}",
    FileWriteError: lambda e: f"Cannot write file '{e.path}': {e.reason}",
    NegativeAmount: lambda e: (
        f"Invalid amounts: owed={e.owed}, paid={e.paid} (amounts must be non-negative)"
    ),
    InsufficientPayment: lambda e: (
        f"Insufficient payment: owed={format_minor_units(e.owed)}, "
        f"paid={format_minor_units(e.paid)}"
    ),
    InvalidLineFormat: lambda e: f"Invalid line format: '{e.line}'",
    InvalidAmountFormat: lambda e: f"Invalid amount '{e.amount}': {e.reason}",
    InvalidDivisor: lambda e: f"Invalid divisor: {e.divisor!r} (must be a positive integer)",
    UnknownCurrency: lambda e: (
        f"Unknown currency: '{e.currency}' "
        f"(supported: {', '.join(currency_registry.supported())})"
    ),
    CannotMakeExactChange: lambda e: (
        f"Cannot make exact change for {e.change} cents "
        f"({e.remaining} cents remaining with available denominations)"
    ),
    InvalidChangeFormat: lambda e: f"Invalid change format: '{e.text}' ({e.reason})",
    UnknownDenomination: lambda e: f"Unknown denomination: '{e.name}'",
}


def format_error(error: Exception) -> str:
    """Сообщение для пользователя по варианту ошибки."""
    render = _ERROR_MESSAGES.get(type(error))
    if render is not None:
        return render(error)
    if isinstance(error, CashRegisterError):
        return str(error)
    return f"Unexpected error: {error!r}"


# =============================================================================
# LOGGING
# =============================================================================


def configure_logging(level: str) -> None:
    """Вывод loguru в stderr с заданным уровнем."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[transaction_id]} | {message}",
    )
    logger.configure(extra={"transaction_id": "-"})


def _fail(message: str) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=EXIT_FAILURE)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"Cash Register v{__version__}")
        raise typer.Exit(code=EXIT_OK)


# =============================================================================
# COMMAND
# =============================================================================


@app.command()
def main(
    input_file: Path = typer.Argument(..., help="File with comma-separated owed,paid amounts"),
    output_file: Path = typer.Argument(..., help="File to write formatted change to"),
    divisor: Optional[int] = typer.Option(
        None, "--divisor", "-d", help="Divisor for strategy selection (default: 3)"
    ),
    currency: Optional[str] = typer.Option(
        None, "--currency", "-c", help="Currency code: USD, EUR, GBP (default: USD)"
    ),
    denominations: Optional[Path] = typer.Option(
        None, "--denominations", help="JSON file with a custom denomination set"
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", help="Random seed for reproducible randomized change"
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Log level (default: CASH_REGISTER_LOG_LEVEL or WARNING)"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Show version information",
    ),
) -> None:
    """Calculate change for every transaction in INPUT_FILE and write it to OUTPUT_FILE."""
    try:
        config = RegisterConfig()
    except ValueError as e:
        _fail(f"Invalid configuration: {e}")

    try:
        configure_logging(log_level or config.log_level)
    except ValueError as e:
        _fail(f"Invalid log level: {e}")

    custom_denominations = None
    if denominations is not None:
        try:
            custom_denominations = load_denomination_set(denominations)
        except (OSError, json.JSONDecodeError) as e:
            _fail(f"Cannot load denominations from '{denominations}': {e}")
        except ValidationError as e:
            _fail(f"Invalid denominations in '{denominations}': {e.message}")

    try:
        if currency is not None:
            currency = currency.upper()
            currency_registry.denominations(currency)

        options = config.to_options(
            divisor=divisor,
            currency=currency,
            denominations=custom_denominations,
            random_seed=seed,
        )
        telemetry = LoguruTelemetry(sample_rate=config.log_sample_rate)
        lines = process_file_and_output(
            input_file, output_file, options, telemetry, max_amount=config.max_amount
        )
    except CashRegisterError as e:
        logger.debug("Processing failed: {!r}", e)
        _fail(format_error(e))

    logger.debug("Wrote {} line(s) to {}", len(lines), output_file)
    typer.echo("Success: Change calculated and written to output file")


if __name__ == "__main__":
    app()
