"""
Processing — Обработка транзакций из текста и файлов

Файл: по одной транзакции на строку ('2.12,3.00' или '2,12,3,00'),
пустые строки пропускаются. Результат: по одной строке сдачи на транзакцию.
"""

from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

from cash_register.calculator import calculate
from cash_register.codec.formatter import format_change
from cash_register.codec.transaction_parser import parse_lines
from cash_register.core.domain.money import MAX_AMOUNT_MINOR_UNITS
from cash_register.errors import FileReadError, FileWriteError
from cash_register.telemetry import TelemetrySink
from cash_register.transactions import TransactionResult, transact


PathLike = Union[str, Path]


def process_transaction(owed: int, paid: int, options: Any = None) -> str:
    """
    Одна транзакция → отформатированная сдача.

    Raises:
        CashRegisterError: Любая ошибка ядра
    """
    return format_change(calculate(owed, paid, options))


def process_lines(
    content: str,
    options: Any = None,
    telemetry: Optional[TelemetrySink] = None,
    max_amount: int = MAX_AMOUNT_MINOR_UNITS,
) -> List[TransactionResult]:
    """
    Разбор и обработка всех строк.

    Raises:
        InvalidLineFormat, InvalidAmountFormat: Первая ошибка разбора
    """
    return [
        transact(owed, paid, options, telemetry)
        for owed, paid in parse_lines(content, max_amount)
    ]


def read_input(path: PathLike) -> str:
    """
    Raises:
        FileReadError: Если файл не читается
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise FileReadError(str(path), "no such file or directory") from e
    except PermissionError as e:
        raise FileReadError(str(path), "permission denied") from e
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(str(path), str(e)) from e


def process_file(
    path: PathLike,
    options: Any = None,
    telemetry: Optional[TelemetrySink] = None,
    max_amount: int = MAX_AMOUNT_MINOR_UNITS,
) -> List[str]:
    """
    Обработка файла транзакций.

    Все транзакции обрабатываются; если хотя бы одна завершилась ошибкой,
    выбрасывается первая ошибка.

    Returns:
        Отформатированная сдача по каждой строке

    Raises:
        FileReadError: Если файл не читается
        CashRegisterError: Первая ошибка разбора или расчёта
    """
    results = process_lines(read_input(path), options, telemetry, max_amount)
    for result in results:
        if not result.ok:
            raise result.error  # type: ignore[misc]
    return [result.formatted for result in results]  # type: ignore[misc]


def write_output(path: PathLike, lines: Iterable[str]) -> None:
    """
    Запись результатов: по строке на транзакцию.

    Raises:
        FileWriteError: Если файл не записывается
    """
    content = "\n".join(lines)
    if content:
        content += "\n"
    try:
        Path(path).write_text(content, encoding="utf-8")
    except PermissionError as e:
        raise FileWriteError(str(path), "permission denied") from e
    except OSError as e:
        raise FileWriteError(str(path), e.strerror or str(e)) from e


def process_file_and_output(
    input_path: PathLike,
    output_path: PathLike,
    options: Any = None,
    telemetry: Optional[TelemetrySink] = None,
    max_amount: int = MAX_AMOUNT_MINOR_UNITS,
) -> List[str]:
    """Обработка входного файла и запись результата в выходной."""
    lines = process_file(input_path, options, telemetry, max_amount)
    write_output(output_path, lines)
    return lines
