"""Общие фикстуры тестов."""

from typing import List

import pytest

from cash_register.core.domain import Denomination
from cash_register.telemetry import StrategySelected, TransactionFinished, TransactionStarted


class RecordingTelemetry:
    """Sink, сохраняющий события для проверок."""

    def __init__(self):
        self.started: List[TransactionStarted] = []
        self.finished: List[TransactionFinished] = []
        self.selected: List[StrategySelected] = []

    def transaction_started(self, event: TransactionStarted) -> None:
        self.started.append(event)

    def transaction_finished(self, event: TransactionFinished) -> None:
        self.finished.append(event)

    def strategy_selected(self, event: StrategySelected) -> None:
        self.selected.append(event)


@pytest.fixture
def telemetry():
    """Sink с записью событий."""
    return RecordingTelemetry()


@pytest.fixture
def no_penny_denominations():
    """Набор без единичного номинала: сдачу 1 выдать нельзя."""
    return (
        Denomination(id="quarter", value=25, singular="quarter", plural="quarters"),
        Denomination(id="dime", value=10, singular="dime", plural="dimes"),
        Denomination(id="nickel", value=5, singular="nickel", plural="nickels"),
    )
