"""
Тесты RegisterConfig

Покрытие:
- Значения по умолчанию
- Загрузка из переменных окружения CASH_REGISTER_*
- Ошибки валидации (ValidationError — подкласс ValueError)
- Построение ChangeOptions
"""

import pytest
from pydantic import ValidationError

from cash_register.config import RegisterConfig
from cash_register.core.domain import MAX_AMOUNT_MINOR_UNITS


ENV_NAMES = ("DEFAULT_CURRENCY", "DIVISOR", "MAX_AMOUNT", "LOG_SAMPLE_RATE", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Окружение без CASH_REGISTER_* переменных."""
    for name in ENV_NAMES:
        monkeypatch.delenv(f"CASH_REGISTER_{name}", raising=False)


def test_defaults() -> None:
    config = RegisterConfig()

    assert config.default_currency == "USD"
    assert config.divisor == 3
    assert config.max_amount == MAX_AMOUNT_MINOR_UNITS
    assert config.log_sample_rate == 1.0
    assert config.log_level == "WARNING"


def test_from_env(monkeypatch) -> None:
    monkeypatch.setenv("CASH_REGISTER_DEFAULT_CURRENCY", "eur")
    monkeypatch.setenv("CASH_REGISTER_DIVISOR", "5")
    monkeypatch.setenv("CASH_REGISTER_MAX_AMOUNT", "1000")
    monkeypatch.setenv("CASH_REGISTER_LOG_SAMPLE_RATE", "0.25")
    monkeypatch.setenv("CASH_REGISTER_LOG_LEVEL", "debug")
    monkeypatch.setenv("UNRELATED", "ignored")

    config = RegisterConfig()

    assert config.default_currency == "EUR"
    assert config.divisor == 5
    assert config.max_amount == 1000
    assert config.log_sample_rate == 0.25
    assert config.log_level == "DEBUG"


def test_empty_env_value_uses_default(monkeypatch) -> None:
    monkeypatch.setenv("CASH_REGISTER_DIVISOR", "")
    assert RegisterConfig().divisor == 3


def test_explicit_value_wins_over_env(monkeypatch) -> None:
    monkeypatch.setenv("CASH_REGISTER_DIVISOR", "7")
    assert RegisterConfig(divisor=4).divisor == 4


def test_unparseable_env_value(monkeypatch) -> None:
    monkeypatch.setenv("CASH_REGISTER_DIVISOR", "three")

    with pytest.raises(ValidationError, match="divisor"):
        RegisterConfig()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"default_currency": "XYZ"},
        {"divisor": 0},
        {"max_amount": -1},
        {"log_sample_rate": 1.5},
        {"log_sample_rate": -0.1},
        {"log_level": "LOUD"},
    ],
)
def test_invalid_values(kwargs) -> None:
    with pytest.raises(ValueError):
        RegisterConfig(**kwargs)


def test_frozen() -> None:
    config = RegisterConfig()
    with pytest.raises(ValidationError):
        config.divisor = 5


class TestToOptions:
    def test_defaults(self) -> None:
        options = RegisterConfig().to_options()

        assert options.divisor == 3
        assert options.currency == "USD"
        assert options.denominations is None

    def test_overrides(self) -> None:
        options = RegisterConfig(divisor=5).to_options(currency="GBP", random_seed=3)

        assert options.divisor == 5
        assert options.currency == "GBP"
        assert options.random_seed == 3

    def test_none_overrides_ignored(self) -> None:
        options = RegisterConfig(default_currency="EUR").to_options(divisor=None, currency=None)

        assert options.divisor == 3
        assert options.currency == "EUR"

    def test_extra_keys(self) -> None:
        options = RegisterConfig().to_options(large_threshold=500)
        assert options.get("large_threshold") == 500
