"""
Конфигурация кассы (pydantic-settings).

Значения по умолчанию заданы в коде; переопределяются переменными
окружения CASH_REGISTER_* (например, CASH_REGISTER_DIVISOR=5).
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cash_register.core.domain.currency import DEFAULT_CURRENCY, supported
from cash_register.core.domain.money import MAX_AMOUNT_MINOR_UNITS
from cash_register.options import DEFAULT_DIVISOR, ChangeOptions


ENV_PREFIX = "CASH_REGISTER_"

_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


# =============================================================================
# CONFIG
# =============================================================================


class RegisterConfig(BaseSettings):
    """Конфигурация кассы.

    Ошибка значения (в том числе из окружения) — pydantic ValidationError,
    подкласс ValueError.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    default_currency: str = Field(
        default=DEFAULT_CURRENCY, description="Валюта, если не указана явно"
    )
    divisor: int = Field(
        default=DEFAULT_DIVISOR, gt=0, description="Делитель правила выбора стратегии"
    )
    max_amount: int = Field(
        default=MAX_AMOUNT_MINOR_UNITS,
        gt=0,
        description="Верхний предел входной суммы (минимальные единицы)",
    )
    log_sample_rate: float = Field(
        default=1.0, ge=0.0, le=1.0, description="Доля успешных транзакций в логе"
    )
    log_level: str = Field(default="WARNING", description="Уровень логирования loguru для CLI")

    @field_validator("default_currency", mode="before")
    @classmethod
    def validate_currency(cls, v):
        code = str(v).strip().upper()
        if code not in supported():
            raise ValueError(f"currency {code!r} is not supported ({', '.join(supported())})")
        return code

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v):
        level = str(v).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"{level!r} is not a loguru level")
        return level

    def to_options(self, **overrides) -> ChangeOptions:
        """Опции расчёта с учётом конфигурации; overrides со значением None игнорируются."""
        values = {"divisor": self.divisor, "currency": self.default_currency}
        values.update({key: value for key, value in overrides.items() if value is not None})
        return ChangeOptions.from_mapping(values)
