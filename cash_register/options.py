"""
Опции расчёта сдачи.

Распознаваемые ключи: divisor, currency, denominations, strategy_rules,
random_seed. Остальные ключи сохраняются в extra и доступны
пользовательским правилам.
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping, Optional, Sequence

from cash_register.core.domain.currency import Denomination

if TYPE_CHECKING:
    from cash_register.rules.strategy_rules import Rule


DEFAULT_DIVISOR = 3

_KNOWN_KEYS = frozenset(
    {"divisor", "currency", "denominations", "strategy_rules", "random_seed"}
)


@dataclass(frozen=True)
class ChangeOptions:
    """Опции Calculator / стратегий / правил.

    divisor не валидируется здесь: некорректное значение превращается
    в InvalidDivisor при выполнении правила делителя.
    """

    divisor: Any = DEFAULT_DIVISOR
    currency: Optional[str] = None
    denominations: Optional[Sequence[Denomination]] = None
    strategy_rules: Optional[Sequence["Rule"]] = None
    random_seed: Optional[int] = None
    extra: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_mapping(cls, options: Optional[Mapping[str, Any]] = None) -> "ChangeOptions":
        """Построение опций из словаря; неизвестные ключи → extra."""
        options = dict(options or {})
        known = {key: options.pop(key) for key in list(options) if key in _KNOWN_KEYS}
        if known.get("denominations") is not None:
            known["denominations"] = tuple(
                d if isinstance(d, Denomination) else Denomination(**d)
                for d in known["denominations"]
            )
        if known.get("strategy_rules") is not None:
            known["strategy_rules"] = tuple(known["strategy_rules"])
        return cls(**known, extra=MappingProxyType(options))

    def get(self, key: str, default: Any = None) -> Any:
        """Чтение ключа: сначала известные поля, затем extra."""
        if key in _KNOWN_KEYS:
            value = getattr(self, key)
            return default if value is None else value
        return self.extra.get(key, default)

    def with_changes(self, **changes: Any) -> "ChangeOptions":
        return replace(self, **changes)


def coerce_options(options: Any) -> ChangeOptions:
    """None / dict / ChangeOptions → ChangeOptions."""
    if options is None:
        return ChangeOptions()
    if isinstance(options, ChangeOptions):
        return options
    if isinstance(options, Mapping):
        return ChangeOptions.from_mapping(options)
    raise TypeError(f"options must be ChangeOptions or a mapping, got {type(options).__name__}")

