"""
Contract Validation Module

Валидация внешних JSON контрактов кассы.
"""

from .validators import (
    ContractValidator,
    DenominationSetValidator,
    SchemaLoader,
    load_denomination_set,
    validate_denomination_set,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DenominationSetValidator",
    # Functions
    "validate_denomination_set",
    "load_denomination_set",
]
