"""
JSON Schema Contract Validators

Валидация внешних JSON данных (пользовательские наборы номиналов)
согласно JSON Schema контрактам из cash_register/core/contracts/schema/.
Использует библиотеку jsonschema.

Схемы:
- denomination_set.json
"""

import json
from pathlib import Path
from typing import Any, Dict, Tuple, Union

import jsonschema
from jsonschema import Draft202012Validator

from cash_register.core.domain.currency import Denomination


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Union[str, Path, None] = None):
        self._schema_dir = Path(schema_dir) if schema_dir else Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Any] = {}

    def load_schema(self, schema_name: str) -> Any:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'denomination_set')

        Returns:
            Загруженная схема

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.
    """

    def __init__(self, schema_name: str, loader: SchemaLoader = _SCHEMA_LOADER):
        self.schema_name = schema_name
        self.schema = loader.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any):
        return self.validator.iter_errors(data)


class DenominationSetValidator(ContractValidator):
    """Валидатор для denomination_set контракта."""

    def __init__(self):
        super().__init__("denomination_set")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_denomination_set(data: Any) -> None:
    """
    Валидация набора номиналов.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    DenominationSetValidator().validate(data)


def load_denomination_set(path: Union[str, Path]) -> Tuple[Denomination, ...]:
    """
    Загрузка и валидация набора номиналов из JSON файла.

    Порядок номиналов сохраняется: это порядок обхода стратегиями.

    Args:
        path: Путь к JSON файлу

    Returns:
        Кортеж Denomination

    Raises:
        OSError: Если файл не читается
        json.JSONDecodeError: Если файл не является валидным JSON
        ValidationError: Если данные не соответствуют схеме
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    validate_denomination_set(data)
    return tuple(Denomination(**item) for item in data)
