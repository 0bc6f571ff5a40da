"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- big_integer.json     (сериализованная модель BigInteger: sign + magnitude)
- bitwise_request.json (запрос побитовой операции)
- bitwise_result.json  (результат побитовой операции)
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Автоматически находит схемы в contracts/schema/ относительно корня проекта.
    """

    def __init__(self):
        # Определяем корень проекта (4 уровня вверх от этого файла)
        self._schema_dir = Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'big_integer')

        Returns:
            Загруженная схема как dict

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
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

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

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        """
        Args:
            schema_name: Имя схемы для валидации
        """
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации (jsonschema.ValidationError)."""
        return self.validator.iter_errors(data)


class BigIntegerValidator(ContractValidator):
    """Валидатор для big_integer контракта."""

    def __init__(self):
        super().__init__("big_integer")


class BitwiseRequestValidator(ContractValidator):
    """Валидатор для bitwise_request контракта."""

    def __init__(self):
        super().__init__("bitwise_request")


class BitwiseResultValidator(ContractValidator):
    """Валидатор для bitwise_result контракта."""

    def __init__(self):
        super().__init__("bitwise_result")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_big_integer(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованного BigInteger (model_dump(mode="json")).

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    BigIntegerValidator().validate(data)


def validate_bitwise_request(data: Dict[str, Any]) -> None:
    """
    Валидация запроса побитовой операции.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    BitwiseRequestValidator().validate(data)


def validate_bitwise_result(data: Dict[str, Any]) -> None:
    """
    Валидация результата побитовой операции.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    BitwiseResultValidator().validate(data)
