"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- liquidation_request.json (вход LiquidationEngine)
- max_liquidable_result.json (результат calc_max_liquidable_value)

Контракты проверяют структуру и знаки; диапазоны процентов дублируются
здесь для раннего отказа, но источником истины остаются формулы
(DomainError).
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
        # Корень проекта: 4 уровня вверх от этого файла
        self._schema_dir = Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'liquidation_request')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


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
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        return self.validator.iter_errors(data)


class LiquidationRequestValidator(ContractValidator):
    """Валидатор для liquidation_request контракта."""

    def __init__(self):
        super().__init__("liquidation_request")


class MaxLiquidableResultValidator(ContractValidator):
    """Валидатор для max_liquidable_result контракта."""

    def __init__(self):
        super().__init__("max_liquidable_result")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_liquidation_request(data: Dict[str, Any]) -> None:
    """
    Валидация liquidation_request данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    LiquidationRequestValidator().validate(data)


def validate_max_liquidable_result(data: Dict[str, Any]) -> None:
    """
    Валидация max_liquidable_result данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    MaxLiquidableResultValidator().validate(data)
