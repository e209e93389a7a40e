"""
JSON Schema Contract Validators

Модуль для валидации mapping-конфигураций форматирования (например,
загруженных приложением из своих настроек) согласно JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (contracts/schema/):
- number_format_options.json
- magnitude_options.json
"""

import json
from pathlib import Path
from typing import Any, Dict, Mapping

import jsonschema
from jsonschema import Draft202012Validator

from humanise.domain.options import MagnitudeOptions, NumberFormatOptions


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом в contracts/schema/.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'magnitude_options')

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
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Mapping[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Mapping[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Mapping[str, Any]):
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


class NumberFormatOptionsValidator(ContractValidator):
    """Валидатор для number_format_options контракта."""

    def __init__(self):
        super().__init__("number_format_options")


class MagnitudeOptionsValidator(ContractValidator):
    """Валидатор для magnitude_options контракта."""

    def __init__(self):
        super().__init__("magnitude_options")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_number_format_options(data: Mapping[str, Any]) -> None:
    """
    Валидация mapping-конфигурации локали числа.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    NumberFormatOptionsValidator().validate(data)


def validate_magnitude_options(data: Mapping[str, Any]) -> None:
    """
    Валидация mapping-конфигурации шкалы величин.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    MagnitudeOptionsValidator().validate(data)


def number_format_options_from_mapping(data: Mapping[str, Any]) -> NumberFormatOptions:
    """
    Построение NumberFormatOptions из mapping после проверки контракта.

    Args:
        data: Конфигурация, например {"decimal_point": ",", "thousands_separator": "."}

    Returns:
        Immutable NumberFormatOptions

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    payload = dict(data)
    validate_number_format_options(payload)
    return NumberFormatOptions.model_validate(payload)


def magnitude_options_from_mapping(data: Mapping[str, Any]) -> MagnitudeOptions:
    """
    Построение MagnitudeOptions из mapping после проверки контракта.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
        pydantic.ValidationError: Если пустой суффикс стоит на шаге > 0
    """
    payload = dict(data)
    validate_magnitude_options(payload)
    return MagnitudeOptions.model_validate(payload)
