"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных конфигураций
- Детекция нарушений типов и constraints (maxLength/minimum/minItems)
- Детекция лишних полей
- Интеграция с Pydantic моделями
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError
from pydantic import ValidationError as PydanticValidationError

from humanise.contracts import (
    MagnitudeOptionsValidator,
    NumberFormatOptionsValidator,
    SchemaLoader,
    magnitude_options_from_mapping,
    number_format_options_from_mapping,
    validate_magnitude_options,
    validate_number_format_options,
)
from humanise.domain import FILE_SIZE_UNITS, MagnitudeOptions, NumberFormatOptions


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_number_options():
    """Валидная локаль числа (немецкая)."""
    return {"decimals": 1, "decimal_point": ",", "thousands_separator": "."}


@pytest.fixture
def valid_magnitude_options():
    """Валидная шкала размеров файлов."""
    return {
        "units": list(FILE_SIZE_UNITS),
        "base": 1024,
        "decimals": 1,
        "suffix_separator": " ",
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты для SchemaLoader"""

    @pytest.mark.parametrize("schema_name", ["number_format_options", "magnitude_options"])
    def test_bundled_schemas_load(self, schema_name: str) -> None:
        """Поставляемые схемы загружаются и проходят meta-validation"""
        schema = SchemaLoader().load_schema(schema_name)
        assert schema["type"] == "object"
        assert schema["additionalProperties"] is False

    def test_schema_cached(self) -> None:
        """Повторная загрузка возвращает тот же объект"""
        loader = SchemaLoader()
        assert loader.load_schema("magnitude_options") is loader.load_schema("magnitude_options")

    def test_missing_schema_raises(self) -> None:
        """Несуществующая схема — FileNotFoundError"""
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        """Несуществующая директория — RuntimeError"""
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "missing")

    def test_invalid_schema_raises(self, tmp_path: Path) -> None:
        """Невалидная JSON Schema — ValueError"""
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# NUMBER FORMAT OPTIONS CONTRACT
# =============================================================================


class TestNumberFormatOptionsContract:
    """Тесты контракта number_format_options"""

    def test_valid_mapping(self, valid_number_options) -> None:
        """Валидная конфигурация проходит"""
        validate_number_format_options(valid_number_options)
        assert NumberFormatOptionsValidator().is_valid(valid_number_options)

    def test_empty_mapping_valid(self) -> None:
        """Все поля необязательны"""
        validate_number_format_options({})

    def test_negative_decimals_valid(self) -> None:
        """Отрицательный decimals допустим (нормализуется моделью)"""
        validate_number_format_options({"decimals": -2})

    def test_unknown_field_rejected(self, valid_number_options) -> None:
        """Лишнее поле — ошибка"""
        with pytest.raises(ValidationError):
            validate_number_format_options({**valid_number_options, "base": 1000})

    def test_decimals_type_rejected(self) -> None:
        """decimals должен быть integer"""
        with pytest.raises(ValidationError):
            validate_number_format_options({"decimals": "2"})
        with pytest.raises(ValidationError):
            validate_number_format_options({"decimals": True})

    def test_separator_too_long_rejected(self) -> None:
        """Разделитель длиннее 3 символов — ошибка"""
        with pytest.raises(ValidationError):
            validate_number_format_options({"thousands_separator": "----"})

    def test_iter_errors_reports_all(self) -> None:
        """iter_errors возвращает все нарушения"""
        errors = list(
            NumberFormatOptionsValidator().iter_errors(
                {"decimals": "x", "decimal_point": 1, "extra": True}
            )
        )
        assert len(errors) == 3

    def test_from_mapping(self, valid_number_options) -> None:
        """Построение модели из mapping"""
        opts = number_format_options_from_mapping(valid_number_options)
        assert opts == NumberFormatOptions(decimals=1, decimal_point=",", thousands_separator=".")

    def test_from_mapping_normalizes_decimals(self) -> None:
        """Отрицательный decimals нормализуется моделью"""
        assert number_format_options_from_mapping({"decimals": -3}).decimals == 3

    def test_from_mapping_invalid_raises(self) -> None:
        """Невалидная конфигурация не превращается в модель"""
        with pytest.raises(ValidationError):
            number_format_options_from_mapping({"decimal_point": 5})


# =============================================================================
# MAGNITUDE OPTIONS CONTRACT
# =============================================================================


class TestMagnitudeOptionsContract:
    """Тесты контракта magnitude_options"""

    def test_valid_mapping(self, valid_magnitude_options) -> None:
        """Валидная конфигурация проходит"""
        validate_magnitude_options(valid_magnitude_options)
        assert MagnitudeOptionsValidator().is_valid(valid_magnitude_options)

    def test_base_below_two_rejected(self, valid_magnitude_options) -> None:
        """base < 2 — ошибка"""
        with pytest.raises(ValidationError):
            validate_magnitude_options({**valid_magnitude_options, "base": 1})

    def test_empty_units_rejected(self, valid_magnitude_options) -> None:
        """Пустая таблица единиц — ошибка"""
        with pytest.raises(ValidationError):
            validate_magnitude_options({**valid_magnitude_options, "units": []})

    def test_non_string_unit_rejected(self, valid_magnitude_options) -> None:
        """Единица должна быть строкой"""
        with pytest.raises(ValidationError):
            validate_magnitude_options({**valid_magnitude_options, "units": ["", 1]})

    def test_from_mapping(self, valid_magnitude_options) -> None:
        """Построение модели из mapping"""
        opts = magnitude_options_from_mapping(valid_magnitude_options)
        assert isinstance(opts, MagnitudeOptions)
        assert opts.units == FILE_SIZE_UNITS
        assert opts.base == 1024
        assert opts.suffix_separator == " "

    def test_from_mapping_model_rules_apply(self) -> None:
        """Правила модели проверяются после контракта"""
        with pytest.raises(PydanticValidationError):
            magnitude_options_from_mapping({"units": ["", ""]})
