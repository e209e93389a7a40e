"""
Contract Validation Module

Модуль для валидации JSON-конфигураций форматирования.
"""

from .validators import (
    ContractValidator,
    MagnitudeOptionsValidator,
    NumberFormatOptionsValidator,
    SchemaLoader,
    magnitude_options_from_mapping,
    number_format_options_from_mapping,
    validate_magnitude_options,
    validate_number_format_options,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "NumberFormatOptionsValidator",
    "MagnitudeOptionsValidator",
    # Functions
    "validate_number_format_options",
    "validate_magnitude_options",
    "number_format_options_from_mapping",
    "magnitude_options_from_mapping",
]
