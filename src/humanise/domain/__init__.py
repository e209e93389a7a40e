"""
Domain models and value objects.

Contains formatting options (number locale, magnitude scale) and the
immutable format constants.
"""

from humanise.domain.options import (
    DATETIME_FORMAT,
    DAY_FORMAT,
    DEFAULT_MAGNITUDE_OPTIONS,
    DEFAULT_NUMBER_OPTIONS,
    FILE_SIZE_BASE,
    FILE_SIZE_UNITS,
    INTWORD_BASE,
    INTWORD_UNITS,
    MAX_SEPARATOR_LENGTH,
    TIME_FORMAT,
    MagnitudeOptions,
    NumberFormatOptions,
    resolve_magnitude_options,
    resolve_number_options,
)

__all__ = [
    # Format templates
    "DAY_FORMAT",
    "TIME_FORMAT",
    "DATETIME_FORMAT",
    # Unit tables
    "INTWORD_UNITS",
    "INTWORD_BASE",
    "FILE_SIZE_UNITS",
    "FILE_SIZE_BASE",
    "MAX_SEPARATOR_LENGTH",
    # Option models
    "NumberFormatOptions",
    "MagnitudeOptions",
    "DEFAULT_NUMBER_OPTIONS",
    "DEFAULT_MAGNITUDE_OPTIONS",
    "resolve_number_options",
    "resolve_magnitude_options",
]
