"""
Formatters — функции "очеловечивания" чисел и моментов времени.
"""

# Number Formatter
from humanise.formatters.number import number_format

# Magnitude Scaler
from humanise.formatters.magnitude import (
    FILE_SIZE_SUFFIX_SEPARATOR,
    ZERO_BYTES,
    file_size,
    intword,
    magnitude_step,
    scale_magnitude,
)

# Ordinal Formatter
from humanise.formatters.ordinal import ORDINAL_SUFFIXES, ordinal

# Relative Day / Relative Time
from humanise.formatters.relative import (
    JUST_NOW,
    TODAY,
    TOMORROW,
    YESTERDAY,
    format_timestamp,
    natural_day,
    natural_time,
    to_datetime,
)

__all__ = [
    # Number Formatter
    "number_format",
    # Magnitude Scaler: constants
    "FILE_SIZE_SUFFIX_SEPARATOR",
    "ZERO_BYTES",
    # Magnitude Scaler: functions
    "file_size",
    "intword",
    "magnitude_step",
    "scale_magnitude",
    # Ordinal Formatter
    "ORDINAL_SUFFIXES",
    "ordinal",
    # Relative: constants
    "JUST_NOW",
    "TODAY",
    "TOMORROW",
    "YESTERDAY",
    # Relative: functions
    "format_timestamp",
    "natural_day",
    "natural_time",
    "to_datetime",
]
