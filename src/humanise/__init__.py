"""
humanise — "очеловечивание" чисел и моментов времени.

Порядковые числительные ("1st"), относительные дни ("Yesterday"),
относительное время ("about 5 minutes ago"), масштабированные величины
("123.46M"), размеры файлов ("117.7 Mb") и числа с разделителями локали.
"""

from humanise.domain import (
    DATETIME_FORMAT,
    DAY_FORMAT,
    FILE_SIZE_BASE,
    FILE_SIZE_UNITS,
    INTWORD_BASE,
    INTWORD_UNITS,
    TIME_FORMAT,
    MagnitudeOptions,
    NumberFormatOptions,
)
from humanise.formatters import (
    JUST_NOW,
    TODAY,
    TOMORROW,
    YESTERDAY,
    file_size,
    format_timestamp,
    intword,
    natural_day,
    natural_time,
    number_format,
    ordinal,
    scale_magnitude,
)
from humanise.humaniser import Humaniser

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Facade
    "Humaniser",
    # Options
    "NumberFormatOptions",
    "MagnitudeOptions",
    # Format templates
    "DAY_FORMAT",
    "TIME_FORMAT",
    "DATETIME_FORMAT",
    # Unit tables
    "INTWORD_UNITS",
    "INTWORD_BASE",
    "FILE_SIZE_UNITS",
    "FILE_SIZE_BASE",
    # Relative phrases
    "TODAY",
    "TOMORROW",
    "YESTERDAY",
    "JUST_NOW",
    # Functions
    "ordinal",
    "number_format",
    "scale_magnitude",
    "intword",
    "file_size",
    "natural_day",
    "natural_time",
    "format_timestamp",
]
