"""
Core math modules для humanise

Численные примитивы форматирования с гарантией устойчивости к невалидному входу.
"""

from humanise.math.numerical_safeguards import (
    # Constants
    DEFAULT_DECIMALS,
    FALLBACK_NUMBER,
    # NaN/Inf sanitization
    coerce_int,
    coerce_number,
    is_valid_float,
    # Parameters
    normalize_decimals,
    # Rounding
    round_half_away,
    round_half_away_int,
    to_decimal,
    # Scaling
    scale_down,
    # Grouping
    group_thousands,
)

__all__ = [
    # Constants
    "DEFAULT_DECIMALS",
    "FALLBACK_NUMBER",
    # NaN/Inf sanitization
    "coerce_int",
    "coerce_number",
    "is_valid_float",
    # Parameters
    "normalize_decimals",
    # Rounding
    "round_half_away",
    "round_half_away_int",
    "to_decimal",
    # Scaling
    "scale_down",
    # Grouping
    "group_thousands",
]
