"""
OrdinalFormatter — порядковые числительные: 1st, 2nd, 3rd, 4th, 11th, 112th
"""

from typing import Any, Final

from humanise.math.numerical_safeguards import coerce_int

# Суффиксы по последней цифре
ORDINAL_SUFFIXES: Final[tuple[str, ...]] = (
    "th", "st", "nd", "rd", "th", "th", "th", "th", "th", "th",
)

# Остатки mod 100, для которых суффикс всегда "th" (11th, 12th, 13th)
TEEN_REMAINDERS: Final[frozenset[int]] = frozenset({11, 12, 13})


def ordinal(value: Any) -> str:
    """
    Порядковое числительное для целого числа.

    Вход усекается до целого (3.9 → 3). Суффикс отрицательного числа
    определяется по модулю (-1 → "-1st"). Нечисловой вход → "0th".

    Examples:
        >>> ordinal(1)
        '1st'
        >>> ordinal(12)
        '12th'
        >>> ordinal(103)
        '103rd'
        >>> ordinal(-22)
        '-22nd'
    """
    number = coerce_int(value)
    magnitude = abs(number)

    if magnitude % 100 in TEEN_REMAINDERS:
        return f"{number}{ORDINAL_SUFFIXES[0]}"
    return f"{number}{ORDINAL_SUFFIXES[magnitude % 10]}"
