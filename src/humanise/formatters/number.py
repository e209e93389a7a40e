"""
NumberFormatter — группировка разрядов и округление

Форматирует число в строку вида "1,234,567.89":
- знак "-" для отрицательных значений (кроме округлённого нуля)
- округление half-away-from-zero до decimals разрядов
- разделитель тысяч каждые 3 цифры целой части
- десятичный разделитель опускается при decimals == 0

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Никогда не выбрасывает exception для значения (NaN/Inf/None/"abc" → 0)
2. Результат зависит только от входа и опций
"""

from typing import Any

from humanise.domain.options import NumberFormatOptions, resolve_number_options
from humanise.math.numerical_safeguards import (
    coerce_number,
    group_thousands,
    round_half_away,
)


def number_format(
    number: Any,
    decimals: Any = None,
    decimal_point: str | None = None,
    thousands_separator: str | None = None,
    *,
    options: NumberFormatOptions | None = None,
) -> str:
    """
    Форматирование числа с разделителями тысяч и фиксированными разрядами.

    Невалидное значение (NaN, Inf, None, нечисловая строка) форматируется
    как 0. Отрицательный ноль после округления выводится без знака.

    Args:
        number: Форматируемое значение
        decimals: Количество дробных разрядов (default: 2; берётся по модулю)
        decimal_point: Десятичный разделитель (default: ".")
        thousands_separator: Разделитель тысяч (default: ",")
        options: Базовые опции локали; keyword-аргументы имеют приоритет

    Returns:
        Отформатированная строка

    Raises:
        pydantic.ValidationError: Если разделитель длиннее допустимого

    Examples:
        >>> number_format(1234567)
        '1,234,567.00'
        >>> number_format(-1234.5, 0)
        '-1,235'
        >>> number_format(1234.5678, 2, ",", ".")
        '1.234,57'
    """
    opts = resolve_number_options(
        options,
        decimals=decimals,
        decimal_point=decimal_point,
        thousands_separator=thousands_separator,
    )

    value = coerce_number(number)
    rounded = round_half_away(abs(value), opts.decimals)

    sign = "-" if value < 0 and rounded != 0 else ""
    int_part, _, frac_part = f"{rounded:f}".partition(".")

    result = sign + group_thousands(int_part, opts.thousands_separator)
    if opts.decimals:
        result += opts.decimal_point + frac_part
    return result
