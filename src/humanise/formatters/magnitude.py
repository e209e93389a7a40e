"""
MagnitudeScaler — масштабирование величин по степеням основания

Сокращает большое число до короткого десятичного значения с суффиксом:
- intword: 123456789 → "123.46M" (основание 1000, единицы "", K, M, B, T)
- file_size: 123456789 → "117.7 Mb" (основание 1024, единицы bytes..Pb)

Алгоритм:
    step = min{i : |number| < base**(i+1)}, ограничен len(units) - 1
    scaled = number / base**step
    result = number_format(scaled) + (suffix_separator + units[step] | "")

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Шаг выбирается по abs(number), знак сохраняется в масштабированном значении
2. Величина больше последней единицы не вызывает ошибку (clamp к последней)
3. Шаг 0 — без масштабирования, пустой суффикс не выводится вовсе
4. int и Decimal любой величины делятся точно, без переполнения float
"""

import logging
from decimal import Decimal
from typing import Any, Final

from humanise.domain.options import (
    FILE_SIZE_BASE,
    FILE_SIZE_UNITS,
    MagnitudeOptions,
    NumberFormatOptions,
    resolve_magnitude_options,
)
from humanise.formatters.number import number_format
from humanise.math.numerical_safeguards import coerce_number, scale_down

logger = logging.getLogger(__name__)

# Результат file_size для нулевого, отрицательного и невалидного размера
ZERO_BYTES: Final[str] = "0 bytes"

# Разделитель числа и единицы для file_size по умолчанию
FILE_SIZE_SUFFIX_SEPARATOR: Final[str] = " "

# Дробные разряды file_size по умолчанию (меньше / не меньше одной kilo-единицы)
FILE_SIZE_DECIMALS_BELOW_KILO: Final[int] = 0
FILE_SIZE_DECIMALS_SCALED: Final[int] = 1


def magnitude_step(value: int | float | Decimal, base: int, unit_count: int) -> int:
    """
    Индекс единицы для значения.

    Args:
        value: Значение (знак игнорируется)
        base: Основание шкалы (>= 2)
        unit_count: Количество единиц в таблице (>= 1)

    Returns:
        Наименьший i, такой что |value| < base**(i+1); не больше unit_count - 1

    Examples:
        >>> magnitude_step(999, 1000, 5)
        0
        >>> magnitude_step(1000, 1000, 5)
        1
        >>> magnitude_step(1e30, 1000, 5)
        4
    """
    magnitude = abs(value)
    for step in range(unit_count):
        if magnitude < base ** (step + 1):
            return step
    return unit_count - 1


def scale_magnitude(number: Any, options: MagnitudeOptions | None = None) -> str:
    """
    Масштабирование числа по шкале options.

    Args:
        number: Значение (NaN/Inf/нечисловое → 0)
        options: Шкала и локаль (default: INTWORD_UNITS, base=1000, decimals=2)

    Returns:
        Строка вида "123.46M"
    """
    opts = options if options is not None else resolve_magnitude_options()

    value = coerce_number(number)
    step = magnitude_step(value, opts.base, len(opts.units))
    scaled = scale_down(value, opts.base, step)

    unit = opts.units[step]
    suffix = opts.suffix_separator + unit if unit else ""
    return number_format(scaled, options=opts) + suffix


def intword(
    number: Any,
    units: tuple[str, ...] | list[str] | None = None,
    base: int | None = None,
    decimals: Any = None,
    decimal_point: str | None = None,
    thousands_separator: str | None = None,
    suffix_separator: str | None = None,
    *,
    options: NumberFormatOptions | None = None,
) -> str:
    """
    "Человекочитаемое" число: "13.00K", "4.10M", "102.00".

    Keyword-аргументы переопределяют options; не переданные берутся
    из options, затем из значений по умолчанию.

    Raises:
        pydantic.ValidationError: Если шкала невалидна (base < 2, пустые units)

    Examples:
        >>> intword(123456789)
        '123.46M'
        >>> intword(123456789, decimals=1, suffix_separator=" ")
        '123.5 M'
        >>> intword(-1500)
        '-1.50K'
    """
    opts = resolve_magnitude_options(
        options,
        units=units,
        base=base,
        decimals=decimals,
        decimal_point=decimal_point,
        thousands_separator=thousands_separator,
        suffix_separator=suffix_separator,
    )
    return scale_magnitude(number, opts)


def file_size(
    filesize: Any,
    base: int | None = None,
    decimals: Any = None,
    decimal_point: str | None = None,
    thousands_separator: str | None = None,
    suffix_separator: str | None = None,
) -> str:
    """
    "Человекочитаемый" размер файла: "102 bytes", "1.5 Kb", "117.7 Mb".

    Политики поверх scale_magnitude:
    - размер <= 0 (и невалидный размер) → "0 bytes"
    - decimals не передан: 0 для размера меньше base, иначе 1
    - suffix_separator не передан: один пробел

    Args:
        filesize: Размер в байтах
        base: Основание шкалы (default: 1024)
        decimals: Количество дробных разрядов
        decimal_point: Десятичный разделитель (default: ".")
        thousands_separator: Разделитель тысяч (default: ",")
        suffix_separator: Разделитель числа и единицы (default: " ")

    Returns:
        Строка размера

    Examples:
        >>> file_size(0)
        '0 bytes'
        >>> file_size(500)
        '500 bytes'
        >>> file_size(1536)
        '1.5 Kb'
    """
    size = coerce_number(filesize)
    if size <= 0:
        logger.debug("Non-positive file size %r rendered as %r", filesize, ZERO_BYTES)
        return ZERO_BYTES

    if base is None:
        base = FILE_SIZE_BASE

    if decimals is None:
        decimals = FILE_SIZE_DECIMALS_BELOW_KILO if size < base else FILE_SIZE_DECIMALS_SCALED

    if suffix_separator is None:
        suffix_separator = FILE_SIZE_SUFFIX_SEPARATOR

    opts = resolve_magnitude_options(
        None,
        units=FILE_SIZE_UNITS,
        base=base,
        decimals=decimals,
        decimal_point=decimal_point,
        thousands_separator=thousands_separator,
        suffix_separator=suffix_separator,
    )
    return scale_magnitude(size, opts)
