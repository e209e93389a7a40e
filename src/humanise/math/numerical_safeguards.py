"""
Numerical Safeguards — безопасная коэрсия и округление для форматтеров

Модуль обеспечивает численную устойчивость всех форматирующих операций:
- Коэрсия произвольного входа (None, str, NaN, Inf) в конечное число
- Нормализация параметра decimals (abs, default для нечисловых значений)
- Округление round-half-away-from-zero в десятичной арифметике
- Точное масштабирование величин любой длины (без float)
- Группировка разрядов целой части

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не пропагируют в результат (заменяются на fallback)
2. Невалидный вход не вызывает exception (деградация до fallback)
3. Округление детерминировано: 2.5 → 3, -2.5 → -3, 1.005 → 1.01
4. Целые числа не теряют точность (int не проходит через float)
"""

import logging
import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Final

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ ПО УМОЛЧАНИЮ
# =============================================================================

# Количество дробных разрядов, если decimals не задан или не число
DEFAULT_DECIMALS: Final[int] = 2

# Значение, которым заменяются NaN/Inf и нечисловой вход
FALLBACK_NUMBER: Final[float] = 0.0

# Минимальная точность decimal-контекста при округлении
_MIN_DECIMAL_PRECISION: Final[int] = 28


# =============================================================================
# NaN/Inf САНИТИЗАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def coerce_number(value: object, fallback: float = FALLBACK_NUMBER) -> int | float | Decimal:
    """
    Коэрсия произвольного входа в конечное число.

    Порядок:
    - bool → fallback (True/False не считаются числами)
    - int → без изменений (точность сохраняется)
    - float/Decimal → без изменений, если finite
    - str → парсинг через float(), пробелы по краям игнорируются
    - всё остальное (None, list, ...) → fallback

    Args:
        value: Исходное значение любого типа
        fallback: Значение для невалидного входа (default: 0.0)

    Returns:
        Конечное число (int, float или Decimal)

    Examples:
        >>> coerce_number(12)
        12
        >>> coerce_number(" 3.5 ")
        3.5
        >>> coerce_number("abc")
        0.0
        >>> coerce_number(float("nan"))
        0.0
    """
    if isinstance(value, bool):
        logger.debug("Boolean %r is not a number, using %r", value, fallback)
        return fallback

    if isinstance(value, int):
        return value

    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            logger.debug("Cannot parse %r as a number, using %r", value, fallback)
            return fallback

    if isinstance(value, Decimal):
        if value.is_finite():
            return value
        logger.debug("Non-finite number %r replaced with %r", value, fallback)
        return fallback

    if isinstance(value, float):
        if is_valid_float(value):
            return value
        logger.debug("Non-finite number %r replaced with %r", value, fallback)
        return fallback

    logger.debug("Unsupported number type %s, using %r", type(value).__name__, fallback)
    return fallback


def coerce_int(value: object, fallback: int = 0) -> int:
    """
    Коэрсия в int с усечением дробной части (не округлением).

    Examples:
        >>> coerce_int(3.9)
        3
        >>> coerce_int(-3.9)
        -3
        >>> coerce_int("7")
        7
        >>> coerce_int(None)
        0
    """
    number = coerce_number(value, fallback)
    if isinstance(number, int):
        return number
    return int(number)


# =============================================================================
# НОРМАЛИЗАЦИЯ ПАРАМЕТРОВ
# =============================================================================


def normalize_decimals(decimals: object, default: int = DEFAULT_DECIMALS) -> int:
    """
    Нормализация количества дробных разрядов.

    Правила:
    - отрицательное значение берётся по модулю (-3 → 3)
    - дробное значение усекается (2.9 → 2)
    - отсутствующее или нечисловое значение (None, NaN, "abc", bool) → default

    Args:
        decimals: Запрошенное количество разрядов
        default: Значение по умолчанию (default: DEFAULT_DECIMALS)

    Returns:
        Неотрицательное целое

    Examples:
        >>> normalize_decimals(-3)
        3
        >>> normalize_decimals(None)
        2
        >>> normalize_decimals(float("nan"))
        2
    """
    if decimals is None or isinstance(decimals, bool):
        return default

    if isinstance(decimals, int):
        return abs(decimals)

    number = coerce_number(decimals, fallback=math.nan)
    if isinstance(number, float) and math.isnan(number):
        return default

    return abs(int(number))


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def to_decimal(value: int | float | Decimal) -> Decimal:
    """
    Точное десятичное представление числа.

    float конвертируется через repr (кратчайшее представление), поэтому
    1.005 становится Decimal("1.005"), а не 1.00499999999999989...
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    return Decimal(repr(value))


def round_half_away(value: int | float | Decimal, decimals: int) -> Decimal:
    """
    Округление до decimals дробных разрядов по правилу half-away-from-zero.

    Python round() использует banker's rounding (2.5 → 2), здесь же
    используется "школьное" округление: 2.5 → 3, -2.5 → -3.

    Args:
        value: Конечное число
        decimals: Количество дробных разрядов (>= 0)

    Returns:
        Decimal ровно с decimals дробными разрядами

    Raises:
        ValueError: Если decimals < 0

    Examples:
        >>> round_half_away(2.5, 0)
        Decimal('3')
        >>> round_half_away(-1234.5, 0)
        Decimal('-1235')
        >>> round_half_away(1.005, 2)
        Decimal('1.01')
    """
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")

    exact = to_decimal(value)
    quantum = Decimal(1).scaleb(-decimals)

    # Точность контекста должна вместить все цифры результата,
    # иначе quantize выбрасывает InvalidOperation
    precision = max(_MIN_DECIMAL_PRECISION, exact.adjusted() + decimals + 2)
    with localcontext() as ctx:
        ctx.prec = precision
        try:
            return exact.quantize(quantum, rounding=ROUND_HALF_UP)
        except InvalidOperation:
            logger.debug("Cannot quantize %r to %d decimals", value, decimals)
            return Decimal(0).quantize(quantum)


def round_half_away_int(value: float) -> int:
    """
    Округление до целого по правилу half-away-from-zero.

    Examples:
        >>> round_half_away_int(2.5)
        3
        >>> round_half_away_int(61.66)
        62
    """
    return int(round_half_away(value, 0))


# =============================================================================
# МАСШТАБИРОВАНИЕ
# =============================================================================


def scale_down(value: int | float | Decimal, base: int, exponent: int) -> Decimal:
    """
    Деление value / base**exponent в десятичной арифметике.

    Результат всегда конечен: int и Decimal любой величины не проходят
    через float, точность контекста расширяется под количество цифр value.

    Examples:
        >>> scale_down(1536, 1024, 1)
        Decimal('1.5')
        >>> scale_down(123456789, 1000, 2)
        Decimal('123.456789')
    """
    exact = to_decimal(value)
    precision = max(_MIN_DECIMAL_PRECISION, exact.adjusted() + _MIN_DECIMAL_PRECISION)
    with localcontext() as ctx:
        ctx.prec = precision
        return exact / Decimal(base) ** exponent


# =============================================================================
# ГРУППИРОВКА РАЗРЯДОВ
# =============================================================================


def group_thousands(digits: str, separator: str) -> str:
    """
    Вставка разделителя каждые 3 цифры справа.

    Первая (левая) группа содержит len(digits) % 3 цифр, если длина
    не кратна трём; все последующие группы — ровно 3 цифры.

    Args:
        digits: Строка из цифр (целая часть без знака)
        separator: Разделитель тысяч (может быть пустым)

    Returns:
        Сгруппированная строка

    Examples:
        >>> group_thousands("1234567", ",")
        '1,234,567'
        >>> group_thousands("999", ",")
        '999'
        >>> group_thousands("123456", " ")
        '123 456'
    """
    lead = len(digits) % 3
    groups = [digits[:lead]] if lead else []
    groups.extend(digits[i : i + 3] for i in range(lead, len(digits), 3))
    return separator.join(groups)
