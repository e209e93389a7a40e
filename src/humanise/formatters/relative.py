"""
RelativeDay / RelativeTime — относительные день и время

Описывает момент относительно опорного "сейчас":
- natural_day: "Today", "Tomorrow", "Yesterday" или дата по шаблону
- natural_time: "just now", "about 5 minutes ago", "in about 2 hours"
  для моментов сегодняшнего дня, иначе время по шаблону

Опорный момент now всегда передаётся явно и используется как есть;
системные часы читаются только если now не передан, один раз на вызов.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат — детерминированная функция (timestamp, now, fmt)
2. Невалидный timestamp не вызывает exception (деградирует до now)
3. Фразы без плюрализации: "in about 1 hours"
4. Окно у границ календаря (год 1, год 9999) ограничивается datetime.min/max

Окно natural_day: [yesterday 00:00, day-after-tomorrow 00:00] включительно.
    today < t < tomorrow           → "Today"
    tomorrow <= t                  → "Tomorrow"
    t <= today (полночь сегодня)   → "Yesterday"
"""

import logging
import math
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any, Final

from humanise.domain.options import DATETIME_FORMAT, DAY_FORMAT, TIME_FORMAT
from humanise.math.numerical_safeguards import round_half_away_int

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

TODAY: Final[str] = "Today"
TOMORROW: Final[str] = "Tomorrow"
YESTERDAY: Final[str] = "Yesterday"
JUST_NOW: Final[str] = "just now"

ONE_DAY: Final[timedelta] = timedelta(hours=24)
SECONDS_PER_MINUTE: Final[int] = 60
MINUTES_PER_HOUR: Final[int] = 60

# Разница в минутах, которая ещё считается "только что"
JUST_NOW_MAX_MINUTES: Final[int] = 1


# =============================================================================
# НОРМАЛИЗАЦИЯ МОМЕНТОВ
# =============================================================================


def to_datetime(value: Any, reference: datetime | None = None) -> datetime:
    """
    Приведение момента к datetime.

    Поддерживаемые типы:
    - datetime → без изменений
    - date → полночь этого дня
    - int/float/Decimal → POSIX-секунды в часовом поясе reference
      (локальное время, если reference naive или не передан)
    - str → ISO 8601 (datetime.fromisoformat)
    - None → reference (или текущее время)

    Невалидное значение (NaN, переполнение, нераспознанная строка)
    заменяется на reference (или текущее время).

    Args:
        value: Исходный момент
        reference: Опорный момент для fallback и часового пояса

    Returns:
        datetime
    """
    fallback = reference if reference is not None else datetime.now()

    if value is None:
        return fallback

    if isinstance(value, datetime):
        return value

    if isinstance(value, date):
        return datetime.combine(value, time.min)

    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError:
            logger.debug("Cannot parse timestamp %r, using %s", value, fallback)
            return fallback

    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        seconds = float(value)
        if not math.isfinite(seconds):
            logger.debug("Non-finite timestamp %r, using %s", value, fallback)
            return fallback
        tz = reference.tzinfo if reference is not None else None
        try:
            return datetime.fromtimestamp(seconds, tz=tz)
        except (OverflowError, OSError, ValueError):
            logger.debug("Timestamp %r out of range, using %s", value, fallback)
            return fallback

    logger.debug("Unsupported timestamp type %s, using %s", type(value).__name__, fallback)
    return fallback


def _resolve_instants(timestamp: Any, now: Any) -> tuple[datetime, datetime]:
    """
    Нормализация пары (timestamp, now) к сравнимым datetime.

    naive-момент принимает часовой пояс aware-партнёра; aware timestamp
    переводится в пояс now, чтобы календарный день определялся по now.
    """
    if now is None:
        tz = timestamp.tzinfo if isinstance(timestamp, datetime) else None
        now = datetime.now(tz)
    elif not isinstance(now, datetime):
        now = to_datetime(now)

    moment = to_datetime(timestamp, now)

    if now.tzinfo is None and moment.tzinfo is not None:
        now = now.replace(tzinfo=moment.tzinfo)
    elif now.tzinfo is not None and moment.tzinfo is None:
        moment = moment.replace(tzinfo=now.tzinfo)
    elif now.tzinfo is not None:
        moment = moment.astimezone(now.tzinfo)

    return moment, now


def format_timestamp(timestamp: Any = None, fmt: str = DATETIME_FORMAT) -> str:
    """
    Абсолютное представление момента по strftime-шаблону.

    Examples:
        >>> format_timestamp(datetime(2024, 3, 5, 17, 30))
        '05/03/2024 05:30:00PM'
        >>> format_timestamp(datetime(2024, 3, 5), DAY_FORMAT)
        '05 Mar, 2024'
    """
    return to_datetime(timestamp).strftime(fmt)


# =============================================================================
# RELATIVE DAY
# =============================================================================


def _shift_days(moment: datetime, days: int) -> datetime:
    """Сдвиг на days суток; за пределами календаря: datetime.min/max в поясе moment."""
    try:
        return moment + days * ONE_DAY
    except OverflowError:
        bound = datetime.max if days > 0 else datetime.min
        return bound.replace(tzinfo=moment.tzinfo)


def natural_day(timestamp: Any = None, now: Any = None, fmt: str = DAY_FORMAT) -> str:
    """
    "Человекочитаемый" день: Today, Tomorrow, Yesterday или дата в формате fmt.

    Args:
        timestamp: Момент (datetime, date, POSIX-секунды, ISO-строка; default: now)
        now: Опорный момент (default: текущее время)
        fmt: strftime-шаблон для дат вне окна (default: DAY_FORMAT)

    Returns:
        "Today" / "Tomorrow" / "Yesterday" или отформатированная дата

    Examples:
        >>> noon = datetime(2024, 3, 5, 12, 0)
        >>> natural_day(noon - timedelta(hours=25), noon)
        'Yesterday'
        >>> natural_day(noon + timedelta(hours=50), noon)
        '07 Mar, 2024'
    """
    moment, now = _resolve_instants(timestamp, now)

    today = now.replace(hour=0, minute=0, second=0, microsecond=0)
    tomorrow = _shift_days(today, 1)
    yesterday = _shift_days(today, -1)

    if yesterday <= moment <= _shift_days(today, 2):
        if today < moment < tomorrow:
            return TODAY
        if moment >= tomorrow:
            return TOMORROW
        return YESTERDAY

    return moment.strftime(fmt)


# =============================================================================
# RELATIVE TIME
# =============================================================================


def _minutes_between(earlier: datetime, later: datetime) -> int:
    seconds = (later - earlier).total_seconds()
    return round_half_away_int(seconds / SECONDS_PER_MINUTE)


def natural_time(timestamp: Any = None, now: Any = None, fmt: str = TIME_FORMAT) -> str:
    """
    "Человекочитаемое" время для моментов сегодняшнего дня.

    Если natural_day классифицирует момент как "Today":
    - будущее: "just now" (<= 1 мин), "in about N minutes" (<= 60 мин),
      "in about H hours" (> 60 мин)
    - прошлое: "just now" (<= 1 мин), "about N minutes ago" (<= 60 мин),
      "about H hours ago" (> 60 мин)
    Минуты и часы округляются half-away-from-zero.
    Иначе — время в формате fmt.

    Args:
        timestamp: Момент (datetime, date, POSIX-секунды, ISO-строка; default: now)
        now: Опорный момент (default: текущее время)
        fmt: strftime-шаблон для моментов вне сегодняшнего дня (default: TIME_FORMAT)

    Returns:
        Относительная фраза или отформатированное время

    Examples:
        >>> noon = datetime(2024, 3, 5, 12, 0)
        >>> natural_time(noon - timedelta(seconds=150), noon)
        'about 3 minutes ago'
        >>> natural_time(noon + timedelta(seconds=3700), noon)
        'in about 1 hours'
    """
    moment, now = _resolve_instants(timestamp, now)

    if natural_day(moment, now) != TODAY:
        return moment.strftime(fmt)

    if moment > now:
        minutes = _minutes_between(now, moment)
        if minutes > MINUTES_PER_HOUR:
            hours = round_half_away_int(minutes / MINUTES_PER_HOUR)
            return f"in about {hours} hours"
        if minutes <= JUST_NOW_MAX_MINUTES:
            return JUST_NOW
        return f"in about {minutes} minutes"

    minutes = _minutes_between(moment, now)
    if minutes > MINUTES_PER_HOUR:
        hours = round_half_away_int(minutes / MINUTES_PER_HOUR)
        return f"about {hours} hours ago"
    if minutes <= JUST_NOW_MAX_MINUTES:
        return JUST_NOW
    return f"about {minutes} minutes ago"
