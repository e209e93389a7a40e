"""
Options — Модели параметров форматирования

Immutable Pydantic модели, описывающие локаль чисел и шкалу величин:
- NumberFormatOptions: decimals, decimal_point, thousands_separator
- MagnitudeOptions: NumberFormatOptions + units, base, suffix_separator

А также неизменяемые константы шаблонов дат/времени и таблицы единиц.
Модели frozen=True: любая настройка создаёт новый экземпляр.
"""

from typing import Any, Final

from pydantic import BaseModel, Field, field_validator

from humanise.math.numerical_safeguards import DEFAULT_DECIMALS, normalize_decimals


# =============================================================================
# ШАБЛОНЫ ДАТ И ВРЕМЕНИ (strftime)
# =============================================================================

# День: "05 Mar, 2024"
DAY_FORMAT: Final[str] = "%d %b, %Y"

# Время суток: "05:30PM"
TIME_FORMAT: Final[str] = "%I:%M%p"

# Дата и время: "05/03/2024 05:30:00PM"
DATETIME_FORMAT: Final[str] = "%d/%m/%Y %I:%M:%S%p"


# =============================================================================
# ТАБЛИЦЫ ЕДИНИЦ
# =============================================================================

# Единицы для intword (индекс 0: без масштабирования)
INTWORD_UNITS: Final[tuple[str, ...]] = ("", "K", "M", "B", "T")
INTWORD_BASE: Final[int] = 1000

# Единицы для file_size
FILE_SIZE_UNITS: Final[tuple[str, ...]] = ("bytes", "Kb", "Mb", "Gb", "Tb", "Pb")
FILE_SIZE_BASE: Final[int] = 1024

# Максимальная длина разделителя (например, "'" или узкий неразрывный пробел)
MAX_SEPARATOR_LENGTH: Final[int] = 3


# =============================================================================
# NUMBER FORMAT OPTIONS
# =============================================================================


class NumberFormatOptions(BaseModel):
    """
    Локаль числа: количество дробных разрядов и разделители.

    Immutable модель (frozen=True). decimals всегда >= 0:
    отрицательное значение берётся по модулю, нечисловое заменяется на 2.
    """

    decimals: int = Field(
        DEFAULT_DECIMALS, ge=0, description="Количество дробных разрядов"
    )
    decimal_point: str = Field(
        ".", max_length=MAX_SEPARATOR_LENGTH, description="Десятичный разделитель"
    )
    thousands_separator: str = Field(
        ",", max_length=MAX_SEPARATOR_LENGTH, description="Разделитель тысяч"
    )

    model_config = {"frozen": True}

    @field_validator("decimals", mode="before")
    @classmethod
    def normalize_decimals_value(cls, v: Any) -> int:
        """Нормализация decimals до применения ограничений поля."""
        return normalize_decimals(v)


# =============================================================================
# MAGNITUDE OPTIONS
# =============================================================================


class MagnitudeOptions(NumberFormatOptions):
    """
    Шкала величин для scale_magnitude.

    Наследует локаль числа от NumberFormatOptions и добавляет:
    - units: упорядоченные суффиксы (units[i] соответствует base**i)
    - base: основание шкалы (1000 для чисел, 1024 для байтов)
    - suffix_separator: строка между числом и непустым суффиксом
    """

    units: tuple[str, ...] = Field(
        INTWORD_UNITS, min_length=1, description="Суффиксы единиц по шагам шкалы"
    )
    base: int = Field(INTWORD_BASE, ge=2, description="Основание шкалы")
    suffix_separator: str = Field(
        "", max_length=MAX_SEPARATOR_LENGTH, description="Разделитель числа и суффикса"
    )

    @field_validator("units")
    @classmethod
    def validate_units(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Проверка, что суффиксы шагов > 0 не пустые."""
        for step, unit in enumerate(v[1:], start=1):
            if not unit:
                raise ValueError(f"unit for step {step} must not be empty")
        return v


# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_NUMBER_OPTIONS: Final[NumberFormatOptions] = NumberFormatOptions()
DEFAULT_MAGNITUDE_OPTIONS: Final[MagnitudeOptions] = MagnitudeOptions()


def resolve_number_options(
    options: NumberFormatOptions | None = None, **overrides: Any
) -> NumberFormatOptions:
    """
    Применение keyword-переопределений к базовым опциям числа.

    None в overrides означает "параметр не передан" и игнорируется.

    Args:
        options: Базовые опции (default: DEFAULT_NUMBER_OPTIONS)
        **overrides: decimals, decimal_point, thousands_separator

    Returns:
        Новый экземпляр NumberFormatOptions (или базовый, если нечего менять)

    Raises:
        pydantic.ValidationError: Если переопределение нарушает ограничения
    """
    base = options if options is not None else DEFAULT_NUMBER_OPTIONS
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return base
    # Поля MagnitudeOptions (units, base, ...) игнорируются моделью числа
    return NumberFormatOptions.model_validate({**base.model_dump(), **changes})


def resolve_magnitude_options(
    options: NumberFormatOptions | None = None, **overrides: Any
) -> MagnitudeOptions:
    """
    Построение MagnitudeOptions из базовых опций и переопределений.

    Если options — только NumberFormatOptions, шкала берётся по умолчанию
    (INTWORD_UNITS, base=1000), а локаль числа сохраняется.

    Raises:
        pydantic.ValidationError: Если переопределение нарушает ограничения
    """
    base = options if options is not None else DEFAULT_MAGNITUDE_OPTIONS
    changes = {key: value for key, value in overrides.items() if value is not None}
    if isinstance(base, MagnitudeOptions) and not changes:
        return base
    return MagnitudeOptions.model_validate({**base.model_dump(), **changes})
