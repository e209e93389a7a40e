"""
Humaniser — фасад с привязанной локалью и часами

Объединяет все форматтеры в одном объекте:
- локаль числа (NumberFormatOptions) применяется ко всем числовым методам
- часы (clock) опрашиваются ровно один раз на вызов natural_day/natural_time,
  полученный момент передаётся вниз как now

Keyword-аргументы методов переопределяют привязанную локаль.
"""

from datetime import datetime
from typing import Any, Callable, Mapping

from humanise.contracts import number_format_options_from_mapping
from humanise.domain.options import (
    DATETIME_FORMAT,
    DAY_FORMAT,
    TIME_FORMAT,
    NumberFormatOptions,
)
from humanise.formatters.magnitude import file_size, intword
from humanise.formatters.number import number_format
from humanise.formatters.ordinal import ordinal
from humanise.formatters.relative import format_timestamp, natural_day, natural_time


class Humaniser:
    """
    Форматтер с привязанной локалью числа и источником текущего времени.

    Examples:
        >>> de = Humaniser(NumberFormatOptions(decimal_point=",", thousands_separator="."))
        >>> de.number_format(1234.5)
        '1.234,50'
        >>> de.file_size(123456789)
        '117,7 Mb'
    """

    def __init__(
        self,
        options: NumberFormatOptions | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self.options = options if options is not None else NumberFormatOptions()
        self._clock = clock if clock is not None else datetime.now

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any],
        clock: Callable[[], datetime] | None = None,
    ) -> "Humaniser":
        """
        Создание из mapping-конфигурации локали.

        Raises:
            jsonschema.ValidationError: Если конфигурация не соответствует схеме
        """
        return cls(number_format_options_from_mapping(data), clock=clock)

    def now(self) -> datetime:
        """Опрос часов."""
        return self._clock()

    # -------------------------------------------------------------------------
    # Numbers
    # -------------------------------------------------------------------------

    def ordinal(self, value: Any) -> str:
        return ordinal(value)

    def number_format(
        self,
        number: Any,
        decimals: Any = None,
        decimal_point: str | None = None,
        thousands_separator: str | None = None,
    ) -> str:
        return number_format(
            number,
            decimals,
            decimal_point,
            thousands_separator,
            options=self.options,
        )

    def intword(
        self,
        number: Any,
        units: tuple[str, ...] | list[str] | None = None,
        base: int | None = None,
        decimals: Any = None,
        suffix_separator: str | None = None,
        decimal_point: str | None = None,
        thousands_separator: str | None = None,
    ) -> str:
        return intword(
            number,
            units=units,
            base=base,
            decimals=decimals,
            decimal_point=decimal_point,
            thousands_separator=thousands_separator,
            suffix_separator=suffix_separator,
            options=self.options,
        )

    def file_size(
        self,
        filesize: Any,
        base: int | None = None,
        decimals: Any = None,
        suffix_separator: str | None = None,
        decimal_point: str | None = None,
        thousands_separator: str | None = None,
    ) -> str:
        # decimals локали не применяется: у file_size своя политика разрядов
        return file_size(
            filesize,
            base=base,
            decimals=decimals,
            decimal_point=self._pick(decimal_point, self.options.decimal_point),
            thousands_separator=self._pick(thousands_separator, self.options.thousands_separator),
            suffix_separator=suffix_separator,
        )

    @staticmethod
    def _pick(override: str | None, bound: str) -> str:
        return bound if override is None else override

    # -------------------------------------------------------------------------
    # Time
    # -------------------------------------------------------------------------

    def natural_day(self, timestamp: Any = None, fmt: str = DAY_FORMAT) -> str:
        return natural_day(timestamp, self.now(), fmt)

    def natural_time(self, timestamp: Any = None, fmt: str = TIME_FORMAT) -> str:
        return natural_time(timestamp, self.now(), fmt)

    def format_timestamp(self, timestamp: Any = None, fmt: str = DATETIME_FORMAT) -> str:
        if timestamp is None:
            timestamp = self.now()
        return format_timestamp(timestamp, fmt)
