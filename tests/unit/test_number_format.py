"""
Тесты для NumberFormatter

Проверяет:
1. Группировку разрядов и десятичный разделитель
2. Округление half-away-from-zero
3. Нормализацию decimals
4. Деградацию невалидного входа до 0
5. Локаль через options и keyword-переопределения
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from humanise.domain import NumberFormatOptions
from humanise.formatters.number import number_format


class TestGrouping:
    """Тесты группировки разрядов"""

    def test_default_two_decimals(self) -> None:
        """По умолчанию 2 разряда, ',' и '.'"""
        assert number_format(1234567) == "1,234,567.00"
        assert number_format(1234567, 2) == "1,234,567.00"

    def test_group_boundary(self) -> None:
        """Разделитель появляется только начиная с 4 цифр"""
        assert number_format(999, 0) == "999"
        assert number_format(1000, 0) == "1,000"
        assert number_format(100000, 0) == "100,000"

    def test_small_values(self) -> None:
        """Значения меньше 1"""
        assert number_format(0) == "0.00"
        assert number_format(0.5, 1) == "0.5"

    def test_large_int_exact(self) -> None:
        """Большие int форматируются без потери точности"""
        assert number_format(123456789012345678, 0) == "123,456,789,012,345,678"

    def test_decimal_input(self) -> None:
        """Decimal принимается как число"""
        assert number_format(Decimal("1234.565"), 2) == "1,234.57"


class TestRounding:
    """Тесты округления"""

    def test_negative_half_rounds_away_from_zero(self) -> None:
        """-1234.5 → -1,235"""
        assert number_format(-1234.5, 0) == "-1,235"

    def test_half_rounds_up(self) -> None:
        """Половина округляется вверх"""
        assert number_format(2.5, 0) == "3"
        assert number_format(0.5, 0) == "1"
        assert number_format(1.005, 2) == "1.01"

    def test_float_noise_ignored(self) -> None:
        """Двоичный шум float не влияет на результат"""
        assert number_format(0.1 + 0.2, 2) == "0.30"

    def test_rounding_carries_into_integer_part(self) -> None:
        """Перенос разряда при округлении"""
        assert number_format(999.995, 2) == "1,000.00"
        assert number_format(999999.5, 0) == "1,000,000"

    def test_negative_zero_has_no_sign(self) -> None:
        """Отрицательное значение, округлённое до нуля, выводится без знака"""
        assert number_format(-0.001, 2) == "0.00"
        assert number_format(-0.4, 0) == "0"
        assert number_format(-0.005, 2) == "-0.01"


class TestDecimals:
    """Тесты параметра decimals"""

    def test_zero_decimals_omits_decimal_point(self) -> None:
        """decimals=0 — без десятичного разделителя"""
        assert number_format(1234.4, 0) == "1,234"
        assert number_format(1234.4, 0, decimal_point="#") == "1,234"

    def test_negative_decimals_taken_by_magnitude(self) -> None:
        """Отрицательный decimals берётся по модулю"""
        assert number_format(1234.5678, -1) == "1,234.6"

    def test_non_numeric_decimals_default_to_two(self) -> None:
        """Нечисловой decimals → 2"""
        assert number_format(1.5, "abc") == "1.50"
        assert number_format(1.5, float("nan")) == "1.50"

    def test_many_decimals(self) -> None:
        """Много разрядов дополняется нулями"""
        assert number_format(1.5, 5) == "1.50000"


class TestInvalidInput:
    """Тесты деградации невалидного входа"""

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf"), None, "abc", [1]])
    def test_invalid_number_formats_as_zero(self, value) -> None:
        """NaN, Inf, None и нечисловые значения форматируются как 0"""
        assert number_format(value) == "0.00"

    def test_numeric_string_parsed(self) -> None:
        """Числовая строка парсится"""
        assert number_format("1234.5") == "1,234.50"


class TestLocale:
    """Тесты разделителей локали"""

    def test_custom_separators(self) -> None:
        """Десятичная запятая и точка для тысяч"""
        assert number_format(1234.5678, 2, ",", ".") == "1.234,57"

    def test_empty_thousands_separator(self) -> None:
        """Пустой разделитель тысяч"""
        assert number_format(1234567, 2, thousands_separator="") == "1234567.00"

    def test_options_model(self) -> None:
        """Локаль из NumberFormatOptions"""
        opts = NumberFormatOptions(decimal_point=",", thousands_separator=" ")
        assert number_format(1234.5, options=opts) == "1 234,50"

    def test_keyword_overrides_options(self) -> None:
        """Keyword-аргументы имеют приоритет над options"""
        opts = NumberFormatOptions(decimal_point=",", thousands_separator=" ")
        assert number_format(1234.5, 0, options=opts) == "1 235"
        assert number_format(1234.5, thousands_separator="'", options=opts) == "1'234,50"

    def test_invalid_separator_raises(self) -> None:
        """Слишком длинный разделитель — ошибка конфигурации"""
        with pytest.raises(ValidationError):
            number_format(1, thousands_separator="long-separator")


class TestDeterminism:
    """Тесты детерминированности"""

    def test_same_input_same_output(self) -> None:
        """Одинаковый вход — одинаковый результат"""
        results = {number_format(-9876543.21, 1, ",", ".") for _ in range(10)}
        assert results == {"-9.876.543,2"}
