"""
Тесты для OrdinalFormatter
"""

import pytest

from humanise.formatters.ordinal import ORDINAL_SUFFIXES, ordinal


class TestOrdinal:
    """Тесты для ordinal"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, "0th"),
            (1, "1st"),
            (2, "2nd"),
            (3, "3rd"),
            (4, "4th"),
            (10, "10th"),
            (11, "11th"),
            (12, "12th"),
            (13, "13th"),
            (21, "21st"),
            (22, "22nd"),
            (23, "23rd"),
            (101, "101st"),
            (111, "111th"),
            (112, "112th"),
            (113, "113th"),
            (1001, "1001st"),
        ],
    )
    def test_known_values(self, value: int, expected: str) -> None:
        """Таблица известных значений"""
        assert ordinal(value) == expected

    def test_suffix_depends_on_last_two_digits(self) -> None:
        """Суффикс определяется только n % 100 и n % 10"""
        for n in range(0, 1000):
            suffix = ordinal(n)[len(str(n)):]
            if n % 100 in (11, 12, 13):
                assert suffix == "th", n
            else:
                assert suffix == ORDINAL_SUFFIXES[n % 10], n

    def test_negative_uses_magnitude(self) -> None:
        """Суффикс отрицательного числа — по модулю"""
        assert ordinal(-1) == "-1st"
        assert ordinal(-11) == "-11th"
        assert ordinal(-22) == "-22nd"

    def test_fraction_truncated(self) -> None:
        """Дробная часть усекается"""
        assert ordinal(3.9) == "3rd"
        assert ordinal(-2.5) == "-2nd"

    def test_numeric_string(self) -> None:
        """Числовая строка парсится"""
        assert ordinal("42") == "42nd"

    @pytest.mark.parametrize("value", [None, "abc", float("nan"), True])
    def test_invalid_input_is_zero(self, value) -> None:
        """Нечисловой вход → '0th'"""
        assert ordinal(value) == "0th"

    def test_large_int(self) -> None:
        """Большие int без потери точности"""
        assert ordinal(10**20 + 1) == "100000000000000000001st"
