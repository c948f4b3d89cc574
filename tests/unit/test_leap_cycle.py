"""
Тесты для core.math.leap_cycle

Проверяет:
1. 3-летний цикл коррекции от 2025 (в обе стороны)
2. Длины месяцев: 12 × 28 + 29/30
3. Независимость от григорианских високосных лет
4. Ошибки для недопустимых входов
"""

import pytest

from igbo_calendar.core.math import (
    ANCHOR_YEAR,
    LEAP_CYCLE_YEARS,
    days_in_month,
    is_leap_year,
    month_lengths,
    year_length,
)


class TestIsLeapYear:
    """Тесты правила коррекции"""

    @pytest.mark.parametrize("year", [2019, 2022, 2025, 2028, 2031, 2034])
    def test_leap_years(self, year):
        assert is_leap_year(year) is True

    @pytest.mark.parametrize("year", [2023, 2024, 2026, 2027, 2029, 2030])
    def test_common_years(self, year):
        assert is_leap_year(year) is False

    def test_anchor_year_is_leap(self):
        assert is_leap_year(ANCHOR_YEAR) is True

    def test_one_in_three(self):
        window = range(1900, 2200)
        leaps = [year for year in window if is_leap_year(year)]
        assert len(leaps) == len(window) // LEAP_CYCLE_YEARS

    def test_custom_anchor_and_cycle(self):
        assert is_leap_year(2030, anchor_year=2030, cycle=4) is True
        assert is_leap_year(2034, anchor_year=2030, cycle=4) is True
        assert is_leap_year(2031, anchor_year=2030, cycle=4) is False

    @pytest.mark.parametrize("cycle", [0, -3])
    def test_non_positive_cycle_rejected(self, cycle):
        with pytest.raises(ValueError, match="cycle must be positive"):
            is_leap_year(2025, cycle=cycle)


class TestDaysInMonth:
    """Тесты длины месяца"""

    @pytest.mark.parametrize("month", range(1, 13))
    @pytest.mark.parametrize("is_leap", [False, True])
    def test_regular_months_have_28_days(self, month, is_leap):
        assert days_in_month(month, is_leap) == 28

    def test_last_month_common_year(self):
        assert days_in_month(13, False) == 29

    def test_last_month_leap_year(self):
        assert days_in_month(13, True) == 30

    @pytest.mark.parametrize("month", [0, 14, -1])
    def test_out_of_range_month_rejected(self, month):
        with pytest.raises(ValueError, match="month_index must be 1..13"):
            days_in_month(month, False)


class TestYearLength:
    """Тесты длины года"""

    def test_common_year_is_365_days(self):
        assert year_length(False) == 365

    def test_leap_year_is_366_days(self):
        assert year_length(True) == 366

    def test_month_lengths_layout(self):
        assert month_lengths(False) == (28,) * 12 + (29,)
        assert month_lengths(True) == (28,) * 12 + (30,)

    def test_gregorian_leap_year_does_not_lengthen_first_month(self):
        """2024 — високосный по григорианскому календарю, но не год коррекции"""
        is_leap = is_leap_year(2024)

        assert is_leap is False
        assert days_in_month(1, is_leap) == 28
        assert days_in_month(13, is_leap) == 29
        assert year_length(is_leap) == 365

    @pytest.mark.parametrize("is_leap", [False, True])
    def test_year_length_is_sum_of_month_lengths(self, is_leap):
        """Длина года выводится из длин месяцев: 12 × 28 + месяц 13"""
        assert year_length(is_leap) == 12 * 28 + days_in_month(13, is_leap)
