"""
Arithmetic Hebrew calendar tests.
"""
import pytest
from datetime import date

from holidaytheme.utils.hebrew_calendar import (
    days_in_hebrew_year,
    hebrew_to_gregorian,
    is_hebrew_leap_year,
    month_lengths,
    month_names,
)


class TestLeapYears:
    def test_known_leap_years(self):
        # 5784 (2023-24) and 5787 are leap years; 5785 and 5786 are not
        assert is_hebrew_leap_year(5784)
        assert is_hebrew_leap_year(5787)
        assert not is_hebrew_leap_year(5785)
        assert not is_hebrew_leap_year(5786)

    def test_seven_leap_years_per_cycle(self):
        assert sum(is_hebrew_leap_year(y) for y in range(5780, 5799)) == 7

    def test_leap_year_has_thirteen_months(self):
        assert len(month_names(5784)) == 13
        assert len(month_lengths(5784)) == 13
        assert len(month_names(5785)) == 12


class TestYearLength:
    def test_lengths_are_valid(self):
        for year in range(5700, 5900):
            length = days_in_hebrew_year(year)
            if is_hebrew_leap_year(year):
                assert length in (383, 384, 385)
            else:
                assert length in (353, 354, 355)

    def test_month_lengths_sum_to_year(self):
        for year in range(5780, 5800):
            assert sum(month_lengths(year)) == days_in_hebrew_year(year)


class TestConversion:
    def test_rosh_hashanah_5785(self):
        assert hebrew_to_gregorian(5785, "Tishrei", 1) == date(2024, 10, 3)

    def test_kislev_25_5785(self):
        assert hebrew_to_gregorian(5785, "Kislev", 25) == date(2024, 12, 26)

    def test_nisan_15_5785(self):
        assert hebrew_to_gregorian(5785, "Nisan", 15) == date(2025, 4, 13)

    def test_plain_adar_means_adar_ii_in_leap_year(self):
        assert hebrew_to_gregorian(5784, "Adar", 14) == hebrew_to_gregorian(5784, "Adar II", 14)
        # Purim 2024 was March 24
        assert hebrew_to_gregorian(5784, "Adar", 14) == date(2024, 3, 24)

    def test_adar_i_missing_in_common_year(self):
        with pytest.raises(ValueError):
            hebrew_to_gregorian(5785, "Adar I", 14)

    def test_day_out_of_range(self):
        with pytest.raises(ValueError):
            hebrew_to_gregorian(5785, "Tevet", 30)

    def test_date_before_gregorian_year_1_overflows(self):
        with pytest.raises(OverflowError):
            hebrew_to_gregorian(1, "Tishrei", 1)

    def test_first_gregorian_year_converts(self):
        # Rosh Hashanah AM 3762 falls in the autumn of 1 CE
        assert hebrew_to_gregorian(3762, "Tishrei", 1).year == 1
