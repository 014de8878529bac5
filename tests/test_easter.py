"""Tests for the Easter Sunday computation."""

from datetime import date, timedelta

import pytest

from feiertage import InvalidArgument, compute_easter
from feiertage.easter import relative_to_easter


class TestComputeEaster:
    def test_reference_dates(self):
        ostersonntage = {
            2000: date(2000, 4, 23),
            2008: date(2008, 3, 23),
            2019: date(2019, 4, 21),
            2020: date(2020, 4, 12),
            2024: date(2024, 3, 31),
            2025: date(2025, 4, 20),
            2026: date(2026, 4, 5),
        }
        for year, ostersonntag in ostersonntage.items():
            assert compute_easter(year) == ostersonntag, year

    def test_always_sunday_in_window(self):
        for year in range(1995, 2101):
            easter = compute_easter(year)
            assert easter.weekday() == 6
            assert date(year, 3, 22) <= easter <= date(year, 4, 25)

    def test_gregorian_start_is_accepted(self):
        assert compute_easter(1583).weekday() == 6

    @pytest.mark.parametrize("year", [1582, 0, -5, 10000])
    def test_out_of_range(self, year):
        with pytest.raises(InvalidArgument):
            compute_easter(year)

    @pytest.mark.parametrize("year", [2024.0, "2024", None, True])
    def test_not_an_int(self, year):
        with pytest.raises(InvalidArgument):
            compute_easter(year)


class TestRelativeToEaster:
    def test_good_friday_and_corpus_christi_2024(self):
        assert relative_to_easter(2024, -2) == date(2024, 3, 29)
        assert relative_to_easter(2024, 60) == date(2024, 5, 30)

    def test_crosses_month_boundary(self):
        assert relative_to_easter(2024, 1) == compute_easter(2024) + timedelta(days=1)
        assert relative_to_easter(2024, 1) == date(2024, 4, 1)
