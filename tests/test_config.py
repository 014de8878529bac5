"""Tests for resolver options."""

import json
from datetime import date

import pytest

from feiertage import Feiertag, GermanHolidays, InvalidArgument, ResolverConfig


class TestResolverConfig:
    def test_defaults(self):
        config = ResolverConfig()
        assert config.min_year == 1995
        assert config.year_dependent is True
        assert config.mariae_himmelfahrt_bayern is True
        assert config.augsburger_friedensfest is False

    def test_from_dict(self):
        config = ResolverConfig.from_dict({"min_year": 2000, "augsburger_friedensfest": True})
        assert config.min_year == 2000
        assert config.augsburger_friedensfest is True

    def test_unknown_key(self):
        with pytest.raises(KeyError):
            ResolverConfig.from_dict({"bundesland": "BY"})

    def test_wrong_types(self):
        with pytest.raises(InvalidArgument):
            ResolverConfig(year_dependent="ja")
        with pytest.raises(InvalidArgument):
            ResolverConfig(min_year="1995")

    def test_min_year_before_gregorian_calendar(self):
        with pytest.raises(InvalidArgument):
            ResolverConfig(min_year=1500)

    def test_load_json(self, tmp_path):
        path = tmp_path / "feiertage.json"
        path.write_text(json.dumps({"year_dependent": False}), encoding="utf-8")
        config = ResolverConfig.load(str(path))
        assert config == ResolverConfig(year_dependent=False)

    @pytest.mark.parametrize("content", ['["min_year"]', "[]", "null", '"min_year"', "1995"])
    def test_load_json_without_object(self, tmp_path, content):
        path = tmp_path / "feiertage.json"
        path.write_text(content, encoding="utf-8")
        with pytest.raises(InvalidArgument):
            ResolverConfig.load(str(path))

    def test_from_dict_requires_mapping(self):
        with pytest.raises(InvalidArgument):
            ResolverConfig.from_dict([("min_year", 2000)])


class TestOptionsAffectResolver:
    def test_rules_always_active(self):
        feiertage = GermanHolidays(ResolverConfig(year_dependent=False))
        assert feiertage.is_holiday(date(1995, 3, 8), "BE")
        assert feiertage.is_holiday(date(1995, 10, 31), "HH")
        assert not GermanHolidays().is_holiday(date(1995, 3, 8), "BE")

    def test_without_assumption_day_in_bavaria(self):
        feiertage = GermanHolidays(ResolverConfig(mariae_himmelfahrt_bayern=False))
        assert not feiertage.is_holiday(date(2024, 8, 15), "BY")
        assert feiertage.is_holiday(date(2024, 8, 15), "SL")
        assert len(feiertage.holidays_in_year(2019, "BY")) == 12

    def test_augsburg(self):
        feiertage = GermanHolidays(ResolverConfig(augsburger_friedensfest=True))
        assert feiertage.holiday_from_date(date(2024, 8, 8), "BY").feiertag is Feiertag.AUGSBURGER_FRIEDENSFEST
        assert not feiertage.is_holiday(date(2024, 8, 8), "BW")

    def test_later_min_year(self):
        feiertage = GermanHolidays(ResolverConfig(min_year=2000))
        assert feiertage.holidays_for(1999, "BY") == []
        assert feiertage.holidays_for(2000, "BY")
