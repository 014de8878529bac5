"""Gesetzliche Feiertage der deutschen Bundesländer (wiederkehrend, seit 1995)."""

from .config import ResolverConfig
from .easter import compute_easter
from .errors import InvalidArgument
from .holidays_de import (
    ALLE_LAENDER,
    REGELN,
    Feiertag,
    GermanHolidays,
    Holiday,
    HolidayRule,
    holiday_from_date,
    holidays_for,
    holidays_in_year,
    is_holiday,
)
from .regions import Bundesland

__all__ = [
    "ALLE_LAENDER",
    "REGELN",
    "Bundesland",
    "Feiertag",
    "GermanHolidays",
    "Holiday",
    "HolidayRule",
    "InvalidArgument",
    "ResolverConfig",
    "compute_easter",
    "holiday_from_date",
    "holidays_for",
    "holidays_in_year",
    "is_holiday",
]

__version__ = "0.1.0"
