"""Ostersonntag nach dem gregorianischen Kalender."""

import datetime

from dateutil.easter import EASTER_WESTERN, easter

from .errors import InvalidArgument

# Einführung des gregorianischen Kalenders bzw. Obergrenze von datetime
GREGORIAN_START = 1583
MAX_YEAR = datetime.MAXYEAR


def check_year(year, minimum: int = datetime.MINYEAR) -> int:
    """Prüft, dass year ein int im darstellbaren Bereich ist."""
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidArgument(f"Jahr muss eine Ganzzahl sein: {year!r}")
    if not minimum <= year <= MAX_YEAR:
        raise InvalidArgument(f"Jahr {year} außerhalb von {minimum}..{MAX_YEAR}.")
    return year


def compute_easter(year: int) -> datetime.date:
    """Datum des Ostersonntags (geschlossene Formel, westliche Kirchen).

    Beispiel: compute_easter(2024) -> date(2024, 3, 31)
    """
    check_year(year, GREGORIAN_START)
    return easter(year, EASTER_WESTERN)


def relative_to_easter(year: int, offset_days: int) -> datetime.date:
    """Datum offset_days Tage nach (bzw. vor) Ostersonntag."""
    return compute_easter(year) + datetime.timedelta(days=offset_days)
