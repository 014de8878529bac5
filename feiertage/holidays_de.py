"""Gesetzliche Feiertage der Bundesländer – Regeltabelle und Abfragen.

Berechnet werden nur *wiederkehrende* Feiertage, die seit 1995 bestehen.
Überblick: https://de.wikipedia.org/wiki/Gesetzliche_Feiertage_in_Deutschland
"""

import datetime
import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, List, Mapping, Optional, Tuple

from dateutil.relativedelta import WE, relativedelta

from .config import ResolverConfig
from .easter import GREGORIAN_START, check_year, relative_to_easter
from .regions import Bundesland
from .utils import to_date

logger = logging.getLogger(__name__)


class Feiertag(Enum):
    """Alle bekannten Feiertage, Wert ist der deutsche Name."""

    NEUJAHR = "Neujahr"
    HEILIGE_DREI_KOENIGE = "Heilige Drei Könige"
    FRAUENTAG = "Frauentag"
    KARFREITAG = "Karfreitag"
    OSTERMONTAG = "Ostermontag"
    ERSTER_MAI = "Erster Mai"
    CHRISTI_HIMMELFAHRT = "Christi Himmelfahrt"
    PFINGSTMONTAG = "Pfingstmontag"
    FRONLEICHNAM = "Fronleichnam"
    AUGSBURGER_FRIEDENSFEST = "Augsburger Friedensfest"
    MARIAE_HIMMELFAHRT = "Mariä Himmelfahrt"
    WELTKINDERTAG = "Weltkindertag"
    TAG_DER_DEUTSCHEN_EINHEIT = "Tag der Deutschen Einheit"
    REFORMATIONSTAG = "Reformationstag"
    ALLERHEILIGEN = "Allerheiligen"
    BUSS_UND_BETTAG = "Buß- und Bettag"
    ERSTER_WEIHNACHTSFEIERTAG = "1. Weihnachtsfeiertag"
    ZWEITER_WEIHNACHTSFEIERTAG = "2. Weihnachtsfeiertag"

    def date(self, year: int) -> datetime.date:
        """Datum dieses Feiertags im angegebenen Jahr (unabhängig vom Land)."""
        check_year(year, GREGORIAN_START)
        if self in _FESTE_TERMINE:
            month, day = _FESTE_TERMINE[self]
            return datetime.date(year, month, day)
        if self in _OSTER_ABSTAND:
            return relative_to_easter(year, _OSTER_ABSTAND[self])
        return buss_und_bettag(year)

    def falls_on(self, datum) -> bool:
        """True, wenn datum auf diesen Feiertag fällt."""
        datum = to_date(datum)
        return self.date(datum.year) == datum


_FESTE_TERMINE = {
    Feiertag.NEUJAHR: (1, 1),
    Feiertag.HEILIGE_DREI_KOENIGE: (1, 6),
    Feiertag.FRAUENTAG: (3, 8),
    Feiertag.ERSTER_MAI: (5, 1),
    Feiertag.AUGSBURGER_FRIEDENSFEST: (8, 8),
    Feiertag.MARIAE_HIMMELFAHRT: (8, 15),
    Feiertag.WELTKINDERTAG: (9, 20),
    Feiertag.TAG_DER_DEUTSCHEN_EINHEIT: (10, 3),
    Feiertag.REFORMATIONSTAG: (10, 31),
    Feiertag.ALLERHEILIGEN: (11, 1),
    Feiertag.ERSTER_WEIHNACHTSFEIERTAG: (12, 25),
    Feiertag.ZWEITER_WEIHNACHTSFEIERTAG: (12, 26),
}

# Tage relativ zu Ostersonntag
_OSTER_ABSTAND = {
    Feiertag.KARFREITAG: -2,
    Feiertag.OSTERMONTAG: 1,
    Feiertag.CHRISTI_HIMMELFAHRT: 39,
    Feiertag.PFINGSTMONTAG: 50,
    Feiertag.FRONLEICHNAM: 60,
}


def buss_und_bettag(year: int) -> datetime.date:
    """Mittwoch vor dem 23. November (also zwischen 16. und 22.11.)."""
    return datetime.date(year, 11, 22) + relativedelta(weekday=WE(-1))


# ---------------------------------------------------------------------------
# Regeltabelle
# ---------------------------------------------------------------------------

ALLE_LAENDER: FrozenSet[Bundesland] = frozenset(Bundesland)


@dataclass(frozen=True)
class HolidayRule:
    """Ein Feiertag, die Länder in denen er gilt, und ggf. sein Einführungsjahr."""
    feiertag: Feiertag
    states: FrozenSet[Bundesland]
    since: Optional[int] = None

    def __post_init__(self):
        if not self.states:
            raise ValueError(f"Regel für {self.feiertag.value} ohne Bundesland.")

    def active_in(self, year: int) -> bool:
        return self.since is None or year >= self.since


def _laender(*codes: str) -> FrozenSet[Bundesland]:
    return frozenset(Bundesland[c] for c in codes)


REGELN: Tuple[HolidayRule, ...] = (
    HolidayRule(Feiertag.NEUJAHR, ALLE_LAENDER),
    HolidayRule(Feiertag.HEILIGE_DREI_KOENIGE, _laender("BW", "BY", "ST")),
    HolidayRule(Feiertag.FRAUENTAG, _laender("BE"), since=2019),
    HolidayRule(Feiertag.FRAUENTAG, _laender("MV"), since=2023),
    HolidayRule(Feiertag.KARFREITAG, ALLE_LAENDER),
    HolidayRule(Feiertag.OSTERMONTAG, ALLE_LAENDER),
    HolidayRule(Feiertag.ERSTER_MAI, ALLE_LAENDER),
    HolidayRule(Feiertag.CHRISTI_HIMMELFAHRT, ALLE_LAENDER),
    HolidayRule(Feiertag.PFINGSTMONTAG, ALLE_LAENDER),
    HolidayRule(Feiertag.FRONLEICHNAM, _laender("BW", "BY", "HE", "NW", "RP", "SL")),
    HolidayRule(Feiertag.MARIAE_HIMMELFAHRT, _laender("BY", "SL")),
    HolidayRule(Feiertag.WELTKINDERTAG, _laender("TH"), since=2019),
    HolidayRule(Feiertag.TAG_DER_DEUTSCHEN_EINHEIT, ALLE_LAENDER),
    HolidayRule(Feiertag.REFORMATIONSTAG, _laender("BB", "MV", "SN", "ST", "TH")),
    HolidayRule(Feiertag.REFORMATIONSTAG, _laender("HB", "HH", "NI", "SH"), since=2018),
    HolidayRule(Feiertag.ALLERHEILIGEN, _laender("BW", "BY", "NW", "RP", "SL")),
    HolidayRule(Feiertag.BUSS_UND_BETTAG, _laender("SN")),
    HolidayRule(Feiertag.ERSTER_WEIHNACHTSFEIERTAG, ALLE_LAENDER),
    HolidayRule(Feiertag.ZWEITER_WEIHNACHTSFEIERTAG, ALLE_LAENDER),
)

# Gilt nur in der Stadt Augsburg, daher nicht in REGELN
AUGSBURG_REGEL = HolidayRule(Feiertag.AUGSBURGER_FRIEDENSFEST, _laender("BY"))

REGELN_NACH_LAND: Mapping[Bundesland, Tuple[HolidayRule, ...]] = MappingProxyType({
    land: tuple(regel for regel in REGELN if land in regel.states)
    for land in Bundesland
})


# ---------------------------------------------------------------------------
# Abfragen
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Holiday:
    """Ein Feiertag an einem konkreten Datum.

    Fallen zwei Feiertage auf denselben Tag (z.B. Erster Mai und Christi
    Himmelfahrt 2008), stehen beide in feiertage, der Name verbindet sie.
    """
    date: datetime.date
    name: str
    feiertage: Tuple[Feiertag, ...]

    @property
    def feiertag(self) -> Feiertag:
        return self.feiertage[0]


class GermanHolidays:
    """Feiertags-Abfragen für alle Bundesländer.

    Verwendung:
        feiertage = GermanHolidays()
        feiertage.holidays_for(2024, Bundesland.BY)
        feiertage.is_holiday(datetime.date(2024, 12, 25), "BE")
    """

    def __init__(self, config: Optional[ResolverConfig] = None):
        self.config = config or ResolverConfig()

    def _rules(self, year: int, land: Bundesland) -> List[HolidayRule]:
        check_year(year)
        if year < self.config.min_year:
            return []

        rules = []
        for regel in REGELN_NACH_LAND[land]:
            if self.config.year_dependent and not regel.active_in(year):
                continue
            if (regel.feiertag is Feiertag.MARIAE_HIMMELFAHRT and land is Bundesland.BY
                    and not self.config.mariae_himmelfahrt_bayern):
                continue
            rules.append(regel)
        if self.config.augsburger_friedensfest and land in AUGSBURG_REGEL.states:
            rules.append(AUGSBURG_REGEL)
        return rules

    def holidays_in_year(self, year: int, state) -> List[Feiertag]:
        """Alle in diesem Jahr geltenden Feiertage (ohne Datum, in Tabellenreihenfolge)."""
        return [regel.feiertag for regel in self._rules(year, Bundesland.parse(state))]

    def holidays_for(self, year: int, state) -> List[Holiday]:
        """Alle Feiertage eines Landes in einem Jahr, nach Datum sortiert.

        Vor min_year ist die Liste leer.
        """
        land = Bundesland.parse(state)
        by_date = {}
        for regel in self._rules(year, land):
            by_date.setdefault(regel.feiertag.date(year), []).append(regel.feiertag)

        result = [
            Holiday(date=datum, name=" / ".join(f.value for f in tage), feiertage=tuple(tage))
            for datum, tage in sorted(by_date.items())
        ]
        logger.debug("%d Feiertage in %s für %d", len(result), land.code, year)
        return result

    def holiday_from_date(self, datum, state) -> Optional[Holiday]:
        """Gibt den Feiertag an diesem Datum zurück, oder None."""
        datum = to_date(datum)
        for holiday in self.holidays_for(datum.year, state):
            if holiday.date == datum:
                return holiday
        return None

    def is_holiday(self, datum, state) -> bool:
        return self.holiday_from_date(datum, state) is not None

    def is_holiday_or_weekend(self, datum, state) -> Tuple[bool, Optional[str]]:
        """Prüft ob ein Datum ein Feiertag oder Wochenende ist.

        Returns:
            (True, "Feiertags-/Wochenendname") oder (False, None)
        """
        datum = to_date(datum)
        holiday = self.holiday_from_date(datum, state)
        if holiday is not None:
            return True, holiday.name
        if datum.weekday() >= 5:
            return True, "Samstag" if datum.weekday() == 5 else "Sonntag"
        return False, None


# Gemeinsame Instanz mit Standard-Optionen
_default = GermanHolidays()


def holidays_for(year: int, state) -> List[Holiday]:
    return _default.holidays_for(year, state)


def holidays_in_year(year: int, state) -> List[Feiertag]:
    return _default.holidays_in_year(year, state)


def holiday_from_date(datum, state) -> Optional[Holiday]:
    return _default.holiday_from_date(datum, state)


def is_holiday(datum, state) -> bool:
    return _default.is_holiday(datum, state)
