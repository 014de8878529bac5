"""Optionen der Feiertagsberechnung – einmal erzeugt, danach unveränderlich."""

import json
import logging
from dataclasses import dataclass, fields
from typing import Any, Dict

from .easter import GREGORIAN_START, check_year
from .errors import InvalidArgument

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolverConfig:
    """Einstellungen für GermanHolidays.

    Verwendung:
        config = ResolverConfig.load("/pfad/zu/feiertage.json")
        feiertage = GermanHolidays(config)
    """
    min_year: int = 1995                    # davor keine Feiertage
    year_dependent: bool = True             # Regeln erst ab Einführungsjahr
    mariae_himmelfahrt_bayern: bool = True  # nur in katholisch geprägten Gemeinden
    augsburger_friedensfest: bool = False   # nur Stadt Augsburg

    def __post_init__(self):
        check_year(self.min_year, GREGORIAN_START)
        for f in fields(self):
            if f.type is bool and not isinstance(getattr(self, f.name), bool):
                raise InvalidArgument(
                    f"Config-Wert '{f.name}' muss bool sein: {getattr(self, f.name)!r}"
                )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResolverConfig":
        """Erzeugt ResolverConfig aus einem Dict wie {"min_year": 1995}."""
        if not isinstance(data, dict):
            raise InvalidArgument(
                f"Config muss ein Objekt sein, nicht {type(data).__name__}: {data!r}"
            )
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise KeyError(f"Unbekannte Config-Schlüssel: {', '.join(sorted(unknown))}")
        return cls(**data)

    @classmethod
    def load(cls, path: str) -> "ResolverConfig":
        """Lädt die Optionen aus einer JSON-Datei."""
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        config = cls.from_dict(data)
        logger.debug("Config geladen aus %s: %s", path, config)
        return config
