"""Hilfsfunktionen: Logging, Datums-Umwandlung."""

import datetime
import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from .errors import InvalidArgument

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

def setup_logging(level: int = logging.DEBUG, console_level: int = logging.INFO,
                  log_file: Optional[str] = None) -> logging.Logger:
    """Richtet das Logging für Anwendungen ein (Konsole, optional Datei).

    Die Bibliothek selbst hängt keine Handler an; das ist Sache der
    Anwendung. Gibt den Root-Logger zurück.
    """
    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                                  datefmt="%Y-%m-%d %H:%M:%S")

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    console_handler.setLevel(console_level)

    root = logging.getLogger()
    root.setLevel(level)
    # Vorherige Handler entfernen, falls setup_logging mehrfach aufgerufen wird
    root.handlers.clear()
    root.addHandler(console_handler)

    if log_file:
        file_handler = RotatingFileHandler(
            log_file, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        root.addHandler(file_handler)

    return root


# ---------------------------------------------------------------------------
# Datums-Umwandlung
# ---------------------------------------------------------------------------

_DATE_FORMATS = ("%Y-%m-%d", "%d.%m.%Y", "%Y%m%d")


def to_date(value) -> datetime.date:
    """Konvertiert diverse Datumsangaben in datetime.date.

    Akzeptiert: datetime.datetime, datetime.date, (Jahr, Monat, Tag), str.
    Wirft InvalidArgument bei ungültigen Werten oder unbekannten Formaten.
    """
    if isinstance(value, datetime.datetime):
        return value.date()

    if isinstance(value, datetime.date):
        return value

    if isinstance(value, tuple) and len(value) == 3:
        try:
            return datetime.date(*value)
        except (TypeError, ValueError) as e:
            raise InvalidArgument(f"Ungültiges Datum {value!r}: {e}") from e

    if isinstance(value, str):
        text = value.strip()
        for fmt in _DATE_FORMATS:
            try:
                return datetime.datetime.strptime(text, fmt).date()
            except ValueError:
                continue

    raise InvalidArgument(f"Unbekanntes Datumsformat: {value!r} ({type(value).__name__})")
