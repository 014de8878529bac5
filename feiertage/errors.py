"""Fehlertypen der Feiertagsberechnung."""


class InvalidArgument(ValueError):
    """Ungültiger Aufruf: Jahr, Bundesland, Datum oder Konfigurationswert.

    Signalisiert einen Programmierfehler beim Aufrufer, keinen
    behebbaren Laufzeitzustand.
    """
