"""Die 16 Bundesländer mit ISO-3166-2:DE-Kürzeln."""

from enum import Enum

from .errors import InvalidArgument


class Bundesland(str, Enum):
    """Deutsches Bundesland, Wert ist das ISO-3166-2-Kürzel."""

    BW = "DE-BW"  # Baden-Württemberg
    BY = "DE-BY"  # Bayern
    BE = "DE-BE"  # Berlin
    BB = "DE-BB"  # Brandenburg
    HB = "DE-HB"  # Bremen
    HH = "DE-HH"  # Hamburg
    HE = "DE-HE"  # Hessen
    MV = "DE-MV"  # Mecklenburg-Vorpommern
    NI = "DE-NI"  # Niedersachsen
    NW = "DE-NW"  # Nordrhein-Westfalen
    RP = "DE-RP"  # Rheinland-Pfalz
    SL = "DE-SL"  # Saarland
    SN = "DE-SN"  # Sachsen
    ST = "DE-ST"  # Sachsen-Anhalt
    SH = "DE-SH"  # Schleswig-Holstein
    TH = "DE-TH"  # Thüringen

    @property
    def code(self) -> str:
        """Kurzkürzel ohne Länderpräfix, z.B. "BY"."""
        return self.name

    @property
    def name_de(self) -> str:
        return _NAMEN[self]

    @classmethod
    def parse(cls, value) -> "Bundesland":
        """Akzeptiert Bundesland, "DE-BY", "BY" (Groß/Klein egal) oder "Bayern"."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip()
            upper = key.upper()
            if upper.startswith("DE-"):
                upper = upper[3:]
            if upper in cls.__members__:
                return cls[upper]
            for land, name in _NAMEN.items():
                if name.casefold() == key.casefold():
                    return land
        raise InvalidArgument(f"Unbekanntes Bundesland: {value!r}")


_NAMEN = {
    Bundesland.BW: "Baden-Württemberg",
    Bundesland.BY: "Bayern",
    Bundesland.BE: "Berlin",
    Bundesland.BB: "Brandenburg",
    Bundesland.HB: "Bremen",
    Bundesland.HH: "Hamburg",
    Bundesland.HE: "Hessen",
    Bundesland.MV: "Mecklenburg-Vorpommern",
    Bundesland.NI: "Niedersachsen",
    Bundesland.NW: "Nordrhein-Westfalen",
    Bundesland.RP: "Rheinland-Pfalz",
    Bundesland.SL: "Saarland",
    Bundesland.SN: "Sachsen",
    Bundesland.ST: "Sachsen-Anhalt",
    Bundesland.SH: "Schleswig-Holstein",
    Bundesland.TH: "Thüringen",
}
