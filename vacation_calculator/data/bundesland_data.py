"""
Static reference data for German federal states.
"""

from typing import Dict

from vacation_calculator.data.schemas import NATIONWIDE, Bundesland


BUNDESLAND_NAMES: Dict[Bundesland, str] = {
    Bundesland.BB: "Brandenburg",
    Bundesland.BE: "Berlin",
    Bundesland.BW: "Baden-Württemberg",
    Bundesland.BY: "Bayern",
    Bundesland.HB: "Bremen",
    Bundesland.HE: "Hessen",
    Bundesland.HH: "Hamburg",
    Bundesland.MV: "Mecklenburg-Vorpommern",
    Bundesland.NI: "Niedersachsen",
    Bundesland.NW: "Nordrhein-Westfalen",
    Bundesland.RP: "Rheinland-Pfalz",
    Bundesland.SH: "Schleswig-Holstein",
    Bundesland.SL: "Saarland",
    Bundesland.SN: "Sachsen",
    Bundesland.ST: "Sachsen-Anhalt",
    Bundesland.TH: "Thüringen",
}

NATIONWIDE_NAME = "Deutschland (alle Bundesländer)"

VALID_REGION_CODES = frozenset([b.value for b in Bundesland] + [NATIONWIDE])


def region_name(code: str) -> str:
    """Return the display name for a region code, or the code itself if unknown."""
    if code == NATIONWIDE:
        return NATIONWIDE_NAME
    try:
        return BUNDESLAND_NAMES[Bundesland(code)]
    except ValueError:
        return code
