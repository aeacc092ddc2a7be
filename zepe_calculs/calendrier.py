# zepe_calculs/calendrier.py

import calendar
from typing import List, Optional

WORKDAY = "0"
DAY_OFF = "1"
MARKERS = frozenset((WORKDAY, DAY_OFF))


def days_in_month(year: int, month: int) -> int:
    """Nombre de jours du mois (calendrier grégorien proleptique, années bissextiles comprises)."""
    if not 1 <= month <= 12:
        raise ValueError(f"Numéro de mois invalide : {month}")
    return calendar.monthrange(year, month)[1]


def days_in_year(year: int) -> int:
    return 366 if calendar.isleap(year) else 365


def is_valid_markers(data: str, expected_length: int) -> bool:
    """Vérifie qu'une chaîne ne contient que des marqueurs '0'/'1' et a la longueur attendue."""
    if not isinstance(data, str) or len(data) != expected_length:
        return False
    return set(data) <= MARKERS


def is_valid_year_calendar(year: int, data: str) -> bool:
    return is_valid_markers(data, days_in_year(year))


def slice_year_calendar(year: int, year_data: str, next_january: Optional[str] = None) -> List[str]:
    """
    Découpe le calendrier annuel en 12 tranches mensuelles.

    On avance un décalage courant de `days_in_month` caractères par mois.
    Si le mois de janvier de l'année suivante est fourni (et non vide),
    il est ajouté comme 13e tranche pour le calcul du solde de décembre.
    """
    slices = []
    offset = 0
    for month in range(1, 13):
        count = days_in_month(year, month)
        slices.append(year_data[offset:offset + count])
        offset += count
    if next_january:
        slices.append(next_january)
    return slices
