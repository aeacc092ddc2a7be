# zepe_api/services/payroll_service.py

import sys
from datetime import date
from typing import List, Optional, Union

from zepe_api.core.config import Settings, get_settings
from zepe_api.services.calendar_provider import CalendarSliceProvider
from zepe_api.services.isdayoff_client import IsDayOffClient
from zepe_api.services.year_cache import build_year_cache
from zepe_calculs.mois_paie import PayrollMonth, compute_month_payroll
from zepe_calculs.politique import PayrollPolicy


def build_provider(settings: Optional[Settings] = None) -> CalendarSliceProvider:
    """Assemble le client isdayoff et le cache décrits par la configuration."""
    settings = settings or get_settings()
    client = IsDayOffClient(settings.isdayoff_url, timeout=settings.isdayoff_timeout)
    return CalendarSliceProvider(client, build_year_cache(settings))


def compute_year_payroll(
    year: Optional[int],
    salary: Union[int, float],
    provider: Optional[CalendarSliceProvider] = None,
    policy: Optional[PayrollPolicy] = None,
) -> List[PayrollMonth]:
    """
    Calcule acompte et solde pour les 12 mois de l'année.

    Le calendrier est récupéré une seule fois ; chaque mois reçoit la tranche
    du mois suivant déjà découpée (janvier N+1 pour décembre, si disponible).
    CalendarUnavailable remonte tel quel : pas de résultat partiel.
    """
    year = year or date.today().year
    if provider is None or policy is None:
        settings = get_settings()
        provider = provider or build_provider(settings)
        policy = policy or settings.policy

    slices = provider.get_year_slices(year)
    print(f"INFO: Calcul de la paie {year} pour un salaire de {salary}...", file=sys.stderr)

    months = []
    for index in range(12):
        next_slice = slices[index + 1] if index + 1 < len(slices) else None
        months.append(compute_month_payroll(slices[index], next_slice, index + 1, year, salary, policy))
    return months
