# zepe_api/api/routers/payroll.py

from datetime import date
from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException, Path

from zepe_api.core.config import get_settings
from zepe_api.core.errors import CalendarUnavailable
from zepe_api.schemas.payroll import YearPayrollResponse
from zepe_api.services.calendar_provider import CalendarSliceProvider
from zepe_api.services.payroll_service import build_provider, compute_year_payroll
from zepe_calculs.politique import PayrollPolicy

# 0 = année en cours ; MAX_YEAR laisse la place au janvier suivant
MIN_YEAR = 1900
MAX_YEAR = 9998

router = APIRouter(
    prefix="/api",
    tags=["Payroll"]
)


@lru_cache
def get_provider() -> CalendarSliceProvider:
    # Un seul fournisseur par processus : le cache mémoire survit entre les requêtes.
    return build_provider(get_settings())


def get_policy() -> PayrollPolicy:
    return get_settings().policy


def _year_payroll(salary, year: int, provider: CalendarSliceProvider, policy: PayrollPolicy):
    year = year or date.today().year
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise HTTPException(status_code=422, detail=f"Année hors limites ({MIN_YEAR}-{MAX_YEAR}) : {year}")
    try:
        months = compute_year_payroll(year, salary, provider=provider, policy=policy)
    except CalendarUnavailable as e:
        raise HTTPException(status_code=502, detail=str(e))
    return {str(year): months}


@router.get("/{salary}", response_model=YearPayrollResponse)
def get_current_year_payroll(
    salary: float = Path(ge=0, allow_inf_nan=False),
    provider: CalendarSliceProvider = Depends(get_provider),
    policy: PayrollPolicy = Depends(get_policy),
):
    """ Acompte et solde de chaque mois de l'année en cours. """
    return _year_payroll(salary, 0, provider, policy)


@router.get("/{salary}/{year}", response_model=YearPayrollResponse)
def get_year_payroll(
    salary: float = Path(ge=0, allow_inf_nan=False),
    year: int = Path(ge=0, le=9999),
    provider: CalendarSliceProvider = Depends(get_provider),
    policy: PayrollPolicy = Depends(get_policy),
):
    """ Acompte et solde de chaque mois de l'année demandée (0 = année en cours). """
    return _year_payroll(salary, year, provider, policy)
