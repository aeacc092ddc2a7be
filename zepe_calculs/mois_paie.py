# zepe_calculs/mois_paie.py

import math
from datetime import MAXYEAR, MINYEAR, date, timedelta
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .arrondi import round_money, to_decimal
from .calendrier import DAY_OFF, MARKERS, WORKDAY
from .politique import DEFAULT_POLICY, PayrollPolicy


class PayrollMonth(BaseModel):
    """Vue figée d'un mois de paie : compteurs de jours, acompte et solde."""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    year: int
    month_num: int = Field(ge=1, le=12)
    salary: Union[int, float]
    total_days: int
    workdays: int
    holidays: int
    salary_per_day: int
    advance_workdays: int
    advance_value: int
    advance_date: date
    rest_value: Union[int, float]
    rest_date: Optional[date] = None
    slice: str
    advance_slice: str


def _check_markers(label: str, data: str) -> None:
    unknown = set(data) - MARKERS
    if unknown:
        raise ValueError(f"Tranche '{label}' invalide, marqueurs inconnus : {sorted(unknown)}")


def _last_workday_date(year: int, month: int, window: str) -> date:
    # rfind renvoie -1 sans jour ouvré : on retombe sur le « jour 0 », soit la veille du 1er.
    index = window.rfind(WORKDAY)
    return date(year, month, 1) + timedelta(days=index)


def compute_month_payroll(
    month_slice: str,
    next_month_slice: Optional[str],
    month_num: int,
    year: Optional[int],
    salary: Union[int, float] = 0,
    policy: Optional[PayrollPolicy] = None,
) -> PayrollMonth:
    """
    Calcule les éléments de paie d'un mois à partir de sa tranche de calendrier.

    Args:
        month_slice: marqueurs '0'/'1' des jours du mois.
        next_month_slice: tranche du mois suivant, ou None si inconnue (pas de date de solde).
        month_num: numéro du mois (1-12).
        year: année ; l'année courante si non renseignée.
        salary: salaire mensuel (>= 0).
        policy: constantes de versement ; celles par défaut si None.
    """
    policy = policy or DEFAULT_POLICY
    year = year or date.today().year
    if not 1 <= month_num <= 12:
        raise ValueError(f"Numéro de mois invalide : {month_num}")
    # le solde de décembre tombe en janvier N+1 et le « jour 0 » de janvier en décembre N-1
    if not MINYEAR < year < MAXYEAR:
        raise ValueError(f"Année hors limites : {year}")
    if not math.isfinite(salary) or salary < 0:
        raise ValueError(f"Le salaire doit être un nombre fini positif ou nul : {salary}")
    _check_markers("mois", month_slice)
    if next_month_slice:
        _check_markers("mois suivant", next_month_slice)

    workdays = month_slice.count(WORKDAY)
    holidays = month_slice.count(DAY_OFF)

    if workdays > 0:
        salary_per_day = round_money(
            to_decimal(salary) / workdays * to_decimal(policy.salary_multiplier)
        )
    else:
        salary_per_day = 0

    advance_slice = month_slice[:policy.advance_window_days]
    advance_workdays = advance_slice.count(WORKDAY)
    advance_value = round_money(salary_per_day * advance_workdays)
    advance_date = _last_workday_date(year, month_num, month_slice[:policy.advance_pay_day])

    rest_date = None
    if next_month_slice:
        next_year, next_month = (year + 1, 1) if month_num == 12 else (year, month_num + 1)
        rest_date = _last_workday_date(next_year, next_month, next_month_slice[:policy.rest_pay_day])

    return PayrollMonth(
        year=year,
        month_num=month_num,
        salary=salary,
        total_days=len(month_slice),
        workdays=workdays,
        holidays=holidays,
        salary_per_day=salary_per_day,
        advance_workdays=advance_workdays,
        advance_value=advance_value,
        advance_date=advance_date,
        rest_value=salary - advance_value,
        rest_date=rest_date,
        slice=month_slice,
        advance_slice=advance_slice,
    )
