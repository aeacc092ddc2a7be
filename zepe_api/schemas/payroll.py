# zepe_api/schemas/payroll.py

from pydantic import BaseModel
from typing import Dict, List

from zepe_calculs.mois_paie import PayrollMonth

# {"2024": [mois 1..12]}, comme l'ancienne API
YearPayrollResponse = Dict[str, List[PayrollMonth]]


class HealthResponse(BaseModel):
    status: str
