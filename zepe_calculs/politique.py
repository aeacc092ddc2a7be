# zepe_calculs/politique.py

from pydantic import BaseModel, ConfigDict, Field


class PayrollPolicy(BaseModel):
    """
    Constantes de la politique de versement (acompte / solde).

    Args:
        salary_multiplier: coefficient appliqué au taux journalier.
        advance_window_days: les N premiers jours du mois comptent pour l'acompte.
        advance_pay_day: dernier jour du mois courant pouvant servir de date d'acompte.
        rest_pay_day: dernier jour du mois suivant pouvant servir de date de solde.
    """
    model_config = ConfigDict(frozen=True)

    salary_multiplier: float = Field(default=1.0, ge=0)
    advance_window_days: int = Field(default=15, ge=0)
    advance_pay_day: int = Field(default=25, ge=0)
    rest_pay_day: int = Field(default=10, ge=0)


DEFAULT_POLICY = PayrollPolicy()
