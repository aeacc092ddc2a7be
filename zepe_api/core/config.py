# zepe_api/core/config.py

import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

from zepe_calculs.politique import PayrollPolicy

# --- Chargement des variables d'environnement ---
load_dotenv()

# --- Chemins ---
# -> zepe_api/core
CORE_DIR = Path(__file__).resolve().parent
# -> zepe_api
API_DIR = CORE_DIR.parent
# -> racine du projet
PROJECT_ROOT = API_DIR.parent

# --- Constantes ---
DEFAULT_ISDAYOFF_URL = "https://isdayoff.ru/api/getdata"
CACHE_BACKENDS = ("none", "memory", "file", "supabase")


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    isdayoff_url: str = DEFAULT_ISDAYOFF_URL
    isdayoff_timeout: float = 20.0
    cache_backend: str = "memory"
    cache_dir: Path = PROJECT_ROOT / "data" / "calendriers"
    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None
    cors_origins: List[str] = ["http://localhost:8080"]
    policy: PayrollPolicy = PayrollPolicy()


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def get_settings() -> Settings:
    """Construit la configuration à partir de l'environnement (et du fichier .env)."""
    cache_backend = os.getenv("CALENDAR_CACHE_BACKEND", "memory").strip().lower()
    if cache_backend not in CACHE_BACKENDS:
        raise RuntimeError(
            f"CALENDAR_CACHE_BACKEND invalide : '{cache_backend}' (valeurs possibles : {', '.join(CACHE_BACKENDS)})"
        )

    defaults = PayrollPolicy()
    policy = PayrollPolicy(
        salary_multiplier=float(os.getenv("SALARY_MULTIPLIER", defaults.salary_multiplier)),
        advance_window_days=int(os.getenv("ADVANCE_WINDOW_DAYS", defaults.advance_window_days)),
        advance_pay_day=int(os.getenv("ADVANCE_PAY_DAY", defaults.advance_pay_day)),
        rest_pay_day=int(os.getenv("REST_PAY_DAY", defaults.rest_pay_day)),
    )

    cache_dir = os.getenv("CALENDAR_CACHE_DIR")
    return Settings(
        isdayoff_url=os.getenv("ISDAYOFF_URL", DEFAULT_ISDAYOFF_URL),
        isdayoff_timeout=float(os.getenv("ISDAYOFF_TIMEOUT", "20")),
        cache_backend=cache_backend,
        cache_dir=Path(cache_dir) if cache_dir else PROJECT_ROOT / "data" / "calendriers",
        supabase_url=os.getenv("SUPABASE_URL"),
        supabase_key=os.getenv("SUPABASE_KEY"),
        cors_origins=_split_origins(os.getenv("CORS_ORIGINS", "http://localhost:8080")),
        policy=policy,
    )
