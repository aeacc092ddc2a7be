# zepe_api/services/isdayoff_client.py

import sys
from typing import Optional

import requests


class IsDayOffClient:
    """
    Client minimal de l'API isdayoff.ru.

    La réponse est une chaîne de '0' (jour ouvré) et de '1' (jour chômé),
    un caractère par jour à partir du 1er janvier (ou du 1er du mois demandé).
    Un corps vide signale un échec.
    """

    def __init__(self, base_url: str, timeout: float = 20.0, session: Optional[requests.Session] = None):
        self.base_url = base_url
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch(self, year: int, month: Optional[int] = None) -> str:
        params = {"year": f"{year:04d}"}
        if month is not None:
            params["month"] = f"{month:02d}"
        print(f"INFO: Appel de {self.base_url} avec {params}...", file=sys.stderr)
        r = self.session.get(self.base_url, params=params, timeout=self.timeout)
        r.raise_for_status()
        return r.text.strip()

    def fetch_year(self, year: int) -> str:
        return self.fetch(year)

    def fetch_month(self, year: int, month: int) -> str:
        return self.fetch(year, month)
