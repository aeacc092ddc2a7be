# zepe_api/services/calendar_provider.py

import sys
from datetime import date
from typing import List, Optional

import requests

from zepe_api.core.errors import CacheUnavailable, CalendarUnavailable
from zepe_api.services.isdayoff_client import IsDayOffClient
from zepe_api.services.year_cache import NullYearCache, YearCache
from zepe_calculs.calendrier import days_in_month, is_valid_markers, is_valid_year_calendar, slice_year_calendar


class CalendarSliceProvider:
    """
    Fournit les tranches mensuelles du calendrier des jours chômés d'une année.

    Le calendrier annuel passe par le cache (clé = année) ; le mois de janvier
    de l'année suivante est toujours redemandé à la source distante, sans cache.
    """

    def __init__(self, client: IsDayOffClient, cache: Optional[YearCache] = None):
        self.client = client
        self.cache = cache or NullYearCache()

    def get_year_slices(self, year: Optional[int] = None) -> List[str]:
        """
        Retourne les 12 tranches de l'année, plus une 13e (janvier de l'année
        suivante) si elle a pu être récupérée.

        Raises:
            CalendarUnavailable: calendrier annuel vide, mal formé ou injoignable.
        """
        year = year or date.today().year
        year_data = self._load_year(year)
        next_january = self._load_next_january(year)
        return slice_year_calendar(year, year_data, next_january)

    # --- Calendrier annuel : cache puis source distante ---

    def _load_year(self, year: int) -> str:
        cached = self._read_cache(year)
        if cached is not None:
            if is_valid_year_calendar(year, cached):
                print(f"INFO: Calendrier {year} lu depuis le cache '{self.cache.name}'.", file=sys.stderr)
                return cached
            print(f"AVERTISSEMENT: Calendrier {year} en cache mal formé, on le redemande.", file=sys.stderr)

        try:
            year_data = self.client.fetch_year(year)
        except requests.RequestException as e:
            raise CalendarUnavailable(year, f"source injoignable ({e})") from e

        if not year_data:
            raise CalendarUnavailable(year, "réponse vide")
        if not is_valid_year_calendar(year, year_data):
            raise CalendarUnavailable(year, f"réponse invalide ({year_data[:20]!r})")
        print(f"INFO: Calendrier {year} récupéré depuis la source distante.", file=sys.stderr)

        self._write_cache(year, year_data)
        return year_data

    def _read_cache(self, year: int) -> Optional[str]:
        try:
            return self.cache.get(year)
        except CacheUnavailable as e:
            print(f"ERREUR: {e}. On se rabat sur la source distante.", file=sys.stderr)
            return None

    def _write_cache(self, year: int, year_data: str) -> None:
        try:
            self.cache.set(year, year_data)
            print(f"INFO: Calendrier {year} mis en cache '{self.cache.name}'.", file=sys.stderr)
        except CacheUnavailable as e:
            print(f"ERREUR: {e}. Mise en cache ignorée.", file=sys.stderr)

    # --- Janvier suivant (solde de décembre) ---

    def _load_next_january(self, year: int) -> Optional[str]:
        next_year = year + 1
        try:
            data = self.client.fetch_month(next_year, 1)
        except requests.RequestException as e:
            print(f"AVERTISSEMENT: Janvier {next_year} indisponible ({e}).", file=sys.stderr)
            return None

        if not is_valid_markers(data, days_in_month(next_year, 1)):
            if data:
                print(f"AVERTISSEMENT: Janvier {next_year} mal formé ({data[:20]!r}), ignoré.", file=sys.stderr)
            return None
        return data
