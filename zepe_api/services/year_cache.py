# zepe_api/services/year_cache.py

import json
import sys
from pathlib import Path
from typing import Dict, Optional, Union

from supabase import create_client

from zepe_api.core.config import Settings
from zepe_api.core.errors import CacheUnavailable


class YearCache:
    """
    Cache clé/valeur des calendriers annuels, indexé par année.

    `get` renvoie None si l'année est absente ; `get` et `set` lèvent
    CacheUnavailable quand le stockage sous-jacent est en erreur.
    """
    name = "abstract"

    def get(self, year: int) -> Optional[str]:
        raise NotImplementedError

    def set(self, year: int, value: str) -> None:
        raise NotImplementedError


class NullYearCache(YearCache):
    name = "none"

    def get(self, year: int) -> Optional[str]:
        return None

    def set(self, year: int, value: str) -> None:
        return None


class MemoryYearCache(YearCache):
    """Cache en mémoire, vit le temps du processus."""
    name = "memory"

    def __init__(self):
        self._data: Dict[int, str] = {}

    def get(self, year: int) -> Optional[str]:
        return self._data.get(year)

    def set(self, year: int, value: str) -> None:
        self._data[year] = value


class JsonFileYearCache(YearCache):
    """Un fichier JSON par année : <dossier>/<année>.json."""
    name = "file"

    def __init__(self, directory: Union[Path, str]):
        self.directory = Path(directory)

    def _path(self, year: int) -> Path:
        return self.directory / f"{year:04d}.json"

    def get(self, year: int) -> Optional[str]:
        path = self._path(year)
        if not path.exists():
            return None
        try:
            data = json.loads(path.read_text(encoding="utf-8")).get("data")
        except (OSError, json.JSONDecodeError, AttributeError) as e:
            raise CacheUnavailable(self.name, f"lecture de '{path}' impossible ({e})") from e
        if data is not None and not isinstance(data, str):
            raise CacheUnavailable(self.name, f"champ 'data' de '{path}' inattendu ({type(data).__name__})")
        return data

    def set(self, year: int, value: str) -> None:
        path = self._path(year)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps({"year": year, "data": value}, ensure_ascii=False), encoding="utf-8")
        except OSError as e:
            raise CacheUnavailable(self.name, f"écriture de '{path}' impossible ({e})") from e


class SupabaseYearCache(YearCache):
    """Cache dans la table Supabase `year_calendars` (year int primary key, data text)."""
    name = "supabase"

    def __init__(self, client, table: str = "year_calendars"):
        self.client = client
        self.table = table

    def get(self, year: int) -> Optional[str]:
        try:
            response = self.client.table(self.table).select("data") \
                .eq("year", year) \
                .maybe_single().execute()
        except Exception as e:
            raise CacheUnavailable(self.name, str(e)) from e

        # maybe_single() peut renvoyer None quand aucune ligne ne correspond
        if response is None or not response.data:
            return None
        data = response.data.get("data")
        if data is not None and not isinstance(data, str):
            raise CacheUnavailable(self.name, f"colonne 'data' inattendue ({type(data).__name__})")
        return data

    def set(self, year: int, value: str) -> None:
        try:
            self.client.table(self.table).upsert({
                "year": year,
                "data": value,
            }, on_conflict="year").execute()
        except Exception as e:
            raise CacheUnavailable(self.name, str(e)) from e


def build_year_cache(settings: Settings) -> YearCache:
    """Instancie le cache choisi par CALENDAR_CACHE_BACKEND."""
    backend = settings.cache_backend
    if backend == "none":
        return NullYearCache()
    if backend == "memory":
        return MemoryYearCache()
    if backend == "file":
        return JsonFileYearCache(settings.cache_dir)
    if backend == "supabase":
        if not settings.supabase_url or not settings.supabase_key:
            raise RuntimeError("Variables d'environnement SUPABASE manquantes.")
        print("INFO: Connexion à Supabase pour le cache des calendriers...", file=sys.stderr)
        return SupabaseYearCache(create_client(settings.supabase_url, settings.supabase_key))
    raise RuntimeError(f"Backend de cache inconnu : '{backend}'")
