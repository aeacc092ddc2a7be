# zepe_api/core/errors.py


class ZepeError(Exception):
    """Classe de base des erreurs du service."""


class CalendarUnavailable(ZepeError):
    """Le calendrier de l'année est introuvable ou mal formé : la requête échoue entièrement."""

    def __init__(self, year: int, reason: str = ""):
        self.year = year
        self.reason = reason
        message = f"Calendrier {year} indisponible"
        if reason:
            message += f" : {reason}"
        super().__init__(message)


class CacheUnavailable(ZepeError):
    """Le cache est en erreur. Récupérée localement, jamais remontée à l'appelant."""

    def __init__(self, backend: str, reason: str = ""):
        self.backend = backend
        self.reason = reason
        super().__init__(f"Cache '{backend}' indisponible : {reason}")
