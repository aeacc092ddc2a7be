"""
Fixtures partagées : calendriers synthétiques et faux client isdayoff (aucun appel réseau).
"""

import calendar

import pytest
import requests

from zepe_calculs.calendrier import days_in_month, days_in_year


def weekly_calendar(year: int) -> str:
    """Calendrier « samedi/dimanche chômés » de l'année, sans jours fériés."""
    return "".join(
        "1" if calendar.weekday(year, month, day) >= 5 else "0"
        for month in range(1, 13)
        for day in range(1, days_in_month(year, month) + 1)
    )


class FakeIsDayOffClient:
    """Remplace IsDayOffClient : réponses fixées par année / (année, mois)."""

    def __init__(self, years=None, months=None, errors=None):
        self.years = years or {}
        self.months = months or {}
        self.errors = errors or {}
        self.calls = []

    def _answer(self, key):
        self.calls.append(key)
        if key in self.errors:
            raise self.errors[key]
        return self.years.get(key, "") if isinstance(key, int) else self.months.get(key, "")

    def fetch_year(self, year):
        return self._answer(year)

    def fetch_month(self, year, month):
        return self._answer((year, month))


@pytest.fixture
def year_2024():
    data = weekly_calendar(2024)
    assert len(data) == days_in_year(2024) == 366
    return data


@pytest.fixture
def january_2025():
    return weekly_calendar(2025)[:31]


@pytest.fixture
def fake_client(year_2024, january_2025):
    return FakeIsDayOffClient(years={2024: year_2024}, months={(2025, 1): january_2025})


@pytest.fixture
def connection_error():
    return requests.ConnectionError("isdayoff.ru injoignable")


@pytest.fixture
def make_client():
    return FakeIsDayOffClient


@pytest.fixture
def make_calendar():
    return weekly_calendar
