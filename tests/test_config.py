import pytest

from zepe_api.core.config import DEFAULT_ISDAYOFF_URL, get_settings
from zepe_api.services.year_cache import (
    JsonFileYearCache,
    MemoryYearCache,
    NullYearCache,
    build_year_cache,
)

ENV_KEYS = [
    "ISDAYOFF_URL", "ISDAYOFF_TIMEOUT", "CALENDAR_CACHE_BACKEND", "CALENDAR_CACHE_DIR",
    "SUPABASE_URL", "SUPABASE_KEY", "SALARY_MULTIPLIER", "ADVANCE_WINDOW_DAYS",
    "ADVANCE_PAY_DAY", "REST_PAY_DAY", "CORS_ORIGINS",
]


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = get_settings()

    assert settings.isdayoff_url == DEFAULT_ISDAYOFF_URL
    assert settings.isdayoff_timeout == 20.0
    assert settings.cache_backend == "memory"
    assert settings.policy.salary_multiplier == 1.0
    assert settings.policy.advance_window_days == 15
    assert settings.policy.advance_pay_day == 25
    assert settings.policy.rest_pay_day == 10


def test_environment_overrides(clean_env, tmp_path):
    clean_env.setenv("ISDAYOFF_URL", "http://localhost:9000/getdata")
    clean_env.setenv("CALENDAR_CACHE_BACKEND", "FILE")
    clean_env.setenv("CALENDAR_CACHE_DIR", str(tmp_path))
    clean_env.setenv("ADVANCE_PAY_DAY", "20")
    clean_env.setenv("SALARY_MULTIPLIER", "0.87")
    clean_env.setenv("CORS_ORIGINS", "http://a.test, http://b.test")

    settings = get_settings()

    assert settings.isdayoff_url == "http://localhost:9000/getdata"
    assert settings.cache_backend == "file"
    assert settings.cache_dir == tmp_path
    assert settings.policy.advance_pay_day == 20
    assert settings.policy.salary_multiplier == 0.87
    assert settings.cors_origins == ["http://a.test", "http://b.test"]


def test_unknown_cache_backend(clean_env):
    clean_env.setenv("CALENDAR_CACHE_BACKEND", "redis")
    with pytest.raises(RuntimeError):
        get_settings()


@pytest.mark.parametrize("backend, expected", [
    ("none", NullYearCache),
    ("memory", MemoryYearCache),
    ("file", JsonFileYearCache),
])
def test_build_year_cache(clean_env, backend, expected):
    clean_env.setenv("CALENDAR_CACHE_BACKEND", backend)
    assert isinstance(build_year_cache(get_settings()), expected)


def test_supabase_cache_requires_credentials(clean_env):
    clean_env.setenv("CALENDAR_CACHE_BACKEND", "supabase")
    with pytest.raises(RuntimeError):
        build_year_cache(get_settings())
