from __future__ import annotations

from typing import Iterable

import pytest

from settings import DEFAULT_LOG_PATH, get_settings

_ENV_NAMES = ("CPUTEMP_LOG_PATH", "CPUTEMP_DEFAULT_SECONDS", "CPUTEMP_UNIT", "LOG_LEVEL")


def _clear_caches(caches: Iterable) -> None:
    for cache in caches:
        cache.cache_clear()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    _clear_caches((get_settings,))
    yield
    _clear_caches((get_settings,))


def test_defaults() -> None:
    settings = get_settings()

    assert settings.log_path == DEFAULT_LOG_PATH == "/var/log/cputemp.log"
    assert settings.default_seconds == 5
    assert settings.default_unit is None
    assert settings.log_level == "WARNING"


def test_environment_overrides_apply(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("CPUTEMP_LOG_PATH", str(tmp_path / "temp.log"))
    monkeypatch.setenv("CPUTEMP_DEFAULT_SECONDS", "12")
    monkeypatch.setenv("CPUTEMP_UNIT", " Kelvin ")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.log_path == str(tmp_path / "temp.log")
    assert settings.default_seconds == 12
    assert settings.default_unit == "kelvin"
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("raw", ["0", "-4", "soon", "  "])
def test_invalid_default_seconds_fall_back(monkeypatch, raw: str) -> None:
    monkeypatch.setenv("CPUTEMP_DEFAULT_SECONDS", raw)

    assert get_settings().default_seconds == 5


def test_unknown_unit_is_ignored(monkeypatch) -> None:
    monkeypatch.setenv("CPUTEMP_UNIT", "rankine")

    assert get_settings().default_unit is None
