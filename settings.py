from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional


_LOG_PATH_ENV = "CPUTEMP_LOG_PATH"
_DEFAULT_SECONDS_ENV = "CPUTEMP_DEFAULT_SECONDS"
_UNIT_ENV = "CPUTEMP_UNIT"
_LOG_LEVEL_ENV = "LOG_LEVEL"

DEFAULT_LOG_PATH = "/var/log/cputemp.log"
DEFAULT_RUNTIME_SECONDS = 5

_KNOWN_UNITS = ("celsius", "fahrenheit", "kelvin")


@dataclass(frozen=True)
class Settings:
    log_path: str
    default_seconds: int
    default_unit: Optional[str]
    log_level: str


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_default_seconds(default: int) -> int:
    value = os.getenv(_DEFAULT_SECONDS_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = int(candidate)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _read_unit(default: Optional[str]) -> Optional[str]:
    value = os.getenv(_UNIT_ENV)
    if value is None:
        return default
    candidate = value.strip().lower()
    return candidate if candidate in _KNOWN_UNITS else default


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        log_path=_read_str_env(_LOG_PATH_ENV, DEFAULT_LOG_PATH),
        default_seconds=_read_default_seconds(DEFAULT_RUNTIME_SECONDS),
        default_unit=_read_unit(None),
        log_level=_read_log_level("WARNING"),
    )
