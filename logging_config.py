from __future__ import annotations

import logging
from logging.config import dictConfig
from typing import Iterable, Sequence

from settings import get_settings

_DEFAULT_EXTRA_KEYS = (
    "sensor_path",
    "unit",
    "tick",
    "value",
    "seconds",
    "log_path",
    "reason",
)

_configured = False


class SensorContextFormatter(logging.Formatter):
    """Append sampling context from ``extra`` as ``key=value`` pairs.

    Samples are shown to one decimal, and a sample carrying its unit is
    rendered as a single ``value=41.0 Celsius`` pair.
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        style: str = "%",
        extra_keys: Iterable[str] | None = None,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt, style=style)
        self._extra_keys: Sequence[str] = tuple(extra_keys or _DEFAULT_EXTRA_KEYS)

    def _render(self, record: logging.LogRecord, key: str) -> str | None:
        value = getattr(record, key, None)
        if value is None:
            return None
        if key == "unit" and getattr(record, "value", None) is not None:
            return None
        if isinstance(value, float):
            value = f"{value:.1f}"
        if key == "value":
            unit = getattr(record, "unit", None)
            if unit is not None:
                return f"value={value} {unit}"
        return f"{key}={value}"

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        parts: list[str] = []
        for key in self._extra_keys:
            part = self._render(record, key)
            if part is not None:
                parts.append(part)
        if not parts:
            return message
        return f"{message} | {' '.join(parts)}"


def configure_logging(level: str | int | None = None) -> None:
    """Route diagnostics to stderr with sensor context appended."""
    global _configured
    if _configured:
        return

    settings = get_settings()
    log_level = level if level is not None else settings.log_level

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "contextual": {
                    "()": "logging_config.SensorContextFormatter",
                    "fmt": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                    "datefmt": "%Y-%m-%dT%H:%M:%S",
                    "style": "%",
                    "extra_keys": list(_DEFAULT_EXTRA_KEYS),
                }
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "level": log_level,
                    "formatter": "contextual",
                }
            },
            "root": {"handlers": ["default"], "level": log_level},
        }
    )

    _configured = True
