"""Locating and reading the ACPI thermal zone exposed by the kernel."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Optional, Sequence

from models.errors import NoSensorFound, SensorReadError

logger = logging.getLogger(__name__)

SENSOR_CANDIDATES: tuple[str, ...] = (
    "/sys/devices/LNXSYSTM:00/LNXTHERM:00/LNXTHERM:01/thermal_zone/temp",
    "/sys/bus/acpi/devices/LNXTHERM:00/thermal_zone/temp",
    "/proc/acpi/thermal_zone/THM0/temperature",
    "/proc/acpi/thermal_zone/THRM/temperature",
    "/proc/acpi/thermal_zone/THR1/temperature",
)

READ_BUFFER_SIZE = 32

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def locate_sensor(candidates: Sequence[str] = SENSOR_CANDIDATES) -> Path:
    """Return the first candidate path that exists, in priority order."""
    for candidate in candidates:
        if os.path.exists(candidate):
            logger.debug("Resolved thermal sensor", extra={"sensor_path": candidate})
            return Path(candidate)
    raise NoSensorFound(candidates)


def parse_leading_int(text: str) -> Optional[int]:
    """Parse the leading decimal integer of ``text`` the way C ``atoi`` does."""
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    return int(match.group(1))


def parse_millidegrees(text: str) -> int:
    value = parse_leading_int(text)
    return 0 if value is None else value


def _truncate_to_degrees(millidegrees: int) -> int:
    # Whole degrees, truncated toward zero.
    degrees = abs(millidegrees) // 1000
    return -degrees if millidegrees < 0 else degrees


def read_celsius(path: str | Path) -> float:
    """Read one sample from ``path`` as whole-degree Celsius.

    The file is reopened on every call since thermal zone entries are
    regenerated by the kernel on each read. Sub-degree precision is dropped.
    """
    try:
        with open(path, "rb") as handle:
            raw = handle.read(READ_BUFFER_SIZE)
    except OSError as exc:
        raise SensorReadError(path, reason=exc.strerror or str(exc)) from exc

    if not raw:
        raise SensorReadError(path, reason="no data")

    first_line = raw.decode("ascii", errors="replace").split("\n", 1)[0]
    return float(_truncate_to_degrees(parse_millidegrees(first_line)))
