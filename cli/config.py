from __future__ import annotations

from pathlib import Path
from typing import Optional

from models.errors import ConflictingUnitFlags
from models.records import RunConfiguration, RunMode, TemperatureUnit
from sensors.thermal import parse_leading_int
from settings import get_settings


def parse_seconds(value: Optional[str], default: int) -> int:
    """Leading-integer parse of a ``--seconds`` value; below 1 means default."""
    if value is None:
        return default
    parsed = parse_leading_int(value)
    if parsed is None:
        return default
    return parsed if parsed > 0 else default


def resolve_unit(
    celsius: int = 0,
    fahrenheit: int = 0,
    kelvin: int = 0,
) -> Optional[TemperatureUnit]:
    """Pick the unit from flag occurrence counts; any second flag is a conflict."""
    if celsius + fahrenheit + kelvin > 1:
        raise ConflictingUnitFlags()
    if fahrenheit:
        return TemperatureUnit.fahrenheit
    if kelvin:
        return TemperatureUnit.kelvin
    if celsius:
        return TemperatureUnit.celsius
    return None


def load_config(
    average_only: bool = False,
    seconds: Optional[str] = None,
    celsius: int = 0,
    fahrenheit: int = 0,
    kelvin: int = 0,
    log_file: Optional[Path] = None,
) -> RunConfiguration:
    settings = get_settings()

    unit = resolve_unit(celsius=celsius, fahrenheit=fahrenheit, kelvin=kelvin)
    unit_explicit = unit is not None
    if unit is None and settings.default_unit is not None:
        unit = TemperatureUnit.from_choice(settings.default_unit)
        unit_explicit = unit is not None
    if unit is None:
        unit = TemperatureUnit.celsius

    if average_only or seconds is not None:
        mode = RunMode.fixed_duration
    else:
        mode = RunMode.continuous

    return RunConfiguration(
        unit=unit,
        mode=mode,
        seconds=parse_seconds(seconds, settings.default_seconds),
        average_only=average_only,
        log_path=log_file or Path(settings.log_path),
        unit_explicit=unit_explicit,
    )
