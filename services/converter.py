from __future__ import annotations

from models.records import TemperatureUnit


def convert(celsius: float, unit: TemperatureUnit) -> float:
    if unit is TemperatureUnit.fahrenheit:
        return 1.8 * celsius + 32.0
    if unit is TemperatureUnit.kelvin:
        return celsius + 273.15
    return celsius
