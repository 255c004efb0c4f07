"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional


class TemperatureUnit(str, Enum):
    """Temperature scales a run can report in."""

    celsius = "Celsius"
    fahrenheit = "Fahrenheit"
    kelvin = "Kelvin"

    @classmethod
    def from_choice(cls, choice: str) -> Optional["TemperatureUnit"]:
        """Map a ``c``/``f``/``k`` answer or a unit name to a unit."""
        candidate = choice.strip().lower()
        if not candidate:
            return None
        for unit in cls:
            if candidate in (unit.name, unit.name[0]):
                return unit
        return None


class RunMode(str, Enum):
    continuous = "continuous"
    fixed_duration = "fixed_duration"


@dataclass(frozen=True)
class RunConfiguration:
    """Everything a sampling run needs, fixed before the loop starts."""

    unit: TemperatureUnit
    mode: RunMode
    seconds: int
    log_path: Path
    average_only: bool = False
    unit_explicit: bool = False

    @property
    def duration(self) -> Optional[int]:
        return self.seconds if self.mode is RunMode.fixed_duration else None


@dataclass(frozen=True)
class SessionRecord:
    """Final statistics of a completed run, as appended to the session log."""

    started_at: datetime
    seconds: int
    unit: TemperatureUnit
    maximum: float
    minimum: float
    average: float
