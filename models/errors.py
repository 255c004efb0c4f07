"""Error kinds raised while locating, reading and reporting sensor data."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class CpuTempError(Exception):
    """Base class for every ccputemp failure."""


class NoSensorFound(CpuTempError):
    """None of the candidate sensor paths exists."""

    def __init__(self, candidates: Sequence[str]) -> None:
        self.candidates = tuple(candidates)
        super().__init__("Can not find a valid data source in /sys or /proc.")


class SensorReadError(CpuTempError):
    """A resolved sensor path could not be opened or yielded no data."""

    def __init__(self, path: str | Path, reason: str = "") -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Error reading temperature data from '{self.path}'.")


class ConflictingUnitFlags(CpuTempError):

    def __init__(self) -> None:
        super().__init__(
            "Multiple temperature units specified. Use only one unit (-C, -F or -K)."
        )


class InsufficientSamples(CpuTempError):

    def __init__(self) -> None:
        super().__init__("Not enough measurements collected...")


class LogUnavailable(CpuTempError):
    """The session log is missing or cannot be opened for appending."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{reason} '{self.path}'.")
