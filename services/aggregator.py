"""Running statistics over converted temperature samples."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class SampleStatistics:
    """Accumulator updated once per tick and read when the loop ends."""

    total: float = 0.0
    count: int = 0
    minimum: float = math.inf
    maximum: float = -math.inf

    def add(self, value: float) -> None:
        self.total += value
        self.count += 1
        if value < self.minimum:
            self.minimum = value
        if value > self.maximum:
            self.maximum = value

    @property
    def average(self) -> float | None:
        if not self.count:
            return None
        return self.total / self.count
