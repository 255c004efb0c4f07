"""The one-second sampling loop and its cooperative cancellation."""

from __future__ import annotations

import logging
import signal
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, Optional

from models.records import TemperatureUnit
from sensors.thermal import read_celsius
from services.aggregator import SampleStatistics
from services.converter import convert

logger = logging.getLogger(__name__)

TICK_SECONDS = 1.0


class CancellationToken:
    """Flag polled by the loop between ticks."""

    def __init__(self) -> None:
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


@contextmanager
def interrupt_handler(token: CancellationToken) -> Iterator[CancellationToken]:
    """Turn SIGINT into ``token.cancel()`` for the duration of the block."""

    def _handle(_signum: int, _frame: object) -> None:
        token.cancel()

    previous = signal.signal(signal.SIGINT, _handle)
    try:
        yield token
    finally:
        signal.signal(signal.SIGINT, previous)


class Sampler:
    """Reads, converts and accumulates one sample per tick."""

    def __init__(
        self,
        sensor_path: Path,
        unit: TemperatureUnit,
        reader: Callable[[Path], float] = read_celsius,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> None:
        self.sensor_path = sensor_path
        self.unit = unit
        self._reader = reader
        self._sleep = sleep or time.sleep

    def run(
        self,
        seconds: Optional[int] = None,
        token: Optional[CancellationToken] = None,
        on_sample: Optional[Callable[[SampleStatistics], None]] = None,
    ) -> SampleStatistics:
        """Sample until ``seconds`` ticks were taken or ``token`` is cancelled.

        ``SensorReadError`` from the reader propagates and ends the run
        without a result.
        """
        statistics = SampleStatistics()
        while True:
            if token is not None and token.cancelled:
                logger.debug("Sampling interrupted", extra={"tick": statistics.count})
                break
            if seconds is not None and statistics.count >= seconds:
                break

            value = convert(self._reader(self.sensor_path), self.unit)
            statistics.add(value)
            logger.debug(
                "Sample recorded",
                extra={"tick": statistics.count, "value": value, "unit": self.unit.value},
            )
            if on_sample is not None:
                on_sample(statistics)

            self._sleep(TICK_SECONDS)

        return statistics
