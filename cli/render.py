from __future__ import annotations

from typing import Iterable

import typer

from models.errors import CpuTempError, NoSensorFound
from models.records import TemperatureUnit
from services.aggregator import SampleStatistics

VERSION_BANNER = "ccputemp v0.1 by Philip Pum (http://github.com/ccputemp)"


def echo_version() -> None:
    typer.echo(VERSION_BANNER)


def echo_error(error: CpuTempError | str, exiting: bool = True) -> None:
    message = str(error)
    if exiting:
        message = f"{message} Exiting..."
    typer.secho(message, fg=typer.colors.RED, err=True)


def echo_warning(message: str) -> None:
    typer.secho(message, fg=typer.colors.YELLOW, err=True)


def render_missing_sensor(error: NoSensorFound) -> None:
    echo_error(f"{error} Possible sources:", exiting=False)
    for candidate in error.candidates:
        typer.echo(f"\t{candidate}", err=True)


def render_tick(statistics: SampleStatistics, unit: TemperatureUnit) -> None:
    typer.echo(
        f"CPU Temperature: {statistics.average:f} {unit.value} "
        f"(Time running: {statistics.count} secs)"
    )


def _summary_lines(statistics: SampleStatistics, unit: TemperatureUnit) -> Iterable[str]:
    yield f"Highest recorded temperature was {statistics.maximum:f} degrees {unit.value}."
    yield f"Lowest recorded temperature was {statistics.minimum:f} degrees {unit.value}."
    yield f"Average recorded temperature was {statistics.average:f} degrees {unit.value}."


def render_summary(statistics: SampleStatistics, unit: TemperatureUnit) -> None:
    typer.echo()
    for line in _summary_lines(statistics, unit):
        typer.echo(line)
    typer.echo()


def render_average(statistics: SampleStatistics, unit: TemperatureUnit) -> None:
    typer.echo(f"Average temperature was {statistics.average:.1f} degrees {unit.value}.")
