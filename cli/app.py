from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from cli.config import load_config
from cli.render import (
    echo_error,
    echo_version,
    echo_warning,
    render_average,
    render_missing_sensor,
    render_summary,
    render_tick,
)
from logging_config import configure_logging
from models.errors import (
    ConflictingUnitFlags,
    InsufficientSamples,
    LogUnavailable,
    NoSensorFound,
    SensorReadError,
)
from models.records import RunConfiguration, SessionRecord, TemperatureUnit
from sensors.thermal import SENSOR_CANDIDATES, locate_sensor
from services.sampler import CancellationToken, Sampler, interrupt_handler
from storage.session_log import build_default_log

UNIT_PROMPT = "Set temperature unit: (c)elsius, (f)ahrenheit or (k)elvin"

app = typer.Typer(
    help="C port of cputemp (http://sourceforge.net/projects/py-cputemp)",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
)


def prompt_unit() -> TemperatureUnit:
    """Ask until an answer contains one of c, f or k; the first one found wins."""
    while True:
        answer = typer.prompt(UNIT_PROMPT, default="", show_default=False)
        for char in answer:
            unit = TemperatureUnit.from_choice(char)
            if unit is not None:
                return unit


def _resolve_sensor() -> Path:
    try:
        return locate_sensor(SENSOR_CANDIDATES)
    except NoSensorFound as exc:
        render_missing_sensor(exc)
        raise typer.Exit(code=1)


def run_average(config: RunConfiguration) -> None:
    """Sample silently for a fixed number of seconds and print the average."""
    echo_version()
    sensor_path = _resolve_sensor()
    sampler = Sampler(sensor_path, config.unit)
    try:
        statistics = sampler.run(seconds=config.seconds)
    except SensorReadError as exc:
        echo_error(exc)
        raise typer.Exit(code=1)
    render_average(statistics, config.unit)


def run_normal(config: RunConfiguration) -> None:
    """Sample with live feedback until the duration ends or SIGINT arrives."""
    echo_version()
    sensor_path = _resolve_sensor()
    unit = config.unit if config.unit_explicit else prompt_unit()

    sampler = Sampler(sensor_path, unit)
    started_at = datetime.now()
    with interrupt_handler(CancellationToken()) as token:
        try:
            statistics = sampler.run(
                seconds=config.duration,
                token=token,
                on_sample=lambda stats: render_tick(stats, unit),
            )
        except SensorReadError as exc:
            echo_error(exc)
            raise typer.Exit(code=1)

    if statistics.average is None:
        echo_error(InsufficientSamples(), exiting=False)
        return

    render_summary(statistics, unit)

    record = SessionRecord(
        started_at=started_at,
        seconds=statistics.count,
        unit=unit,
        maximum=statistics.maximum,
        minimum=statistics.minimum,
        average=statistics.average,
    )
    try:
        build_default_log(str(config.log_path)).append(record)
    except LogUnavailable as exc:
        echo_warning(str(exc))
        return
    typer.echo("Log has been updated.")


@app.command()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Output version information and exit.",
    ),
    average: bool = typer.Option(
        False,
        "--average",
        "-a",
        help="Display only the results (use with -s and [-F, -C or -K]).",
    ),
    seconds: Optional[str] = typer.Option(
        None,
        "--seconds",
        "-s",
        metavar="N",
        help="Run for the specified number of seconds (default is 5).",
    ),
    celsius: int = typer.Option(
        0, "--celsius", "-C", count=True, help="Display temperature in degree Celsius (default)."
    ),
    fahrenheit: int = typer.Option(
        0, "--fahrenheit", "-F", count=True, help="Display temperature in degree Fahrenheit."
    ),
    kelvin: int = typer.Option(
        0, "--kelvin", "-K", count=True, help="Display temperature in degree Kelvin."
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        "-l",
        help="Append session summaries to this existing file (default /var/log/cputemp.log).",
    ),
) -> None:
    """Sample the CPU thermal zone once per second and report statistics."""
    configure_logging()
    try:
        config = load_config(
            average_only=average,
            seconds=seconds,
            celsius=celsius,
            fahrenheit=fahrenheit,
            kelvin=kelvin,
            log_file=log_file,
        )
    except ConflictingUnitFlags as exc:
        echo_error(exc)
        raise typer.Exit(code=1)

    # Flags are validated before --version is honoured.
    if version:
        echo_version()
        raise typer.Exit()

    if config.average_only:
        run_average(config)
    else:
        run_normal(config)
