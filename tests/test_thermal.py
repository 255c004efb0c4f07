from __future__ import annotations

from pathlib import Path

import pytest

from models.errors import NoSensorFound, SensorReadError
from sensors.thermal import (
    SENSOR_CANDIDATES,
    locate_sensor,
    parse_leading_int,
    parse_millidegrees,
    read_celsius,
)


def _write_sensor(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


def test_candidates_keep_priority_order() -> None:
    assert SENSOR_CANDIDATES[0].startswith("/sys/devices/LNXSYSTM:00")
    assert SENSOR_CANDIDATES[-1] == "/proc/acpi/thermal_zone/THR1/temperature"
    assert len(SENSOR_CANDIDATES) == 5


def test_locate_prefers_higher_priority(tmp_path: Path) -> None:
    first = tmp_path / "zone0" / "temp"
    second = _write_sensor(tmp_path / "zone1" / "temp", "40000\n")
    third = _write_sensor(tmp_path / "zone2" / "temp", "50000\n")

    assert locate_sensor([str(first), str(second), str(third)]) == second

    _write_sensor(first, "30000\n")
    assert locate_sensor([str(first), str(second), str(third)]) == first


def test_locate_checks_existence_only(tmp_path: Path) -> None:
    unreadable = _write_sensor(tmp_path / "temp", "")
    unreadable.chmod(0)

    assert locate_sensor([str(unreadable)]) == unreadable


def test_locate_without_candidates_raises(tmp_path: Path) -> None:
    candidates = [str(tmp_path / "a"), str(tmp_path / "b")]

    with pytest.raises(NoSensorFound) as excinfo:
        locate_sensor(candidates)

    assert excinfo.value.candidates == tuple(candidates)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("45000\n", 45000),
        ("  38500", 38500),
        ("52000 mC\n", 52000),
        ("-1500\n", -1500),
        ("+7000", 7000),
        ("temperature: 45 C", 0),
        ("", 0),
    ],
)
def test_parse_millidegrees(text: str, expected: int) -> None:
    assert parse_millidegrees(text) == expected


def test_read_truncates_to_whole_degrees(tmp_path: Path) -> None:
    sensor = _write_sensor(tmp_path / "temp", "45999\n")

    assert read_celsius(sensor) == 45.0


def test_read_truncates_negative_toward_zero(tmp_path: Path) -> None:
    sensor = _write_sensor(tmp_path / "temp", "-1500\n")

    assert read_celsius(sensor) == -1.0


def test_read_uses_first_line_only(tmp_path: Path) -> None:
    sensor = _write_sensor(tmp_path / "temp", "30000\n99000\n")

    assert read_celsius(sensor) == 30.0


def test_read_rereads_file_each_call(tmp_path: Path) -> None:
    sensor = _write_sensor(tmp_path / "temp", "30000\n")
    assert read_celsius(sensor) == 30.0

    sensor.write_text("61000\n")
    assert read_celsius(sensor) == 61.0


def test_read_missing_file_raises(tmp_path: Path) -> None:
    missing = tmp_path / "gone"

    with pytest.raises(SensorReadError) as excinfo:
        read_celsius(missing)

    assert excinfo.value.path == str(missing)
    assert str(missing) in str(excinfo.value)


def test_read_empty_file_raises(tmp_path: Path) -> None:
    sensor = _write_sensor(tmp_path / "temp", "")

    with pytest.raises(SensorReadError):
        read_celsius(sensor)


@pytest.mark.parametrize(
    ("text", "expected"),
    [("12", 12), (" -3s", -3), ("0", 0), ("abc", None), ("", None)],
)
def test_parse_leading_int(text: str, expected) -> None:
    assert parse_leading_int(text) == expected
