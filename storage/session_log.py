from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from models.errors import LogUnavailable
from models.records import SessionRecord
from settings import get_settings

logger = logging.getLogger(__name__)

_SEPARATOR = "---------------"


def format_record(record: SessionRecord) -> str:
    """Render the human-readable block appended for one session."""
    started = record.started_at
    unit = record.unit.value
    return (
        f"Session started at {started.year}-{started.month}-{started.day} "
        f"{started.hour}:{started.minute}:{started.second} :\n"
        f"ccputime was run for {record.seconds} seconds.\n"
        f"Highest recorded temperature was {record.maximum:f} degrees {unit}.\n"
        f"Lowest recorded temperature was {record.minimum:f} degrees {unit}.\n"
        f"Average recorded temperature was {record.average:f} degrees {unit}.\n"
        f"{_SEPARATOR}\n"
    )


class SessionLog:
    """Append-only log of session summaries.

    The file is never created here; installations provision it (usually as
    root) and a missing file means logging is disabled.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def append(self, record: SessionRecord) -> None:
        if not self.path.exists():
            raise LogUnavailable(self.path, "Could not locate log file")

        try:
            handle = self.path.open("a", encoding="utf-8")
        except OSError as exc:
            raise LogUnavailable(self.path, "Can not open log file") from exc

        with handle:
            try:
                handle.write(format_record(record))
            except OSError as exc:
                raise LogUnavailable(self.path, "Can not write log file") from exc

        logger.info(
            "Session appended",
            extra={"log_path": str(self.path), "seconds": record.seconds},
        )


@lru_cache
def build_default_log(path: Optional[str] = None) -> SessionLog:
    settings = get_settings()
    log_path = settings.log_path if path is None else path
    return SessionLog(Path(log_path))
