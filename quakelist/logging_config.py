# quakelist/logging_config.py
"""JSON log lines for the page server and the CLI.

Anything a call site passes through ``extra`` (timespan, magnitude,
feed_url, event_count, duration_ms, ...) becomes a top-level key.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime
from typing import IO, Optional

# attributes every LogRecord carries; the rest came in through ``extra``
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}

# httpx logs every request at INFO; fetch_quakes already logs its own line
QUIET_LOGGERS = ("httpx", "httpcore")


class QuakeLogFormatter(logging.Formatter):

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": datetime.fromtimestamp(record.created).astimezone().isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (k, v) for k, v in vars(record).items()
            if k not in _RECORD_ATTRS and not k.startswith("_") and v is not None
        )
        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def configure_logging(level: int = logging.INFO, stream: Optional[IO[str]] = None) -> None:
    root = logging.getLogger()
    root.setLevel(level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(QuakeLogFormatter())
    root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
