"""
Opt-in logfmt output for the ``api_record`` logger namespace.

The library only emits records (``op.request`` at DEBUG from the client);
applications that want them on stderr call ``setup_logging("debug")``.
"""

import logging
from typing import Any, Optional

LOGGER_NAME = "api_record"

LOG_EXTRA_FIELDS = (
    "resource",
    "method",
    "path",
    "status",
    "duration_ms",
)


class LogfmtFormatter(logging.Formatter):
    """logfmt line per record; extras that are missing are skipped."""

    def __init__(self, *, with_time: bool = True):
        super().__init__(datefmt="%Y-%m-%dT%H:%M:%S")
        self.with_time = with_time

    def format(self, record: logging.LogRecord) -> str:
        pairs: list[tuple[str, Any]] = []
        if self.with_time:
            pairs.append(("ts", self.formatTime(record, self.datefmt)))
        pairs.append(("level", record.levelname.lower()))
        pairs.append(("logger", record.name))

        msg = record.getMessage()
        if msg:
            pairs.append(("event", msg))

        pairs.extend(
            (key, getattr(record, key))
            for key in LOG_EXTRA_FIELDS
            if getattr(record, key, None) is not None
        )

        if record.exc_info and record.exc_info[0] is not None:
            pairs.append(("exc_type", record.exc_info[0].__name__))
            pairs.append(("exc_msg", str(record.exc_info[1])))

        return " ".join(f"{key}={self._quote(val)}" for key, val in pairs)

    @staticmethod
    def _quote(val: Any) -> str:
        if isinstance(val, bool):
            return "true" if val else "false"
        if isinstance(val, (int, float)):
            return str(val)
        s = str(val)
        if not s or any(c in s for c in ' ="'):
            s = '"' + s.replace('"', '\\"') + '"'
        return s


def setup_logging(
    level: str = "INFO", *, logger: Optional[logging.Logger] = None
) -> logging.Logger:
    """Attach a single logfmt stderr handler to the api_record logger."""

    target = logger or logging.getLogger(LOGGER_NAME)
    for h in list(target.handlers):
        if isinstance(h.formatter, LogfmtFormatter):
            target.removeHandler(h)

    handler = logging.StreamHandler()
    handler.setFormatter(LogfmtFormatter())
    target.addHandler(handler)
    target.setLevel(getattr(logging, level.upper(), logging.INFO))
    return target


__all__ = ["setup_logging", "LogfmtFormatter", "LOG_EXTRA_FIELDS", "LOGGER_NAME"]
