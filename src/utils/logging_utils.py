"""Structured logging setup for the nested grid viewer."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

DEFAULT_LOG_FILE = Path(__file__).resolve().parents[2] / "data" / "logs" / "nestgrid.log"
CONSOLE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Attributes every LogRecord carries; anything else arrived through ``extra=``.
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime", "taskName"}

_active_log_file: Optional[Path] = None


class StructuredFormatter(logging.Formatter):
    """One JSON object per line, with ``extra=`` fields (event, handle...) at top level."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        )
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)

        # Payload records and other extras are not JSON types
        return json.dumps(entry, default=str)


def setup_logging(level: int = logging.INFO, log_file: Optional[Path] = None) -> Path:
    """Configure the root logger once; later calls return the active log file."""
    global _active_log_file

    if _active_log_file is not None:
        return _active_log_file

    target = log_file or DEFAULT_LOG_FILE
    target.parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(target, encoding="utf-8")
    file_handler.setFormatter(StructuredFormatter())
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    _active_log_file = target
    return target
