"""Frame-aware logging for the clock feed: JSON lines on disk, short lines on the console."""

from __future__ import annotations

import faulthandler
import json
import logging
import logging.handlers
import sys
import threading
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .config import config_root


_LOGGER_NAME = "imageclock"
_LOG_FILE = "imageclock.log"
_FAULT_FILE = "fault.log"

# Extras that runner/CLI records may carry; copied into the JSON payload when set.
_EXTRA_FIELDS = ("event", "frame", "path", "crash_id")


def log_dir() -> Path:
    path = config_root() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


class JsonFormatter(logging.Formatter):
    """One JSON object per record, stamped with the record's own creation time."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts_utc": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for name in _EXTRA_FIELDS:
            if hasattr(record, name):
                payload[name] = getattr(record, name)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True)


class ConsoleFormatter(logging.Formatter):
    """``HH:MM:SS LEVEL [frame N] message``; the frame tag only appears on frame records."""

    def __init__(self) -> None:
        super().__init__("%(asctime)s %(levelname)s %(frame_tag)s%(message)s", datefmt="%H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        frame = getattr(record, "frame", None)
        record.frame_tag = f"[frame {frame}] " if frame is not None else ""
        return super().format(record)


def configure_logging(
    keep_files: int = 7,
    console: bool = True,
    directory: Path | None = None,
    level: int = logging.INFO,
) -> logging.Logger:
    logger = logging.getLogger(_LOGGER_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(level)
    target = directory or log_dir()
    target.mkdir(parents=True, exist_ok=True)
    log_file = target / _LOG_FILE
    handler = logging.handlers.TimedRotatingFileHandler(
        filename=str(log_file),
        when="midnight",
        backupCount=max(2, keep_files),
        encoding="utf-8",
    )
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)

    if console:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(ConsoleFormatter())
        logger.addHandler(stream_handler)

    logger.info("logging to %s", log_file, extra={"event": "logging_configured", "path": str(log_file)})
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    if name:
        return logging.getLogger(f"{_LOGGER_NAME}.{name}")
    return logging.getLogger(_LOGGER_NAME)


def install_crash_hooks(directory: Path | None = None) -> None:
    """Log uncaught exceptions with a crash id and dump native faults next to the log file."""
    logger = get_logger()

    def _report(kind: str, exc_info) -> None:
        crash_id = str(uuid.uuid4())
        logger.critical(
            f"{kind} crash_id={crash_id}",
            exc_info=exc_info,
            extra={"event": kind.replace(" ", "_"), "crash_id": crash_id},
        )

    sys.excepthook = lambda exc_type, exc_value, exc_tb: _report(
        "uncaught exception", (exc_type, exc_value, exc_tb)
    )
    threading.excepthook = lambda args: _report(
        "thread exception", (args.exc_type, args.exc_value, args.exc_traceback)
    )

    fault_path = (directory or log_dir()) / _FAULT_FILE
    faulthandler.enable(file=fault_path.open("a", encoding="utf-8"), all_threads=True)
    logger.info("fault handler writing to %s", fault_path, extra={"event": "fault_handler_enabled"})
