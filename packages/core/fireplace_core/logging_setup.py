"""Opt-in structured file logging for the animation loop.

stdout is the animation surface and a default run writes no files, so the
`fireplace` logger only gets a JSON file handler (and a fault log) when
`diagnostics.log_to_file` is enabled. Otherwise records go to a NullHandler.
"""

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
from typing import Any, TextIO

from .config import DiagnosticsConfig, config_root


_LOGGER_NAME = "fireplace"
# Structured fields copied from `extra=` into the JSON line.
_EVENT_FIELDS = ("event", "stage", "ticks", "frame_index", "frames", "loop_ms", "crash_id")

_fault_file: TextIO | None = None


def log_dir() -> Path:
    return config_root() / "logs"


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts_utc": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for name in _EVENT_FIELDS:
            if hasattr(record, name):
                payload[name] = getattr(record, name)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)


def log_event(event: str, msg: str, level: int = logging.INFO, **fields: Any) -> None:
    get_logger().log(level, msg, extra={"event": event, **fields})


def _reset_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def configure_logging(diagnostics: DiagnosticsConfig | None = None, directory: Path | None = None) -> logging.Logger:
    """(Re)attach the handlers for ``diagnostics``; touches the filesystem only when file logging is on."""
    diagnostics = diagnostics or DiagnosticsConfig()
    logger = get_logger()
    _reset_handlers(logger)
    logger.propagate = False

    if not diagnostics.log_to_file:
        logger.addHandler(logging.NullHandler())
        return logger

    logger.setLevel(getattr(logging, diagnostics.log_level, logging.INFO))
    path = (directory or log_dir()) / "fireplace.log"
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.TimedRotatingFileHandler(
        filename=str(path),
        when="midnight",
        backupCount=max(2, diagnostics.keep_log_files),
        encoding="utf-8",
    )
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)
    log_event("logging_configured", f"file logging enabled path={path}")
    return logger


def _enable_fault_log(directory: Path) -> None:
    global _fault_file
    if _fault_file is not None:
        return
    directory.mkdir(parents=True, exist_ok=True)
    _fault_file = (directory / "fault.log").open("a", encoding="utf-8")
    faulthandler.enable(file=_fault_file, all_threads=True)
    log_event("fault_log_enabled", "fault handler enabled")


def install_crash_hooks(diagnostics: DiagnosticsConfig | None = None, directory: Path | None = None) -> None:
    """Route uncaught exceptions through the logger; the fault log follows the file logging switch."""
    diagnostics = diagnostics or DiagnosticsConfig()

    def _log_uncaught(exc_type, exc_value, exc_tb) -> None:
        if not issubclass(exc_type, KeyboardInterrupt):
            crash_id = str(uuid.uuid4())
            get_logger().critical(
                f"uncaught exception crash_id={crash_id}",
                exc_info=(exc_type, exc_value, exc_tb),
                extra={"event": "uncaught_exception", "crash_id": crash_id},
            )
        sys.__excepthook__(exc_type, exc_value, exc_tb)

    def _thread_hook(args: threading.ExceptHookArgs) -> None:
        crash_id = str(uuid.uuid4())
        get_logger().critical(
            f"thread exception crash_id={crash_id}",
            exc_info=(args.exc_type, args.exc_value, args.exc_traceback),
            extra={"event": "thread_exception", "crash_id": crash_id},
        )

    sys.excepthook = _log_uncaught
    threading.excepthook = _thread_hook
    if diagnostics.log_to_file:
        _enable_fault_log(directory or log_dir())
