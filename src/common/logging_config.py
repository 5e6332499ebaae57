"""
Logging configuration for AppReferenceHub.

Console output is colored on a terminal; ``json_logs`` switches every
handler to one JSON object per line. Structured fields added with
LogContext are kept per thread, so concurrent catalog mutations never
see each other's fields.
"""

from __future__ import annotations

import json
import logging
import logging.handlers
import sys
import threading
from pathlib import Path
from typing import Optional, Dict, Any, List

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(filename)s:%(lineno)d] %(message)s"

_context = threading.local()
_factory_lock = threading.Lock()
_factory_installed = False


def _context_stack() -> List[Dict[str, Any]]:
    stack = getattr(_context, "stack", None)
    if stack is None:
        stack = _context.stack = []
    return stack


def current_context() -> Dict[str, Any]:
    """Fields active in this thread, innermost LogContext winning."""
    merged: Dict[str, Any] = {}
    for fields in _context_stack():
        merged.update(fields)
    return merged


def _install_record_factory() -> None:
    """Wrap the record factory once so records pick up this thread's context."""
    global _factory_installed
    with _factory_lock:
        if _factory_installed:
            return
        base_factory = logging.getLogRecordFactory()

        def record_factory(*args, **kwargs):
            record = base_factory(*args, **kwargs)
            fields = current_context()
            if fields:
                record.extra_data = fields
            return record

        logging.setLogRecordFactory(record_factory)
        _factory_installed = True


class JSONFormatter(logging.Formatter):
    """One JSON object per record; Arabic text is written unescaped."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
        }

        extra = getattr(record, "extra_data", None)
        if extra:
            log_data["data"] = extra

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


class ColoredFormatter(logging.Formatter):
    """Console formatter coloring the level name."""

    COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        levelname = record.levelname
        record.levelname = f"{self.COLORS.get(record.levelno, '')}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def _console_formatter(json_logs: bool) -> logging.Formatter:
    if json_logs:
        return JSONFormatter()
    if sys.stderr.isatty():
        return ColoredFormatter(LOG_FORMAT)
    return logging.Formatter(LOG_FORMAT)


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    json_logs: bool = False,
):
    """
    Configure logging for AppReferenceHub.

    Args:
        level: Console logging level (default: INFO)
        log_file: Rotating log file; records at DEBUG and above go there
        json_logs: Emit JSON lines instead of plain text on every handler
    """
    _install_record_factory()

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(logging.DEBUG if log_file else level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(_console_formatter(json_logs))
    root_logger.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(JSONFormatter() if json_logs else logging.Formatter(FILE_FORMAT))
        root_logger.addHandler(file_handler)

    logging.getLogger("jinja2").setLevel(logging.WARNING)


class LogContext:
    """
    Attach structured fields to records logged in the current thread.

    Contexts nest; inner fields override outer ones until the inner
    context exits.

    Example:
        with LogContext(app_id="1", operation="update"):
            logger.info("Updated application")  # record.extra_data holds both fields
    """

    def __init__(self, **fields):
        self.fields = fields

    def __enter__(self):
        _install_record_factory()
        _context_stack().append(self.fields)
        return self

    def __exit__(self, *args):
        _context_stack().pop()
