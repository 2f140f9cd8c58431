"""Logging setup for the ``podfeed`` command line and embedding applications."""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Optional

from . import config
from .utils.logging import sanitize_log_message

_LOGGING_CONFIGURED = False
_ERROR_HANDLER: Optional[RotatingFileHandler] = None


class SafeFormatter(logging.Formatter):
    """Formatter that escapes control characters and masks URL credentials.

    The message is rendered (``msg % args``) before sanitizing so that
    arguments are covered as well.
    """

    def format(self, record: logging.LogRecord) -> str:
        record.msg = sanitize_log_message(record.getMessage())
        record.args = ()
        return super().format(record)


class SafeJSONFormatter(logging.Formatter):
    """One JSON object per record, with sanitized values."""

    _DEFAULT_FIELDS = {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
    }

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, timezone.utc)
        payload: Dict[str, Any] = {
            "timestamp": timestamp.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": sanitize_log_message(record.getMessage()),
        }
        if record.exc_info:
            payload["exc_info"] = sanitize_log_message(
                self.formatException(record.exc_info), strip_control_chars=False
            )
        if record.stack_info:
            payload["stack"] = self.formatStack(record.stack_info)

        extras: Dict[str, Any] = {}
        for key, value in record.__dict__.items():
            if key in self._DEFAULT_FIELDS:
                continue
            extras[key] = sanitize_log_message(value) if isinstance(value, str) else value
        if extras:
            payload["extra"] = extras

        return json.dumps(payload, ensure_ascii=False, default=str)


def _make_formatter(log_format: Optional[str] = None) -> logging.Formatter:
    if (log_format or config.LOG_FORMAT) == "json":
        return SafeJSONFormatter()
    return SafeFormatter("%(asctime)s %(levelname)s %(name)s: %(message)s")


def configure_logging(*, force: bool = False) -> None:
    """Install safe formatters on the root logger.

    Runs once per process unless ``force`` is set.  When ``PODFEED_LOG_DIR``
    is configured, errors are additionally written to a rotating
    ``errors.log`` in that directory.
    """

    global _LOGGING_CONFIGURED, _ERROR_HANDLER

    if _LOGGING_CONFIGURED and not force:
        return

    level = getattr(logging, config.LOG_LEVEL, logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(level=level)
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if _ERROR_HANDLER is not None:
        root_logger.removeHandler(_ERROR_HANDLER)
        _ERROR_HANDLER.close()
        _ERROR_HANDLER = None

    formatter = _make_formatter()
    for handler in root_logger.handlers:
        handler.setFormatter(formatter)
        if isinstance(handler, logging.StreamHandler):
            handler.setLevel(level)

    if config.LOG_DIR_PATH is not None:
        config.LOG_DIR_PATH.mkdir(parents=True, exist_ok=True)
        error_handler = RotatingFileHandler(
            config.LOG_DIR_PATH / "errors.log",
            maxBytes=config.LOG_MAX_BYTES,
            backupCount=config.LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(formatter)
        root_logger.addHandler(error_handler)
        _ERROR_HANDLER = error_handler

    _LOGGING_CONFIGURED = True


__all__ = ["SafeFormatter", "SafeJSONFormatter", "configure_logging"]
