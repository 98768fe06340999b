"""Base structured logging utilities for the resolver layer.

Rationale:
- Central place to configure consistent JSON (or plain) logging.
- Avoid sprinkling ad-hoc logger setup across modules.
- Dependency-free: only the standard ``logging`` package is used.

All package loggers are children of the shared ``artifactory_ci`` logger,
which owns the single console handler. The level can be overridden through
the ``ARTIFACTORY_CI_LOG_LEVEL`` environment variable.
"""
from __future__ import annotations

import logging
import json
import sys
import os
import contextlib
from logging.handlers import RotatingFileHandler
from typing import Any, Optional

from .log_support import JsonFormatter, LogContext


BASE_LOGGER_NAME = "artifactory_ci"
LOG_LEVEL_ENV = "ARTIFACTORY_CI_LOG_LEVEL"
PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_BASE_LOGGER_ATTR = "_artifactory_ci_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_artifactory_ci_console_handler"
_FILE_HANDLER_ATTR = "_artifactory_ci_file_handler"


def _formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(PLAIN_FORMAT)


def _console_handler(json_mode: bool, level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    return handler


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Initialize and return the shared ``artifactory_ci`` logger.

    ``level`` and ``ARTIFACTORY_CI_LOG_LEVEL`` only apply on first
    initialization; afterwards the level and formatters belong to
    ``configure_logger``.
    """

    logger = logging.getLogger(BASE_LOGGER_NAME)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        for existing in list(logger.handlers):
            if not getattr(existing, _CONSOLE_HANDLER_ATTR, False):
                continue
            stream_obj = getattr(existing, "stream", None)
            if stream_obj is None or getattr(stream_obj, "closed", False):
                # pytest's capsys swaps and closes sys.stderr between tests
                logger.removeHandler(existing)
                existing.close()
                replacement = _console_handler(json_mode, existing.level)
                if existing.formatter is not None:
                    replacement.setFormatter(existing.formatter)
                logger.addHandler(replacement)
                continue
            if isinstance(existing, logging.StreamHandler):
                existing.setStream(sys.stderr)
        return logger

    desired_level = _parse_level(os.getenv(LOG_LEVEL_ENV), default=level)
    logger.setLevel(desired_level)
    logger.handlers[:] = [_console_handler(json_mode, logging.NOTSET)]
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Parse a logging level string into an integer constant.

    Accepts common names (DEBUG, INFO, WARNING, ERROR, CRITICAL) case-insensitively.
    Falls back to ``default`` on unknown values.
    """
    if not value:
        return default
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool = True, level: int = logging.INFO) -> logging.Logger:
    """Return a logger that emits through the shared package handler.

    Child loggers carry no handlers of their own and propagate to the base
    logger, so a message is written exactly once.
    """
    base_logger = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == BASE_LOGGER_NAME:
        return base_logger
    if not name.startswith(BASE_LOGGER_NAME + "."):
        name = f"{BASE_LOGGER_NAME}.{name}"

    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        if getattr(handler, _CONSOLE_HANDLER_ATTR, False):
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


_UNSET: Any = object()


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = _UNSET,
    json_mode: Optional[bool] = None,
) -> logging.Logger:
    """Reconfigure the shared package logger at runtime.

    Parameters
    ----------
    level: int | str | None
        Desired logging level. Accepts numeric levels or names (e.g., "DEBUG").
        When ``None``, the current level is preserved.
    file_path: Optional[str]
        When a path is given, a rotating file handler writing to it is
        attached (reused if it already points there). An explicit ``None``
        removes any file handler previously attached by this function. When
        omitted, file handlers are left as they are.
    json_mode: Optional[bool]
        Whether to use the JSON formatter or a plain text formatter. When
        ``None``, existing formatters are kept (new handlers use JSON).

    Returns
    -------
    logging.Logger
        The configured base logger instance.
    """
    logger = _ensure_base_logger(json_mode=json_mode is not False, level=logging.INFO)

    if level is not None:
        if isinstance(level, str):
            logger.setLevel(_parse_level(level, default=logger.level))
        else:
            logger.setLevel(level)
        for h in logger.handlers:
            h.setLevel(logger.level)

    if json_mode is not None:
        for h in logger.handlers:
            h.setFormatter(_formatter(json_mode))

    if file_path is _UNSET:
        return logger

    managed_handlers = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    if file_path is None:
        for h in managed_handlers:
            logger.removeHandler(h)
            h.close()
        return logger

    abs_path = os.path.abspath(os.path.expanduser(file_path))
    os.makedirs(os.path.dirname(abs_path), exist_ok=True)

    existing: Optional[logging.FileHandler] = None
    for h in managed_handlers:
        if isinstance(h, logging.FileHandler) and getattr(h, "baseFilename", None) == abs_path:
            existing = h
        else:
            logger.removeHandler(h)
            h.close()

    if existing is None:
        # 10MB x 5 backups
        fh = RotatingFileHandler(abs_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
        setattr(fh, _FILE_HANDLER_ATTR, True)
        fh.setLevel(logger.level)
        fh.setFormatter(_formatter(json_mode is not False))
        logger.addHandler(fh)
    else:
        existing.setLevel(logger.level)

    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit a structured log event as a single JSON line.

    Parameters
    ----------
    logger: logging.Logger
        Logger instance (should be JSON formatted by ``get_logger``).
    event: str
        Event name (e.g. ``resolver.publisher``).
    ctx: LogContext | None
        Lookup context; merged shallowly.
    level: int
        Logging level of the emitted record.
    keep_none: bool
        When ``True``, preserve keys whose values are ``None``; otherwise drop them.
    **fields: Any
        Arbitrary serializable key/value pairs.
    """
    if not logger.isEnabledFor(level):
        return
    payload = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


def close_handlers() -> None:
    """Close and detach every handler owned by the shared logger."""
    logger = logging.getLogger(BASE_LOGGER_NAME)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        with contextlib.suppress(OSError):
            h.close()
    if hasattr(logger, _BASE_LOGGER_ATTR):
        delattr(logger, _BASE_LOGGER_ATTR)


__all__ = [
    "BASE_LOGGER_NAME",
    "LOG_LEVEL_ENV",
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
    "close_handlers",
]
