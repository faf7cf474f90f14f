"""Structured logging for the composition engine.

All engine loggers hang off one ``extendkit`` logger that owns a single
console handler. Modules ask for a dotted child (``extendkit.registry``) and
let records propagate, so the handler, level and formatter are configured in
one place.

The initial level comes from ``EXTENDKIT_LOG_LEVEL`` (default ``WARNING``),
keeping per-composition debug events silent unless requested. After that the
level only changes through ``configure_logger`` (``apply_logging`` for engine
settings) or an explicitly set ``EXTENDKIT_LOG_LEVEL``.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Optional

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "extendkit"
LOG_LEVEL_ENV = "EXTENDKIT_LOG_LEVEL"

_READY_ATTR = "_extendkit_logger_initialized"
_CONSOLE_ATTR = "_extendkit_console_handler"
_FILE_ATTR = "_extendkit_file_handler"
_JSON_ATTR = "_extendkit_json_mode"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
_FILE_MAX_BYTES = 5 * 1024 * 1024
_FILE_BACKUPS = 3

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _parse_level(value: str | None, default: int = logging.WARNING) -> int:
    """Map a level name (any case) to its numeric value, else ``default``."""
    if not value:
        return default
    return _LEVELS.get(value.strip().upper(), default)


def _managed(logger: logging.Logger, marker: str) -> list[logging.Handler]:
    return [h for h in logger.handlers if getattr(h, marker, False)]


def _drop(logger: logging.Logger, handler: logging.Handler) -> None:
    logger.removeHandler(handler)
    with contextlib.suppress(Exception):
        handler.close()


def _console_handler() -> logging.StreamHandler:
    handler = logging.StreamHandler(sys.stderr)
    setattr(handler, _CONSOLE_ATTR, True)
    return handler


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Return the ``extendkit`` logger, creating its console handler once.

    ``json_mode`` and ``level`` apply on first use only. Later changes go
    through ``configure_logger``, or through ``EXTENDKIT_LOG_LEVEL`` when it is
    set. The console handler is pointed at the current ``sys.stderr``, which
    test capture replaces between tests.
    """
    logger = logging.getLogger(BASE_LOGGER_NAME)
    env_level = os.getenv(LOG_LEVEL_ENV)

    if not getattr(logger, _READY_ATTR, False):
        logger.handlers[:] = [_console_handler()]
        logger.propagate = False
        logger.setLevel(_parse_level(env_level, default=level))
        setattr(logger, _JSON_ATTR, json_mode)
        setattr(logger, _READY_ATTR, True)
    elif env_level:
        logger.setLevel(_parse_level(env_level, default=logger.level))

    formatter = _formatter(getattr(logger, _JSON_ATTR, json_mode))
    for handler in _managed(logger, _CONSOLE_ATTR):
        stream = getattr(handler, "stream", None)
        if stream is None or getattr(stream, "closed", False):
            _drop(logger, handler)
            handler = _console_handler()
            logger.addHandler(handler)
        elif handler.stream is not sys.stderr:
            handler.setStream(sys.stderr)
        handler.setLevel(logger.level)
        handler.setFormatter(formatter)
    return logger


def get_logger(
    name: str = BASE_LOGGER_NAME,
    json_mode: bool = True,
    level: int = logging.WARNING,
) -> logging.Logger:
    """Return the shared engine logger or a propagating child of it.

    Child names should be dotted under ``extendkit`` so their records reach
    the managed handler.
    """
    base = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == BASE_LOGGER_NAME:
        return base
    child = logging.getLogger(name)
    for handler in _managed(child, _CONSOLE_ATTR):
        _drop(child, handler)
    child.setLevel(logging.NOTSET)
    child.propagate = True
    return child


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Change level, formatter and file output of the shared logger.

    Parameters
    ----------
    level:
        Numeric level or level name; ``None`` keeps the current level.
    file_path:
        Attach a rotating file handler writing to this path, replacing a
        managed handler for another path. ``None`` removes the managed file
        handler.
    json_mode:
        JSON lines when true, plain text otherwise.

    Returns
    -------
    logging.Logger
        The base logger. Handlers added by other code are left alone.
    """
    logger = get_logger(BASE_LOGGER_NAME, json_mode=json_mode)
    setattr(logger, _JSON_ATTR, json_mode)
    for handler in _managed(logger, _CONSOLE_ATTR):
        handler.setFormatter(_formatter(json_mode))
    if level is not None:
        numeric = _parse_level(level, default=logger.level) if isinstance(level, str) else level
        logger.setLevel(numeric)
        for handler in logger.handlers:
            handler.setLevel(numeric)

    file_handlers = _managed(logger, _FILE_ATTR)
    if file_path is None:
        for handler in file_handlers:
            _drop(logger, handler)
        return logger

    target = os.path.abspath(os.path.expanduser(file_path))
    os.makedirs(os.path.dirname(target), exist_ok=True)
    current = None
    for handler in file_handlers:
        if getattr(handler, "baseFilename", None) == target:
            current = handler
        else:
            _drop(logger, handler)
    if current is None:
        current = RotatingFileHandler(target, maxBytes=_FILE_MAX_BYTES, backupCount=_FILE_BACKUPS, encoding="utf-8")
        setattr(current, _FILE_ATTR, True)
        logger.addHandler(current)
    current.setFormatter(_formatter(json_mode))
    current.setLevel(logger.level)
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
    """Log ``event`` as one JSON object.

    ``ctx`` fields come first, then ``fields``; ``None`` values are dropped
    unless ``keep_none`` is set. Nothing is serialized when ``level`` is
    disabled.
    """
    if not logger.isEnabledFor(level):
        return
    payload: dict[str, Any] = {"event": event}
    if ctx is not None:
        payload.update(ctx.to_dict())
    payload.update(fields if keep_none else {k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=repr))


__all__ = [
    "BASE_LOGGER_NAME",
    "LOG_LEVEL_ENV",
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
]
