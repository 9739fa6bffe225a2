"""
reqlog.api.logging.logging_config

Purpose:
    Central logging configuration for the API.
    Every line is rendered as "<asctime> | <level> | <logger>: <message>", so a
    request-scoped message reads "...: Request id: <id> <message>".

Notes:
    - The request id is added by RequestLogDecorator, not by the formatter.
    - Uvicorn loggers share our handler so server and app lines look alike.
    - Safe to call again (e.g. once at import, once with CLI settings): the
      same handler is reused and its level follows the latest call.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s: %(message)s"

_handler: logging.Handler | None = None


def _get_handler(level: int) -> logging.Handler:
    global _handler
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    _handler.setLevel(level)
    return _handler


def _configure_logger(logger_name: str, handler: logging.Handler, level: int) -> None:
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False


def configure_logging(level: str | int = logging.INFO) -> None:
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")

    handler = _get_handler(level)

    # Root/app logs (don't clear root handlers to avoid surprising other libs)
    root = logging.getLogger()
    root.setLevel(level)
    if handler not in root.handlers and not any(
        isinstance(h, logging.StreamHandler) for h in root.handlers
    ):
        root.addHandler(handler)

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        _configure_logger(name, handler, level)
