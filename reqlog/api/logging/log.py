"""
reqlog.api.logging.log

Purpose:
    Minimal logging capability used by routes and middleware.
    A Log forwards each message to one of three backend callables; it does not
    buffer or format anything itself.

Notes:
    - StdlibLogFactory binds a Log to a stdlib `logging.Logger`, named after
      the owner (class, module or plain logger name).
    - Backend errors are not caught here.
"""

from __future__ import annotations

import logging
from types import ModuleType
from typing import Any, Callable, Protocol, runtime_checkable

InfoSink = Callable[[str], None]
DebugSink = Callable[[str], None]
ErrorSink = Callable[[str, BaseException | None], None]


@runtime_checkable
class Log(Protocol):
    def info(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def error(self, message: str, exc: BaseException | None = None) -> None: ...


@runtime_checkable
class LogFactory(Protocol):
    def get_logger(self, owner: Any) -> Log: ...


class CallbackLog:
    """Log implementation that delegates to injected per-level callables."""

    def __init__(self, log_info: InfoSink, log_debug: DebugSink, log_error: ErrorSink) -> None:
        self._log_info = log_info
        self._log_debug = log_debug
        self._log_error = log_error

    def info(self, message: str) -> None:
        self._log_info(message)

    def debug(self, message: str) -> None:
        self._log_debug(message)

    def error(self, message: str, exc: BaseException | None = None) -> None:
        self._log_error(message, exc)


def logger_name_for(owner: Any) -> str:
    """
    Resolve a stdlib logger name for `owner`.

    - str -> used as-is
    - module -> module.__name__
    - class -> "<module>.<qualname>"
    - anything else -> name of its class
    """
    if isinstance(owner, str):
        return owner
    if isinstance(owner, ModuleType):
        return owner.__name__
    if not isinstance(owner, type):
        owner = type(owner)
    return f"{owner.__module__}.{owner.__qualname__}"


class StdlibLogFactory:
    """LogFactory backed by the stdlib `logging` module."""

    def get_logger(self, owner: Any) -> Log:
        logger = logging.getLogger(logger_name_for(owner))

        def _log_error(message: str, exc: BaseException | None = None) -> None:
            logger.error(message, exc_info=exc)

        return CallbackLog(logger.info, logger.debug, _log_error)
