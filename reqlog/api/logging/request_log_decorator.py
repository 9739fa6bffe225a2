"""
reqlog.api.logging.request_log_decorator

Purpose:
    Log decorator that prefixes every message with the current request id.
    Inside a request scope: "Request id: <id> <message>".
    Outside one: the message is forwarded unchanged.

Notes:
    - The context is looked up on every call through the injected supplier,
      so one decorator instance can be shared by all requests.
    - No error handling: whatever the inner Log raises propagates.
"""

from __future__ import annotations

from typing import Any, Callable

from reqlog.api.logging.log import Log, LogFactory
from reqlog.api.logging.request_context import RequestContext

RequestContextSupplier = Callable[[], RequestContext | None]


class RequestLogDecorator:
    def __init__(self, log: Log, get_request_context: RequestContextSupplier) -> None:
        self._log = log
        self._get_request_context = get_request_context

    def _with_request_id(self, message: str) -> str:
        ctx = self._get_request_context()
        if ctx is None:
            return message
        return f"Request id: {ctx.id} {message}"

    def info(self, message: str) -> None:
        self._log.info(self._with_request_id(message))

    def debug(self, message: str) -> None:
        self._log.debug(self._with_request_id(message))

    def error(self, message: str, exc: BaseException | None = None) -> None:
        self._log.error(self._with_request_id(message), exc)


class RequestLogFactory:
    """LogFactory that wraps every Log produced by `inner` in a RequestLogDecorator."""

    def __init__(self, inner: LogFactory, get_request_context: RequestContextSupplier) -> None:
        self._inner = inner
        self._get_request_context = get_request_context

    def get_logger(self, owner: Any) -> Log:
        return RequestLogDecorator(self._inner.get_logger(owner), self._get_request_context)
