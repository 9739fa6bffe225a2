"""
reqlog.api.middleware.request_timing

Purpose:
    Middleware that logs the wall-clock duration of every request:
    "Request <path-and-query> took <N> ms".

Notes:
    - Must sit inside RequestContextMiddleware so the line carries the request id.
    - On a downstream failure the same line is logged at error level with the
      exception attached, then the exception is re-raised unchanged.
    - Cancellation is not logged; it propagates as-is.
    - call_next returns once the response headers are ready, so time spent
      streaming a body (StreamingResponse) is not included. Responses built in
      one piece, like ping, are fully covered.
"""

from __future__ import annotations

import time
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from reqlog.api.logging.log import Log


def path_and_query(request: Request) -> str:
    query = request.url.query
    return f"{request.url.path}?{query}" if query else request.url.path


def elapsed_ms(started: float) -> int:
    return max(0, int((time.perf_counter() - started) * 1000))


class RequestTimingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, log: Log) -> None:
        super().__init__(app)
        self._log = log

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        started = time.perf_counter()
        try:
            response: Response = await call_next(request)
        except Exception as exc:
            self._log.error(f"Request {path_and_query(request)} took {elapsed_ms(started)} ms", exc)
            raise

        self._log.info(f"Request {path_and_query(request)} took {elapsed_ms(started)} ms")
        return response
