"""
reqlog.api.middleware.request_context

Purpose:
    Middleware that opens a request scope: every request gets a freshly
    generated RequestContext which stays ambient for the whole downstream chain.

Notes:
    - Incoming X-Request-Id / X-Correlation-Id headers are ignored; ids are
      always generated here.
    - The id is also put on request.state so global exception handlers, which
      run after the scope is closed, can still report it.
    - Request and response pass through untouched.
"""

from __future__ import annotations

from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from reqlog.api.logging.request_context import (
    RequestContext,
    reset_request_context,
    set_request_context,
)


class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        ctx = RequestContext.new()
        request.state.request_id = ctx.id

        token = set_request_context(ctx)
        try:
            return await call_next(request)
        finally:
            reset_request_context(token)
