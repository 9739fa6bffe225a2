"""
reqlog.api.error_handlers

Purpose:
    Register global exception handlers that return stable ErrorResponse objects.
    Ensures request_id is always included.

Notes:
    - The catch-all handler runs outside the request scope (after
      RequestContextMiddleware has closed it), so it re-enters the scope from
      request.state before logging.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from reqlog.api.contracts.error_contract import ApiErrorCode, ErrorResponse
from reqlog.api.errors import ApiError
from reqlog.api.logging.log import Log
from reqlog.api.logging.request_context import (
    RequestContext,
    current_request_context,
    request_scope,
)

NO_REQUEST_ID = "-"


def _get_request_id(request: Request) -> str:
    rid = getattr(getattr(request, "state", None), "request_id", None)
    if isinstance(rid, str) and rid:
        return rid

    ctx = current_request_context()
    if ctx is not None:
        return ctx.id

    return NO_REQUEST_ID


def register_error_handlers(app: FastAPI, log: Log) -> None:
    """
    Register global exception handlers on the FastAPI app.
    """

    @app.exception_handler(ApiError)
    async def handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
        rid = _get_request_id(request)
        payload = ErrorResponse(
            request_id=rid,
            error_code=exc.error_code,
            message=exc.message,
            details=exc.details,
        )
        return JSONResponse(status_code=exc.status_code, content=payload.model_dump(mode="json"))

    @app.exception_handler(Exception)
    async def handle_unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        rid = _get_request_id(request)

        if rid == NO_REQUEST_ID:
            log.error("Unhandled exception in API request", exc)
        else:
            with request_scope(RequestContext(id=rid)):
                log.error("Unhandled exception in API request", exc)

        payload = ErrorResponse(
            request_id=rid,
            error_code=ApiErrorCode.INTERNAL_ERROR,
            message="Internal server error",
            details=None,
        )
        return JSONResponse(status_code=500, content=payload.model_dump(mode="json"))
