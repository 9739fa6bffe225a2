"""
tests.api.test_error_handling

Purpose:
    Failure paths through the middleware pipeline.

Covers:
    - Handler crash: timing line still logged (error level, with id), 500 ErrorResponse
      carries the same request id
    - ApiError: status/code preserved, timing logged at info
    - Unknown route: timing still logged
"""

from __future__ import annotations

import asyncio
import logging
import re

from fastapi.responses import StreamingResponse

from log_helpers import app_messages, split_request_id
from reqlog.api.contracts.error_contract import ApiErrorCode
from reqlog.api.errors import ApiError


def test_handler_failure_still_logs_duration_and_returns_500(client_factory, caplog) -> None:
    client = client_factory(raise_server_exceptions=False)

    @client.app.get("/api/boom")
    async def boom() -> str:
        raise RuntimeError("kaboom")

    caplog.set_level(logging.INFO)
    r = client.get("/api/boom")

    assert r.status_code == 500
    data = r.json()
    assert data["error_code"] == "INTERNAL_ERROR"
    assert data["message"] == "Internal server error"

    timing = [
        rec for rec in caplog.records
        if rec.name.startswith("reqlog.") and "Request /api/boom took" in rec.getMessage()
    ]
    assert len(timing) == 1
    assert timing[0].levelno == logging.ERROR
    assert isinstance(timing[0].exc_info[1], RuntimeError)

    rid, text = split_request_id(timing[0].getMessage())
    assert rid == data["request_id"]
    assert text.startswith("Request /api/boom took ")

    unhandled = [msg for lvl, msg in app_messages(caplog) if "Unhandled exception" in msg]
    assert unhandled == [f"Request id: {rid} Unhandled exception in API request"]


def test_api_error_keeps_status_and_request_id(client_factory, caplog) -> None:
    client = client_factory()

    @client.app.get("/api/missing")
    async def missing() -> str:
        raise ApiError(
            status_code=404,
            error_code=ApiErrorCode.NOT_FOUND,
            message="Nothing here",
            details={"what": "thing"},
        )

    caplog.set_level(logging.INFO)
    r = client.get("/api/missing")

    assert r.status_code == 404
    data = r.json()
    assert data["error_code"] == "NOT_FOUND"
    assert data["message"] == "Nothing here"
    assert data["details"] == {"what": "thing"}

    (level, msg), = app_messages(caplog)
    rid, text = split_request_id(msg)
    assert level == logging.INFO
    assert rid == data["request_id"]
    assert text.startswith("Request /api/missing took ")


def test_unknown_route_is_timed(client, caplog) -> None:
    caplog.set_level(logging.INFO)

    r = client.get("/api/nope")
    assert r.status_code == 404

    (_, msg), = app_messages(caplog)
    rid, text = split_request_id(msg)
    assert rid is not None
    assert text.startswith("Request /api/nope took ")


def test_error_codes_are_the_ones_handlers_emit() -> None:
    assert {c.value for c in ApiErrorCode} == {"INTERNAL_ERROR", "NOT_FOUND"}


def test_streamed_body_time_is_not_in_timing_line(client_factory, caplog) -> None:
    client = client_factory()

    async def slow_body():
        yield b"first"
        await asyncio.sleep(0.3)
        yield b"second"

    @client.app.get("/api/stream")
    async def stream() -> StreamingResponse:
        return StreamingResponse(slow_body(), media_type="text/plain")

    caplog.set_level(logging.INFO)
    r = client.get("/api/stream")
    assert r.text == "firstsecond"

    (_, msg), = app_messages(caplog)
    _, text = split_request_id(msg)
    m = re.match(r"^Request /api/stream took (\d+) ms$", text)
    assert m is not None, text
    assert int(m.group(1)) < 300
