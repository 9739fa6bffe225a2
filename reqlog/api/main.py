"""
reqlog.api.main

Purpose:
    FastAPI application entrypoint: builds the app and wires the logging
    pipeline (request scope -> request timing -> routes).

Notes:
    - `app` is importable for `uvicorn reqlog.api.main:app`.
"""

from __future__ import annotations

from fastapi import FastAPI

from reqlog.api.composition import build_log_factory
from reqlog.api.error_handlers import register_error_handlers
from reqlog.api.logging.log import LogFactory
from reqlog.api.logging.logging_config import configure_logging
from reqlog.api.middleware.request_context import RequestContextMiddleware
from reqlog.api.middleware.request_timing import RequestTimingMiddleware
from reqlog.api.routes.ping import router as ping_router
from reqlog.api.settings import Settings, get_settings


def create_app(settings: Settings | None = None, log_backend: LogFactory | None = None) -> FastAPI:
    settings = settings or get_settings()

    configure_logging(settings.log_level)

    log_factory = build_log_factory(log_backend)

    app = FastAPI(title=settings.service_name, version=settings.service_version)
    app.state.settings = settings
    app.state.log_factory = log_factory

    # Starlette runs the last added middleware first: the scope must wrap the timer.
    app.add_middleware(RequestTimingMiddleware, log=log_factory.get_logger(RequestTimingMiddleware))
    app.add_middleware(RequestContextMiddleware)

    register_error_handlers(app, log_factory.get_logger("reqlog.api.error_handlers"))

    app.include_router(ping_router, prefix=settings.api_prefix)

    return app


app = create_app()
