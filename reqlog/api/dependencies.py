"""
reqlog.api.dependencies

Purpose:
    FastAPI dependencies that hand routes their collaborators from app.state
    (populated by create_app).
"""

from __future__ import annotations

from typing import Any, Callable

from fastapi import Request

from reqlog.api.logging.log import Log, LogFactory
from reqlog.api.settings import Settings


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_log_factory(request: Request) -> LogFactory:
    return request.app.state.log_factory


def request_log(owner: Any) -> Callable[[Request], Log]:
    """
    Build a dependency returning the request-aware Log for `owner`.

    Usage:
        log: Log = Depends(request_log(__name__))
    """

    def _dependency(request: Request) -> Log:
        return get_log_factory(request).get_logger(owner)

    return _dependency
