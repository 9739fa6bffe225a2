"""
reqlog.api.composition

Purpose:
    Composition root: decides which Log implementation the rest of the app gets.
    Every Log handed out is a stdlib-backed Log wrapped in RequestLogDecorator,
    reading the ambient request context on each call.
"""

from __future__ import annotations

from reqlog.api.logging.log import LogFactory, StdlibLogFactory
from reqlog.api.logging.request_context import current_request_context
from reqlog.api.logging.request_log_decorator import RequestLogFactory


def build_log_factory(backend: LogFactory | None = None) -> LogFactory:
    return RequestLogFactory(backend or StdlibLogFactory(), current_request_context)
