"""
reqlog.api.logging.request_context

Purpose:
    Request-scoped context storage using contextvars.
    The current RequestContext follows the logical flow of a request: it survives
    `await` suspension, is copied into tasks spawned downstream and into
    Starlette's worker threads, and is never visible to other requests.

Notes:
    - Outside any request (startup, background jobs, unit tests) the current
      context is None. That is not an error.
    - Thread-locals are not used: a request's continuations may resume on a
      different worker thread.
"""

from __future__ import annotations

import contextvars
import uuid
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class RequestContext:
    id: str

    @classmethod
    def new(cls) -> "RequestContext":
        return cls(id=str(uuid.uuid4()))


request_context_ctx_var: contextvars.ContextVar[RequestContext | None] = contextvars.ContextVar(
    "request_context",
    default=None,
)


def set_request_context(ctx: RequestContext) -> contextvars.Token:
    """
    Make `ctx` the ambient context for the rest of the current flow.

    Returns the token needed by reset_request_context().
    """
    return request_context_ctx_var.set(ctx)


def current_request_context() -> RequestContext | None:
    return request_context_ctx_var.get()


def reset_request_context(token: contextvars.Token) -> None:
    request_context_ctx_var.reset(token)


@contextmanager
def request_scope(ctx: RequestContext | None = None) -> Iterator[RequestContext]:
    """
    Run a block inside a request scope.

    A fresh RequestContext is generated when `ctx` is not given. The previous
    value is restored on exit, including when the block raises.
    """
    ctx = ctx or RequestContext.new()
    token = set_request_context(ctx)
    try:
        yield ctx
    finally:
        reset_request_context(token)
