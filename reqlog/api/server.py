"""
reqlog.api.server

Purpose:
    Hosting for the API: WebApplication starts a uvicorn server on a background
    thread and stops it again, so an external supervisor (or tests) can drive
    the service lifecycle with start()/stop().

Notes:
    - log_config=None keeps uvicorn from replacing configure_logging().
    - Port 0 binds an ephemeral port; see bound_port / base_url after start().
"""

from __future__ import annotations

import threading
import time

import uvicorn
from fastapi import FastAPI

from reqlog.api.logging.log import StdlibLogFactory
from reqlog.api.main import create_app
from reqlog.api.settings import Settings, get_settings

_log = StdlibLogFactory().get_logger(__name__)


class WebApplication:
    def __init__(self, settings: Settings | None = None, app: FastAPI | None = None) -> None:
        self._settings = settings or get_settings()
        self._app = app or create_app(self._settings)
        self._server: uvicorn.Server | None = None
        self._thread: threading.Thread | None = None

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @property
    def bound_port(self) -> int:
        if self._server is None or not self._server.started:
            raise RuntimeError("WebApplication is not running")
        for server in self._server.servers:
            for sock in server.sockets:
                return sock.getsockname()[1]
        return self._settings.port

    @property
    def base_url(self) -> str:
        return f"http://{self._settings.host}:{self.bound_port}"

    def start(self, timeout_s: float = 10.0) -> None:
        if self._thread is not None:
            raise RuntimeError("WebApplication already started")

        config = uvicorn.Config(
            self._app,
            host=self._settings.host,
            port=self._settings.port,
            log_config=None,
            log_level=self._settings.log_level.lower(),
        )
        self._server = uvicorn.Server(config)
        self._thread = threading.Thread(target=self._server.run, name="reqlog-api", daemon=True)
        self._thread.start()

        deadline = time.monotonic() + timeout_s
        while not self._server.started:
            if not self._thread.is_alive():
                self._reset()
                raise RuntimeError("WebApplication failed to start")
            if time.monotonic() > deadline:
                self.stop()
                raise RuntimeError(f"WebApplication did not start within {timeout_s}s")
            time.sleep(0.05)

        _log.info(f"Listening on {self.base_url}")

    def stop(self, timeout_s: float = 10.0) -> None:
        if self._server is None or self._thread is None:
            return

        self._server.should_exit = True
        self._thread.join(timeout_s)
        if self._thread.is_alive():
            self._server.force_exit = True
            self._thread.join(timeout_s)

        _log.info("Stopped")
        self._reset()

    def _reset(self) -> None:
        self._server = None
        self._thread = None
