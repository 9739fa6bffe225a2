"""
CLI entrypoint for the reqlog API.
Runs the web application until SIGINT/SIGTERM, then stops it cleanly.

Usage:
    python -m reqlog.api [--host HOST] [--port PORT] [--log-level LEVEL]

Exit codes:
    0 - stopped by signal
    1 - server stopped on its own
"""

from __future__ import annotations

import argparse
import signal
import sys
import threading

from reqlog.api.settings import Settings, get_settings

_STOP_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="reqlog-api", description="Ping API with per-request log ids")
    p.add_argument("--host", default=None, help="Listen host (default: REQLOG_HOST or localhost)")
    p.add_argument("--port", type=int, default=None, help="Listen port (default: REQLOG_PORT or 8080)")
    p.add_argument("--log-level", default=None, help="Log level (default: REQLOG_LOG_LEVEL or INFO)")
    return p


def settings_from_args(args: argparse.Namespace) -> Settings:
    overrides = {
        k: v
        for k, v in (("host", args.host), ("port", args.port), ("log_level", args.log_level))
        if v is not None
    }
    return get_settings().model_copy(update=overrides)


def serve(settings: Settings, stopping: threading.Event) -> int:
    # Imported late so the app is built with the CLI settings, not at parse time.
    from reqlog.api.server import WebApplication

    web_app = WebApplication(settings)
    web_app.start()
    try:
        while not stopping.wait(0.5):
            if not web_app.is_running:
                return 1
    finally:
        web_app.stop()
    return 0


def main(argv: list[str] | None = None) -> int:
    settings = settings_from_args(_build_parser().parse_args(argv))
    stopping = threading.Event()

    def _request_stop(signum, frame) -> None:
        stopping.set()

    previous = {sig: signal.signal(sig, _request_stop) for sig in _STOP_SIGNALS}
    try:
        return serve(settings, stopping)
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)


if __name__ == "__main__":
    sys.exit(main())
