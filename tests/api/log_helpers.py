"""
tests.api.log_helpers

Helpers shared by API tests for inspecting log output.
"""

from __future__ import annotations

import re

REQUEST_ID_LINE = re.compile(r"^Request id: (?P<rid>\S+) (?P<text>.*)$", re.DOTALL)


class RecordingLog:
    """In-memory Log used to observe exactly what reaches the backend."""

    def __init__(self) -> None:
        self.entries: list[tuple[str, str, BaseException | None]] = []

    def info(self, message: str) -> None:
        self.entries.append(("info", message, None))

    def debug(self, message: str) -> None:
        self.entries.append(("debug", message, None))

    def error(self, message: str, exc: BaseException | None = None) -> None:
        self.entries.append(("error", message, exc))

    @property
    def messages(self) -> list[str]:
        return [m for _, m, _ in self.entries]


def split_request_id(message: str) -> tuple[str | None, str]:
    """Return (request_id, text); request_id is None for an unprefixed message."""
    m = REQUEST_ID_LINE.match(message)
    if m is None:
        return None, message
    return m.group("rid"), m.group("text")


def app_messages(caplog) -> list[tuple[int, str]]:
    """(levelno, message) for records emitted by our own loggers."""
    return [(r.levelno, r.getMessage()) for r in caplog.records if r.name.startswith("reqlog.")]
