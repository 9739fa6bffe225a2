"""
reqlog.api.contracts.api_tags

Purpose:
    Central definition of FastAPI tags to avoid scattered string literals.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ApiTags:
    ping: str = "ping"
