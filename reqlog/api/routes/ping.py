"""
reqlog.api.routes.ping

Purpose:
    GET /api/ping. Logs before and after a simulated downstream delay and
    answers "Pong".
"""

from __future__ import annotations

import asyncio

from fastapi import APIRouter, Depends

from reqlog.api.contracts.api_paths import ApiPaths
from reqlog.api.contracts.api_tags import ApiTags
from reqlog.api.dependencies import get_app_settings, request_log
from reqlog.api.logging.log import Log
from reqlog.api.settings import Settings

_paths = ApiPaths()
_tags = ApiTags()

router = APIRouter(tags=[_tags.ping])


@router.get(_paths.ping)
async def ping(
    log: Log = Depends(request_log(__name__)),
    settings: Settings = Depends(get_app_settings),
) -> str:
    log.info("Ping start")

    await asyncio.sleep(settings.ping_delay_ms / 1000)

    # No request id passed around; the decorated log still finds it here.
    log.info("Ping end")
    return "Pong"
