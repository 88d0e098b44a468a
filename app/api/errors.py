from __future__ import annotations

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from app.core.errors import EventRepositoryError

logger = logging.getLogger(__name__)


async def event_repository_error_handler(
    request: Request, exc: EventRepositoryError
) -> JSONResponse:
    logger.error(
        "Event lookup failed",
        extra={"props": {"path": request.url.path, "error": str(exc)}},
    )
    body = {"error": {"code": "event_lookup_failed", "message": str(exc)}}
    return JSONResponse(status_code=503, content=body)
