from __future__ import annotations

import logging
import time
import uuid

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from app.config import settings

logger = logging.getLogger(__name__)


def install_middleware(app: FastAPI) -> None:
    """Request ids, one access-log line per request, and 500s for unhandled errors."""

    @app.middleware("http")
    async def request_context(request: Request, call_next):
        request_id = request.headers.get(settings.REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            logger.exception("[%s] unhandled error on %s %s", request_id, request.method, request.url.path)
            response = PlainTextResponse("Internal Server Error", status_code=500)

        elapsed_ms = (time.perf_counter() - started) * 1000
        response.headers[settings.REQUEST_ID_HEADER] = request_id
        logger.info(
            "[%s] %s %s %d %.1fms",
            request_id, request.method, request.url.path, response.status_code, elapsed_ms,
        )
        return response
