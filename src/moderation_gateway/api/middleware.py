"""FastAPI middleware for request correlation.

Every request carries a request id in the structlog context, taken from the
caller's X-Request-ID header when it is well formed. The configured model id
is bound as well, so upstream failures can be traced to the model that
produced them. Request bodies are never read here: submitted text stays out
of the logs.
"""

import re
import time
import uuid
from typing import Callable

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

logger = structlog.get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
_REQUEST_ID_PATTERN = re.compile(r"[A-Za-z0-9._:\-]{1,128}")


def resolve_request_id(header_value: str | None) -> str:
    """Reuse a caller-supplied request id if it is safe to log, else mint one."""
    if header_value and _REQUEST_ID_PATTERN.fullmatch(header_value):
        return header_value
    return str(uuid.uuid4())


class RequestTracingMiddleware(BaseHTTPMiddleware):
    """Bind request_id and model to the log context and echo the id back."""

    def __init__(self, app: ASGIApp, model_id: str):
        super().__init__(app)
        self.model_id = model_id

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Response]
    ) -> Response:
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))

        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            model=self.model_id,
        )

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.error(
                "Request failed",
                duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
            )
            raise
        else:
            logger.info(
                "Request completed",
                status_code=response.status_code,
                body_bytes=request.headers.get("content-length"),
                duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
            )
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            structlog.contextvars.clear_contextvars()
