"""
Unit tests for request tracing middleware.
"""

import uuid

import pytest
import structlog
from starlette.requests import Request
from starlette.responses import Response

from moderation_gateway.api.middleware import RequestTracingMiddleware, resolve_request_id


def _request(headers: dict[str, str] | None = None) -> Request:
    return Request({
        "type": "http",
        "method": "POST",
        "path": "/api/analyze",
        "query_string": b"",
        "headers": [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()],
    })


async def _noop_app(scope, receive, send):
    pass


def test_well_formed_request_id_is_reused():
    assert resolve_request_id("req-123.abc:1") == "req-123.abc:1"


@pytest.mark.parametrize("header", [None, "", "has spaces", "x" * 129, "line\nbreak", "trailing\n"])
def test_unusable_request_id_is_replaced(header):
    request_id = resolve_request_id(header)
    
    assert request_id != header
    uuid.UUID(request_id)


@pytest.mark.asyncio
async def test_context_bound_during_request_and_cleared_after():
    middleware = RequestTracingMiddleware(_noop_app, model_id="test-org/sentiment-model")
    seen = {}
    
    async def call_next(request):
        seen.update(structlog.contextvars.get_contextvars())
        return Response("ok")
    
    response = await middleware.dispatch(_request({"X-Request-ID": "abc-123"}), call_next)
    
    assert seen["request_id"] == "abc-123"
    assert seen["model"] == "test-org/sentiment-model"
    assert seen["path"] == "/api/analyze"
    assert response.headers["X-Request-ID"] == "abc-123"
    assert structlog.contextvars.get_contextvars() == {}


@pytest.mark.asyncio
async def test_context_cleared_when_handler_raises():
    middleware = RequestTracingMiddleware(_noop_app, model_id="m")
    
    async def call_next(request):
        raise RuntimeError("boom")
    
    with pytest.raises(RuntimeError):
        await middleware.dispatch(_request(), call_next)
    
    assert structlog.contextvars.get_contextvars() == {}
