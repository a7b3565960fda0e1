"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests.
"""

import json
from typing import Any, Callable

import httpx
import pytest

from moderation_gateway.config import Settings
from moderation_gateway.inference.huggingface_client import HuggingFaceClient


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with safe defaults for local testing.
    
    Override specific settings in individual tests as needed:
        def test_something(test_settings):
            test_settings.HF_MODEL_ID = "org/other-model"
    """
    return Settings(
        APP_NAME="Text Moderation Gateway (Test)",
        APP_VERSION="0.1.0",
        DEBUG=True,
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",
        HF_API_TOKEN="hf_test_token",
        HF_BASE_URL="https://inference.test/hf-inference",
        HF_MODEL_ID="test-org/sentiment-model",
        HF_TIMEOUT=5.0,
        MAX_TEXT_LENGTH=5000,
        PROMETHEUS_ENABLED=False,
    )


@pytest.fixture
def flat_predictions() -> list[dict[str, Any]]:
    """Flat upstream payload for "I hate you"."""
    return [
        {"label": "negative", "score": 0.91},
        {"label": "positive", "score": 0.05},
        {"label": "neutral", "score": 0.04},
    ]


@pytest.fixture
def nested_predictions(flat_predictions) -> list[list[dict[str, Any]]]:
    """Same payload wrapped in one extra array, as some models return it."""
    return [flat_predictions]


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    """Requests seen by the stub upstream, in order."""
    return []


@pytest.fixture
def stub_upstream(recorded_requests) -> Callable[..., httpx.MockTransport]:
    """Factory fixture for an httpx.MockTransport answering every call the same way.
    
    Usage:
        def test_something(stub_upstream):
            transport = stub_upstream(json_body=[{"label": "positive", "score": 0.9}])
            transport = stub_upstream(status_code=503, text="loading")
            transport = stub_upstream(exc=httpx.ConnectError("refused"))
    """
    def _create(
        status_code: int = 200,
        json_body: Any = None,
        text: str | None = None,
        exc: Exception | None = None,
    ) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            if exc is not None:
                raise exc
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(status_code, content=json.dumps(json_body).encode())
        
        return httpx.MockTransport(handler)
    
    return _create


@pytest.fixture
def make_client(test_settings) -> Callable[[httpx.MockTransport], HuggingFaceClient]:
    """Factory fixture building a HuggingFaceClient on a stub transport."""
    def _create(transport: httpx.MockTransport) -> HuggingFaceClient:
        return HuggingFaceClient(
            api_token=test_settings.HF_API_TOKEN.get_secret_value(),
            base_url=test_settings.HF_BASE_URL,
            model_id=test_settings.HF_MODEL_ID,
            timeout=test_settings.HF_TIMEOUT,
            transport=transport,
        )
    
    return _create
