"""
Unit tests for HuggingFaceClient against a stubbed transport.
"""

import json
import re

import httpx
import pytest

from moderation_gateway.inference.exceptions import (
    AuthenticationFailedError,
    InferenceTimeoutError,
    InferenceTransportError,
    MalformedResponseError,
    ModelLoadingError,
    ModelUnavailableError,
    UpstreamError,
)
from moderation_gateway.inference.huggingface_client import HuggingFaceClient
from moderation_gateway.models.classification import ClassificationResult

ISO_UTC = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


@pytest.mark.asyncio
async def test_request_shape(stub_upstream, make_client, recorded_requests, flat_predictions):
    """POST /models/{model_id} with bearer token and wait_for_model."""
    client = make_client(stub_upstream(json_body=flat_predictions))
    
    await client.infer("I hate you")
    
    assert len(recorded_requests) == 1
    request = recorded_requests[0]
    assert request.method == "POST"
    assert str(request.url) == "https://inference.test/hf-inference/models/test-org/sentiment-model"
    assert request.headers["Authorization"] == "Bearer hf_test_token"
    assert request.headers["Content-Type"] == "application/json"
    assert json.loads(request.content) == {
        "inputs": "I hate you",
        "options": {"wait_for_model": True},
    }


@pytest.mark.asyncio
async def test_infer_returns_decoded_payload(stub_upstream, make_client, nested_predictions):
    """infer() returns the raw JSON value, unwrapping is left to normalization."""
    client = make_client(stub_upstream(json_body=nested_predictions))
    
    assert await client.infer("text") == nested_predictions


@pytest.mark.asyncio
async def test_classify_end_to_end(stub_upstream, make_client, flat_predictions):
    """Scores become percentages, ranked, stamped with model and time."""
    client = make_client(stub_upstream(json_body=flat_predictions))
    
    result = await client.classify("I hate you")
    
    assert isinstance(result, ClassificationResult)
    assert [item.label for item in result.results] == ["negative", "positive", "neutral"]
    assert result.results[0].score == pytest.approx(91.0)
    assert result.results[1].score == pytest.approx(5.0)
    assert result.results[2].score == pytest.approx(4.0)
    assert result.model == "test-org/sentiment-model"
    assert ISO_UTC.match(result.timestamp)


@pytest.mark.asyncio
async def test_classify_sorts_unordered_payload(stub_upstream, make_client):
    client = make_client(stub_upstream(json_body=[
        {"label": "positive", "score": 0.2},
        {"label": "negative", "score": 0.7},
    ]))
    
    result = await client.classify("text")
    
    assert [item.label for item in result.results] == ["negative", "positive"]
    assert result.results[0].score == pytest.approx(70.0)
    assert result.results[1].score == pytest.approx(20.0)


@pytest.mark.asyncio
async def test_classify_unwraps_nested_payload(stub_upstream, make_client):
    client = make_client(stub_upstream(json_body=[[{"label": "neutral", "score": 0.5}]]))
    
    result = await client.classify("text")
    
    assert len(result.results) == 1
    assert result.results[0].label == "neutral"
    assert result.results[0].score == 50.0


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "status_code,expected",
    [
        (503, ModelLoadingError),
        (410, ModelUnavailableError),
        (401, AuthenticationFailedError),
        (403, AuthenticationFailedError),
        (400, UpstreamError),
        (500, UpstreamError),
    ],
)
async def test_non_success_status_mapped(stub_upstream, make_client, status_code, expected):
    client = make_client(stub_upstream(status_code=status_code, text="upstream body"))
    
    with pytest.raises(expected) as exc_info:
        await client.classify("text")
    
    assert exc_info.value.details["status"] == status_code
    assert exc_info.value.details["body"] == "upstream body"


@pytest.mark.asyncio
async def test_upstream_error_keeps_reason_phrase(stub_upstream, make_client):
    client = make_client(stub_upstream(status_code=429, text='{"error": "rate limited"}'))
    
    with pytest.raises(UpstreamError) as exc_info:
        await client.classify("text")
    
    assert exc_info.value.status_code == 429
    assert exc_info.value.body == '{"error": "rate limited"}'
    assert exc_info.value.message == "API error (429): Too Many Requests"


@pytest.mark.asyncio
async def test_connect_error_is_transport_error(stub_upstream, make_client):
    client = make_client(stub_upstream(exc=httpx.ConnectError("connection refused")))
    
    with pytest.raises(InferenceTransportError) as exc_info:
        await client.classify("text")
    
    assert not isinstance(exc_info.value, InferenceTimeoutError)
    assert exc_info.value.retryable is True
    assert exc_info.value.details["error_type"] == "ConnectError"


@pytest.mark.asyncio
async def test_timeout_is_timeout_error(stub_upstream, make_client):
    client = make_client(stub_upstream(exc=httpx.ReadTimeout("timed out")))
    
    with pytest.raises(InferenceTimeoutError) as exc_info:
        await client.classify("text")
    
    assert exc_info.value.details["timeout"] == 5.0


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    ["not json", "", '{"error": "oops"}', "[]", "[[[]]]", '[{"label": "x"}]'],
)
async def test_unusable_success_body_is_malformed(stub_upstream, make_client, body):
    client = make_client(stub_upstream(status_code=200, text=body))
    
    with pytest.raises(MalformedResponseError):
        await client.classify("text")


@pytest.mark.asyncio
async def test_no_internal_retry(stub_upstream, make_client, recorded_requests):
    """Retryable failures are surfaced after a single attempt."""
    client = make_client(stub_upstream(status_code=503, text="loading"))
    
    with pytest.raises(ModelLoadingError):
        await client.classify("text")
    
    assert len(recorded_requests) == 1


@pytest.mark.asyncio
async def test_empty_token_still_sent(stub_upstream, recorded_requests, flat_predictions):
    """A missing token is not fatal locally; the upstream decides (401)."""
    client = HuggingFaceClient(
        api_token="",
        base_url="https://inference.test",
        model_id="m",
        transport=stub_upstream(json_body=flat_predictions),
    )
    
    await client.infer("text")
    
    assert recorded_requests[0].headers["Authorization"] == "Bearer "


@pytest.mark.asyncio
async def test_close_and_context_manager(stub_upstream, make_client, flat_predictions):
    client = make_client(stub_upstream(json_body=flat_predictions))
    
    async with client:
        await client.classify("text")
        assert client._client is not None
    
    assert client._client.is_closed


def test_repr_hides_token(make_client, stub_upstream):
    client = make_client(stub_upstream(json_body=[]))
    
    assert "hf_test_token" not in repr(client)
    assert "test-org/sentiment-model" in repr(client)


@pytest.mark.asyncio
async def test_unpaired_surrogate_text_is_sent(
    stub_upstream, make_client, recorded_requests, flat_predictions
):
    """Lone surrogates are JSON-escaped instead of failing UTF-8 encoding."""
    text = "I hate you \ud83d"
    client = make_client(stub_upstream(json_body=flat_predictions))
    
    result = await client.classify(text)
    
    assert result.results[0].label == "negative"
    assert b"\\ud83d" in recorded_requests[0].content
    assert json.loads(recorded_requests[0].content)["inputs"] == text


@pytest.mark.asyncio
async def test_non_ascii_text_round_trips(stub_upstream, make_client, recorded_requests, flat_predictions):
    text = "Je te déteste 😠"
    client = make_client(stub_upstream(json_body=flat_predictions))
    
    await client.infer(text)
    
    assert json.loads(recorded_requests[0].content)["inputs"] == text
