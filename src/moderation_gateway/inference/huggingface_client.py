"""
Hugging Face Inference API client.

Communicates with the hosted inference endpoint using httpx AsyncClient:
- POST {base_url}/models/{model_id} with bearer authentication
- Status-code specific error mapping (see status_mapping.py)
- Flat / nested response reconciliation, rescaling and ranking
"""

import json
import time
from typing import Any, Optional

import httpx
import structlog

from moderation_gateway.inference.base_client import BaseInferenceClient
from moderation_gateway.inference.exceptions import (
    InferenceError,
    InferenceTimeoutError,
    InferenceTransportError,
)
from moderation_gateway.inference.normalizer import (
    extract_predictions,
    parse_body,
    rank_items,
    rescale_scores,
)
from moderation_gateway.inference.status_mapping import map_status_error
from moderation_gateway.models.classification import ClassificationResult
from moderation_gateway.monitoring.metrics import (
    inference_errors_total,
    inference_latency_seconds,
)


logger = structlog.get_logger(__name__)


class HuggingFaceClient(BaseInferenceClient):
    """
    Hugging Face text-classification client.
    
    Request payload:
    {
        "inputs": "<text>",
        "options": {"wait_for_model": true}
    }
    
    Response (either shape):
    [{"label": "negative", "score": 0.91}, ...]
    [[{"label": "negative", "score": 0.91}, ...]]
    
    The gateway makes exactly one call per classify(); nothing is retried.
    """
    
    def __init__(
        self,
        api_token: str,
        base_url: str = "https://router.huggingface.co/hf-inference",
        model_id: str = "ProsusAI/finbert",
        timeout: float = 60.0,
        connection_limits: Optional[httpx.Limits] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize Hugging Face client.
        
        Args:
            api_token: Bearer token for the inference service
            base_url: Inference service URL
            model_id: Model identifier (e.g., "ProsusAI/finbert")
            timeout: Request timeout in seconds
            connection_limits: httpx connection pool limits
            transport: Custom httpx transport (e.g., httpx.MockTransport in tests)
        """
        super().__init__(base_url, model_id, timeout)
        
        if connection_limits is None:
            connection_limits = httpx.Limits(
                max_keepalive_connections=5,
                max_connections=10,
                keepalive_expiry=30.0
            )
        
        self._api_token = api_token
        self._client: Optional[httpx.AsyncClient] = None
        self._connection_limits = connection_limits
        self._transport = transport
        
        if not api_token:
            logger.warning("No inference API token configured; upstream will reject requests")
        
        logger.info(
            "Hugging Face client initialized",
            base_url=self.base_url,
            model_id=model_id,
            timeout=timeout,
        )
    
    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                limits=self._connection_limits,
                transport=self._transport,
                follow_redirects=True,
            )
            logger.debug("Created new httpx AsyncClient")
        return self._client
    
    def _build_payload(self, text: str) -> dict[str, Any]:
        return {
            "inputs": text,
            "options": {
                "wait_for_model": True,
            },
        }
    
    async def infer(self, text: str) -> Any:
        """Send the classification request and return the decoded JSON body."""
        logger.info(
            "Sending classification request",
            model=self.model_id,
            text_length=len(text),
        )
        
        try:
            client = await self._get_client()
            response = await client.post(
                f"/models/{self.model_id}",
                # ASCII escapes keep unpaired surrogates encodable
                content=json.dumps(self._build_payload(text)).encode("ascii"),
                headers={
                    "Authorization": f"Bearer {self._api_token}",
                    "Content-Type": "application/json",
                },
            )
        except httpx.TimeoutException as e:
            logger.warning("Inference request timeout", timeout=self.timeout, error=str(e))
            raise InferenceTimeoutError(
                f"Request timeout after {self.timeout}s",
                details={"timeout": self.timeout, "error_type": type(e).__name__},
            ) from e
        except httpx.TransportError as e:
            logger.warning("Inference network error", error=str(e))
            raise InferenceTransportError(
                f"Network error: {str(e)}",
                details={"error_type": type(e).__name__},
            ) from e
        
        if not response.is_success:
            error_text = response.text
            logger.error(
                "Inference service HTTP error",
                status_code=response.status_code,
                reason=response.reason_phrase,
                error_text=error_text[:500],
            )
            raise map_status_error(
                response.status_code,
                error_text,
                reason=response.reason_phrase,
                model_id=self.model_id,
            )
        
        return parse_body(response.text)
    
    async def classify(self, text: str) -> ClassificationResult:
        """Classify text: infer, unwrap, rescale to percentages and rank."""
        start_time = time.perf_counter()
        
        try:
            data = await self.infer(text)
            items = rank_items(rescale_scores(extract_predictions(data)))
        except InferenceError as e:
            inference_errors_total.labels(kind=e.kind.value).inc()
            inference_latency_seconds.labels(
                model=self.model_id, outcome=e.kind.value
            ).observe(time.perf_counter() - start_time)
            raise
        
        latency = time.perf_counter() - start_time
        inference_latency_seconds.labels(
            model=self.model_id, outcome="success"
        ).observe(latency)
        
        logger.info(
            "Classification successful",
            model=self.model_id,
            latency_ms=round(latency * 1000, 2),
            label_count=len(items),
            top_label=items[0].label,
        )
        
        return ClassificationResult(results=items, model=self.model_id)
    
    async def close(self):
        """Close the HTTP client connection."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            logger.debug("Closed Hugging Face client connection")
    
    async def __aenter__(self):
        """Async context manager entry."""
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
