"""
Inference gateway: upstream client, error taxonomy and normalization.

Components:
- BaseInferenceClient: Abstract base class for inference clients
- HuggingFaceClient: Implementation for the Hugging Face Inference API
- status_mapping: Pure (status, body) -> InferenceError mapping
- normalizer: Shape reconciliation, rescaling and ranking
- exceptions: Inference-specific exceptions
"""

from moderation_gateway.inference.base_client import BaseInferenceClient
from moderation_gateway.inference.huggingface_client import HuggingFaceClient
from moderation_gateway.inference.status_mapping import map_status_error
from moderation_gateway.inference.normalizer import (
    extract_predictions,
    normalize_response,
    parse_body,
    rank_items,
    rescale_scores,
)
from moderation_gateway.inference.exceptions import (
    InferenceError,
    InferenceTransportError,
    InferenceTimeoutError,
    ModelLoadingError,
    ModelUnavailableError,
    AuthenticationFailedError,
    UpstreamError,
    MalformedResponseError,
)

__all__ = [
    "BaseInferenceClient",
    "HuggingFaceClient",
    "map_status_error",
    "parse_body",
    "extract_predictions",
    "rescale_scores",
    "rank_items",
    "normalize_response",
    "InferenceError",
    "InferenceTransportError",
    "InferenceTimeoutError",
    "ModelLoadingError",
    "ModelUnavailableError",
    "AuthenticationFailedError",
    "UpstreamError",
    "MalformedResponseError",
]
