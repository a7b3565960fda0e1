"""
Inbound payload validation.

Checks the shape and size of an analysis payload before the inference
gateway is called. The text is returned exactly as received: no trimming
happens server-side, so the length limit applies to the raw string.
"""

from typing import Any

import structlog

from moderation_gateway.monitoring.metrics import validation_failures_total
from .exceptions import InvalidTextError, TextTooLongError

logger = structlog.get_logger(__name__)

DEFAULT_MAX_TEXT_LENGTH = 5000


class RequestValidator:
    """
    Validates `{"text": str}` payloads.
    
    Raises InvalidTextError or TextTooLongError (hard fail, never retried).
    """
    
    def __init__(self, max_length: int = DEFAULT_MAX_TEXT_LENGTH):
        self.max_length = max_length
    
    def validate(self, payload: Any) -> str:
        """
        Validate an untyped payload and return its text.
        
        Args:
            payload: Decoded JSON body (any type)
            
        Returns:
            The original `text` value, unmodified
            
        Raises:
            InvalidTextError: payload is not an object, or text is missing,
                not a string, or empty
            TextTooLongError: len(text) exceeds max_length
        """
        text = payload.get("text") if isinstance(payload, dict) else None
        
        if not isinstance(text, str) or not text:
            received_type = type(text).__name__ if isinstance(payload, dict) else type(payload).__name__
            logger.warning("Validation failed: invalid text parameter", received_type=received_type)
            validation_failures_total.labels(kind=InvalidTextError.kind.value).inc()
            raise InvalidTextError(received_type=received_type)
        
        if len(text) > self.max_length:
            logger.warning(
                "Validation failed: text too long",
                length=len(text),
                max_length=self.max_length,
            )
            validation_failures_total.labels(kind=TextTooLongError.kind.value).inc()
            raise TextTooLongError(len(text), self.max_length)
        
        logger.debug("Validation passed", length=len(text))
        return text


def validate_analysis_payload(payload: Any, max_length: int = DEFAULT_MAX_TEXT_LENGTH) -> str:
    """Validate a payload with a one-off RequestValidator."""
    return RequestValidator(max_length).validate(payload)
