"""
Enumerations for the Text Moderation Gateway data models.

All enums are closed taxonomies - no values outside these sets are permitted.
"""

from enum import Enum


class Verdict(str, Enum):
    """
    Coarse three-way verdict derived from the top-ranked label.
    
    Closed regardless of how many distinct labels the upstream model returns.
    """
    
    HATE_SPEECH = "Hate Speech"
    NO_HATE = "No Hate"
    NEUTRAL = "Neutral"


class ScoreBand(str, Enum):
    """
    Severity band for a percentage score.
    
    Ordered from low to high (can be used for ordinal comparisons).
    """
    
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    
    @classmethod
    def for_score(cls, score: float) -> "ScoreBand":
        """Band a 0-100 score: below 30 is low, below 60 medium, else high."""
        if score < 30:
            return cls.LOW
        if score < 60:
            return cls.MEDIUM
        return cls.HIGH


class ValidationErrorKind(str, Enum):
    """Reasons an inbound analysis payload is rejected."""
    
    INVALID_TYPE = "InvalidType"
    TOO_LONG = "TooLong"


class InferenceErrorKind(str, Enum):
    """
    Failure modes of the upstream inference call.
    
    MODEL_LOADING and TRANSPORT_ERROR are retryable by the caller,
    everything else is terminal.
    """
    
    TRANSPORT_ERROR = "TransportError"
    MODEL_LOADING = "ModelLoading"
    MODEL_UNAVAILABLE = "ModelUnavailable"
    AUTHENTICATION_FAILED = "AuthenticationFailed"
    UPSTREAM_ERROR = "UpstreamError"
    MALFORMED_RESPONSE = "MalformedResponse"
