"""
Custom exceptions for the inference gateway.

These exceptions let callers distinguish retryable conditions (model
loading, transport failures) from terminal ones (model removed, bad
credentials, malformed payload). The gateway itself never retries.
"""

from moderation_gateway.models.enums import InferenceErrorKind


class InferenceError(Exception):
    """
    Base exception for all inference gateway errors.
    
    All gateway exceptions inherit from this to allow catching any
    upstream-related error with a single except clause.
    """
    
    kind: InferenceErrorKind
    retryable: bool = False
    
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InferenceTransportError(InferenceError):
    """
    Raised when the inference service cannot be reached.
    
    Includes network errors, DNS failures, connection resets and timeouts.
    Retryable without delay guidance.
    """
    
    kind = InferenceErrorKind.TRANSPORT_ERROR
    retryable = True


class InferenceTimeoutError(InferenceTransportError):
    """
    Raised when the upstream call exceeds the configured timeout.
    
    Separate from generic transport errors so the API can answer 504.
    """
    pass


class ModelLoadingError(InferenceError):
    """
    Raised on HTTP 503: the model is still being loaded upstream.
    
    wait_for_model normally prevents this, but the service can still
    return it under sustained load. Retry after a short delay.
    """
    
    kind = InferenceErrorKind.MODEL_LOADING
    retryable = True


class ModelUnavailableError(InferenceError):
    """
    Raised on HTTP 410: the configured model is gone.
    
    Not retryable; the model identifier must be changed.
    """
    
    kind = InferenceErrorKind.MODEL_UNAVAILABLE


class AuthenticationFailedError(InferenceError):
    """
    Raised on HTTP 401 or 403: the bearer token is missing or rejected.
    
    Keeps the original status code so it can be propagated to the caller.
    """
    
    kind = InferenceErrorKind.AUTHENTICATION_FAILED
    
    def __init__(self, message: str, status_code: int, details: dict | None = None):
        super().__init__(message, details)
        self.status_code = status_code


class UpstreamError(InferenceError):
    """Raised on any other non-2xx status; carries the status and raw body."""
    
    kind = InferenceErrorKind.UPSTREAM_ERROR
    
    def __init__(self, status_code: int, body: str, reason: str = ""):
        message = f"API error ({status_code})"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, details={"status": status_code, "body": body})
        self.status_code = status_code
        self.body = body
        self.reason = reason


class MalformedResponseError(InferenceError):
    """
    Raised when a 2xx body is not valid JSON or not a (singly nested)
    list of label/score pairs.
    """
    
    kind = InferenceErrorKind.MALFORMED_RESPONSE
