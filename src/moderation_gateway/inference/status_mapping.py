"""
Mapping of upstream HTTP failures to the inference error taxonomy.

Pure function, independent of any network call: every non-2xx status maps
to exactly one InferenceError subclass.
"""

from http import HTTPStatus

from moderation_gateway.inference.exceptions import (
    AuthenticationFailedError,
    InferenceError,
    ModelLoadingError,
    ModelUnavailableError,
    UpstreamError,
)


def map_status_error(
    status_code: int,
    body: str,
    reason: str = "",
    model_id: str | None = None,
) -> InferenceError:
    """
    Build the InferenceError for a non-success upstream response.
    
    Args:
        status_code: HTTP status returned by the inference service
        body: Response body read as text
        reason: HTTP reason phrase (optional, used in UpstreamError message)
        model_id: Model identifier the request targeted (for details)
        
    Returns:
        ModelLoadingError for 503, ModelUnavailableError for 410,
        AuthenticationFailedError for 401/403, UpstreamError otherwise
    """
    details = {"status": status_code, "body": body}
    if model_id:
        details["model"] = model_id
    
    if status_code == HTTPStatus.SERVICE_UNAVAILABLE:
        return ModelLoadingError("Model is loading", details=details)
    
    if status_code == HTTPStatus.GONE:
        return ModelUnavailableError(
            f"Model is no longer available: {model_id or 'unknown'}",
            details=details,
        )
    
    if status_code in (HTTPStatus.UNAUTHORIZED, HTTPStatus.FORBIDDEN):
        return AuthenticationFailedError(
            "Authentication with the inference service failed",
            status_code=status_code,
            details=details,
        )
    
    if not reason:
        try:
            reason = HTTPStatus(status_code).phrase
        except ValueError:
            reason = ""
    return UpstreamError(status_code, body, reason)
