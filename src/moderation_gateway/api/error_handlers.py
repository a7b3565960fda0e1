"""
FastAPI exception handlers for structured error responses.

Maps validation and inference exceptions 1:1 to HTTP status codes with
stable, user-safe messages. Raw upstream bodies only ever appear in
`details`; internal exception text is never returned.
"""

import structlog
from fastapi import Request, status
from fastapi.responses import JSONResponse

from moderation_gateway.api.dependencies import get_settings
from moderation_gateway.api.models import ErrorResponse
from moderation_gateway.inference.exceptions import (
    AuthenticationFailedError,
    InferenceTimeoutError,
    InferenceTransportError,
    MalformedResponseError,
    ModelLoadingError,
    ModelUnavailableError,
    UpstreamError,
)
from moderation_gateway.validation.exceptions import ValidationError

logger = structlog.get_logger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred. Please try again."


def _error_response(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
    )


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """
    Handle payload validation errors.
    
    Maps to 400 Bad Request with the validator's message.
    """
    logger.warning(
        "Validation error",
        kind=exc.kind.value,
        details=exc.details,
    )
    return _error_response(status.HTTP_400_BAD_REQUEST, exc.message)


async def model_loading_handler(request: Request, exc: ModelLoadingError) -> JSONResponse:
    """
    Handle model loading (upstream 503).
    
    Maps to 503 Service Unavailable; the caller should retry shortly.
    """
    logger.warning("Model is loading, caller should retry", details=exc.details)
    return _error_response(
        status.HTTP_503_SERVICE_UNAVAILABLE,
        "Model is loading. Please try again in a moment.",
    )


async def model_unavailable_handler(request: Request, exc: ModelUnavailableError) -> JSONResponse:
    """
    Handle a removed model (upstream 410).
    
    Maps to 410 Gone with a replacement model suggestion in details.
    """
    logger.error("Model is gone/unavailable", details=exc.details)
    # Handlers bypass Depends, so honour overrides explicitly
    settings_provider = request.app.dependency_overrides.get(get_settings, get_settings)
    replacement = settings_provider().HF_REPLACEMENT_MODEL
    return _error_response(
        status.HTTP_410_GONE,
        "This model is no longer available. Please update the configured model name.",
        details=f'Set HF_MODEL_ID and try: "{replacement}"',
    )


async def authentication_failed_handler(
    request: Request, exc: AuthenticationFailedError
) -> JSONResponse:
    """
    Handle rejected credentials (upstream 401/403).
    
    Propagates the original status code.
    """
    logger.error("Authentication error - check HF_API_TOKEN", status_code=exc.status_code)
    return _error_response(
        exc.status_code,
        "Authentication failed. Please check your Hugging Face API token.",
    )


async def upstream_error_handler(request: Request, exc: UpstreamError) -> JSONResponse:
    """
    Handle any other upstream non-2xx status.
    
    Forwards the upstream status with the raw body as details.
    """
    logger.error("Inference service error", status_code=exc.status_code, reason=exc.reason)
    return _error_response(exc.status_code, exc.message, details=exc.body)


async def transport_error_handler(request: Request, exc: InferenceTransportError) -> JSONResponse:
    """
    Handle unreachable inference service.
    
    Maps to 502 Bad Gateway.
    """
    logger.error("Inference transport error", details=exc.details)
    return _error_response(
        status.HTTP_502_BAD_GATEWAY,
        "Unable to reach the inference service. Please try again.",
    )


async def timeout_error_handler(request: Request, exc: InferenceTimeoutError) -> JSONResponse:
    """
    Handle upstream timeouts.
    
    Maps to 504 Gateway Timeout.
    """
    logger.error("Inference timeout", details=exc.details)
    return _error_response(
        status.HTTP_504_GATEWAY_TIMEOUT,
        "The inference service timed out. Please try again.",
    )


async def malformed_response_handler(
    request: Request, exc: MalformedResponseError
) -> JSONResponse:
    """
    Handle unusable 2xx payloads.
    
    Maps to the generic 500; parse details stay in the logs.
    """
    logger.error("Malformed inference response", message=exc.message, details=exc.details)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE)


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected errors.
    
    Maps to 500 Internal Server Error.
    """
    logger.exception("Unexpected error", error_type=type(exc).__name__)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE)


# Exception handler mapping for FastAPI app.add_exception_handler()
EXCEPTION_HANDLERS = {
    ValidationError: validation_error_handler,
    ModelLoadingError: model_loading_handler,
    ModelUnavailableError: model_unavailable_handler,
    AuthenticationFailedError: authentication_failed_handler,
    UpstreamError: upstream_error_handler,
    InferenceTransportError: transport_error_handler,
    InferenceTimeoutError: timeout_error_handler,
    MalformedResponseError: malformed_response_handler,
    Exception: generic_error_handler,
}
