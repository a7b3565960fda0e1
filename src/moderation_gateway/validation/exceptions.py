"""
Validation exceptions for inbound analysis payloads.

Raised before any network call; the API layer maps every subclass to
400 Bad Request with the exception message as the user-facing error.
"""

from typing import Any

from moderation_gateway.models.enums import ValidationErrorKind


class ValidationError(Exception):
    """
    Base exception for all payload validation errors.
    
    Attributes:
        message: Human-readable error description (safe to return to clients)
        details: Structured error data for logging/metrics
        kind: Machine-readable validation failure kind
    """
    
    kind: ValidationErrorKind
    
    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
    
    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidTextError(ValidationError):
    """
    The payload has no usable `text` field.
    
    Raised when the payload is not a JSON object, `text` is missing,
    `text` is not a string, or `text` is empty.
    """
    
    kind = ValidationErrorKind.INVALID_TYPE
    
    def __init__(self, received_type: str | None = None):
        details = {}
        if received_type:
            details["received_type"] = received_type
        super().__init__("Text is required and must be a string", details)


class TextTooLongError(ValidationError):
    """The `text` field exceeds the maximum length (checked untrimmed)."""
    
    kind = ValidationErrorKind.TOO_LONG
    
    def __init__(self, length: int, max_length: int):
        super().__init__(
            f"Text exceeds maximum length of {max_length} characters",
            {"length": length, "max_length": max_length},
        )
        self.length = length
        self.max_length = max_length
