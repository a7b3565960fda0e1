"""
Inbound payload validation.

- request_validator.py: type and length checks on {"text": str}
- exceptions.py: ValidationError taxonomy (InvalidType, TooLong)
"""

from .exceptions import (
    ValidationError,
    InvalidTextError,
    TextTooLongError,
)
from .request_validator import (
    DEFAULT_MAX_TEXT_LENGTH,
    RequestValidator,
    validate_analysis_payload,
)

__all__ = [
    "RequestValidator",
    "validate_analysis_payload",
    "DEFAULT_MAX_TEXT_LENGTH",
    # Exceptions (for API error handling)
    "ValidationError",
    "InvalidTextError",
    "TextTooLongError",
]
