"""
API-specific response models for FastAPI endpoints.

Successful analyses return the domain ClassificationResult directly;
these models cover errors and service metadata.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response format."""
    
    error: str = Field(
        description="User-safe error message",
        examples=["Text is required and must be a string"]
    )
    details: Optional[str] = Field(
        default=None,
        description="Additional context (upstream body or remediation hint)"
    )


class HealthResponse(BaseModel):
    """Response for health check endpoint."""
    
    status: str = Field(
        description="Overall health status",
        examples=["healthy", "degraded"]
    )
    version: str = Field(
        description="Gateway version",
        examples=["0.1.0"]
    )
    checks: dict[str, str] = Field(
        description="Configuration checks",
        examples=[{"api_token": "configured", "model": "ProsusAI/finbert"}]
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Health check timestamp (UTC)"
    )


class VersionResponse(BaseModel):
    """Response for version info endpoint."""
    
    version: str = Field(
        description="Application version"
    )
    model_id: str = Field(
        description="Inference model identifier (e.g., 'ProsusAI/finbert')"
    )
    max_text_length: int = Field(
        description="Maximum accepted text length in characters"
    )
