"""
Classification data models.

RawPrediction mirrors one label/score pair as returned by the inference
service. ClassificationItem and ClassificationResult are the canonical,
rescaled and ranked output handed back to callers.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from moderation_gateway.models.enums import ScoreBand, Verdict


class AnalysisRequest(BaseModel):
    """Inbound analysis payload (documentation model for POST /api/analyze)."""
    
    text: str = Field(
        ...,
        description="Free-form text to classify (at most 5000 characters)",
        examples=["I hate you"],
    )


class RawPrediction(BaseModel):
    """
    One label/score pair from the upstream model.
    
    Strict so that booleans or numeric strings never pass as scores.
    Extra keys returned by some models are ignored.
    """
    
    model_config = ConfigDict(strict=True, frozen=True, extra="ignore")
    
    label: StrictStr = Field(..., description="Class name returned by the model")
    score: float = Field(..., ge=0.0, le=1.0, description="Probability in [0, 1]")


class ClassificationItem(BaseModel):
    """A label with its confidence expressed as a percentage."""
    
    model_config = ConfigDict(frozen=True)
    
    label: str = Field(..., description="Class name returned by the model")
    score: float = Field(..., ge=0.0, le=100.0, description="Confidence percentage (0-100)")


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ClassificationResult(BaseModel):
    """
    Ranked classification output for a single request.
    
    results are sorted by score descending; equal scores keep the upstream
    order. Immutable once constructed.
    """
    
    model_config = ConfigDict(frozen=True)
    
    results: list[ClassificationItem] = Field(
        ...,
        min_length=1,
        description="Items ranked by score (descending, stable)",
    )
    model: str = Field(..., description="Model identifier that produced the scores")
    timestamp: str = Field(
        default_factory=utc_timestamp,
        description="Classification time (UTC, ISO-8601)",
    )


class AnalysisSummary(BaseModel):
    """Verdict and headline figures derived from a ClassificationResult."""
    
    model_config = ConfigDict(frozen=True)
    
    verdict: Verdict
    top_label: str
    top_score: float
    band: ScoreBand
