"""
Pydantic data models for the Text Moderation Gateway.

Includes:
- Enums (Verdict, ScoreBand, ValidationErrorKind, InferenceErrorKind)
- Classification models (RawPrediction, ClassificationItem, ClassificationResult)
"""

from moderation_gateway.models.enums import (
    InferenceErrorKind,
    ScoreBand,
    ValidationErrorKind,
    Verdict,
)
from moderation_gateway.models.classification import (
    AnalysisRequest,
    AnalysisSummary,
    ClassificationItem,
    ClassificationResult,
    RawPrediction,
    utc_timestamp,
)

__all__ = [
    # Enums
    "Verdict",
    "ScoreBand",
    "ValidationErrorKind",
    "InferenceErrorKind",
    # Classification models
    "AnalysisRequest",
    "RawPrediction",
    "ClassificationItem",
    "ClassificationResult",
    "AnalysisSummary",
    "utc_timestamp",
]
