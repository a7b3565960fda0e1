"""
Verdict derivation from ranked classification results.

The first item of a ranked result is the maximum-score label (ties already
resolved by the stable sort). Its label maps, case-insensitively, onto the
closed three-way Verdict.
"""

from collections.abc import Sequence

from moderation_gateway.models.classification import ClassificationItem
from moderation_gateway.models.enums import Verdict

LABEL_VERDICTS = {
    "negative": Verdict.HATE_SPEECH,
    "positive": Verdict.NO_HATE,
}


class EmptyResultsError(ValueError):
    """Raised when a verdict is requested for an empty result list."""


def verdict_for_label(label: str) -> Verdict:
    """Map a model label to a Verdict; unknown labels are Neutral."""
    return LABEL_VERDICTS.get(label.lower(), Verdict.NEUTRAL)


def derive_verdict(results: Sequence[ClassificationItem]) -> Verdict:
    """
    Derive the verdict from rank-ordered results.
    
    Args:
        results: Items sorted by score descending
        
    Returns:
        Verdict for the top-ranked label
        
    Raises:
        EmptyResultsError: If results is empty (never the case after a
            successful classification)
    """
    if not results:
        raise EmptyResultsError("Cannot derive a verdict from empty results")
    return verdict_for_label(results[0].label)
