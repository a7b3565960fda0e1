"""
Upstream response normalization.

Turns the raw body of a successful inference call into a ranked list of
ClassificationItem:

1. parse: body text -> JSON value
2. extract: flat `[{...}]` or singly nested `[[{...}]]` -> list of RawPrediction
3. rescale: probability [0, 1] -> percentage [0, 100]
4. rank: stable sort by score, descending

Anything that is not one of the two supported shapes fails closed with
MalformedResponseError.
"""

import json
from collections.abc import Sequence
from typing import Any

import structlog
from pydantic import ValidationError as PydanticValidationError

from moderation_gateway.inference.exceptions import MalformedResponseError
from moderation_gateway.models.classification import ClassificationItem, RawPrediction

logger = structlog.get_logger(__name__)

SCORE_SCALE = 100


def parse_body(content: str) -> Any:
    """
    Decode a response body as JSON.
    
    Raises:
        MalformedResponseError: If content is empty or not valid JSON
    """
    if not content or not content.strip():
        raise MalformedResponseError(
            "Inference response body is empty",
            details={"parse_error": "Empty content"},
        )
    
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise MalformedResponseError(
            f"Failed to parse inference response as JSON: {e.msg}",
            details={
                "content_snippet": content[:500],
                "parse_error": f"{e.msg} at line {e.lineno} col {e.colno}",
            },
        ) from e


def extract_predictions(data: Any) -> list[RawPrediction]:
    """
    Reconcile the flat and nested response shapes into one item list.
    
    If `data` is a list whose first element is itself a list, that first
    element is the item list (exactly one level is unwrapped). Otherwise
    `data` is used directly.
    
    Raises:
        MalformedResponseError: Not a list, empty, nested deeper than one
            level, or an item is not a valid label/score pair
    """
    if not isinstance(data, list):
        raise MalformedResponseError(
            f"Inference response is not a JSON array (got {type(data).__name__})",
            details={"shape": type(data).__name__},
        )
    if not data:
        raise MalformedResponseError(
            "Inference response is an empty array",
            details={"shape": "empty"},
        )
    
    items = data
    shape = "flat"
    if isinstance(data[0], list):
        items = data[0]
        shape = "nested"
        if not items:
            raise MalformedResponseError(
                "Inference response contains an empty nested array",
                details={"shape": "nested_empty"},
            )
    
    predictions = []
    for index, item in enumerate(items):
        if isinstance(item, list):
            raise MalformedResponseError(
                "Inference response is nested more than one level deep",
                details={"shape": shape, "index": index},
            )
        try:
            predictions.append(RawPrediction.model_validate(item))
        except PydanticValidationError as e:
            raise MalformedResponseError(
                f"Invalid label/score pair at index {index}",
                details={
                    "shape": shape,
                    "index": index,
                    "errors": e.errors(include_url=False, include_input=False),
                },
            ) from e
    
    logger.debug("Extracted predictions", shape=shape, count=len(predictions))
    return predictions


def rescale_scores(predictions: Sequence[RawPrediction]) -> list[ClassificationItem]:
    """Convert probabilities to percentages, keeping upstream order."""
    return [
        ClassificationItem(label=p.label, score=p.score * SCORE_SCALE)
        for p in predictions
    ]


def rank_items(items: Sequence[ClassificationItem]) -> list[ClassificationItem]:
    """
    Sort items by score, highest first.
    
    sorted() is stable with reverse=True, so equal scores keep their
    upstream order and re-ranking sorted input is a no-op.
    """
    return sorted(items, key=lambda item: item.score, reverse=True)


def normalize_response(content: str) -> list[ClassificationItem]:
    """Run parse -> extract -> rescale -> rank on a raw response body."""
    predictions = extract_predictions(parse_body(content))
    return rank_items(rescale_scores(predictions))
