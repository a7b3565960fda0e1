"""
Request pipeline: Validating -> Inferring -> Deriving.

Linear and stateless. Each stage either hands a value to the next one or
raises a typed error; nothing is retried here.
"""

from typing import Any

import structlog

from moderation_gateway.inference.base_client import BaseInferenceClient
from moderation_gateway.models.classification import AnalysisSummary, ClassificationResult
from moderation_gateway.models.enums import ScoreBand
from moderation_gateway.monitoring.metrics import verdicts_total
from moderation_gateway.pipeline.verdict import derive_verdict
from moderation_gateway.validation.request_validator import RequestValidator

logger = structlog.get_logger(__name__)


class AnalysisPipeline:
    """
    Orchestrates validation, inference and verdict derivation.
    
    Validation errors are raised before the inference client is touched.
    Inference errors propagate unchanged for the API error handlers.
    """
    
    def __init__(self, inference_client: BaseInferenceClient, validator: RequestValidator):
        self.inference_client = inference_client
        self.validator = validator
    
    async def analyze(self, payload: Any) -> ClassificationResult:
        """
        Validate a payload and classify its text.
        
        Args:
            payload: Decoded JSON request body
            
        Returns:
            Ranked ClassificationResult
            
        Raises:
            ValidationError: Payload rejected (no network call made)
            InferenceError: Upstream call or normalization failed
        """
        text = self.validator.validate(payload)
        result = await self.inference_client.classify(text)
        
        summary = self.summarize(result)
        verdicts_total.labels(verdict=summary.verdict.value).inc()
        logger.info(
            "Analysis completed",
            model=result.model,
            verdict=summary.verdict.value,
            top_label=summary.top_label,
            top_score=round(summary.top_score, 2),
            band=summary.band.value,
        )
        return result
    
    @staticmethod
    def summarize(result: ClassificationResult) -> AnalysisSummary:
        """Derive verdict, top label/score and score band from a result."""
        top = result.results[0]
        return AnalysisSummary(
            verdict=derive_verdict(result.results),
            top_label=top.label,
            top_score=top.score,
            band=ScoreBand.for_score(top.score),
        )
