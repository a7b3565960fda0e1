"""
FastAPI dependency injection for the Text Moderation Gateway.

Provides singleton instances of expensive resources (inference client with
its connection pool) and factory functions for pipeline components.
Credentials flow from Settings into the client here, so tests can swap
them through app.dependency_overrides without touching the environment.
"""

from functools import lru_cache

from fastapi import Depends

from moderation_gateway.config import Settings, settings
from moderation_gateway.inference.base_client import BaseInferenceClient
from moderation_gateway.inference.huggingface_client import HuggingFaceClient
from moderation_gateway.pipeline.analyzer import AnalysisPipeline
from moderation_gateway.validation.request_validator import RequestValidator


@lru_cache()
def get_settings() -> Settings:
    """
    Get settings singleton.
    
    Returns:
        Settings instance
    """
    return settings


@lru_cache()
def get_inference_client() -> BaseInferenceClient:
    """
    Get singleton inference client with connection pooling.
    
    Returns:
        HuggingFaceClient configured from settings
    """
    config = get_settings()
    return HuggingFaceClient(
        api_token=config.HF_API_TOKEN.get_secret_value(),
        base_url=config.HF_BASE_URL,
        model_id=config.HF_MODEL_ID,
        timeout=config.HF_TIMEOUT,
    )


def get_request_validator(config: Settings = Depends(get_settings)) -> RequestValidator:
    """Create a validator bound to the configured maximum text length."""
    return RequestValidator(max_length=config.MAX_TEXT_LENGTH)


def get_analysis_pipeline(
    inference_client: BaseInferenceClient = Depends(get_inference_client),
    validator: RequestValidator = Depends(get_request_validator),
) -> AnalysisPipeline:
    """
    Create analysis pipeline with injected dependencies.
    
    Not cached: the pipeline is lightweight and stateless, the client
    it wraps is the shared singleton.
    """
    return AnalysisPipeline(inference_client=inference_client, validator=validator)
