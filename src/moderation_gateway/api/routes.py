"""
API routes for text analysis and service metadata.

POST /api/analyze is the public operation: validate -> classify -> rank.
Failures are raised as typed exceptions and rendered by error_handlers.py.
"""

import time

import structlog
from fastapi import APIRouter, Depends, Request, status

from moderation_gateway.api.dependencies import get_analysis_pipeline, get_settings
from moderation_gateway.api.models import ErrorResponse, HealthResponse, VersionResponse
from moderation_gateway.config import Settings
from moderation_gateway.models.classification import AnalysisRequest, ClassificationResult
from moderation_gateway.pipeline.analyzer import AnalysisPipeline

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.post(
    "/api/analyze",
    response_model=ClassificationResult,
    status_code=status.HTTP_200_OK,
    summary="Classify a text",
    description="""
    Classify free-form text with the configured inference model.
    
    Returns every label with its score as a percentage, ranked from the
    highest score down. Equal scores keep the order returned by the model.
    """,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": AnalysisRequest.model_json_schema()}},
        }
    },
    responses={
        200: {"description": "Classification completed successfully"},
        400: {"model": ErrorResponse, "description": "Missing, non-string or too long text"},
        401: {"model": ErrorResponse, "description": "Inference credentials rejected"},
        403: {"model": ErrorResponse, "description": "Inference credentials rejected"},
        410: {"model": ErrorResponse, "description": "Configured model no longer available"},
        500: {"model": ErrorResponse, "description": "Unexpected error"},
        502: {"model": ErrorResponse, "description": "Inference service unreachable"},
        503: {"model": ErrorResponse, "description": "Model is loading, retry shortly"},
        504: {"model": ErrorResponse, "description": "Inference service timed out"},
    },
)
async def analyze_text(
    request: Request,
    pipeline: AnalysisPipeline = Depends(get_analysis_pipeline),
) -> ClassificationResult:
    """
    Analyze a single text.
    
    The body is read untyped so that shape errors surface as the
    validator's 400 rather than FastAPI's 422.
    """
    start_time = time.perf_counter()
    
    try:
        payload = await request.json()
    except ValueError:
        # Unparseable body is treated like a missing text field
        payload = None
    
    result = await pipeline.analyze(payload)
    
    logger.info(
        "Analyze request served",
        duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        result_count=len(result.results),
    )
    return result


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="""
    Report gateway health from local configuration only.
    
    The inference service is not called: a health check must not spend
    upstream quota or wait on a model cold start.
    """,
)
async def health_check(
    settings: Settings = Depends(get_settings),
) -> HealthResponse:
    """Check configuration needed to serve requests."""
    token_configured = bool(settings.HF_API_TOKEN.get_secret_value())
    checks = {
        "api_token": "configured" if token_configured else "missing",
        "model": settings.HF_MODEL_ID,
    }
    health_status = "healthy" if token_configured else "degraded"
    
    logger.info("Health check", status=health_status, checks=checks)
    
    return HealthResponse(
        status=health_status,
        version=settings.APP_VERSION,
        checks=checks,
    )


@router.get(
    "/version",
    response_model=VersionResponse,
    summary="Get version information",
)
async def get_version(
    settings: Settings = Depends(get_settings),
) -> VersionResponse:
    """Return gateway version and inference configuration."""
    return VersionResponse(
        version=settings.APP_VERSION,
        model_id=settings.HF_MODEL_ID,
        max_text_length=settings.MAX_TEXT_LENGTH,
    )
