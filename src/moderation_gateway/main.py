"""
FastAPI application entry point for the Text Moderation Gateway.
"""

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from moderation_gateway.api.dependencies import get_inference_client
from moderation_gateway.api.error_handlers import EXCEPTION_HANDLERS
from moderation_gateway.api.middleware import RequestTracingMiddleware
from moderation_gateway.api.routes import router
from moderation_gateway.config import settings
from moderation_gateway.logging_config import configure_logging

# Configure structured logging before the app starts emitting events
configure_logging(settings.LOG_LEVEL, settings.ENVIRONMENT)
logger = structlog.get_logger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="Text classification gateway with ranked label scores and a derived verdict",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Request tracing middleware (must be first for request_id in all logs)
app.add_middleware(RequestTracingMiddleware, model_id=settings.HF_MODEL_ID)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

for exc_class, handler in EXCEPTION_HANDLERS.items():
    app.add_exception_handler(exc_class, handler)

app.include_router(router, tags=["analysis"])


@app.on_event("startup")
async def startup():
    """Application startup - log effective inference configuration."""
    logger.info(
        "Application startup",
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        inference_base_url=settings.HF_BASE_URL,
        model=settings.HF_MODEL_ID,
        timeout=settings.HF_TIMEOUT,
        api_token_configured=bool(settings.HF_API_TOKEN.get_secret_value()),
    )


@app.on_event("shutdown")
async def shutdown():
    """Application shutdown - close the shared inference client."""
    logger.info("Application shutdown")
    await get_inference_client().close()
    logger.info("Application shutdown complete")


if settings.PROMETHEUS_ENABLED:
    Instrumentator().instrument(app).expose(app)


@app.get("/")
async def root():
    """Root endpoint with API documentation links."""
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "health": "/health",
        "analyze": "/api/analyze",
        "metrics": "/metrics" if settings.PROMETHEUS_ENABLED else None,
    }


if __name__ == "__main__":
    import uvicorn
    
    uvicorn.run(
        "moderation_gateway.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
