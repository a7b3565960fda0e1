"""
FastAPI API routes and endpoints.

- routes.py: POST /api/analyze, GET /health, GET /version
- dependencies.py: Dependency injection for settings, inference client, pipeline
- models.py: API-specific response models
- error_handlers.py: Exception handlers for structured error responses
- middleware.py: Request tracing
"""

from moderation_gateway.api import dependencies, error_handlers, models
from moderation_gateway.api.routes import router

__all__ = [
    "router",
    "dependencies",
    "error_handlers",
    "models",
]
