"""
FastAPI API routes and endpoints.

- routes.py: POST/OPTIONS /processEntry, GET /health
- dependencies.py: Dependency injection for settings, inference client, token verifier
- models.py: API-specific request/response models
- error_handlers.py: Exception handlers for {"ok": false, "error": ...} responses
- middleware.py: Request tracing and CORS origin header
"""

from entry_analysis.api import dependencies, error_handlers, models
from entry_analysis.api.routes import router

__all__ = [
    "router",
    "dependencies",
    "error_handlers",
    "models",
]
