"""
FastAPI application entry point for the Entry Analysis Service.
"""

import structlog
from fastapi import FastAPI
from prometheus_fastapi_instrumentator import Instrumentator

from entry_analysis.api.dependencies import get_inference_client
from entry_analysis.api.error_handlers import EXCEPTION_HANDLERS
from entry_analysis.api.middleware import AllowAnyOriginMiddleware, RequestTracingMiddleware
from entry_analysis.api.routes import router
from entry_analysis.config import settings
from entry_analysis.logging_config import configure_logging

# Configure structured logging before any other imports
configure_logging(settings.LOG_LEVEL, settings.ENVIRONMENT)
logger = structlog.get_logger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="Sentiment, emotion, summary and stress analysis of journal entries",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Added last = outermost: the origin header is set on every response,
# tracing wraps everything inside it
app.add_middleware(RequestTracingMiddleware)
app.add_middleware(AllowAnyOriginMiddleware)

for exc_class, handler in EXCEPTION_HANDLERS.items():
    app.add_exception_handler(exc_class, handler)

app.include_router(router, tags=["entries"])


@app.on_event("startup")
async def startup():
    """Log configuration; the inference client connects lazily."""
    logger.info(
        "Application startup",
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        inference_base_url=settings.HF_INFERENCE_BASE_URL,
        sentiment_model=settings.SENTIMENT_MODEL,
        emotion_model=settings.EMOTION_MODEL,
        summary_model=settings.SUMMARY_MODEL,
    )
    if not settings.HF_API_KEY.get_secret_value():
        logger.warning("HF_API_KEY is not set, inference calls will be rejected")


@app.on_event("shutdown")
async def shutdown():
    """Close the shared inference client."""
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
        "metrics": "/metrics" if settings.PROMETHEUS_ENABLED else None,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "entry_analysis.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
