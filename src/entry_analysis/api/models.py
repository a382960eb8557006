"""
API-specific request and response models for FastAPI endpoints.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from entry_analysis.models.analysis_models import AnalysisResult


class ProcessEntryRequest(BaseModel):
    """Body of POST /processEntry."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    text: Optional[str] = Field(
        default=None,
        description="Journal entry text (required, non-empty)",
        examples=["I am furious and overwhelmed today"],
    )
    audio_url: Optional[str] = Field(
        default=None,
        alias="audioUrl",
        description="Recording the text was transcribed from (accepted, not analyzed)",
    )


class ProcessEntryResponse(BaseModel):
    """Successful analysis."""

    ok: bool = Field(default=True)
    uid: str = Field(description="Authenticated caller id")
    ai: AnalysisResult = Field(description="Analysis of the entry")


class ErrorResponse(BaseModel):
    """Standard error response format."""

    ok: bool = Field(default=False)
    error: str = Field(
        description="Error code or message",
        examples=["missing_id_token", "invalid_id_token", "missing_text"],
    )


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: str = Field(
        description="Overall health status",
        examples=["healthy", "degraded"]
    )
    version: str = Field(
        description="Service version",
        examples=["0.1.0"]
    )
    models: dict[str, str] = Field(
        description="Configured model per analysis stage",
    )
    credential_configured: bool = Field(
        description="Whether an inference API key is set"
    )
    timestamp: datetime = Field(
        default_factory=datetime.utcnow,
        description="Health check timestamp (UTC)"
    )
