"""
Configuration settings for the Entry Analysis Service.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development.
"""

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    # === Application ===
    APP_NAME: str = "Entry Analysis Service"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"
    
    # === Hugging Face Inference ===
    HF_API_KEY: SecretStr = SecretStr("")  # Never logged
    HF_INFERENCE_BASE_URL: str = "https://router.huggingface.co/hf-inference/models"
    INFERENCE_TIMEOUT: float = 5.0  # seconds, same as the httpx default
    
    # === Models ===
    SENTIMENT_MODEL: str = "distilbert/distilbert-base-uncased-finetuned-sst-2-english"
    EMOTION_MODEL: str = "j-hartmann/emotion-english-distilroberta-base"
    SUMMARY_MODEL: str = "sshleifer/distilbart-cnn-12-6"
    
    # === Summarization ===
    SUMMARY_MIN_LENGTH: int = 10
    SUMMARY_MAX_LENGTH: int = 60
    SUMMARY_FALLBACK_CHARS: int = 200  # Truncation limit when the summary model fails
    
    # === Authentication ===
    FIREBASE_PROJECT_ID: Optional[str] = None  # Falls back to GOOGLE_CLOUD_PROJECT / ADC
    
    # === Monitoring ===
    PROMETHEUS_ENABLED: bool = True


# Global settings instance
settings = Settings()
