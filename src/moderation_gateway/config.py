"""
Configuration settings for the Text Moderation Gateway.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development (see .env.example).
"""

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    # === Application ===
    APP_NAME: str = "Text Moderation Gateway"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    
    # === Hugging Face Inference ===
    HF_API_TOKEN: SecretStr = SecretStr("")
    HF_BASE_URL: str = "https://router.huggingface.co/hf-inference"
    HF_MODEL_ID: str = "ProsusAI/finbert"
    HF_REPLACEMENT_MODEL: str = "cardiffnlp/twitter-roberta-base-hate-latest"
    HF_TIMEOUT: float = 60.0  # seconds, wait_for_model can stall on cold starts
    
    # === Input Processing ===
    MAX_TEXT_LENGTH: int = 5000  # chars, checked on the untrimmed text
    
    # === Monitoring ===
    PROMETHEUS_ENABLED: bool = True


# Global settings instance
settings = Settings()
