"""
Configuration settings for the Sentiment Analysis API.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development.
"""

from pydantic import AliasChoices, Field
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
    APP_NAME: str = "Sentiment Analysis API"
    APP_VERSION: str = "1.0.0"
    
    # === Server ===
    SERVER_HOST: str = "localhost"
    SERVER_PORT: int = 8080
    CORS_ALLOW_ORIGINS: list[str] = ["*"]
    
    # === LLM Provider ===
    LLM_API_KEY: str = ""
    LLM_URL: str = Field(
        default="",
        validation_alias=AliasChoices("URL_CHAT_LLM_LLM", "LLM_URL"),
    )
    LLM_MODEL: str = "telkom-ai-instruct"
    LLM_TIMEOUT: int = 60  # seconds, whole request
    
    # === Generation Parameters ===
    LABEL_MAX_TOKENS: int = 100
    LABEL_TEMPERATURE: float = 0.0  # Deterministic labels
    REASONING_MAX_TOKENS: int = 300
    REASONING_TEMPERATURE: float = 0.1
    
    # === Input Limits ===
    QUESTION_MAX_LENGTH: int = 1000  # chars
    ANSWER_MAX_LENGTH: int = 2000  # chars
    
    # === Logging ===
    LOG_LEVEL: str = "info"
    LOG_FORMAT: str = "json"  # "json" or "text"
    
    # === Monitoring ===
    PROMETHEUS_ENABLED: bool = True
    
    def missing_required(self) -> list[str]:
        """Return the environment names of required settings that are blank."""
        missing = []
        if not self.LLM_API_KEY.strip():
            missing.append("LLM_API_KEY")
        if not self.LLM_URL.strip():
            missing.append("URL_CHAT_LLM_LLM")
        return missing


# Global settings instance
settings = Settings()
