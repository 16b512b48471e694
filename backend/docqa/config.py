"""Configuration and environment variables"""
from functools import lru_cache
from typing import List, Optional

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Google Gemini API
    gemini_api_key: Optional[SecretStr] = Field(
        default=None,
        validation_alias=AliasChoices("api_key", "gemini_api_key"),
    )
    gemini_model: str = "gemini-1.5-flash"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    request_timeout: float = 30.0  # seconds

    # Upload Configuration
    upload_dir: str = "./uploads"
    max_file_size: int = 10 * 1024 * 1024  # 10MB

    # Q&A Configuration
    max_question_length: int = 500
    max_content_length: int = 30000

    # Server Configuration
    environment: str = "production"
    port: int = 5001
    log_level: str = "INFO"

    # CORS Settings
    cors_origins: List[str] = ["http://localhost:3000", "http://localhost:5001"]

    class Config:
        env_file = ".env"
        case_sensitive = False
        populate_by_name = True
        extra = "ignore"

    @property
    def is_development(self) -> bool:
        """Whether error envelopes may carry debugging details"""
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process"""
    return Settings()
