"""Configuration settings using Pydantic BaseSettings."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Service Configuration
    service_name: str = Field(default="api-tareas", description="Service name reported by the health check")
    environment: str = Field(default="development", description="Deployment environment name")

    # Application Configuration
    app_host: str = Field(default="0.0.0.0", description="FastAPI host")
    app_port: int = Field(default=8001, description="FastAPI port")
    debug: bool = Field(default=False, description="Enable debug mode")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_file: Optional[Path] = Field(default=None, description="Log file path")

    class Config:
        """Pydantic configuration."""
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = Settings()
