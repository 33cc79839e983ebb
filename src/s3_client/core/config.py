"""Configuration management for s3-client."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    log_level: str = "WARNING"
    otel_enabled: bool = False
    otel_service_name: str = "s3-client"

    model_config = {
        "env_prefix": "S3_CLIENT_",
        "case_sensitive": False,
    }


settings = Settings()
