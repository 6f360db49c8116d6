"""
Configuration management for the Job Board backend.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Upstream job service
    job_service_url: str = "http://localhost:8000"
    upstream_timeout: float = 30.0

    # CV generation
    cv_generation_delay: float = 2.0  # Simulated generation latency (seconds)
    cv_generate_rate_limit: str = "20/minute"
    rate_limit_enabled: bool = True

    # Uploads
    max_upload_size_mb: int = 5

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    debug: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra env vars


settings = Settings()
