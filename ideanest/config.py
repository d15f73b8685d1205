"""Application configuration via pydantic-settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="IDEANEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Evaluation service
    api_base_url: str = "http://localhost:3001/make-server-a61508a1"
    api_key: str = ""
    request_timeout: float = 60.0

    # Simulated latency on the substitute paths (seconds)
    evaluate_fallback_delay: float = 2.0
    auxiliary_fallback_delay: float = 1.0
    auxiliary_substitute_delay: float = 1.5

    # Idea store (disabled when empty)
    redis_url: str = ""
    redis_timeout: float = 2.0

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"
