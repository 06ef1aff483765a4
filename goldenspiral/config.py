"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    goldenspiral_env: str = "development"
    goldenspiral_log_level: str = "info"

    # Frame defaults
    default_square_count: int = 8
    viewport_width: float = 800.0
    viewport_height: float = 600.0

    # Animation driver
    animation_speed: float = 1.0
    base_duration_per_square_ms: float = 500.0
    frame_interval_ms: float = 16.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
