"""Configuration management for TinyLink."""

from typing import Literal, Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Config(BaseSettings):
    """Application configuration."""

    # Storage settings
    storage_backend: Literal["memory", "file", "redis"] = Field(
        default="file",
        description="Where the link collection is kept: memory, file or redis"
    )

    storage_path: str = Field(
        default="data",
        description="Directory for the file backend"
    )

    storage_key: str = Field(
        default="tinylink_db",
        description="Slot key holding the JSON link collection"
    )

    redis_url: Optional[str] = Field(
        default=None,
        description="Redis connection URL (required for the redis backend)"
    )

    redis_prefix: str = Field(
        default="tinylink:",
        description="Namespace prepended to Redis keys"
    )

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )

    port: int = Field(
        default=9200,
        description="Port to listen on"
    )

    workers: int = Field(
        default=1,
        ge=1,
        description="Number of uvicorn worker processes. Links are only consistent with 1 worker."
    )

    # Link settings
    base_url: str = Field(
        default="http://localhost:9200",
        description="Base URL for generating short URLs"
    )

    path_prefix: str = Field(
        default="",
        description="Path prefix for short URLs (e.g., '/s' for /s/abc123)"
    )

    short_code_length: int = Field(
        default=6,
        ge=1,
        description="Length of generated short codes"
    )

    enable_custom_codes: bool = Field(
        default=True,
        description="Allow users to provide custom short codes"
    )

    max_collision_retries: int = Field(
        default=5,
        ge=1,
        description="Generation attempts per code length before growing the length"
    )

    simulated_latency_ms: int = Field(
        default=0,
        ge=0,
        description="Artificial delay for management operations (redirects are never delayed)"
    )

    history_days: int = Field(
        default=7,
        ge=1,
        description="Days covered by the synthesized click history"
    )

    app_version: str = Field(
        default="1.0.0",
        description="Version reported by /healthz"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


def load_config(**overrides) -> Config:
    """Load configuration from environment, with keyword overrides."""
    return Config(**overrides)
