"""Shared configuration management using pydantic-settings."""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class SharedConfig(BaseSettings):
    """Base configuration shared across all packages."""
    log_level: str = Field(default="info", validation_alias="LOG_LEVEL")

    model_config = {
        "populate_by_name": True,
        "extra": "ignore",
    }


class ModelSettings(SharedConfig):
    """Configuration for the AsyncAPI document model."""
    strict_mode: bool = Field(
        default=False, validation_alias="ASYNCAPI_MODEL_STRICT"
    )


def get_settings() -> ModelSettings:
    """Build settings from the current environment."""
    return ModelSettings()
