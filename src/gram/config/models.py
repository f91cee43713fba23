"""Pydantic configuration models for gram."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

GITHUB_BASE_URL = "https://api.github.com"


class GithubConfig(BaseModel):
    """GitHub API client configuration."""

    api_url: str = GITHUB_BASE_URL
    timeout_seconds: float = Field(default=30.0, ge=1.0, le=300.0)

    @field_validator("api_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate URL format and strip trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("api_url must start with http:// or https://")
        return v.rstrip("/")


class LoggingConfig(BaseModel):
    """Logging configuration for loguru."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"


class GramConfig(BaseSettings):
    """Root configuration for gram."""

    github: GithubConfig = Field(default_factory=GithubConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "GRAM_",
        "env_nested_delimiter": "__",
    }
