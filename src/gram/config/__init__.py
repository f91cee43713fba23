"""Configuration management for gram."""

from gram.config.loader import load_config
from gram.config.models import GithubConfig, GramConfig, LoggingConfig

__all__ = ["GithubConfig", "GramConfig", "LoggingConfig", "load_config"]
