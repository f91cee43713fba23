"""Domain models for gram."""

from gram.models.github import Branch, Protection, Repository, RequiredStatusChecks
from gram.models.settings import GramSettings, Options

__all__ = [
    "Branch",
    "GramSettings",
    "Options",
    "Protection",
    "Repository",
    "RequiredStatusChecks",
]
