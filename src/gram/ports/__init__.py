"""Port interfaces (protocols) for gram's external collaborators."""

from gram.ports.github import GithubClientPort
from gram.ports.settings import SettingsReaderPort, SettingsRetrieverPort

__all__ = [
    "GithubClientPort",
    "SettingsReaderPort",
    "SettingsRetrieverPort",
]
