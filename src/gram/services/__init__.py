"""gram services layer.

Services load the desired settings, fetch the actual settings
from GitHub, and diff the two.
"""

from gram.services.differ import diff
from gram.services.flattener import SETTINGS_FIELDS, flatten
from gram.services.github import GithubClient
from gram.services.reconciler import SettingsDiffCommand, check_settings
from gram.services.retriever import SettingsRetriever
from gram.services.settings_reader import SettingsReader

__all__ = [
    "SETTINGS_FIELDS",
    "GithubClient",
    "SettingsDiffCommand",
    "SettingsReader",
    "SettingsRetriever",
    "check_settings",
    "diff",
    "flatten",
]
