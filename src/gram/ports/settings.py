"""Port interfaces for loading desired and actual settings."""

from pathlib import Path
from typing import Protocol

from gram.models.settings import GramSettings


class SettingsReaderPort(Protocol):
    """Protocol for reading the desired settings file."""

    def read_to_string(self, path: Path) -> str:
        """Read a file as text.

        Raises:
            SettingsParseError: If the file cannot be read
        """
        ...

    def read_settings(self, path: Path) -> GramSettings:
        """Read and parse a settings file.

        Raises:
            SettingsParseError: If the file is missing or malformed
        """
        ...


class SettingsRetrieverPort(Protocol):
    """Protocol for fetching the actual settings of a repository."""

    async def retrieve(self, owner: str, repo: str) -> GramSettings:
        """Fetch the live settings.

        Raises:
            TransportError: If any underlying read fails
        """
        ...
