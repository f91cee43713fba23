"""Read the desired settings from a TOML file."""

import tomllib
from pathlib import Path

from pydantic import ValidationError

from gram.errors import SettingsParseError
from gram.models.settings import GramSettings


class SettingsReader:
    """Loads GramSettings from a settings TOML file."""

    def read_to_string(self, path: Path) -> str:
        """Read the file at path as UTF-8 text."""
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SettingsParseError(f"Could not read settings file {path}: {e}", str(path)) from e

    def read_settings(self, path: Path) -> GramSettings:
        """
        Parse the settings file at path.

        Raises:
            SettingsParseError: If the file can't be read, isn't valid
                TOML, or has values of the wrong type.
        """
        content = self.read_to_string(path)

        try:
            data = tomllib.loads(content)
        except tomllib.TOMLDecodeError as e:
            raise SettingsParseError(f"Invalid TOML in settings file {path}: {e}", str(path)) from e

        try:
            return GramSettings.model_validate(data)
        except ValidationError as e:
            raise SettingsParseError(f"Invalid settings in {path}: {e}", str(path)) from e
