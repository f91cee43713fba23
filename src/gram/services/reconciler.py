"""Reconcile desired settings with the actual repository settings."""

from pathlib import Path

from loguru import logger

from gram.errors import DiscrepancyError
from gram.models.settings import GramSettings
from gram.ports.settings import SettingsReaderPort, SettingsRetrieverPort
from gram.services.differ import diff
from gram.services.flattener import flatten


def check_settings(desired: GramSettings, actual: GramSettings) -> None:
    """
    Raise DiscrepancyError if actual does not satisfy desired.

    Raises:
        DiscrepancyError: With every discrepancy, sorted.
    """
    diffs = diff(flatten(desired), flatten(actual))
    logger.debug("Found {} discrepancies", len(diffs))
    if diffs:
        raise DiscrepancyError(diffs)


class SettingsDiffCommand:
    """
    Diff actual settings with expected settings defined in a
    settings file.

    Only settings defined in the file are diffed. Any failure to
    read the file or the repository aborts the whole diff.
    """

    def __init__(self, reader: SettingsReaderPort, retriever: SettingsRetrieverPort) -> None:
        self.reader = reader
        self.retriever = retriever

    async def run(self, owner: str, repo: str, settings_file: Path) -> None:
        """Diff owner/repo against settings_file.

        Raises:
            SettingsParseError: If the settings file can't be loaded.
            TransportError: If the repository can't be read.
            DiscrepancyError: If the settings differ.
        """
        desired = self.reader.read_settings(settings_file)
        logger.debug("Desired settings: {!r}", desired)
        actual = await self.retriever.retrieve(owner, repo)
        check_settings(desired, actual)
