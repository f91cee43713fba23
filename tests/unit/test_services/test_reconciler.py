"""Tests for the settings diff command."""

import io
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from gram.errors import DIFF_BANNER, DiscrepancyError, SettingsParseError, TransportError
from gram.models.github import Branch, Repository
from gram.models.settings import GramSettings, Options
from gram.services.reconciler import SettingsDiffCommand, check_settings
from gram.services.retriever import SettingsRetriever


class FakeReader:
    """SettingsReaderPort returning fixed settings."""

    def __init__(self, settings: GramSettings | None) -> None:
        self.settings = settings

    def read_to_string(self, path: Path) -> str:
        raise NotImplementedError

    def read_settings(self, path: Path) -> GramSettings:
        if self.settings is None:
            raise SettingsParseError(f"Could not read settings file {path}", str(path))
        return self.settings


@pytest.fixture
def opposing() -> tuple[GramSettings, Repository]:
    """Desired settings and a repository that disagrees on every field."""
    settings = GramSettings(
        description="description",
        options=Options(
            delete_branch_on_merge=True,
            allow_rebase_merge=True,
            allow_squash_merge=True,
            allow_merge_commit=False,
        ),
    )
    repo = Repository(
        description="different",
        allow_merge_commit=True,
        allow_squash_merge=False,
        allow_rebase_merge=False,
        delete_branch_on_merge=False,
    )
    return settings, repo


class TestCheckSettings:
    """Test check_settings()."""

    def test_matching_settings_pass(self) -> None:
        """Identical settings should not raise."""
        settings = GramSettings(description="a", protected_branches=["main"])
        check_settings(settings, settings)

    def test_partial_desired_settings_pass(self, full_settings: GramSettings) -> None:
        """Fields missing from desired should not be diffed."""
        check_settings(GramSettings(description="a"), full_settings)

    def test_missing_description(self) -> None:
        """A desired description with none on the repo is reported."""
        with pytest.raises(DiscrepancyError) as exc_info:
            check_settings(GramSettings(description="test"), GramSettings())
        assert exc_info.value.diffs == ["[description]: expected [test] but it has no value"]

    def test_error_message_has_banner_and_lines(self) -> None:
        """The message is the banner then one line per discrepancy."""
        with pytest.raises(DiscrepancyError) as exc_info:
            check_settings(
                GramSettings(description="test", protected_branches=["main"]),
                GramSettings(description="something else"),
            )
        assert str(exc_info.value).splitlines() == [
            DIFF_BANNER,
            "[description]: expected [test] got [something else]",
            "[protected]: expected [main] but it has no value",
        ]


class TestSettingsDiffCommand:
    """Test SettingsDiffCommand.run()."""

    @pytest.mark.asyncio
    async def test_line_per_failed_setting(
        self,
        make_client: Callable[..., Any],
        opposing: tuple[GramSettings, Repository],
    ) -> None:
        """Each differing setting should get one sorted line."""
        settings, repo = opposing
        command = SettingsDiffCommand(
            FakeReader(settings),
            SettingsRetriever(make_client(repository=repo, branches=[])),
        )

        with pytest.raises(DiscrepancyError) as exc_info:
            await command.run("owner", "repo", Path("settings.toml"))

        assert exc_info.value.diffs == [
            "[description]: expected [description] got [different]",
            "[options.allow-merge-commit]: expected [false] got [true]",
            "[options.allow-rebase-merge]: expected [true] got [false]",
            "[options.allow-squash-merge]: expected [true] got [false]",
            "[options.delete-branch-on-merge]: expected [true] got [false]",
        ]
        assert str(exc_info.value).startswith("Actual settings differ from expected!")

    @pytest.mark.asyncio
    async def test_matching_repository_succeeds(
        self,
        make_client: Callable[..., Any],
        repository: Repository,
        branches: list[Branch],
    ) -> None:
        """A repository matching the file should pass."""
        desired = GramSettings(
            description="description",
            options=Options(allow_squash_merge=True),
            protected_branches=["master"],
        )
        command = SettingsDiffCommand(
            FakeReader(desired),
            SettingsRetriever(make_client(repository=repository, branches=branches)),
        )

        await command.run("owner", "repo", Path("settings.toml"))

    @pytest.mark.asyncio
    async def test_error_if_repository_fetch_fails(
        self, make_client: Callable[..., Any]
    ) -> None:
        """A failed remote read should propagate unchanged."""
        error = TransportError("error", "/repos/owner/repo")
        command = SettingsDiffCommand(
            FakeReader(GramSettings()),
            SettingsRetriever(make_client(error=error)),
        )

        with pytest.raises(TransportError):
            await command.run("owner", "repo", Path("settings.toml"))

    @pytest.mark.asyncio
    async def test_error_if_reading_settings_file_fails(
        self,
        make_client: Callable[..., Any],
        repository: Repository,
    ) -> None:
        """A failed file read should abort before any remote call."""
        client = make_client(repository=repository, branches=[])
        command = SettingsDiffCommand(FakeReader(None), SettingsRetriever(client))

        with pytest.raises(SettingsParseError):
            await command.run("owner", "repo", Path("settings.toml"))
        assert client.calls == []

    @pytest.mark.asyncio
    async def test_logs_discrepancy_count(
        self,
        make_client: Callable[..., Any],
        opposing: tuple[GramSettings, Repository],
        log_capture: io.StringIO,
    ) -> None:
        """The number of discrepancies should be logged."""
        settings, repo = opposing
        command = SettingsDiffCommand(
            FakeReader(settings),
            SettingsRetriever(make_client(repository=repo, branches=[])),
        )

        with pytest.raises(DiscrepancyError):
            await command.run("owner", "repo", Path("settings.toml"))

        assert "Found 5 discrepancies" in log_capture.getvalue()
