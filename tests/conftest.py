"""Shared pytest fixtures for gram tests."""

import io
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from loguru import logger

from gram.models.github import Branch, Repository
from gram.models.settings import GramSettings, Options


class FakeGithubClient:
    """In-memory GithubClientPort.

    A None repository or branch list makes the matching call fail.
    """

    def __init__(
        self,
        repository: Repository | None = None,
        branches: list[Branch] | None = None,
        error: Exception | None = None,
    ) -> None:
        self._repository = repository
        self._branches = branches
        self._error = error or RuntimeError("error")
        self.calls: list[tuple[str, str, str]] = []

    async def repository(self, owner: str, name: str) -> Repository:
        self.calls.append(("repository", owner, name))
        if self._repository is None:
            raise self._error
        return self._repository

    async def protected_branches(self, owner: str, name: str) -> list[Branch]:
        self.calls.append(("protected_branches", owner, name))
        if self._branches is None:
            raise self._error
        return self._branches


@pytest.fixture
def make_client() -> Callable[..., FakeGithubClient]:
    """Factory for fake GitHub clients."""
    return FakeGithubClient


@pytest.fixture
def log_capture() -> Generator[io.StringIO, None, None]:
    """Capture loguru output to a string buffer."""
    string_io = io.StringIO()
    handler_id = logger.add(string_io, format="{message}", level="DEBUG")
    yield string_io
    logger.remove(handler_id)


@pytest.fixture
def repository() -> Repository:
    """Repository metadata as returned by GitHub."""
    return Repository(
        description="description",
        allow_squash_merge=True,
        allow_merge_commit=False,
        allow_rebase_merge=True,
        delete_branch_on_merge=False,
    )


@pytest.fixture
def branches() -> list[Branch]:
    """A single protected branch."""
    return [Branch(name="master")]


@pytest.fixture
def full_settings() -> GramSettings:
    """Settings with every field defined."""
    return GramSettings(
        description="a",
        options=Options(
            allow_squash_merge=True,
            allow_merge_commit=True,
            allow_rebase_merge=True,
            delete_branch_on_merge=True,
        ),
        protected_branches=["a", "b"],
    )


@pytest.fixture
def settings_toml(tmp_path: Path) -> Path:
    """Create a sample settings TOML file."""
    content = """
description = "This is a test repository"
protected = ["main", "release"]

[options]
allow-squash-merge = true
allow-merge-commit = false
"""
    path = tmp_path / "settings.toml"
    path.write_text(content)
    return path
