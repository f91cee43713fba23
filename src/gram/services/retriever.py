"""Retrieve the actual settings of a repository from GitHub."""

import asyncio

from loguru import logger

from gram.models.settings import GramSettings
from gram.ports.github import GithubClientPort


class SettingsRetriever:
    """
    Assembles GramSettings from the GitHub API.

    Repository metadata and protected branches are fetched
    concurrently. Both reads must succeed; otherwise the error of
    the first failed read (metadata before branches) is raised and
    no settings are built.
    """

    def __init__(self, client: GithubClientPort) -> None:
        self.client = client

    async def retrieve(self, owner: str, repo: str) -> GramSettings:
        """Fetch the live settings of owner/repo."""
        repository, branches = await asyncio.gather(
            self.client.repository(owner, repo),
            self.client.protected_branches(owner, repo),
            return_exceptions=True,
        )
        for result in (repository, branches):
            if isinstance(result, BaseException):
                logger.debug("Failed to retrieve {}/{}: {}", owner, repo, result)
                raise result

        logger.debug(
            "Retrieved {}/{}: {} protected branch(es)",
            owner,
            repo,
            len(branches),
        )
        return GramSettings.from_github(repository, branches)
