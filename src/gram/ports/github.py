"""Port interface for the GitHub API."""

from typing import Protocol

from gram.models.github import Branch, Repository


class GithubClientPort(Protocol):
    """Protocol for the GitHub reads gram needs.

    Implementations raise TransportError (or AuthenticationError)
    when a call does not succeed.
    """

    async def repository(self, owner: str, name: str) -> Repository:
        """Get repository metadata."""
        ...

    async def protected_branches(self, owner: str, name: str) -> list[Branch]:
        """List the protected branches of a repository."""
        ...
