"""GitHub API client using httpx.

Implements GithubClientPort for the two reads gram needs:
repository metadata and the list of protected branches.
"""

from types import TracebackType
from typing import Any

import httpx
from loguru import logger
from pydantic import TypeAdapter, ValidationError

from gram import __version__
from gram.config.models import GithubConfig
from gram.errors import AuthenticationError, TransportError
from gram.models.github import Branch, Repository

USER_AGENT = f"gram {__version__}"


class GithubClient:
    """
    Async GitHub REST client.

    Use as an async context manager so the underlying connection
    pool is closed:

        async with GithubClient(token, config) as github:
            repo = await github.repository("owner", "name")
    """

    def __init__(
        self,
        token: str,
        config: GithubConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or GithubConfig()
        self._client = httpx.AsyncClient(
            base_url=self.config.api_url,
            headers=self.default_headers(token),
            timeout=self.config.timeout_seconds,
            transport=transport,
        )

    @staticmethod
    def default_headers(token: str) -> dict[str, str]:
        """Headers sent with every request."""
        return {
            "Content-Type": "application/json",
            "Authorization": f"token {token}",
            "User-Agent": USER_AGENT,
        }

    async def __aenter__(self) -> "GithubClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the client."""
        await self._client.aclose()

    async def repository(self, owner: str, name: str) -> Repository:
        """Get repository metadata."""
        return await self.get(f"/repos/{owner}/{name}", Repository)

    async def protected_branches(self, owner: str, name: str) -> list[Branch]:
        """List the protected branches of a repository."""
        return await self.get(
            f"/repos/{owner}/{name}/branches",
            list[Branch],
            params={"protected": "true"},
        )

    async def get(self, url: str, response_type: Any, params: dict[str, Any] | None = None) -> Any:
        """
        GET url and deserialize the JSON body into response_type.

        Raises:
            AuthenticationError: On a 401 response.
            TransportError: On any other failure.
        """
        logger.debug("GET {}{}", self.config.api_url, url)
        try:
            response = await self._client.get(url, params=params)
        except httpx.HTTPError as e:
            raise TransportError(f"Request to {url} failed: {e}", url) from e

        if response.status_code == httpx.codes.UNAUTHORIZED:
            raise AuthenticationError(url)

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(str(e), url, status_code=response.status_code) from e

        try:
            return TypeAdapter(response_type).validate_json(response.content)
        except ValidationError as e:
            raise TransportError(
                f"Unexpected response body from {url}: {e}",
                url,
                status_code=response.status_code,
            ) from e
