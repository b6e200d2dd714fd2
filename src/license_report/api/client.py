"""HTTP client for the dependency data service.

Fetches a revision's dependency list, with license matches, from the
service's revisions API.
"""

import asyncio
import logging
from typing import Any, Optional
from urllib.parse import quote

import aiohttp

from license_report.api.base import BaseClient
from license_report.errors import ClientError
from license_report.models import Locator, Revision

logger = logging.getLogger(__name__)

REVISION_DEPENDENCIES_PATH = "/api/revisions/{locator}/dependencies"


class RevisionClient(BaseClient):
    """Client for the revisions API of the data service.

    Manages an aiohttp session for the lifetime of the client. Use as an
    async context manager or call close() when done.

    Attributes:
        endpoint: Base URL of the service (e.g., "https://app.fossa.com").
        api_key: API key sent in the Authorization header.
        timeout: Total request timeout in seconds.
    """

    def __init__(self, endpoint: str, api_key: str, timeout: float = 600) -> None:
        """Initialize the client.

        Args:
            endpoint: Base URL of the service.
            api_key: API key for authentication.
            timeout: Total request timeout in seconds.
        """
        self.endpoint = endpoint.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self._session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create the aiohttp session.

        Returns:
            The shared aiohttp ClientSession.
        """
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                headers={
                    "Authorization": f"token {self.api_key}",
                    "Accept": "application/json",
                },
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            )
        return self._session

    async def close(self) -> None:
        """Close the aiohttp session."""
        if self._session is not None and not self._session.closed:
            await self._session.close()
            self._session = None

    def dependencies_url(self, locator: Locator) -> str:
        """Return the dependencies URL for a locator."""
        path = REVISION_DEPENDENCIES_PATH.format(locator=quote(str(locator), safe=""))
        return f"{self.endpoint}{path}"

    async def get_revision_dependencies(
        self, locator: Locator, include_licenses: bool = True
    ) -> list[Revision]:
        """Fetch the dependencies of a project revision.

        A single request is made; failures are not retried.

        Args:
            locator: Project revision to query.
            include_licenses: Whether license matches should be included.

        Returns:
            Revisions in the order returned by the service.

        Raises:
            ClientError: On transport errors, timeouts, non-2xx responses
                or a response body that is not a JSON array.
        """
        url = self.dependencies_url(locator)
        params = {"include_ignored": "true"}
        if include_licenses:
            params["licenses"] = "true"

        logger.debug("Requesting dependencies: %s", url)
        session = await self._get_session()

        try:
            async with session.get(url, params=params) as response:
                if response.status >= 400:
                    body = await response.text()
                    raise ClientError(
                        f"Service returned HTTP {response.status}: {body.strip()[:200]}",
                        status=response.status,
                    )
                payload: Any = await response.json(content_type=None)
        except aiohttp.ClientError as e:
            raise ClientError(f"Request to {url} failed: {e}") from e
        except asyncio.TimeoutError as e:
            raise ClientError(
                f"Request to {url} timed out after {self.timeout}s"
            ) from e
        except ValueError as e:
            raise ClientError(f"Invalid JSON response from {url}: {e}") from e

        if not isinstance(payload, list):
            raise ClientError(
                f"Unexpected response from {url}: expected a list of revisions"
            )

        try:
            revisions = [Revision.from_dict(item) for item in payload]
        except (AttributeError, TypeError, ValueError) as e:
            raise ClientError(f"Malformed revision in response from {url}: {e}") from e

        logger.debug("Received %d revisions for %s", len(revisions), locator)
        return revisions
