"""Base interface for dependency data service clients.

Clients fetch the dependency graph, with license attributions, that the
service previously computed for a project revision.
"""

from abc import ABC, abstractmethod

from license_report.models import Locator, Revision


class BaseClient(ABC):
    """Abstract base class for data service clients.

    Clients must be async-compatible and usable as async context managers
    so their connections are released when the report is done.
    """

    @abstractmethod
    async def get_revision_dependencies(
        self, locator: Locator, include_licenses: bool = True
    ) -> list[Revision]:
        """Fetch the dependencies of a project revision.

        Args:
            locator: Project revision to query.
            include_licenses: Whether license matches should be included.

        Returns:
            Revisions in the order returned by the service.

        Raises:
            ClientError: If the service call fails.
        """
        ...

    async def close(self) -> None:
        """Release any held resources."""

    async def __aenter__(self) -> "BaseClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()
