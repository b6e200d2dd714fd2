"""Base interface for output reporters.

Reporters turn a license grouping into a formatted document.
"""

from abc import ABC, abstractmethod
from typing import Optional

from license_report.grouping import Grouping
from license_report.models import Locator


class BaseReporter(ABC):
    """Abstract base class for output reporters."""

    @abstractmethod
    def render(self, grouping: Grouping, locator: Optional[Locator] = None) -> str:
        """Render a license grouping to formatted output.

        Args:
            grouping: Sorted license -> revisions mapping.
            locator: Locator of the project the report is for.

        Returns:
            Rendered output as a string.
        """
        ...
