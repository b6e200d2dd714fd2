"""Error types raised while building a license report.

Every error derives from LicenseReportError so the CLI can map the whole
family to a single exit code.
"""

from typing import Optional


class LicenseReportError(Exception):
    """Base class for all license report errors."""


class ConfigurationError(LicenseReportError):
    """Configuration is missing or invalid (API key, project, revision, ...)."""


class ClientError(LicenseReportError):
    """The data service request failed.

    Attributes:
        status: HTTP status code, if the service answered at all.
    """

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.status = status


class FetchError(LicenseReportError):
    """Dependencies for a locator could not be fetched."""


class SerializationError(LicenseReportError):
    """Revisions could not be encoded as JSON."""


class RenderError(LicenseReportError):
    """The notice template could not be loaded or rendered."""
