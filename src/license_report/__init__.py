"""License Report - third-party license notices from dependency analysis data.

This package fetches the dependency graph computed for a project revision
by a remote analysis service and renders it as a license notice or JSON.
"""

__version__ = "0.1.0"

from license_report.models import (
    LicenseMatch,
    Locator,
    Project,
    Revision,
)

__all__ = [
    "__version__",
    "LicenseMatch",
    "Locator",
    "Project",
    "Revision",
]
