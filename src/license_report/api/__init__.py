"""Clients for the dependency data service."""

from license_report.api.base import BaseClient
from license_report.api.client import RevisionClient

__all__ = ["BaseClient", "RevisionClient"]
