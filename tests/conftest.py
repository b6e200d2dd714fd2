"""Pytest configuration and fixtures."""

from typing import Any

import pytest

from license_report.models import Locator, Revision


@pytest.fixture
def sample_locator() -> Locator:
    """Return the locator used across tests."""
    return Locator(fetcher="git", project="acme/widgets", revision="abc123")


@pytest.fixture
def sample_payload() -> list[dict[str, Any]]:
    """Return a dependencies response as sent by the data service."""
    return [
        {
            "loc": {"fetcher": "npm", "package": "libfoo", "revision": "1.0.0"},
            "project": {"title": "libfoo", "url": "http://x/foo", "public": True},
            "licenses": [{"licenseId": "MIT", "title": "MIT License"}],
        },
        {
            "loc": "npm+libbar$2.1.0",
            "project": {"title": "libbar", "url": "http://x/bar"},
            "licenses": [{"licenseId": "MIT"}, {"licenseId": "Apache-2.0"}],
        },
    ]


@pytest.fixture
def sample_revisions(sample_payload: list[dict[str, Any]]) -> list[Revision]:
    """Return the sample payload parsed into revisions."""
    return [Revision.from_dict(item) for item in sample_payload]
