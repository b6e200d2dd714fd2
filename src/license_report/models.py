"""Core data models for license_report.

This module defines the structures exchanged with the dependency data
service: project locators, the revisions returned for them, and the
license matches attached to each revision.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Locator:
    """Immutable identifier of an analyzed project snapshot.

    The string form is ``{fetcher}+{project}${revision}``, which is also
    how the data service addresses revisions.

    Attributes:
        fetcher: Source of the project (e.g., "git", "npm", "custom").
        project: Project identifier (e.g., "acme/widgets").
        revision: Revision identifier (e.g., a commit hash).
    """

    fetcher: str
    project: str
    revision: str

    def __str__(self) -> str:
        return f"{self.fetcher}+{self.project}${self.revision}"

    @classmethod
    def parse(cls, text: str) -> "Locator":
        """Parse a locator from its string form.

        Args:
            text: Locator string such as "npm+lodash$4.17.21".

        Returns:
            The parsed Locator. A missing revision yields an empty string.

        Raises:
            ValueError: If the string has no fetcher separator.
        """
        fetcher, sep, rest = text.partition("+")
        if not sep or not fetcher:
            raise ValueError(f"Invalid locator: {text!r}")
        project, _, revision = rest.partition("$")
        return cls(fetcher=fetcher, project=project, revision=revision)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Locator":
        """Build a locator from the service's object form."""
        return cls(
            fetcher=data.get("fetcher", ""),
            project=data.get("package", data.get("project", "")),
            revision=data.get("revision", ""),
        )


@dataclass
class Project:
    """Descriptive metadata of a dependency's project.

    Attributes:
        title: Display title (e.g., "lodash").
        url: Project homepage or repository URL.
        public: Whether the project is publicly available.
        authors: Author names reported by the service.
    """

    title: str = ""
    url: str = ""
    public: bool = False
    authors: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Project":
        return cls(
            title=data.get("title") or "",
            url=data.get("url") or "",
            public=bool(data.get("public", False)),
            authors=list(data.get("authors") or []),
        )


@dataclass
class LicenseMatch:
    """One detected license applicable to a revision.

    Attributes:
        license_id: License identifier, usually SPDX (e.g., "MIT").
        title: Human-readable license title.
        url: URL of the license text.
        copyright: Copyright notice attached to the match.
        ignored: True if the match was ignored on the service.
    """

    license_id: str
    title: Optional[str] = None
    url: Optional[str] = None
    copyright: Optional[str] = None
    ignored: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LicenseMatch":
        return cls(
            license_id=data.get("licenseId") or "",
            title=data.get("title"),
            url=data.get("url"),
            copyright=data.get("copyright"),
            ignored=bool(data.get("ignored", False)),
        )


@dataclass
class Revision:
    """A dependency instance returned by the data service.

    Keeps the raw payload it was parsed from so that JSON output can
    pass the service response through untouched.

    Attributes:
        project: Project descriptor (title and URL).
        licenses: License matches in service order (may contain duplicates).
        locator: Locator of the dependency itself, if reported.
        raw: The unmodified JSON object received from the service, or None
            for revisions built in code.
    """

    project: Project
    licenses: list[LicenseMatch] = field(default_factory=list)
    locator: Optional[Locator] = None
    raw: Optional[dict[str, Any]] = field(default=None, repr=False, compare=False)

    @property
    def title(self) -> str:
        return self.project.title

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Revision":
        """Parse one revision object from the service response.

        Args:
            data: A single element of the dependencies array.

        Returns:
            Revision with parsed project, licenses and locator. A locator
            string that does not parse leaves the locator unset.
        """
        loc = data.get("loc")
        locator = None
        if isinstance(loc, dict):
            locator = Locator.from_dict(loc)
        elif isinstance(loc, str) and loc:
            try:
                locator = Locator.parse(loc)
            except ValueError:
                logger.debug("Ignoring unparseable revision locator: %r", loc)

        return cls(
            project=Project.from_dict(data.get("project") or {}),
            licenses=[LicenseMatch.from_dict(m) for m in data.get("licenses") or []],
            locator=locator,
            raw=data,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the payload this revision was parsed from."""
        if self.raw is not None:
            return self.raw
        return {
            "loc": str(self.locator) if self.locator else None,
            "project": {"title": self.project.title, "url": self.project.url},
            "licenses": [{"licenseId": m.license_id} for m in self.licenses],
        }
