"""Configuration loading for license reports.

Values come from, in order of precedence: command-line flags (which also
cover environment variables), the YAML config file, and inference from
the git repository in the working directory.
"""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from license_report.errors import ConfigurationError
from license_report.models import Locator

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = ".fossa.yml"
DEFAULT_ENDPOINT = "https://app.fossa.com"
DEFAULT_FETCHER = "custom"
DEFAULT_TIMEOUT = 600.0


@dataclass(frozen=True)
class ReportConfig:
    """Resolved settings for one report invocation.

    Attributes:
        endpoint: Base URL of the data service.
        api_key: API key for the data service.
        fetcher: Locator fetcher.
        project: Locator project.
        revision: Locator revision.
        timeout: Request timeout in seconds.
    """

    endpoint: str
    api_key: str
    fetcher: str
    project: str
    revision: str
    timeout: float = DEFAULT_TIMEOUT

    @property
    def locator(self) -> Locator:
        return Locator(fetcher=self.fetcher, project=self.project, revision=self.revision)


def read_config_file(path: Path) -> dict[str, Any]:
    """Read the ``cli`` section of a YAML config file.

    Args:
        path: Path to the config file.

    Returns:
        The ``cli`` mapping, or an empty dict if the file has none.

    Raises:
        ConfigurationError: If the file cannot be read or parsed.
    """
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigurationError(f"Unable to read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Invalid config file {path}: expected a mapping")

    cli = data.get("cli") or {}
    if not isinstance(cli, dict):
        raise ConfigurationError(f"Invalid config file {path}: 'cli' must be a mapping")
    return cli


def _git(*args: str, cwd: Optional[Path] = None) -> Optional[str]:
    """Run a git command and return its stripped output, or None on failure."""
    try:
        proc = subprocess.run(
            ["git", *args],
            cwd=str(cwd) if cwd else None,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError:
        return None
    if proc.returncode != 0:
        return None
    return proc.stdout.strip() or None


def infer_project(cwd: Optional[Path] = None) -> Optional[str]:
    """Infer the project identifier from the ``origin`` remote URL."""
    return _git("remote", "get-url", "origin", cwd=cwd)


def infer_revision(cwd: Optional[Path] = None) -> Optional[str]:
    """Infer the revision from the current HEAD commit."""
    return _git("rev-parse", "HEAD", cwd=cwd)


def load_config(
    config_path: Optional[Path] = None,
    endpoint: Optional[str] = None,
    api_key: Optional[str] = None,
    fetcher: Optional[str] = None,
    project: Optional[str] = None,
    revision: Optional[str] = None,
    timeout: Optional[float] = None,
    cwd: Optional[Path] = None,
) -> ReportConfig:
    """Resolve the report configuration.

    Args:
        config_path: Explicit config file. If None, ``.fossa.yml`` in the
            working directory is used when present.
        endpoint: Service URL from flags or environment.
        api_key: API key from flags or environment.
        fetcher: Locator fetcher from flags.
        project: Locator project from flags.
        revision: Locator revision from flags.
        timeout: Request timeout from flags.
        cwd: Working directory for config discovery and git inference.

    Returns:
        The resolved ReportConfig.

    Raises:
        ConfigurationError: If the config file is invalid or the API key,
            project or revision cannot be determined.
    """
    base = cwd or Path.cwd()
    file_values: dict[str, Any] = {}
    if config_path is not None:
        if not config_path.exists():
            raise ConfigurationError(f"Config file not found: {config_path}")
        file_values = read_config_file(config_path)
    elif (base / DEFAULT_CONFIG_FILE).exists():
        file_values = read_config_file(base / DEFAULT_CONFIG_FILE)

    def pick(name: str, flag_value: Optional[str], file_key: str) -> Optional[str]:
        if flag_value:
            logger.debug("%s taken from flags", name)
            return flag_value
        value = file_values.get(file_key)
        if value:
            logger.debug("%s taken from config file", name)
            return str(value)
        return None

    resolved_api_key = pick("api_key", api_key, "api_key")
    if not resolved_api_key:
        raise ConfigurationError(
            "No API key provided; set FOSSA_API_KEY or pass --api-key"
        )

    resolved_project = pick("project", project, "project")
    if not resolved_project:
        resolved_project = infer_project(base)
        if resolved_project:
            logger.debug("project inferred from git remote")
    if not resolved_project:
        raise ConfigurationError("Could not determine project; pass --project")

    resolved_revision = pick("revision", revision, "revision")
    if not resolved_revision:
        resolved_revision = infer_revision(base)
        if resolved_revision:
            logger.debug("revision inferred from git HEAD")
    if not resolved_revision:
        raise ConfigurationError("Could not determine revision; pass --revision")

    return ReportConfig(
        endpoint=pick("endpoint", endpoint, "server") or DEFAULT_ENDPOINT,
        api_key=resolved_api_key,
        fetcher=pick("fetcher", fetcher, "fetcher") or DEFAULT_FETCHER,
        project=resolved_project,
        revision=resolved_revision,
        timeout=timeout if timeout is not None else DEFAULT_TIMEOUT,
    )
