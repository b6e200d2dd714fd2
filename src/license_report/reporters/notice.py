"""Notice reporter for generating third-party license notice files.

This module provides a reporter that renders the license grouping into a
plain-text notice document using Jinja2 templates.
"""

from importlib.resources import files
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateError

from license_report.errors import RenderError
from license_report.grouping import Grouping
from license_report.models import Locator
from license_report.reporters.base import BaseReporter

DEFAULT_TEMPLATE = "licenses.txt.j2"


class NoticeReporter(BaseReporter):
    """Reporter that generates plain-text license notices.

    Templates receive two variables: ``licenses``, the sorted mapping of
    license identifier to revisions, and ``locator``, the project the
    notice is for. Undefined variables raise instead of rendering empty.

    Attributes:
        template: The Jinja2 template to use for rendering.
    """

    def __init__(self, template_path: Optional[Path] = None) -> None:
        """Initialize the notice reporter.

        Args:
            template_path: Optional path to a custom Jinja2 template.
                If not provided, uses the default bundled template.

        Raises:
            RenderError: If the template cannot be loaded or parsed.
        """
        try:
            if template_path:
                env = Environment(
                    loader=FileSystemLoader(template_path.parent),
                    autoescape=False,
                    undefined=StrictUndefined,
                )
                self.template = env.get_template(template_path.name)
            else:
                self.template = self._load_default_template()
        except (TemplateError, OSError) as e:
            raise RenderError(f"Unable to load template: {e}") from e

    def _load_default_template(self) -> Template:
        """Load the default bundled template from package resources."""
        template_content = (
            files("license_report.templates")
            .joinpath(DEFAULT_TEMPLATE)
            .read_text(encoding="utf-8")
        )
        env = Environment(autoescape=False, undefined=StrictUndefined)
        return env.from_string(template_content)

    def render(self, grouping: Grouping, locator: Optional[Locator] = None) -> str:
        """Render the grouping to a notice document.

        Args:
            grouping: Sorted license -> revisions mapping.
            locator: Locator of the project the notice is for.

        Returns:
            Rendered notice text.

        Raises:
            RenderError: If rendering fails, e.g. on a template that
                references data the grouping does not provide.
        """
        try:
            return self.template.render(licenses=grouping, locator=locator)
        except Exception as e:
            raise RenderError(f"Unable to render license notice: {e}") from e
