"""License report generation.

Fetches the dependency graph of a project revision and turns it into
either raw JSON or a license notice grouped by license.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from license_report.api import BaseClient
from license_report.errors import FetchError
from license_report.grouping import group_by_license, sort_grouping
from license_report.models import Locator
from license_report.reporters import BaseReporter, JsonReporter, NoticeReporter

logger = logging.getLogger(__name__)


async def generate_report(
    client: BaseClient,
    locator: Locator,
    as_json: bool = False,
    reporter: Optional[BaseReporter] = None,
    console: Optional[Console] = None,
    show_progress: bool = True,
) -> Optional[str]:
    """Build the license report for a project revision.

    A transient progress spinner is shown for the whole operation and is
    cleared on return, whether or not the report succeeded.

    Args:
        client: Data service client.
        locator: Project revision to report on.
        as_json: Return the raw revisions as JSON instead of a notice.
        reporter: Reporter for the notice. Defaults to NoticeReporter
            with the bundled template.
        console: Console the spinner is drawn on.
        show_progress: Whether to draw the spinner at all.

    Returns:
        The report text, or None if no licenses were found.

    Raises:
        FetchError: If the dependencies could not be fetched.
        SerializationError: If JSON encoding failed.
        RenderError: If the notice template failed to render.
    """
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
        disable=not show_progress,
    ) as progress:
        progress.add_task("Fetching License Information", total=None)

        try:
            revisions = await client.get_revision_dependencies(
                locator, include_licenses=True
            )
        except Exception as e:
            raise FetchError(f"Unable to find licenses for project {locator}: {e}") from e

        if as_json:
            return JsonReporter().dump(revisions)

        grouping = group_by_license(revisions)
        if not grouping:
            logger.debug("No license matches among %d revisions", len(revisions))
            return None

        if reporter is None:
            reporter = NoticeReporter()
        return reporter.render(sort_grouping(grouping), locator)
