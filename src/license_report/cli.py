"""Command-line interface for license_report.

Provides the main entry point and the ``licenses`` report subcommand.
"""

import asyncio
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from license_report.api import RevisionClient
from license_report.config import DEFAULT_TIMEOUT, load_config
from license_report.errors import LicenseReportError
from license_report.reporters import NoticeReporter
from license_report.report import generate_report

app = typer.Typer(
    name="license-report",
    help="Generate license reports from a dependency analysis service.",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s: %(message)s",
)
logger = logging.getLogger("license_report")


def _setup_logging(debug: bool) -> None:
    """Configure logging level based on the debug flag."""
    level = logging.DEBUG if debug else logging.WARNING
    logging.getLogger("license_report").setLevel(level)


async def _run_licenses(
    config_path: Optional[Path],
    endpoint: Optional[str],
    api_key: Optional[str],
    fetcher: Optional[str],
    project: Optional[str],
    revision: Optional[str],
    timeout: float,
    template: Optional[Path],
    output: Optional[Path],
    as_json: bool,
    no_ansi: bool,
) -> int:
    """Async implementation of the licenses command."""
    out = Console(no_color=True, highlight=False) if no_ansi else console
    try:
        config = load_config(
            config_path=config_path,
            endpoint=endpoint,
            api_key=api_key,
            fetcher=fetcher,
            project=project,
            revision=revision,
            timeout=timeout,
        )
        reporter = None if as_json else NoticeReporter(template_path=template)

        async with RevisionClient(
            endpoint=config.endpoint,
            api_key=config.api_key,
            timeout=config.timeout,
        ) as client:
            report = await generate_report(
                client,
                config.locator,
                as_json=as_json,
                reporter=reporter,
                console=err_console,
                show_progress=not no_ansi,
            )
    except LicenseReportError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        return 1

    if report is None:
        out.print(
            f"\n[yellow]No licenses were found for project {escape(str(config.locator))}[/yellow]",
            soft_wrap=True,
        )
        return 0

    if output:
        try:
            output.write_text(report + "\n", encoding="utf-8")
        except OSError as e:
            err_console.print(f"[red]Error writing output:[/red] {escape(str(e))}")
            return 1
        err_console.print(f"[green]Generated:[/green] {escape(str(output))}")
    else:
        typer.echo(report)

    return 0


@app.callback()
def main() -> None:
    """Generate license reports from a dependency analysis service."""


@app.command()
def licenses(
    as_json: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Format output as JSON",
        ),
    ] = False,
    template: Annotated[
        Optional[Path],
        typer.Option(
            "--template",
            "-t",
            help="Custom Jinja2 template file for the license notice",
            exists=True,
            readable=True,
        ),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Write the report to a file instead of stdout",
        ),
    ] = None,
    timeout: Annotated[
        float,
        typer.Option(
            "--timeout",
            help="Request timeout in seconds",
        ),
    ] = DEFAULT_TIMEOUT,
    endpoint: Annotated[
        Optional[str],
        typer.Option(
            "--endpoint",
            "-e",
            envvar="FOSSA_ENDPOINT",
            help="Dependency analysis service URL",
        ),
    ] = None,
    api_key: Annotated[
        Optional[str],
        typer.Option(
            "--api-key",
            envvar="FOSSA_API_KEY",
            help="API key for the dependency analysis service",
        ),
    ] = None,
    fetcher: Annotated[
        Optional[str],
        typer.Option(
            "--fetcher",
            help="Locator fetcher of the project (default: custom)",
        ),
    ] = None,
    project: Annotated[
        Optional[str],
        typer.Option(
            "--project",
            "-p",
            help="Project identifier (defaults to the git origin URL)",
        ),
    ] = None,
    revision: Annotated[
        Optional[str],
        typer.Option(
            "--revision",
            "-r",
            help="Revision identifier (defaults to the git HEAD commit)",
        ),
    ] = None,
    config_path: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            "-c",
            help="Path to config file (defaults to .fossa.yml)",
        ),
    ] = None,
    no_ansi: Annotated[
        bool,
        typer.Option(
            "--no-ansi",
            help="Disable colors and the progress spinner",
        ),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            help="Enable debug logging",
        ),
    ] = False,
) -> None:
    """Generate a licenses report.

    Fetches the dependencies of a project revision and prints a license
    notice grouped by license, or the raw dependency list with --json.

    Exit codes:
        0 - Report generated, or no licenses found
        1 - Configuration, fetch, or rendering error
    """
    _setup_logging(debug)

    exit_code = asyncio.run(
        _run_licenses(
            config_path=config_path,
            endpoint=endpoint,
            api_key=api_key,
            fetcher=fetcher,
            project=project,
            revision=revision,
            timeout=timeout,
            template=template,
            output=output,
            as_json=as_json,
            no_ansi=no_ansi,
        )
    )
    raise typer.Exit(code=exit_code)


if __name__ == "__main__":
    app()
