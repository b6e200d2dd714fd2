"""Unit tests for report generation."""

import json
from typing import Optional

import pytest

from license_report.api import BaseClient
from license_report.errors import ClientError, FetchError, RenderError
from license_report.models import Locator, Revision
from license_report.report import generate_report

BANNER = "=" * 72


class FakeClient(BaseClient):
    """Client returning canned revisions or raising a canned error."""

    def __init__(
        self,
        revisions: Optional[list[Revision]] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.revisions = revisions or []
        self.error = error
        self.calls: list[tuple[Locator, bool]] = []

    async def get_revision_dependencies(
        self, locator: Locator, include_licenses: bool = True
    ) -> list[Revision]:
        self.calls.append((locator, include_licenses))
        if self.error is not None:
            raise self.error
        return self.revisions


@pytest.mark.asyncio
async def test_generate_report_text(sample_locator, sample_revisions):
    """Test the text report for the example project."""
    client = FakeClient(sample_revisions)

    output = await generate_report(client, sample_locator, show_progress=False)

    assert client.calls == [(sample_locator, True)]
    apache, mit = output.split(f"{BANNER}\nMIT\n{BANNER}\n")
    assert "- libbar (from http://x/bar)" in apache
    assert "libfoo" not in apache
    assert mit.index("- libbar (from http://x/bar)") < mit.index(
        "- libfoo (from http://x/foo)"
    )


@pytest.mark.asyncio
async def test_generate_report_json(sample_locator, sample_revisions, sample_payload):
    """Test that JSON mode returns the raw, unsorted revisions."""
    client = FakeClient(sample_revisions)

    output = await generate_report(
        client, sample_locator, as_json=True, show_progress=False
    )

    assert json.loads(output) == sample_payload


@pytest.mark.asyncio
async def test_generate_report_no_revisions(sample_locator):
    """Test that no revisions means no report rather than an error."""
    output = await generate_report(FakeClient([]), sample_locator, show_progress=False)

    assert output is None


@pytest.mark.asyncio
async def test_generate_report_no_license_matches(sample_locator):
    """Test that revisions without licenses produce no report."""
    revisions = [Revision.from_dict({"project": {"title": "libfoo"}, "licenses": []})]

    output = await generate_report(
        FakeClient(revisions), sample_locator, show_progress=False
    )

    assert output is None


@pytest.mark.asyncio
async def test_generate_report_json_with_no_revisions(sample_locator):
    """Test that JSON mode emits an empty array instead of the message."""
    output = await generate_report(
        FakeClient([]), sample_locator, as_json=True, show_progress=False
    )

    assert output == "[]"


@pytest.mark.asyncio
async def test_generate_report_wraps_fetch_failure(sample_locator):
    """Test that client failures become FetchError naming the locator."""
    cause = ClientError("Service returned HTTP 500", status=500)

    with pytest.raises(FetchError) as exc_info:
        await generate_report(
            FakeClient(error=cause), sample_locator, show_progress=False
        )

    assert "git+acme/widgets$abc123" in str(exc_info.value)
    assert exc_info.value.__cause__ is cause


@pytest.mark.asyncio
async def test_generate_report_uses_given_reporter(
    sample_locator, sample_revisions, mocker
):
    """Test that a custom reporter receives the sorted grouping."""
    reporter = mocker.MagicMock()
    reporter.render.return_value = "rendered"

    output = await generate_report(
        FakeClient(sample_revisions),
        sample_locator,
        reporter=reporter,
        show_progress=False,
    )

    assert output == "rendered"
    grouping, locator = reporter.render.call_args.args
    assert list(grouping) == ["Apache-2.0", "MIT"]
    assert [rev.title for rev in grouping["MIT"]] == ["libbar", "libfoo"]
    assert locator == sample_locator


@pytest.mark.asyncio
async def test_generate_report_propagates_render_error(
    sample_locator, sample_revisions, mocker
):
    """Test that render failures surface unchanged."""
    reporter = mocker.MagicMock()
    reporter.render.side_effect = RenderError("bad template")

    with pytest.raises(RenderError, match="bad template"):
        await generate_report(
            FakeClient(sample_revisions),
            sample_locator,
            reporter=reporter,
            show_progress=False,
        )


@pytest.mark.asyncio
async def test_progress_cleared_on_failure(sample_locator, mocker):
    """Test that the progress display is stopped when the fetch fails."""
    progress_cls = mocker.patch("license_report.report.Progress")
    progress = progress_cls.return_value

    with pytest.raises(FetchError):
        await generate_report(
            FakeClient(error=ClientError("boom")), sample_locator
        )

    progress.__enter__.assert_called_once()
    progress.__exit__.assert_called_once()
    assert progress_cls.call_args.kwargs["transient"] is True
