"""Group revisions by license for notice rendering."""

from license_report.models import Revision

Grouping = dict[str, list[Revision]]


def group_by_license(revisions: list[Revision]) -> Grouping:
    """Build the license -> revisions mapping.

    Revisions can carry the same license identifier more than once; each
    revision is listed at most once per license.

    Args:
        revisions: Revisions in the order returned by the data service.

    Returns:
        Mapping of license identifier to the revisions carrying it, in
        service order. Revisions without license matches are skipped.
    """
    grouping: Grouping = {}
    for revision in revisions:
        seen: set[str] = set()
        for match in revision.licenses:
            if match.license_id in seen:
                continue
            seen.add(match.license_id)
            grouping.setdefault(match.license_id, []).append(revision)
    return grouping


def sort_grouping(grouping: Grouping) -> Grouping:
    """Order a grouping for output.

    Each revision list is sorted by project title (case-sensitive, stable)
    and license identifiers are emitted in ascending order.

    Args:
        grouping: Mapping produced by group_by_license.

    Returns:
        A new mapping; the input is left untouched.
    """
    return {
        license_id: sorted(grouping[license_id], key=lambda rev: rev.title)
        for license_id in sorted(grouping)
    }
