"""JSON reporter that passes service revisions through unchanged."""

import json
from typing import Optional

from license_report.errors import SerializationError
from license_report.models import Revision


class JsonReporter:
    """Serialize revisions exactly as the data service returned them.

    No grouping or sorting is applied; consumers get the raw revision list.
    """

    def __init__(self, indent: Optional[int] = None) -> None:
        self.indent = indent

    def dump(self, revisions: list[Revision]) -> str:
        """Encode revisions as a JSON array.

        Args:
            revisions: Revisions in service order.

        Returns:
            JSON text.

        Raises:
            SerializationError: If a payload is not JSON-encodable.
        """
        try:
            return json.dumps(
                [revision.to_dict() for revision in revisions],
                indent=self.indent,
                allow_nan=False,
            )
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Unable to encode revisions as JSON: {e}") from e
