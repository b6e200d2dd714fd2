"""Output reporters for license reports.

This module provides reporters for rendering fetched revisions as a
plain-text license notice or as raw JSON.
"""

from license_report.reporters.base import BaseReporter
from license_report.reporters.json import JsonReporter
from license_report.reporters.notice import NoticeReporter

__all__ = ["BaseReporter", "JsonReporter", "NoticeReporter"]
