"""Output reporters for generating third-party notices.

This module provides reporters for rendering scanned package records to
Markdown and JSON.
"""

from attribution_artisan.reporters.base import (
    BaseReporter,
    format_timestamp,
    group_by_license,
)
from attribution_artisan.reporters.json_export import JsonReporter
from attribution_artisan.reporters.markdown import MarkdownReporter

__all__ = [
    "BaseReporter",
    "JsonReporter",
    "MarkdownReporter",
    "format_timestamp",
    "group_by_license",
]
