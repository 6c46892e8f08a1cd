"""License text resolvers.

This module provides the lookup of full license texts for the identifiers
selected for embedding in a report.
"""

from attribution_artisan.resolvers.base import BaseTextResolver
from attribution_artisan.resolvers.embedded import (
    build_embedded_texts,
    split_license_expression,
    wanted_license_ids,
)
from attribution_artisan.resolvers.template import TemplateTextResolver

__all__ = [
    "BaseTextResolver",
    "TemplateTextResolver",
    "build_embedded_texts",
    "split_license_expression",
    "wanted_license_ids",
]
