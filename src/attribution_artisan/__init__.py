"""Attribution Artisan - third-party notice generator.

This package scans an installed node_modules tree, collects per-package
license metadata and renders a third-party notices document.
"""

__version__ = "0.1.0"

from attribution_artisan.models import (
    Config,
    LicenseGroup,
    PackageRecord,
)

__all__ = [
    "__version__",
    "Config",
    "LicenseGroup",
    "PackageRecord",
]
