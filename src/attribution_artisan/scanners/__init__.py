"""Dependency tree scanners.

This module provides scanners for walking installed dependency
directories and collecting per-package license metadata.
"""

from collections.abc import Iterable
from pathlib import Path

from attribution_artisan.scanners.base import BaseScanner
from attribution_artisan.scanners.node_modules import NodeModulesScanner

__all__ = [
    "BaseScanner",
    "NodeModulesScanner",
    "get_scanner",
]

# Registry of available scanners in priority order
_SCANNERS: list[type[BaseScanner]] = [
    NodeModulesScanner,
]


def get_scanner(path: Path, exclude: Iterable[str] = ()) -> BaseScanner:
    """Get the appropriate scanner for a dependency directory.

    Args:
        path: Root of the installed dependency tree.
        exclude: Package name patterns passed on to the scanner.

    Returns:
        Scanner instance configured for the given directory.

    Raises:
        ValueError: If no scanner can handle the given directory.
    """
    for scanner_cls in _SCANNERS:
        if scanner_cls.can_handle(path):
            return scanner_cls(path, exclude=exclude)

    raise ValueError(
        f"No scanner available for '{path.name}'. "
        f"Supported directories: node_modules"
    )
