"""Base interface for dependency tree scanners.

Scanners walk an installed dependency directory and produce one
PackageRecord per unique installed package.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path
from typing import Optional

from attribution_artisan.models import PackageRecord


class BaseScanner(ABC):
    """Abstract base class for dependency tree scanners.

    Attributes:
        source_path: Root of the dependency tree to scan.
        exclude: Glob-style package name patterns to omit.
    """

    def __init__(
        self,
        source_path: Optional[Path] = None,
        exclude: Iterable[str] = (),
    ) -> None:
        """Initialize the scanner.

        Args:
            source_path: Root directory of the installed dependency tree.
            exclude: Package name patterns; matching packages are skipped
                together with their nested dependencies.
        """
        self.source_path = source_path
        self.exclude = tuple(exclude)

    @abstractmethod
    def scan(self) -> list[PackageRecord]:
        """Scan the tree and return records sorted by name, then version.

        Returns:
            Deduplicated list of PackageRecord objects.

        Raises:
            FileNotFoundError: If the root directory does not exist.
            ValueError: If source_path is not set.
        """
        ...

    @classmethod
    @abstractmethod
    def can_handle(cls, path: Path) -> bool:
        """Check if this scanner can walk the given directory.

        Args:
            path: Path to check.

        Returns:
            True if this scanner can process the directory, False otherwise.
        """
        ...

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Return a human-readable name for this scanner's source type."""
        ...
