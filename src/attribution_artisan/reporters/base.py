"""Base interface for output reporters.

Reporters render scanned package records, embedded license texts and the
effective configuration into an output document.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import UTC, datetime
from pathlib import Path
from typing import Optional

from attribution_artisan.models import (
    UNKNOWN_LICENSE,
    Config,
    LicenseGroup,
    PackageRecord,
)


def format_timestamp(moment: datetime) -> str:
    """Format a timestamp as ISO-8601 UTC with milliseconds and a "Z" suffix.

    Example:
        >>> format_timestamp(datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=UTC))
        '2024-01-02T03:04:05.678Z'
    """
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def group_by_license(
    packages: Iterable[PackageRecord],
    sort: str = "name",
) -> list[LicenseGroup]:
    """Partition packages by their whole canonical license string.

    "MIT OR Apache-2.0" is its own group, not split into "MIT" and
    "Apache-2.0". Groups are ordered alphabetically by license for both
    accepted ``sort`` values; packages within a group by name, then version.

    Args:
        packages: Package records to group.
        sort: The configured display-order key ("name" or "license").

    Returns:
        Ordered license groups.
    """
    groups: dict[str, LicenseGroup] = {}
    for package in packages:
        key = package.license or UNKNOWN_LICENSE
        groups.setdefault(key, LicenseGroup(license=key)).packages.append(package)

    # "name" and "license" currently yield the same group order.
    ordered = [groups[key] for key in sorted(groups)]
    for group in ordered:
        group.packages.sort(key=lambda p: (p.name, p.version))
    return ordered


class BaseReporter(ABC):
    """Abstract base class for output reporters."""

    @abstractmethod
    def render(
        self,
        packages: list[PackageRecord],
        embedded_texts: dict[str, str],
        config: Config,
        generated_at: Optional[datetime] = None,
    ) -> str:
        """Render the report.

        Args:
            packages: Scanned package records.
            embedded_texts: License identifier to full text.
            config: Effective configuration.
            generated_at: Generation time; defaults to now.

        Returns:
            Rendered output as a string.
        """
        ...

    def write(
        self,
        packages: list[PackageRecord],
        embedded_texts: dict[str, str],
        config: Config,
        output_path: Path,
        generated_at: Optional[datetime] = None,
    ) -> None:
        """Render and write output to a file, replacing any existing content.

        Args:
            packages: Scanned package records.
            embedded_texts: License identifier to full text.
            config: Effective configuration.
            output_path: Path to write the output file.
            generated_at: Generation time; defaults to now.
        """
        content = self.render(packages, embedded_texts, config, generated_at)
        output_path.write_text(content, encoding="utf-8")

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Return the output format name, e.g. "markdown" or "json"."""
        ...

    @property
    @abstractmethod
    def default_extension(self) -> str:
        """Return the default file extension, e.g. ".md" or ".json"."""
        ...
