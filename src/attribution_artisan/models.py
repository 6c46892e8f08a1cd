"""Core data models for attribution_artisan.

This module defines the records produced by a dependency tree scan, the
immutable run configuration, and the license groups consumed by reporters.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

UNKNOWN_LICENSE = "UNKNOWN"


@dataclass
class PackageRecord:
    """One installed package discovered during a scan.

    Records are unique by ``(name, version)`` within a single scan result.

    Attributes:
        name: Package name, possibly with a scope prefix (e.g., "@babel/core").
        version: Version string, treated opaquely.
        license: Canonical license string, an "A OR B" expression, or "UNKNOWN".
        homepage: Optional homepage URL.
        repository: Optional normalized repository URL.
        directory: On-disk location of the package.
    """

    name: str
    version: str
    license: str = UNKNOWN_LICENSE
    homepage: Optional[str] = None
    repository: Optional[str] = None
    directory: Optional[Path] = None

    @property
    def key(self) -> tuple[str, str]:
        """Return the deduplication key ``(name, version)``."""
        return (self.name, self.version)

    @property
    def link(self) -> Optional[str]:
        """Return the homepage, else the repository, else None."""
        return self.homepage or self.repository or None

    @property
    def display_name(self) -> str:
        """Return ``name@version``, or just the name for unversioned packages."""
        return f"{self.name}@{self.version}" if self.version else self.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-ready mapping.

        Absent optional URLs are left out rather than written as null.
        """
        data: dict[str, Any] = {
            "name": self.name,
            "version": self.version,
            "license": self.license,
        }
        if self.homepage is not None:
            data["homepage"] = self.homepage
        if self.repository is not None:
            data["repository"] = self.repository
        if self.directory is not None:
            data["dir"] = str(self.directory)
        return data


@dataclass(frozen=True)
class Config:
    """Immutable run configuration.

    Loaded once per run and passed explicitly to the components that need it.

    Attributes:
        include_texts: License identifiers whose full text is embedded
            (compared case-insensitively).
        exclude: Glob-style package name patterns omitted from the scan.
        sort: Display-order key, either "name" or "license".
    """

    include_texts: tuple[str, ...] = ("MIT", "BSD-2-Clause", "BSD-3-Clause")
    exclude: tuple[str, ...] = ("@types/*",)
    sort: str = "name"

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the key names of the config file."""
        return {
            "includeTexts": list(self.include_texts),
            "exclude": list(self.exclude),
            "sort": self.sort,
        }


@dataclass
class LicenseGroup:
    """Packages sharing one canonical license string."""

    license: str
    packages: list[PackageRecord] = field(default_factory=list)
