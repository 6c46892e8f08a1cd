"""Scanner for installed ``node_modules`` dependency trees.

Walks the tree depth-first, reads each package's ``package.json`` and
builds one PackageRecord per unique (name, version).
"""

import json
import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from attribution_artisan.config import DEPENDENCY_DIR_NAME, MANIFEST_NAME
from attribution_artisan.exceptions import ManifestError
from attribution_artisan.matching import is_excluded
from attribution_artisan.models import PackageRecord
from attribution_artisan.normalize import (
    normalize_license,
    pick_homepage,
    pick_repository,
)
from attribution_artisan.scanners.base import BaseScanner

logger = logging.getLogger(__name__)


class NodeModulesScanner(BaseScanner):
    """Scanner for ``node_modules`` directories.

    Traversal rules:
    - ``.bin`` is never a package.
    - Entries starting with ``@`` are scope containers and are walked
      directly.
    - Any other entry with a ``package.json`` is a package. Its nested
      ``node_modules`` is walked unless the package is excluded or a
      duplicate of one already recorded.
    - Directories without a manifest still have their nested
      ``node_modules`` walked.

    The walk uses an explicit stack of directory iterators, so deep trees
    do not grow the call stack. Entries are visited in sorted order, which
    makes first-seen-wins deduplication deterministic.
    """

    SKIPPED_ENTRIES = frozenset({".bin"})
    SCOPE_PREFIX = "@"

    def scan(self) -> list[PackageRecord]:
        """Walk the dependency tree and collect package records.

        Returns:
            Records sorted by name, then version (plain string order).

        Raises:
            FileNotFoundError: If the root directory does not exist.
            ValueError: If source_path is not set.
        """
        if self.source_path is None:
            raise ValueError("source_path must be set before calling scan()")

        if not self.source_path.is_dir():
            raise FileNotFoundError(
                f"Dependency directory not found: {self.source_path}"
            )

        records: list[PackageRecord] = []
        seen: set[tuple[str, str]] = set()
        stack: list[Iterator[Path]] = [self._iter_entries(self.source_path)]

        while stack:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop()
                continue

            if entry.name in self.SKIPPED_ENTRIES:
                continue

            if entry.name.startswith(self.SCOPE_PREFIX):
                stack.append(self._iter_entries(entry))
                continue

            manifest_path = entry / MANIFEST_NAME
            if manifest_path.exists():
                try:
                    record = self._read_record(entry, manifest_path)
                except ManifestError as e:
                    logger.debug("Skipping package candidate %s: %s", e.path, e.reason)
                    continue

                if is_excluded(record.name, self.exclude):
                    logger.debug("Excluding %s at %s", record.display_name, entry)
                    continue

                if record.key in seen:
                    logger.debug("Skipping duplicate %s at %s", record.display_name, entry)
                    continue

                seen.add(record.key)
                records.append(record)
            elif not entry.is_dir():
                continue

            nested = entry / DEPENDENCY_DIR_NAME
            if nested.exists():
                stack.append(self._iter_entries(nested))

        records.sort(key=lambda r: (r.name, r.version))
        return records

    def _iter_entries(self, directory: Path) -> Iterator[Path]:
        """Return an iterator over the sorted entries of ``directory``.

        A directory that cannot be listed is treated as empty.
        """
        try:
            entries = sorted(directory.iterdir())
        except OSError as e:
            logger.debug("Cannot list %s: %s", directory, e)
            entries = []
        return iter(entries)

    def _load_manifest(self, manifest_path: Path) -> dict[str, Any]:
        try:
            data = json.loads(manifest_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ManifestError(manifest_path, str(e)) from e

        if not isinstance(data, dict):
            raise ManifestError(manifest_path, "manifest is not a JSON object")
        return data

    def _read_record(self, package_dir: Path, manifest_path: Path) -> PackageRecord:
        """Build a PackageRecord from a package directory's manifest.

        Raises:
            ManifestError: If the manifest is unusable or has no name.
        """
        manifest = self._load_manifest(manifest_path)

        name = manifest.get("name")
        if not isinstance(name, str) or not name:
            raise ManifestError(manifest_path, "manifest has no 'name'")

        version = manifest.get("version")
        if not isinstance(version, str):
            version = "" if version is None else str(version)

        return PackageRecord(
            name=name,
            version=version,
            license=normalize_license(manifest.get("license"), manifest.get("licenses")),
            homepage=pick_homepage(manifest),
            repository=pick_repository(manifest),
            directory=package_dir,
        )

    @classmethod
    def can_handle(cls, path: Path) -> bool:
        """Check if this scanner can handle the given directory.

        Args:
            path: Path to check.

        Returns:
            True if the directory is named "node_modules", False otherwise.
        """
        return path.name == DEPENDENCY_DIR_NAME

    @property
    def source_name(self) -> str:
        """Return a human-readable name for this scanner's source type.

        Returns:
            The string "node_modules".
        """
        return DEPENDENCY_DIR_NAME
