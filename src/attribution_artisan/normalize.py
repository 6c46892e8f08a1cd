"""Normalization of package manifest fields.

Manifests describe licenses and repositories in several shapes. These
helpers reduce them to plain strings for the report.
"""

from typing import Any, Optional

from attribution_artisan.models import UNKNOWN_LICENSE

LICENSE_SEPARATOR = " OR "


def _license_entry(entry: Any) -> Optional[str]:
    """Return the trimmed identifier of a string or ``{"type": ...}`` entry."""
    if isinstance(entry, str):
        value = entry
    elif isinstance(entry, dict) and isinstance(entry.get("type"), str):
        value = entry["type"]
    else:
        return None
    return value.strip() or None


def normalize_license(license: Any = None, licenses: Any = None) -> str:
    """Reduce manifest license fields to one canonical string.

    Rules, in order:
    1. ``license`` as a non-empty string.
    2. ``license`` as an object with a string ``type``.
    3. Legacy ``licenses`` array; usable entries joined with " OR ".
    4. "UNKNOWN".

    No validation against the SPDX list is performed.

    Args:
        license: The manifest's ``license`` field.
        licenses: The manifest's legacy ``licenses`` field.

    Returns:
        The canonical license string.

    Example:
        >>> normalize_license(None, [{"type": "MIT"}, "BSD-3-Clause"])
        'MIT OR BSD-3-Clause'
    """
    value = _license_entry(license)
    if value:
        return value

    if isinstance(licenses, list):
        parts = [part for part in map(_license_entry, licenses) if part]
        if parts:
            return LICENSE_SEPARATOR.join(parts)

    return UNKNOWN_LICENSE


def normalize_repo_url(url: str) -> str:
    """Strip a leading "git+" and a trailing ".git" from a repository URL.

    Example:
        >>> normalize_repo_url("git+https://example.com/x.git")
        'https://example.com/x'
    """
    if url.startswith("git+"):
        url = url[len("git+"):]
    if url.endswith(".git"):
        url = url[: -len(".git")]
    return url


def pick_repository(manifest: dict[str, Any]) -> Optional[str]:
    """Return the normalized repository URL of a manifest, if any.

    The ``repository`` field may be a URL string or an object with ``url``.
    """
    repository = manifest.get("repository")
    if isinstance(repository, str) and repository:
        return normalize_repo_url(repository)
    if isinstance(repository, dict) and isinstance(repository.get("url"), str):
        if repository["url"]:
            return normalize_repo_url(repository["url"])
    return None


def pick_homepage(manifest: dict[str, Any]) -> Optional[str]:
    """Return the homepage, falling back to the normalized repository URL."""
    homepage = manifest.get("homepage")
    if isinstance(homepage, str):
        return homepage
    return pick_repository(manifest)
