"""Configuration loading for attribution_artisan.

Configuration is merged from built-in defaults, an optional
``attribution-artisan.config.json`` at the project root, and the
``--include-texts`` command-line override, in that order.
"""

import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Optional

from attribution_artisan.exceptions import ConfigFileError
from attribution_artisan.models import Config

logger = logging.getLogger(__name__)

MANIFEST_NAME = "package.json"
CONFIG_FILE_NAME = "attribution-artisan.config.json"
DEPENDENCY_DIR_NAME = "node_modules"

SORT_KEYS = ("name", "license")


def find_project_root(start: Path) -> Path:
    """Find the nearest ancestor directory holding a package manifest.

    Args:
        start: Directory to start searching from.

    Returns:
        The first directory (``start`` included) containing ``package.json``,
        or ``start`` itself if the filesystem root is reached first.
    """
    directory = start.resolve()
    while directory != directory.parent:
        if (directory / MANIFEST_NAME).exists():
            return directory
        directory = directory.parent
    return start


def parse_include_texts(raw: str) -> tuple[str, ...]:
    """Split a comma-separated list of license identifiers.

    Args:
        raw: Value such as "MIT, BSD-3-Clause".

    Returns:
        Stripped, non-empty identifiers in their given order.
    """
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def _string_list(value: Any, key: str, path: Path) -> tuple[str, ...]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigFileError(path, f"'{key}' must be a list of strings")
    return tuple(value)


def _read_config_file(path: Path, base: Config) -> Config:
    """Merge the config file at ``path`` over ``base``.

    Raises:
        ConfigFileError: If the file cannot be read or has the wrong shape.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ConfigFileError(path, str(e)) from e

    if not isinstance(data, dict):
        raise ConfigFileError(path, "top-level value must be an object")

    changes: dict[str, Any] = {}
    if "includeTexts" in data:
        changes["include_texts"] = _string_list(data["includeTexts"], "includeTexts", path)
    if "exclude" in data:
        changes["exclude"] = _string_list(data["exclude"], "exclude", path)
    if "sort" in data:
        sort = data["sort"]
        if isinstance(sort, str) and sort.lower() in SORT_KEYS:
            changes["sort"] = sort.lower()
        else:
            logger.debug("Ignoring 'sort' value %r in %s", sort, path)

    return replace(base, **changes)


def load_config(root: Path, include_texts_override: Optional[str] = None) -> Config:
    """Load the effective configuration for a project.

    A config file that cannot be used is ignored and the defaults are kept.

    Args:
        root: Project root directory.
        include_texts_override: Raw ``--include-texts`` value, if given.

    Returns:
        The merged, immutable configuration.
    """
    config = Config()

    path = root / CONFIG_FILE_NAME
    if path.exists():
        try:
            config = _read_config_file(path, config)
        except ConfigFileError as e:
            logger.debug("Ignoring config file %s: %s", e.path, e.reason)

    if include_texts_override is not None:
        config = replace(config, include_texts=parse_include_texts(include_texts_override))

    return config
