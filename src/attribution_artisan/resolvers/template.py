"""Template resolver for license texts.

Reads license bodies from ``templates/licenses/<identifier>.txt`` under
the project root.
"""

import logging
from pathlib import Path
from typing import Optional

from attribution_artisan.resolvers.base import BaseTextResolver

logger = logging.getLogger(__name__)

TEMPLATES_SUBDIR = Path("templates") / "licenses"
TEXT_EXTENSION = ".txt"


class TemplateTextResolver(BaseTextResolver):
    """Resolver backed by one text file per license identifier.

    Attributes:
        templates_dir: Directory holding ``<identifier>.txt`` files.
    """

    def __init__(self, templates_dir: Path) -> None:
        self.templates_dir = templates_dir

    @classmethod
    def for_project(cls, root: Path) -> "TemplateTextResolver":
        """Create a resolver for the standard location under ``root``."""
        return cls(root / TEMPLATES_SUBDIR)

    @property
    def name(self) -> str:
        return "templates"

    def resolve(self, spdx_id: str) -> Optional[str]:
        """Read the text file named exactly after ``spdx_id``.

        Identifiers that are empty or would leave the templates directory
        never resolve, and neither do files that cannot be read as UTF-8.
        """
        if not spdx_id or "/" in spdx_id or "\\" in spdx_id or spdx_id.startswith("."):
            return None

        path = self.templates_dir / f"{spdx_id}{TEXT_EXTENSION}"
        if not path.is_file():
            logger.debug("No license text for %s at %s", spdx_id, path)
            return None

        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Cannot read license text %s: %s", path, e)
            return None
