"""JSON reporter for machine-readable third-party notice exports."""

import json
from datetime import UTC, datetime
from typing import Optional

from attribution_artisan.models import Config, PackageRecord
from attribution_artisan.reporters.base import BaseReporter, format_timestamp


class JsonReporter(BaseReporter):
    """Reporter that serializes a scan result as JSON.

    The export holds the generation timestamp, the effective configuration,
    the full package list and the embedded texts, without further
    transformation.
    """

    INDENT = 2

    def render(
        self,
        packages: list[PackageRecord],
        embedded_texts: dict[str, str],
        config: Config,
        generated_at: Optional[datetime] = None,
    ) -> str:
        document = {
            "generatedAt": format_timestamp(generated_at or datetime.now(UTC)),
            "config": config.to_dict(),
            "packages": [package.to_dict() for package in packages],
            "embeddedTexts": embedded_texts,
        }
        return json.dumps(document, indent=self.INDENT, ensure_ascii=False)

    @property
    def format_name(self) -> str:
        return "json"

    @property
    def default_extension(self) -> str:
        return ".json"
