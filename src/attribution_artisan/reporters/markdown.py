"""Markdown reporter for generating third-party notice files.

This module provides a reporter that generates Markdown-formatted notice
documents using Jinja2 templates.
"""

from datetime import UTC, datetime
from importlib.resources import files
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, Template

from attribution_artisan.models import Config, PackageRecord
from attribution_artisan.reporters.base import (
    BaseReporter,
    format_timestamp,
    group_by_license,
)

_ENV_OPTIONS = {
    "autoescape": False,
    "trim_blocks": True,
    "keep_trailing_newline": True,
}


class MarkdownReporter(BaseReporter):
    """Reporter that generates Markdown third-party notices.

    The document has a title, a generation timestamp, a preamble, one
    section per license group and, when any texts are embedded, a
    "License Texts" section. Output is not HTML-escaped so license texts
    appear verbatim.

    Attributes:
        template: The Jinja2 template to use for rendering.
    """

    def __init__(self, template_path: Optional[Path] = None) -> None:
        """Initialize the Markdown reporter.

        Args:
            template_path: Optional path to a custom Jinja2 template.
                If not provided, uses the default bundled template.
        """
        if template_path:
            env = Environment(
                loader=FileSystemLoader(template_path.parent),
                **_ENV_OPTIONS,
            )
            self.template = env.get_template(template_path.name)
        else:
            self.template = self._load_default_template()

    def _load_default_template(self) -> Template:
        template_content = (
            files("attribution_artisan.templates")
            .joinpath("notices.md.j2")
            .read_text(encoding="utf-8")
        )
        env = Environment(**_ENV_OPTIONS)
        return env.from_string(template_content)

    def render(
        self,
        packages: list[PackageRecord],
        embedded_texts: dict[str, str],
        config: Config,
        generated_at: Optional[datetime] = None,
    ) -> str:
        """Render package records to Markdown.

        Args:
            packages: Scanned package records.
            embedded_texts: License identifier to full text.
            config: Effective configuration.
            generated_at: Generation time; defaults to now.

        Returns:
            Rendered Markdown document as a string.
        """
        return self.template.render(
            groups=group_by_license(packages, config.sort),
            license_texts=[
                (spdx_id, embedded_texts[spdx_id].strip())
                for spdx_id in sorted(embedded_texts)
            ],
            config=config,
            generated_at=format_timestamp(generated_at or datetime.now(UTC)),
        )

    @property
    def format_name(self) -> str:
        return "markdown"

    @property
    def default_extension(self) -> str:
        return ".md"
