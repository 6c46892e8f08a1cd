"""Command-line interface for attribution_artisan.

Provides the ``generate`` command, which scans the project's installed
``node_modules`` tree and writes third-party notices. ``generate`` is the
default when no command is given.
"""

import logging
from datetime import UTC, datetime
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import click
import typer
from rich.console import Console
from typer.core import TyperGroup

from attribution_artisan.config import DEPENDENCY_DIR_NAME, find_project_root, load_config
from attribution_artisan.reporters import JsonReporter, MarkdownReporter
from attribution_artisan.resolvers import TemplateTextResolver, build_embedded_texts
from attribution_artisan.scanners import get_scanner

DEFAULT_OUTPUT = "THIRD_PARTY_NOTICES.md"
JSON_OUTPUT = "third_party_notices.json"

EXIT_UNKNOWN_COMMAND = 1
EXIT_MISSING_DEPENDENCIES = 2

USAGE = """Attribution Artisan
Usage:
  attribution-artisan generate [--format md|json|both] [--out THIRD_PARTY_NOTICES.md] [--include-texts MIT,BSD-3-Clause]
"""

console = Console()
err_console = Console(stderr=True)

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s: %(message)s",
)
logger = logging.getLogger("attribution_artisan")


class OutputFormat(str, Enum):
    MD = "md"
    JSON = "json"
    BOTH = "both"


def _drop_bare_value_options(command: click.Command, args: list[str]) -> list[str]:
    value_options = {
        opt
        for param in command.params
        if isinstance(param, click.Option) and not param.is_flag
        for opt in param.opts
    }
    kept = []
    for i, arg in enumerate(args):
        if arg in value_options:
            following = args[i + 1] if i + 1 < len(args) else None
            if following is None or following.startswith("--"):
                logger.debug("Ignoring %s without a value", arg)
                continue
        kept.append(arg)
    return kept


class DefaultCommandGroup(TyperGroup):
    """Command group that falls back to ``generate``.

    The default command is used when no arguments are given or the first
    argument is an option. An unknown command prints usage and exits 1.
    A value option given without a value (last argument, or followed by
    another "--" option) is dropped so its default applies.
    """

    default_command = "generate"

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        if not args or (args[0].startswith("-") and args[0] not in ctx.help_option_names):
            args = [self.default_command, *args]
        command = self.get_command(ctx, args[0])
        if command is not None:
            args = [args[0], *_drop_bare_value_options(command, args[1:])]
        return super().parse_args(ctx, args)

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[Optional[str], Optional[click.Command], list[str]]:
        if args and self.get_command(ctx, args[0]) is None:
            console.print(USAGE, markup=False, highlight=False)
            ctx.exit(EXIT_UNKNOWN_COMMAND)
        return super().resolve_command(ctx, args)


app = typer.Typer(
    name="attribution-artisan",
    help="Generate third-party license notices from an installed dependency tree.",
    cls=DefaultCommandGroup,
    add_completion=False,
)


def _setup_logging(verbose: bool) -> None:
    """Configure logging level based on verbosity flag."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.getLogger("attribution_artisan").setLevel(level)


@app.callback()
def main() -> None:
    """Generate third-party license notices from an installed dependency tree."""


@app.command(
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
)
def generate(
    ctx: typer.Context,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            help="Output format: md, json or both",
            case_sensitive=False,
        ),
    ] = OutputFormat.MD,
    out: Annotated[
        Path,
        typer.Option(
            "--out",
            help="Markdown output path, relative to the project root",
        ),
    ] = Path(DEFAULT_OUTPUT),
    include_texts: Annotated[
        Optional[str],
        typer.Option(
            "--include-texts",
            help="Comma-separated license IDs whose full text is embedded",
        ),
    ] = None,
    project_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--project-dir",
            help="Directory to start the project root search from",
            file_okay=False,
        ),
    ] = None,
    template: Annotated[
        Optional[Path],
        typer.Option(
            "--template",
            "-t",
            help="Custom Jinja2 template file for the Markdown report",
            exists=True,
            readable=True,
            dir_okay=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output",
        ),
    ] = False,
) -> None:
    """Generate third-party notices.

    Scans node_modules under the project root, embeds selected license
    texts and writes the Markdown report and/or the JSON export.

    Exit codes:
        0 - Notices written
        2 - node_modules not found
    """
    _setup_logging(verbose)
    if ctx.args:
        logger.debug("Ignoring unrecognized arguments: %s", " ".join(ctx.args))

    root = find_project_root(project_dir or Path.cwd())
    config = load_config(root, include_texts)
    logger.debug("Project root: %s", root)

    dependency_dir = root / DEPENDENCY_DIR_NAME
    if not dependency_dir.is_dir():
        err_console.print(
            f"[red]✖[/red] {DEPENDENCY_DIR_NAME} not found. "
            "Run npm ci / pnpm i / yarn install first."
        )
        raise typer.Exit(code=EXIT_MISSING_DEPENDENCIES)

    scanner = get_scanner(dependency_dir, exclude=config.exclude)
    packages = scanner.scan()
    if verbose:
        console.print(f"[dim]Using scanner: {scanner.source_name}[/dim]")
    console.print(f"Found [bold]{len(packages)}[/bold] packages")

    embedded_texts = build_embedded_texts(
        packages,
        config.include_texts,
        TemplateTextResolver.for_project(root),
    )
    generated_at = datetime.now(UTC)

    if output_format in (OutputFormat.MD, OutputFormat.BOTH):
        reporter = MarkdownReporter(template_path=template)
        reporter.write(packages, embedded_texts, config, root / out, generated_at)
        console.print(f"[green]✓[/green] Wrote {out}")

    if output_format in (OutputFormat.JSON, OutputFormat.BOTH):
        JsonReporter().write(
            packages, embedded_texts, config, root / JSON_OUTPUT, generated_at
        )
        console.print(f"[green]✓[/green] Wrote {JSON_OUTPUT}")


if __name__ == "__main__":
    app()
