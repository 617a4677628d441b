"""Command-line interface for pageclip."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import IO, Optional, Tuple

import click
import structlog
from rich.console import Console
from rich.table import Table

from pageclip import __version__
from pageclip.config import Config, settings
from pageclip.extractor import ExtractorManager, MetadataClassifier, Page
from pageclip.observability import configure_logging

console = Console()
err_console = Console(stderr=True)
logger = structlog.get_logger(__name__)


def _load_config(config_path: Optional[Path]) -> Config:
    if config_path is not None:
        return Config.from_yaml(config_path)
    return settings


@click.group()
@click.version_option(version=__version__)
@click.option("--config", "-c", type=click.Path(exists=True, dir_okay=False), help="Configuration file path")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (overrides the configuration file)",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[str], log_level: Optional[str]) -> None:
    """pageclip - Extract readable article content from saved pages."""
    ctx.ensure_object(dict)
    cfg = _load_config(Path(config) if config else None)
    monitoring = cfg.monitoring
    if log_level:
        monitoring = monitoring.model_copy(update={"log_level": log_level.upper()})
    configure_logging(monitoring)
    ctx.obj["config"] = cfg


@cli.command()
@click.argument("source", type=click.File("rb"))
@click.option("--url", required=True, help="Location the page was captured from")
@click.option("--title", default=None, help="Title to use instead of the extracted one")
@click.option(
    "--format",
    "output_format",
    default="json",
    type=click.Choice(["json", "html", "manual"]),
    help="json: {title, content, imageCount}; html: content only; manual: {title, content, source}",
)
@click.pass_context
def extract(ctx: click.Context, source: IO[bytes], url: str, title: Optional[str], output_format: str) -> None:
    """Extract the readable content of a saved HTML page (use - for stdin)."""
    cfg: Config = ctx.obj["config"]

    page = Page.from_html(source.read(), url, parser=cfg.extraction.parser)
    result = ExtractorManager(cfg.extraction).extract(page)

    if result.is_empty:
        err_console.print("[red]No content found on page[/red]")
        sys.exit(1)

    if output_format == "html":
        click.echo(result.content)
    elif output_format == "manual":
        click.echo(json.dumps(result.to_manual_article(url, title), ensure_ascii=False, indent=2))
    else:
        payload = result.to_dict()
        if title and title.strip():
            payload["title"] = title.strip()
        click.echo(json.dumps(payload, ensure_ascii=False, indent=2))

    logger.info("Extracted page", url=url, images=result.image_count, output_format=output_format)


@cli.command()
@click.argument("fragments", nargs=-1, required=True)
@click.pass_context
def classify(ctx: click.Context, fragments: Tuple[str, ...]) -> None:
    """Show which text fragments the post extractor drops as page chrome."""
    cfg: Config = ctx.obj["config"]
    classifier = MetadataClassifier(
        extra_labels=cfg.extraction.extra_noise_labels,
        extra_patterns=cfg.extraction.extra_noise_patterns,
    )

    table = Table(title="Text Classification")
    table.add_column("Fragment", style="cyan")
    table.add_column("Kind", style="magenta")

    for fragment in fragments:
        kind = "metadata" if classifier.is_metadata(fragment.strip()) else "content"
        table.add_row(fragment, kind)

    console.print(table)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
