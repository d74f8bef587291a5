"""CLI interface for Docsidebar.

Command-line tool for serving and inspecting documentation sidebars.
"""

import json
import logging
import sys
from pathlib import Path

import click

from docsidebar.config import Config
from docsidebar.core.documents import DocumentLoader
from docsidebar.core.sidebar import CategoryEntry, SidebarEntry, get_sidebar
from docsidebar.core.slugs import normalize_slug

config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover docsidebar.toml)",
)

source_dir_option = click.option(
    "--source-dir",
    "-s",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Documentation source directory (overrides config)",
)


@click.group()
def cli() -> None:
    """Docsidebar - navigation sidebars for documentation sites."""


@cli.command()
@config_option
@source_dir_option
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--live-reload/--no-live-reload",
    default=None,
    help="Enable/disable live reload (overrides config, default: enabled)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (debug logging)",
)
def serve(
    config_path: Path | None,
    source_dir: Path | None,
    host: str | None,
    port: int | None,
    live_reload: bool | None,
    verbose: bool,
) -> None:
    """Start the sidebar API server."""
    from docsidebar.server import run_server

    _configure_logging(verbose)
    config = _load_config(config_path).with_overrides(
        host=host,
        port=port,
        source_dir=source_dir,
        live_reload_enabled=live_reload,
    )

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Source directory: {config.docs.source_dir}")
    if config.locales:
        click.echo(f"Locales: {', '.join(config.locales)}")
    if config.live_reload.enabled:
        click.echo("Live reload: enabled")
    else:
        click.echo("Live reload: disabled")

    run_server(config)


@cli.command()
@click.argument("slug")
@config_option
@source_dir_option
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print entries as JSON instead of an outline",
)
def sidebar(
    slug: str,
    config_path: Path | None,
    source_dir: Path | None,
    as_json: bool,
) -> None:
    """Print the sidebar for the document with the given SLUG."""
    config = _load_config(config_path).with_overrides(source_dir=source_dir)

    documents = DocumentLoader(config.docs.source_dir).load()
    entries = get_sidebar(documents, normalize_slug(slug), config.locales)

    if as_json:
        click.echo(json.dumps([entry.to_dict() for entry in entries], indent=2))
        return

    if not entries:
        click.echo(click.style("No documents for this locale.", fg="yellow"))
        return

    for line in format_outline(entries):
        click.echo(line)


def format_outline(entries: list[SidebarEntry], depth: int = 0) -> list[str]:
    """Render entries as indented outline lines.

    Categories end with "/", the current page is marked with "*".

    Args:
        entries: Sidebar entries to render
        depth: Indentation level of entries

    Returns:
        One line per entry, depth first
    """
    indent = "  " * depth
    lines: list[str] = []
    for entry in entries:
        if isinstance(entry, CategoryEntry):
            lines.append(f"{indent}{entry.label}/")
            lines.extend(format_outline(entry.entries, depth + 1))
        else:
            marker = "*" if entry.is_current else "-"
            lines.append(f"{indent}{marker} {entry.label} ({entry.href})")
    return lines


def _load_config(config_path: Path | None) -> Config:
    """Load configuration or exit with error.

    Args:
        config_path: Explicit config file, None to auto-discover

    Returns:
        Loaded configuration

    Raises:
        SystemExit: If configuration is invalid
    """
    try:
        return Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


if __name__ == "__main__":
    cli()
