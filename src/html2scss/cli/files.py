"""CLI command: html2scss files -- list candidate HTML sources."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from html2scss.config import load_config
from html2scss.errors import Html2ScssError
from html2scss.workspace import find_html_files, prioritize


@click.command()
@click.option(
    "-w",
    "--workspace",
    type=click.Path(exists=True, file_okay=False),
    default=".",
    help="Directory to scan for HTML files",
)
@click.option("-c", "--config", "config_path", default=None, help="YAML config file")
def files(workspace: str, config_path: str | None) -> None:
    """List HTML files in the order they are offered by ``extract``."""
    try:
        config = load_config(config_path)
        found = find_html_files(workspace, exclude=config.exclude_dirs, limit=config.max_files)
    except Html2ScssError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    root = Path(workspace)
    for path in prioritize(found, config.priority_names):
        click.echo(str(path.relative_to(root)))
