"""CLI command: html2scss extract -- generate an SCSS skeleton from HTML."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from html2scss.config import ExtractConfig, load_config
from html2scss.errors import Html2ScssError
from html2scss.scss import ClassFilter, ScssGenerator
from html2scss.sink import InsertSink, NewFileSink, Sink, StdoutSink
from html2scss.workspace import find_html_files, prioritize, read_html

logger = logging.getLogger(__name__)


def _pick_html_file(workspace: Path, config: ExtractConfig) -> Path:
    """Offer the workspace's HTML files as a numbered menu and return the choice."""
    found = find_html_files(workspace, exclude=config.exclude_dirs, limit=config.max_files)
    candidates = prioritize(found, config.priority_names)
    if len(candidates) == 1:
        return candidates[0]

    click.echo("Select the source HTML file from which to extract CSS selectors:", err=True)
    for i, path in enumerate(candidates, start=1):
        click.echo(f"  [{i}] {path.name}  ({path.relative_to(workspace)})", err=True)
    choice = click.prompt(
        "  Choice",
        type=click.IntRange(1, len(candidates)),
        default=1,
        err=True,
    )
    return candidates[choice - 1]


def _non_empty(value: str) -> str:
    if not value or not value.strip():
        raise click.BadParameter("Selector cannot be empty")
    return value


def _build_sink(
    output: str | None, insert_into: str | None, line: int | None, force: bool
) -> Sink:
    if output and insert_into:
        raise click.UsageError("--output and --insert-into are mutually exclusive")
    if line is not None and not insert_into:
        raise click.UsageError("--line requires --insert-into")
    if output:
        return NewFileSink(output, overwrite=force)
    if insert_into:
        return InsertSink(insert_into, line=line)
    return StdoutSink()


@click.command()
@click.argument("htmlfile", required=False, type=click.Path(dir_okay=False))
@click.option("-s", "--selector", default=None, help="CSS selector of the root element (e.g. '.idx01 .card')")
@click.option(
    "-w",
    "--workspace",
    type=click.Path(exists=True, file_okay=False),
    default=".",
    help="Directory to scan when HTMLFILE is omitted",
)
@click.option("-o", "--output", default=None, help="Write the block to a new file")
@click.option(
    "-i",
    "--insert-into",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Insert the block into an existing file",
)
@click.option("--line", type=int, default=None, help="1-based line to insert before (default: end of file)")
@click.option("--force", is_flag=True, help="Overwrite the --output file if it exists")
@click.option("--ignore", "ignore", multiple=True, help="Extra class pattern to ignore (repeatable, '*' wildcard)")
@click.option("--no-default-ignores", is_flag=True, help="Drop the configured ignore patterns")
@click.option("-c", "--config", "config_path", default=None, help="YAML config file")
def extract(
    htmlfile: str | None,
    selector: str | None,
    workspace: str,
    output: str | None,
    insert_into: str | None,
    line: int | None,
    force: bool,
    ignore: tuple[str, ...],
    no_default_ignores: bool,
    config_path: str | None,
) -> None:
    """Generate a nested SCSS skeleton for the element matching a selector.

    Without HTMLFILE, HTML files under the workspace are offered for selection.
    Without --selector, the root selector is prompted for.
    """
    sink = _build_sink(output, insert_into, line, force)

    try:
        config = load_config(config_path).with_overrides(ignore, replace_defaults=no_default_ignores)

        # Step 1: Source file
        html_path = Path(htmlfile) if htmlfile else _pick_html_file(Path(workspace), config)

        # Step 2: Root selector
        if selector is None:
            selector = click.prompt(
                "Enter the CSS selector for the root element (e.g., .idx01 .card)",
                value_proc=_non_empty,
                err=True,
            )

        # Step 3: Read, parse and generate
        html = read_html(html_path)
        generator = ScssGenerator(ClassFilter(config.ignore_class_patterns), indent=config.indent)
        block = generator.generate_from_html(html, selector)

        # Step 4: Deliver
        sink.write(block)
    except Html2ScssError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    logger.debug("Generated block for %s from %s", selector, html_path)
    if not isinstance(sink, StdoutSink):
        click.echo("Generated CSS from HTML based on selector", err=True)
