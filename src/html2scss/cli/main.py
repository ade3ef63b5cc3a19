"""html2scss CLI entry point: Click group with subcommands."""

import logging

import click

from html2scss import __version__


@click.group()
@click.version_option(version=__version__, prog_name="html2scss")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """html2scss - nested SCSS skeletons from HTML structure."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from html2scss.cli.extract import extract  # noqa: E402
from html2scss.cli.files import files  # noqa: E402

cli.add_command(extract)
cli.add_command(files)
