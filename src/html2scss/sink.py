"""Destinations for a generated SCSS block."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

import click

from html2scss.errors import SinkError

logger = logging.getLogger(__name__)


class Sink(Protocol):
    """Anything that accepts a finished SCSS block."""

    def write(self, block: str) -> None: ...


class StdoutSink:
    """Echo the block to standard output."""

    def write(self, block: str) -> None:
        click.echo(block)


class NewFileSink:
    """Write the block as the whole content of a new file."""

    def __init__(self, path: str | Path, overwrite: bool = False) -> None:
        self.path = Path(path)
        self.overwrite = overwrite

    def write(self, block: str) -> None:
        if self.path.exists() and not self.overwrite:
            raise SinkError(f"{self.path} already exists (use --force to overwrite)")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(block, encoding="utf-8")
        except OSError as exc:
            raise SinkError(f"Cannot write {self.path}: {exc.strerror or exc}") from exc
        logger.info("Wrote %s", self.path)


class InsertSink:
    """Insert the block into an existing file at a cursor line.

    ``line`` is 1-based: the block goes before that line. ``None`` appends
    at the end of the file. The block is padded with a newline on each side.
    """

    def __init__(self, path: str | Path, line: int | None = None) -> None:
        self.path = Path(path)
        self.line = line

    def write(self, block: str) -> None:
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SinkError(f"Cannot open {self.path} for insertion: {exc}") from exc

        offset = self._offset(text)
        updated = text[:offset] + f"\n{block}\n" + text[offset:]
        try:
            self.path.write_text(updated, encoding="utf-8")
        except OSError as exc:
            raise SinkError(f"Cannot write {self.path}: {exc.strerror or exc}") from exc
        logger.info("Inserted %d character(s) into %s at offset %d", len(block), self.path, offset)

    def _offset(self, text: str) -> int:
        if self.line is None:
            return len(text)
        if self.line < 1:
            raise SinkError(f"Line number must be at least 1, got {self.line}")
        lines = text.splitlines(keepends=True)
        if self.line > len(lines) + 1:
            raise SinkError(f"{self.path} has only {len(lines)} line(s); cannot insert at line {self.line}")
        return sum(len(chunk) for chunk in lines[: self.line - 1])
