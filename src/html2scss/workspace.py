"""Locating and reading HTML source files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Sequence

from html2scss.errors import HtmlReadError, NoHtmlFilesError

logger = logging.getLogger(__name__)


def find_html_files(
    root: str | Path,
    exclude: Iterable[str] = ("node_modules",),
    limit: int = 100,
) -> list[Path]:
    """Return up to *limit* ``.html`` files below *root*, sorted by relative path.

    Files inside any directory named in *exclude* are skipped. Raises
    NoHtmlFilesError when nothing is found.
    """
    root = Path(root)
    excluded = set(exclude)
    found: list[Path] = []
    for path in sorted(root.rglob("*.html")):
        if len(found) >= limit:
            break
        if not path.is_file():
            continue
        if excluded.intersection(path.relative_to(root).parts[:-1]):
            continue
        found.append(path)

    if not found:
        raise NoHtmlFilesError()
    logger.debug("Found %d HTML file(s) under %s", len(found), root)
    return found


def prioritize(files: Sequence[Path], priority_names: Sequence[str]) -> list[Path]:
    """Order *files* so well-known entry pages come first.

    For each priority name, the first file with that basename
    (case-insensitive) is moved to the front. The remaining non-priority
    files follow in their original order.
    """
    names = [n.lower() for n in priority_names]
    ordered: list[Path] = []
    for name in names:
        match = next((f for f in files if f.name.lower() == name), None)
        if match is not None:
            ordered.append(match)
    ordered.extend(f for f in files if f.name.lower() not in names)
    return ordered


def read_html(path: str | Path) -> str:
    """Read *path* as UTF-8 text."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        reason = exc.strerror if isinstance(exc, OSError) and exc.strerror else str(exc)
        raise HtmlReadError(str(path), reason) from exc
