"""Glob-based filter for class names that should never become selectors.

Patterns use ``*`` as the only wildcard and match the whole class name::

    br_*     ignores br_1, br_sp, br_ (but not xbr_1)
    .br_*    same as above; one leading dot is stripped
"""

from __future__ import annotations

import re
from typing import Iterable

__all__ = ["ClassFilter", "glob_to_regex"]


def glob_to_regex(pattern: str) -> re.Pattern[str]:
    """Compile a glob pattern into an anchored regular expression.

    Every other regex metacharacter is escaped, so any string is a valid
    pattern and compilation never fails.
    """
    if pattern.startswith("."):
        pattern = pattern[1:]
    parts = (re.escape(chunk) for chunk in pattern.split("*"))
    return re.compile(".*".join(parts), re.DOTALL)


class ClassFilter:
    """Decides whether a class name is excluded from selector generation."""

    def __init__(self, patterns: Iterable[str] = ()) -> None:
        self.patterns: tuple[str, ...] = tuple(patterns)
        self._compiled = [glob_to_regex(p) for p in self.patterns]

    def is_ignored(self, class_name: str) -> bool:
        return any(regex.fullmatch(class_name) for regex in self._compiled)

    def __repr__(self) -> str:
        return f"ClassFilter({list(self.patterns)!r})"
