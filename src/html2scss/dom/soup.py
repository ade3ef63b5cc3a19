"""BeautifulSoup adapter: parsing and root lookup."""

from __future__ import annotations

import logging
from typing import Sequence

from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError

from html2scss.errors import RootNotFoundError

logger = logging.getLogger(__name__)


class SoupElement:
    """Wraps a ``bs4.Tag`` to satisfy the Element protocol."""

    __slots__ = ("tag",)

    def __init__(self, tag: Tag) -> None:
        self.tag = tag

    @property
    def tag_name(self) -> str:
        return self.tag.name or ""

    def get_attribute(self, name: str) -> str | None:
        value = self.tag.get(name)
        if value is None:
            return None
        # class (and a few others) come back as a list of tokens
        if isinstance(value, (list, tuple)):
            return " ".join(value)
        return str(value)

    def children(self) -> Sequence[SoupElement]:
        return [SoupElement(child) for child in self.tag.children if isinstance(child, Tag)]

    def __repr__(self) -> str:
        return f"SoupElement(<{self.tag_name}>)"


def parse_html(html: str) -> BeautifulSoup:
    """Parse an HTML string with the stdlib-backed ``html.parser`` builder."""
    return BeautifulSoup(html, "html.parser")


def find_root(document: BeautifulSoup, selector: str) -> SoupElement:
    """Return the first element in *document* matching *selector*.

    Raises RootNotFoundError when nothing matches or the selector engine
    rejects the selector.
    """
    try:
        match = document.select_one(selector)
    except (SelectorSyntaxError, NotImplementedError) as exc:
        # NotImplementedError covers valid syntax soupsieve does not support
        reason = str(exc).strip().splitlines()
        raise RootNotFoundError(selector, reason=reason[0] if reason else None) from exc

    if not isinstance(match, Tag):
        raise RootNotFoundError(selector)

    logger.debug("Root selector %r matched <%s>", selector, match.name)
    return SoupElement(match)
