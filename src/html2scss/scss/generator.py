"""End-to-end SCSS generation from an element or an HTML string."""

from __future__ import annotations

import logging

from html2scss.dom.model import Element
from html2scss.dom.soup import find_root, parse_html
from html2scss.errors import EmptySelectorError
from html2scss.scss.builder import build_nested, wrap_with_root
from html2scss.scss.class_filter import ClassFilter

__all__ = ["ScssGenerator"]

logger = logging.getLogger(__name__)


class ScssGenerator:
    """Turns the subtree under a root element into a nested SCSS block."""

    def __init__(self, class_filter: ClassFilter | None = None, indent: str = "  ") -> None:
        self.class_filter = class_filter if class_filter is not None else ClassFilter()
        self.indent = indent

    def generate(self, root_selector: str, root: Element) -> str:
        lines = build_nested(root, self.class_filter, depth=1, indent=self.indent)
        logger.debug("Built %d line(s) under %s", len(lines), root_selector)
        return wrap_with_root(root_selector, lines)

    def generate_from_html(self, html: str, root_selector: str) -> str:
        """Parse *html*, locate *root_selector* and generate its block.

        Raises EmptySelectorError or RootNotFoundError before producing any
        output.
        """
        if not root_selector or not root_selector.strip():
            raise EmptySelectorError()
        root = find_root(parse_html(html), root_selector)
        return self.generate(root_selector, root)
