"""Nested SCSS block construction.

``build_nested`` walks the descendants of a root element and emits one
indented line per selected element::

    .card {
      .title{}
      #footer {
        h4{}
      }
    }

Elements without a selector are transparent: their children are emitted at
the same depth. Among siblings of one parent only the first element with a
given selector is emitted; later ones are dropped together with their
subtrees.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, Sequence

from html2scss.dom.model import Element
from html2scss.scss.class_filter import ClassFilter
from html2scss.scss.resolver import resolve_selector

__all__ = ["build_nested", "wrap_with_root"]

logger = logging.getLogger(__name__)


@dataclass
class _Frame:
    """One sibling group being walked.

    Transparent frames write straight into their parent's ``lines``;
    frames opened for a selected element collect their own lines and are
    rendered as a rule into ``parent_lines`` when exhausted.
    """

    children: Iterator[Element]
    depth: int
    lines: list[str]
    seen: set[str] = field(default_factory=set)
    selector: str | None = None
    parent_lines: list[str] | None = None


def build_nested(
    root: Element,
    class_filter: ClassFilter,
    depth: int = 1,
    indent: str = "  ",
) -> list[str]:
    """Return the nested block lines for all descendants of *root*.

    *root* itself is not included; see ``wrap_with_root``. The walk uses an
    explicit stack, so arbitrarily deep markup does not hit the recursion
    limit.
    """
    lines: list[str] = []
    stack = [_Frame(iter(root.children()), depth, lines)]

    while stack:
        frame = stack[-1]
        child = next(frame.children, None)
        if child is None:
            stack.pop()
            if frame.parent_lines is not None:
                _emit_rule(frame, frame.parent_lines, indent)
            continue

        selector = resolve_selector(child, class_filter)
        if selector is None:
            logger.debug("Skipping <%s> at depth %d", child.tag_name, frame.depth)
            stack.append(_Frame(iter(child.children()), frame.depth, frame.lines))
            continue

        if selector in frame.seen:
            logger.debug("Dropping duplicate sibling %s at depth %d", selector, frame.depth)
            continue
        frame.seen.add(selector)

        stack.append(
            _Frame(
                iter(child.children()),
                frame.depth + 1,
                [],
                selector=selector,
                parent_lines=frame.lines,
            )
        )

    return lines


def _emit_rule(frame: _Frame, out: list[str], indent: str) -> None:
    pad = indent * (frame.depth - 1)
    if not frame.lines:
        out.append(f"{pad}{frame.selector}{{}}")
    else:
        out.append(f"{pad}{frame.selector} {{")
        out.extend(frame.lines)
        out.append(f"{pad}}}")


def wrap_with_root(root_selector: str, inner_lines: Sequence[str]) -> str:
    """Wrap *inner_lines* in a block keyed by *root_selector*, verbatim.

    An empty *inner_lines* still leaves a blank line between the braces
    (``"sel {\\n\\n}"``), unlike joining a bare line list, which would give
    ``"sel {\\n}"``.
    """
    return f"{root_selector} {{\n" + "\n".join(inner_lines) + "\n}"
