"""Pick the single selector that represents one element."""

from __future__ import annotations

from html2scss.dom.model import Element
from html2scss.scss.class_filter import ClassFilter

__all__ = ["resolve_selector", "NEVER_SELECTED_TAGS", "HEADING_TAGS"]

NEVER_SELECTED_TAGS = frozenset({"script", "style", "br"})
HEADING_TAGS = frozenset({"h3", "h4", "h5", "h6"})


def resolve_selector(element: Element, class_filter: ClassFilter) -> str | None:
    """Return the selector for *element*, or None if it should be skipped.

    Precedence:
        1. script/style/br are never represented.
        2. The first class not matched by *class_filter* (class beats id).
        3. The trimmed id attribute.
        4. The bare tag name for h3-h6.

    Anything else yields None; the caller still visits its children.
    """
    tag = (element.tag_name or "").lower()
    if tag in NEVER_SELECTED_TAGS:
        return None

    classes = (element.get_attribute("class") or "").split()
    usable = [c for c in classes if not class_filter.is_ignored(c)]
    if usable:
        return f".{usable[0]}"

    element_id = (element.get_attribute("id") or "").strip()
    if element_id:
        return f"#{element_id}"

    if tag in HEADING_TAGS:
        return tag

    return None
