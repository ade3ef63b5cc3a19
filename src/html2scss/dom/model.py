"""Read-only element interface and an in-memory element tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, Sequence


class Element(Protocol):
    """The narrow view of a DOM element that selector generation needs."""

    @property
    def tag_name(self) -> str: ...

    def get_attribute(self, name: str) -> str | None: ...

    def children(self) -> Sequence[Element]: ...


@dataclass(frozen=True)
class Node:
    """A parser-free element, handy for building trees by hand.

    Example:
        Node("div", {"class": "page"}, [Node("h3")])
    """

    tag: str
    attrs: dict[str, str] = field(default_factory=dict)
    kids: list[Node] = field(default_factory=list)

    @property
    def tag_name(self) -> str:
        return self.tag

    def get_attribute(self, name: str) -> str | None:
        return self.attrs.get(name)

    def children(self) -> Sequence[Node]:
        return self.kids
