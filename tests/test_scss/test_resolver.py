"""Tests for per-element selector resolution."""

import pytest

from html2scss.dom import Node
from html2scss.scss import ClassFilter, resolve_selector


@pytest.fixture
def default_filter():
    return ClassFilter(["br_*", ".br_*"])


# ---------------------------------------------------------------------------
# Never-selected tags
# ---------------------------------------------------------------------------


class TestNeverSelected:
    @pytest.mark.parametrize("tag", ["script", "style", "br", "SCRIPT", "Style", "BR"])
    def test_ignored_regardless_of_attributes(self, tag, default_filter):
        node = Node(tag, {"class": "foo", "id": "bar"})
        assert resolve_selector(node, default_filter) is None


# ---------------------------------------------------------------------------
# Classes
# ---------------------------------------------------------------------------


class TestClassSelector:
    def test_class_wins_over_id(self, default_filter):
        node = Node("div", {"class": "foo bar", "id": "x"})
        assert resolve_selector(node, default_filter) == ".foo"

    def test_first_usable_class(self, default_filter):
        node = Node("div", {"class": "br_sp card title"})
        assert resolve_selector(node, default_filter) == ".card"

    def test_extra_whitespace(self, default_filter):
        node = Node("div", {"class": "  \t card\n  wide "})
        assert resolve_selector(node, default_filter) == ".card"

    def test_all_classes_ignored_falls_back_to_id(self, default_filter):
        node = Node("div", {"class": "br_1 br_2", "id": "main"})
        assert resolve_selector(node, default_filter) == "#main"

    def test_all_classes_ignored_no_id(self, default_filter):
        node = Node("div", {"class": "br_1"})
        assert resolve_selector(node, default_filter) is None

    def test_empty_filter_keeps_br_classes(self):
        node = Node("div", {"class": "br_1"})
        assert resolve_selector(node, ClassFilter([])) == ".br_1"


# ---------------------------------------------------------------------------
# Id and heading fallbacks
# ---------------------------------------------------------------------------


class TestFallbacks:
    def test_id_selector(self, default_filter):
        assert resolve_selector(Node("p", {"id": "panel"}), default_filter) == "#panel"

    def test_id_trimmed(self, default_filter):
        assert resolve_selector(Node("p", {"id": "  panel "}), default_filter) == "#panel"

    def test_blank_id_ignored(self, default_filter):
        assert resolve_selector(Node("p", {"id": "   "}), default_filter) is None

    def test_empty_class_attribute(self, default_filter):
        assert resolve_selector(Node("p", {"class": "", "id": "a"}), default_filter) == "#a"

    @pytest.mark.parametrize("tag", ["h3", "h4", "h5", "h6"])
    def test_bare_heading(self, tag, default_filter):
        assert resolve_selector(Node(tag), default_filter) == tag

    def test_uppercase_heading_lowered(self, default_filter):
        assert resolve_selector(Node("H4"), default_filter) == "h4"

    @pytest.mark.parametrize("tag", ["h1", "h2", "div", "span", "p"])
    def test_plain_elements_skipped(self, tag, default_filter):
        assert resolve_selector(Node(tag), default_filter) is None

    def test_heading_with_class_uses_class(self, default_filter):
        assert resolve_selector(Node("h3", {"class": "ttl"}), default_filter) == ".ttl"
