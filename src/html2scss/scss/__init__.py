"""SCSS generation: class filtering, selector resolution and nesting."""

from html2scss.scss.builder import build_nested, wrap_with_root
from html2scss.scss.class_filter import ClassFilter, glob_to_regex
from html2scss.scss.generator import ScssGenerator
from html2scss.scss.resolver import resolve_selector

__all__ = [
    "ClassFilter",
    "ScssGenerator",
    "build_nested",
    "glob_to_regex",
    "resolve_selector",
    "wrap_with_root",
]
