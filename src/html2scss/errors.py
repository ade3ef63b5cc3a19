"""Error types raised by html2scss."""

from __future__ import annotations


class Html2ScssError(Exception):
    """Base class for all errors surfaced to the user."""


class ConfigError(Html2ScssError):
    """Raised when a configuration file cannot be loaded."""


class EmptySelectorError(Html2ScssError):
    """Raised when the root selector is empty or whitespace."""

    def __init__(self) -> None:
        super().__init__("Selector cannot be empty")


class RootNotFoundError(Html2ScssError):
    """Raised when the root selector matches no element in the document."""

    def __init__(self, selector: str, reason: str | None = None):
        self.selector = selector
        self.reason = reason
        message = f"Cannot find a valid element with selector: {selector}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class NoHtmlFilesError(Html2ScssError):
    """Raised when workspace discovery finds no HTML files."""

    def __init__(self) -> None:
        super().__init__("No HTML source file was found in the workspace.")


class HtmlReadError(Html2ScssError):
    """Raised when an HTML file cannot be read as UTF-8."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read HTML file: {reason}")


class SinkError(Html2ScssError):
    """Raised when generated SCSS cannot be written to its destination."""
