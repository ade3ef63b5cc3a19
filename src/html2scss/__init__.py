"""html2scss: generate nested SCSS skeletons from HTML structure."""

__version__ = "0.1.0"
