from html2scss.cli.main import cli

__all__ = ["cli"]
