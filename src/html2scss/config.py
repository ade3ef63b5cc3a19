"""Extraction settings and YAML config loading."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from html2scss.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = ".html2scss.yaml"


@dataclass(frozen=True)
class ExtractConfig:
    ignore_class_patterns: tuple[str, ...] = ("br_*", ".br_*")
    priority_names: tuple[str, ...] = ("index.html", "under.html", "interview.html")
    exclude_dirs: tuple[str, ...] = ("node_modules",)
    max_files: int = 100
    indent: str = "  "

    def with_overrides(
        self,
        extra_patterns: tuple[str, ...] = (),
        replace_defaults: bool = False,
    ) -> ExtractConfig:
        """Return a copy with *extra_patterns* added to (or replacing) the ignore list."""
        base = () if replace_defaults else self.ignore_class_patterns
        return replace(self, ignore_class_patterns=tuple(base) + tuple(extra_patterns))


_FIELD_NAMES = {f.name for f in fields(ExtractConfig)}
_TUPLE_FIELDS = {"ignore_class_patterns", "priority_names", "exclude_dirs"}


def _coerce(key: str, value: Any) -> Any:
    if key in _TUPLE_FIELDS:
        if isinstance(value, str):
            return (value,)
        if not isinstance(value, (list, tuple)):
            raise ConfigError(f"{key} must be a list of strings")
        return tuple(str(v) for v in value)
    if key == "max_files":
        try:
            count = int(value)
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"max_files must be an integer, got {value!r}") from exc
        if count < 1:
            raise ConfigError(f"max_files must be at least 1, got {count}")
        return count
    return str(value)


def load_config(config_path: str | Path | None = None) -> ExtractConfig:
    """Load an ExtractConfig from a YAML file.

    With no *config_path*, ``.html2scss.yaml`` in the working directory is
    used when present; otherwise the defaults apply. An explicit path that
    does not exist is an error.
    """
    if config_path is None:
        path = Path(DEFAULT_CONFIG_NAME)
        if not path.exists():
            return ExtractConfig()
    else:
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {config_path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot load config {path}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must contain a mapping")

    unknown = sorted(set(data) - _FIELD_NAMES)
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {', '.join(unknown)}")

    logger.debug("Loaded config from %s", path)
    return ExtractConfig(**{key: _coerce(key, value) for key, value in data.items()})
