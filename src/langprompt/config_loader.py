# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Loading of per-language segment properties from TOML configuration."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from .errors import ConfigError
from .properties import SegmentProperties

CONFIG_ENV_VAR: Final[str] = "LANGPROMPT_CONFIG"
SEGMENTS_KEY: Final[str] = "segments"


def default_config_path() -> Path:
    """Return ``$LANGPROMPT_CONFIG`` or ``~/.config/langprompt/config.toml``."""

    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "langprompt" / "config.toml"


def load_config(path: Path) -> dict[str, SegmentProperties]:
    """Load segment properties keyed by language from ``path``.

    The file holds one ``[segments.<language>]`` table per configured segment::

        [segments.python]
        fetch_version = true
        version_url_template = "https://docs.python.org/{{ .Major }}.{{ .Minor }}/"

    Args:
        path: TOML file to read. A missing file yields an empty mapping.

    Returns:
        dict[str, SegmentProperties]: Validated properties per language.

    Raises:
        ConfigError: If the file is unreadable, not valid TOML, or holds
            invalid option values.
    """

    if not path.is_file():
        return {}
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"failed to read {path}: {exc}") from exc

    segments = data.get(SEGMENTS_KEY, {})
    if not isinstance(segments, Mapping):
        raise ConfigError(f"'{SEGMENTS_KEY}' in {path} must be a table")
    return {str(name): _section(path, str(name), raw) for name, raw in segments.items()}


def _section(path: Path, name: str, raw: Any) -> SegmentProperties:
    if not isinstance(raw, Mapping):
        raise ConfigError(f"'{SEGMENTS_KEY}.{name}' in {path} must be a table")
    try:
        return SegmentProperties.from_mapping(raw)
    except ConfigError as exc:
        raise ConfigError(f"{path}: [{SEGMENTS_KEY}.{name}] {exc}") from exc


def properties_for(config: Mapping[str, SegmentProperties], language: str) -> SegmentProperties:
    """Return the properties configured for ``language`` or defaults."""

    return config.get(language) or SegmentProperties()


__all__ = ["CONFIG_ENV_VAR", "default_config_path", "load_config", "properties_for"]
