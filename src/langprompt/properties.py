# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Per-segment configuration properties."""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError

DEFAULT_CACHE_DURATION: Final[int] = 3600


class Property(StrEnum):
    """Enumerate the property keys recognised by language segments."""

    FETCH_VERSION = "fetch_version"
    HOME_ENABLED = "home_enabled"
    MISSING_COMMAND_TEXT = "missing_command_text"
    VERSION_URL_TEMPLATE = "version_url_template"
    DISPLAY_MODE = "display_mode"
    EXTENSIONS = "extensions"
    FOLDERS = "folders"
    CACHE_DURATION = "cache_duration"


class DisplayMode(StrEnum):
    """Enumerate the triggers that make a segment eligible for display."""

    ALWAYS = "always"
    FILES = "files"
    ENVIRONMENT = "environment"
    CONTEXT = "context"


class SegmentProperties(BaseModel):
    """User-configurable options for a single language segment.

    Unknown keys are ignored so one configuration table can also carry options
    consumed by the downstream renderer.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    fetch_version: bool = True
    home_enabled: bool = False
    missing_command_text: str = ""
    version_url_template: str = ""
    display_mode: DisplayMode = DisplayMode.FILES
    extensions: tuple[str, ...] | None = None
    folders: tuple[str, ...] | None = None
    cache_duration: int = Field(default=DEFAULT_CACHE_DURATION)

    @field_validator("extensions", "folders", mode="before")
    @classmethod
    def _coerce_single_pattern(cls, value: Any) -> Any:
        if isinstance(value, str):
            return (value,)
        return value

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any] | None) -> SegmentProperties:
        """Build properties from a raw mapping, accepting :class:`Property` keys.

        Args:
            raw: Mapping of option names (strings or :class:`Property` members) to values.

        Returns:
            SegmentProperties: Validated properties.

        Raises:
            ConfigError: If a recognised option carries an invalid value.
        """

        if not raw:
            return cls()
        payload = {key.value if isinstance(key, Property) else str(key): value for key, value in raw.items()}
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            raise ConfigError(f"invalid segment properties: {exc}") from exc


__all__ = ["DEFAULT_CACHE_DURATION", "DisplayMode", "Property", "SegmentProperties"]
