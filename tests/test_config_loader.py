# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for segment properties and TOML configuration loading."""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest

from langprompt.config_loader import CONFIG_ENV_VAR, default_config_path, load_config, properties_for
from langprompt.errors import ConfigError
from langprompt.properties import DEFAULT_CACHE_DURATION, DisplayMode, Property, SegmentProperties


def test_properties_defaults() -> None:
    props = SegmentProperties()

    assert props.fetch_version is True
    assert props.home_enabled is False
    assert props.missing_command_text == ""
    assert props.version_url_template == ""
    assert props.display_mode is DisplayMode.FILES
    assert props.extensions is None
    assert props.cache_duration == DEFAULT_CACHE_DURATION


def test_property_enums_are_plain_strings() -> None:
    assert str(DisplayMode.ENVIRONMENT) == "environment"
    assert f"{Property.CACHE_DURATION}" == "cache_duration"
    assert SegmentProperties.from_mapping({"display_mode": "context"}).display_mode is DisplayMode.CONTEXT


def test_properties_from_mapping_accepts_enum_keys_and_ignores_unknown() -> None:
    props = SegmentProperties.from_mapping(
        {
            Property.FETCH_VERSION: False,
            "display_mode": "always",
            "extensions": "*.uni",
            "template": " {{ .Full }} ",
        },
    )

    assert props.fetch_version is False
    assert props.display_mode is DisplayMode.ALWAYS
    assert props.extensions == ("*.uni",)


def test_properties_from_mapping_rejects_invalid_values() -> None:
    with pytest.raises(ConfigError):
        SegmentProperties.from_mapping({Property.DISPLAY_MODE: "sometimes"})


def test_load_config_missing_file(tmp_path: Path) -> None:
    assert load_config(tmp_path / "absent.toml") == {}


def test_load_config_reads_segment_tables(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text(
        dedent(
            """
            [segments.python]
            fetch_version = false
            missing_command_text = "no python"

            [segments.node]
            version_url_template = "https://nodejs.org/{{ .Major }}"
            cache_duration = 0
            """,
        ),
        encoding="utf-8",
    )

    config = load_config(path)

    assert set(config) == {"python", "node"}
    assert config["python"].fetch_version is False
    assert config["python"].missing_command_text == "no python"
    assert config["node"].cache_duration == 0
    assert properties_for(config, "ruby") == SegmentProperties()


@pytest.mark.parametrize(
    "content",
    [
        "segments = [",
        "segments = 3",
        "[segments]\npython = 1",
        "[segments.python]\nhome_enabled = 'maybe'",
    ],
    ids=["malformed", "not a table", "section not a table", "invalid value"],
)
def test_load_config_errors(tmp_path: Path, content: str) -> None:
    path = tmp_path / "config.toml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(path)


def test_default_config_path_env_override(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "custom.toml"))

    assert default_config_path() == tmp_path / "custom.toml"


def test_default_config_path_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))

    assert default_config_path() == tmp_path / ".config" / "langprompt" / "config.toml"
