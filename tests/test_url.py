# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for documentation link template selection and rendering."""

from __future__ import annotations

import pytest

from langprompt.language import SegmentState, render_version_url, select_url_template


@pytest.fixture
def state() -> SegmentState:
    return SegmentState(full="1.3.307", major="1", minor="3", patch="307", executable="uni")


def test_select_url_template_priority() -> None:
    assert select_url_template("user", "command", "default") == "user"
    assert select_url_template("", "command", "default") == "command"
    assert select_url_template("", "", "default") == "default"
    assert select_url_template("", "", "") == ""


def test_render_go_style_fields(state: SegmentState) -> None:
    assert render_version_url("https://x/{{ .Full }}", state) == "https://x/1.3.307"
    assert render_version_url("https://x/{{.Major}}.{{ .Minor }}", state) == "https://x/1.3"


def test_render_plain_jinja_fields(state: SegmentState) -> None:
    assert render_version_url("https://x/{{ Executable }}/{{ Patch }}", state) == "https://x/uni/307"


def test_render_keeps_attribute_access(state: SegmentState) -> None:
    assert render_version_url("https://x/{{ .Executable.upper() }}", state) == "https://x/UNI"


@pytest.mark.parametrize(
    "template",
    [
        "https://x/{{ .Unknown }}",
        "https://x/{{ .Full ",
        "{% if %}",
        "https://x/{{ .Full + 1 }}",
        "https://x/{{ .Major | int / 0 }}",
        "https://x/{{ .Full[99] }}",
    ],
)
def test_render_failures_yield_empty_link(state: SegmentState, template: str) -> None:
    assert render_version_url(template, state) == ""


def test_render_empty_template(state: SegmentState) -> None:
    assert render_version_url("", state) == ""
