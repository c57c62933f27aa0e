# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for version-pin suppliers and node package lookups."""

from __future__ import annotations

import pytest

from langprompt.errors import PackageVersionError
from langprompt.language import VersionPin, node_package_version, version_matches

PROJECT = "/usr/home/project"
NX_MANIFEST = f"{PROJECT}/node_modules/nx/package.json"


@pytest.mark.parametrize(
    ("detected", "expected", "result"),
    [
        ("1.3.307", "1.3.307", True),
        ("18.2.1", "18", True),
        ("18.2.1", "18.2", True),
        ("1.20.0", "1.2", False),
        ("1.3.307", "1.2.009", False),
    ],
)
def test_version_matches(detected: str, expected: str, result: bool) -> None:
    assert version_matches(detected, expected) is result


def test_pin_reads_version_file(make_env) -> None:
    env = make_env(file_contents={f"{PROJECT}/.nvmrc": "v18.19.0\n"})

    assert VersionPin(".nvmrc").read(env) == "18.19.0"


def test_pin_custom_pattern(make_env) -> None:
    env = make_env(file_contents={f"{PROJECT}/go.mod": "module example.com/x\n\ngo 1.21\n"})

    assert VersionPin("go.mod", r"^go\s+(?P<version>[0-9][0-9.]*)").read(env) == "1.21"


def test_pin_missing_file_matches(make_env) -> None:
    supplier = VersionPin(".python-version").matcher(make_env(), lambda: "3.12.1")

    assert supplier() == ("", True)


def test_pin_mismatch(make_env) -> None:
    env = make_env(file_contents={f"{PROJECT}/.python-version": "3.11.4\n"})
    supplier = VersionPin(".python-version").matcher(env, lambda: "3.12.1")

    assert supplier() == ("3.11.4", False)


def test_pin_without_detected_version_matches(make_env) -> None:
    env = make_env(file_contents={f"{PROJECT}/.python-version": "3.11.4\n"})
    supplier = VersionPin(".python-version").matcher(env, lambda: "")

    assert supplier() == ("3.11.4", True)


@pytest.mark.parametrize("version", ["14.1.5", "14.0.0"])
def test_node_package_version(make_env, version: str) -> None:
    env = make_env(file_contents={NX_MANIFEST: f'{{ "name": "nx", "version": "{version}" }}'})

    assert node_package_version(env, "nx") == version


@pytest.mark.parametrize(
    "contents",
    [
        {},
        {NX_MANIFEST: "bad data"},
        {NX_MANIFEST: '{ "name": "nx" }'},
        {NX_MANIFEST: '["not", "an", "object"]'},
    ],
    ids=["no files", "bad data", "no version", "not an object"],
)
def test_node_package_version_failures(make_env, contents: dict[str, str]) -> None:
    with pytest.raises(PackageVersionError):
        node_package_version(make_env(file_contents=contents), "nx")
