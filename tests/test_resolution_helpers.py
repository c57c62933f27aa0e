# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for extension matching, command selection and reconciliation."""

from __future__ import annotations

from langprompt.language import (
    SegmentState,
    VersionCommand,
    matches_extensions,
    matches_folders,
    reconcile_version,
    resolve_command,
)


def test_matches_extensions_any_order(make_env) -> None:
    env = make_env(files=["*.corn"])

    assert matches_extensions(env, ["*.uni", "*.corn"])
    assert matches_extensions(env, ["*.corn", "*.uni"])
    assert not matches_extensions(env, ["*.uni"])
    assert not matches_extensions(env, [])


def test_matches_folders(make_env) -> None:
    env = make_env(folders=[".venv"])

    assert matches_folders(env, ["venv", ".venv"])
    assert not matches_folders(env, ["node_modules"])


def test_resolve_command_prefers_declared_order(make_env) -> None:
    env = make_env(commands=["uni", "corn"])
    commands = [VersionCommand("corn"), VersionCommand("uni")]

    assert resolve_command(env, commands) is commands[0]


def test_resolve_command_skips_absent_candidates(make_env) -> None:
    env = make_env(commands=["corn"])
    commands = [VersionCommand("uni"), VersionCommand("unicorn"), VersionCommand("corn")]

    selected = resolve_command(env, commands)

    assert selected is not None
    assert selected.executable == "corn"


def test_resolve_command_none_when_nothing_present(make_env) -> None:
    env = make_env()

    assert resolve_command(env, [VersionCommand("uni")]) is None
    assert resolve_command(env, []) is None


def test_resolve_command_accepts_getter_candidates(make_env) -> None:
    env = make_env()
    getter_command = VersionCommand("@angular/core", getter=lambda: "17.0.0")

    assert resolve_command(env, [VersionCommand("uni"), getter_command]) is getter_command


def test_reconcile_version_without_supplier() -> None:
    state = SegmentState(full="1.0.0")

    reconcile_version(state, None)

    assert state.expected == ""
    assert not state.mismatch


def test_reconcile_version_records_mismatch() -> None:
    state = SegmentState(full="1.3.307")

    reconcile_version(state, lambda: ("1.2.009", False))

    assert state.expected == "1.2.009"
    assert state.mismatch
