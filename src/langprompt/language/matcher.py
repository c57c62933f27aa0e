# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Workspace probes deciding whether a language is present."""

from __future__ import annotations

from collections.abc import Iterable

from ..interfaces import Environment


def matches_extensions(env: Environment, extensions: Iterable[str]) -> bool:
    """Return ``True`` when any glob in ``extensions`` matches a file in the working directory."""

    return any(env.has_files(pattern) for pattern in extensions)


def matches_folders(env: Environment, folders: Iterable[str]) -> bool:
    """Return ``True`` when any marker directory in ``folders`` exists in the working directory."""

    return any(env.has_folder(name) for name in folders)


__all__ = ["matches_extensions", "matches_folders"]
