# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Comparison of the detected version against a project-declared one."""

from __future__ import annotations

from collections.abc import Callable

from .models import SegmentState

VersionFileMatcher = Callable[[], tuple[str, bool]]


def reconcile_version(state: SegmentState, supplier: VersionFileMatcher | None) -> None:
    """Record the expected version reported by ``supplier`` on ``state``.

    ``supplier`` returns the expected version and whether it already matches
    the detected one. Without a supplier the state keeps its defaults.
    """

    if supplier is None:
        return
    expected, matches = supplier()
    state.expected = expected
    state.mismatch = not matches


__all__ = ["VersionFileMatcher", "reconcile_version"]
