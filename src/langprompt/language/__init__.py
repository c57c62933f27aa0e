# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Public exports for the language segment pipeline."""

from __future__ import annotations

from .extractor import VersionExtractor
from .matcher import matches_extensions, matches_folders
from .models import SegmentState, VersionCommand, VersionInfo
from .node import node_package_version
from .pins import VersionPin, version_matches
from .reconciler import VersionFileMatcher, reconcile_version
from .resolver import resolve_command
from .segment import NO_VERSION_TEXT, LanguageSegment
from .url import render_version_url, select_url_template

__all__ = [
    "NO_VERSION_TEXT",
    "LanguageSegment",
    "SegmentState",
    "VersionCommand",
    "VersionExtractor",
    "VersionFileMatcher",
    "VersionInfo",
    "VersionPin",
    "matches_extensions",
    "matches_folders",
    "node_package_version",
    "reconcile_version",
    "render_version_url",
    "resolve_command",
    "select_url_template",
    "version_matches",
]
