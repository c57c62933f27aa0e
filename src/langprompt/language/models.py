# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Data models describing version candidates and resolved segment state."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import asdict, dataclass, field
from typing import Final

from ..errors import VersionParseError

VERSION_GROUP: Final[str] = "version"


@dataclass(frozen=True, slots=True)
class VersionInfo:
    """Version components extracted from a single candidate."""

    full: str
    major: str = ""
    minor: str = ""
    patch: str = ""
    prerelease: str = ""
    build_metadata: str = ""


@dataclass(frozen=True, slots=True)
class VersionCommand:
    """One executable probed for a version, in priority order within a segment.

    Attributes:
        executable: Binary looked up on ``PATH``; display label for getter candidates.
        args: Arguments passed when invoking ``executable``.
        regex: Pattern with a ``version`` named group and optional
            ``major``/``minor``/``patch``/``prerelease``/``buildmetadata`` groups.
        version_url_template: Candidate-specific documentation link template.
        getter: In-process version source used instead of running a process.
    """

    executable: str
    args: tuple[str, ...] = ()
    regex: str = ""
    version_url_template: str = ""
    getter: Callable[[], str] | None = field(default=None, compare=False)

    def cache_key(self) -> str:
        """Return the deterministic cache key for this invocation."""

        return "_".join(("version", self.executable, *self.args))

    def parse(self, output: str) -> VersionInfo:
        """Extract version components from ``output``.

        Args:
            output: Raw text produced by the candidate.

        Returns:
            VersionInfo: Parsed version components; absent optional groups are empty.

        Raises:
            VersionParseError: If the pattern is invalid, does not match, or
                captures no ``version``.
        """

        try:
            match = re.search(self.regex, output)
        except re.error as exc:
            raise VersionParseError(self.executable, output) from exc
        if match is None:
            raise VersionParseError(self.executable, output)
        groups = {name: value or "" for name, value in match.groupdict().items()}
        full = groups.get(VERSION_GROUP, "")
        if not full:
            raise VersionParseError(self.executable, output)
        return VersionInfo(
            full=full,
            major=groups.get("major", ""),
            minor=groups.get("minor", ""),
            patch=groups.get("patch", ""),
            prerelease=groups.get("prerelease", ""),
            build_metadata=groups.get("buildmetadata", ""),
        )


@dataclass(slots=True)
class SegmentState:
    """Externally visible result of evaluating a language segment."""

    full: str = ""
    major: str = ""
    minor: str = ""
    patch: str = ""
    prerelease: str = ""
    build_metadata: str = ""
    executable: str = ""
    expected: str = ""
    mismatch: bool = False
    error: str = ""
    exit_code: int = 0
    url: str = ""

    def apply_version(self, info: VersionInfo, executable: str) -> None:
        """Copy ``info`` into the state and record the producing ``executable``."""

        self.full = info.full
        self.major = info.major
        self.minor = info.minor
        self.patch = info.patch
        self.prerelease = info.prerelease
        self.build_metadata = info.build_metadata
        self.executable = executable
        self.error = ""

    def template_context(self) -> dict[str, str | bool | int]:
        """Return template variables using the prompt renderer's field names."""

        return {
            "Full": self.full,
            "Major": self.major,
            "Minor": self.minor,
            "Patch": self.patch,
            "Prerelease": self.prerelease,
            "BuildMetadata": self.build_metadata,
            "Executable": self.executable,
            "Expected": self.expected,
            "Mismatch": self.mismatch,
            "Error": self.error,
            "URL": self.url,
        }

    def to_dict(self) -> dict[str, str | bool | int]:
        """Return the state as a plain mapping keyed by field name."""

        return asdict(self)


__all__ = ["SegmentState", "VersionCommand", "VersionInfo"]
