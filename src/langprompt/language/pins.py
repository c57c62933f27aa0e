# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Expected-version suppliers backed by version-pin files in the workspace."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial
from pathlib import Path

from ..interfaces import Environment
from .reconciler import VersionFileMatcher


def version_matches(detected: str, expected: str) -> bool:
    """Return ``True`` when ``detected`` equals ``expected`` or extends it by components.

    A pin of ``18`` or ``18.2`` accepts ``18.2.1``; ``1.2`` does not accept ``1.20.0``.
    """

    return detected == expected or detected.startswith(f"{expected}.")


@dataclass(frozen=True, slots=True)
class VersionPin:
    """Locate an expected version in ``filename`` within the working directory.

    Attributes:
        filename: Pin file name relative to the working directory.
        pattern: Regex whose ``version`` group captures the pinned version.
    """

    filename: str
    pattern: str = r"^\s*v?(?P<version>[0-9][0-9A-Za-z.\-+]*)"

    def read(self, env: Environment) -> str:
        """Return the pinned version, or an empty string when absent or unparsable."""

        content = env.file_content(Path(env.pwd()) / self.filename)
        if not content:
            return ""
        match = re.search(self.pattern, content, re.MULTILINE)
        if match is None:
            return ""
        return match.group("version") or ""

    def compare(self, env: Environment, detected: Callable[[], str]) -> tuple[str, bool]:
        """Return the pinned version and whether ``detected()`` satisfies it.

        With no pin file the supplier reports an empty expectation that
        matches. With no detected version there is nothing to disagree with,
        so it also matches.
        """

        expected = self.read(env)
        current = detected()
        if not expected or not current:
            return expected, True
        return expected, version_matches(current, expected)

    def matcher(self, env: Environment, detected: Callable[[], str]) -> VersionFileMatcher:
        """Return a zero-argument supplier bound to ``env`` and ``detected``."""

        return partial(self.compare, env, detected)


__all__ = ["VersionPin", "version_matches"]
